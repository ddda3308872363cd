"""
Player State

Holds a player's lives and completed-level counters. Lives may never go
negative; the upper bound is enforced by the upgrader, not here.
"""

from __future__ import annotations

from typing import Any, Optional

MAXIMUM_LIVES = 3


class PlayerError(Exception):
    """Base class for player and upgrader failures."""

    pass


class InvalidValueError(PlayerError):
    """Raised when a value violates a non-negativity or range constraint."""

    pass


class MissingPlayerError(PlayerError):
    """Raised when an upgrader is created without a player to act on."""

    pass


class Player:
    """A player's lives and level progress."""

    maximum_lives: int = MAXIMUM_LIVES

    def __init__(self, maximum_lives: Optional[int] = None) -> None:
        if maximum_lives is not None:
            if maximum_lives < 0:
                raise InvalidValueError(
                    f"maximum_lives must be >= 0, got {maximum_lives}"
                )
            self.maximum_lives = maximum_lives
        self._lives = 0
        self._levels_complete = 0

    @property
    def lives(self) -> int:
        """Current number of lives."""
        return self._lives

    @lives.setter
    def lives(self, value: int) -> None:
        if value < 0:
            raise InvalidValueError(f"lives must be >= 0, got {value}")
        self._lives = value

    @property
    def levels_complete(self) -> int:
        """Number of levels the player has completed."""
        return self._levels_complete

    @levels_complete.setter
    def levels_complete(self, value: int) -> None:
        self._levels_complete = value

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "lives": self._lives,
            "levels_complete": self._levels_complete,
            "maximum_lives": self.maximum_lives,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Player:
        """
        Rebuild a player from a dictionary produced by to_dict().

        Raises:
            InvalidValueError: If the stored lives are negative
        """
        player = cls(maximum_lives=data.get("maximum_lives"))
        player.lives = data.get("lives", 0)
        player.levels_complete = data.get("levels_complete", 0)
        return player

    def __repr__(self) -> str:
        return (
            f"Player(lives={self._lives}, levels_complete={self._levels_complete}, "
            f"maximum_lives={self.maximum_lives})"
        )
