"""
Player Upgrader

Raises a player's lives up to the maximum and advances completed levels.
"""

from __future__ import annotations

import logging
from typing import Optional

from player_upgrader.history import UpgradeAction, UpgradeRecord
from player_upgrader.player import InvalidValueError, MissingPlayerError, Player

logger = logging.getLogger(__name__)


class PlayerUpgrader:
    """Applies lives and level upgrades to a single player."""

    def __init__(self, player: Optional[Player]) -> None:
        if player is None:
            raise MissingPlayerError("PlayerUpgrader requires a player")
        self._player = player
        self._history: list[UpgradeRecord] = []

    @property
    def player(self) -> Player:
        """The player this upgrader acts on."""
        return self._player

    @property
    def history(self) -> list[UpgradeRecord]:
        """Upgrades applied so far, oldest first."""
        return list(self._history)

    def upgrade_lives(self, by: int) -> None:
        """
        Add lives to the player, clamped to the player's maximum.

        Args:
            by: Number of lives to add

        Raises:
            InvalidValueError: If by is negative, or the player rejects the result
        """
        if by < 0:
            raise InvalidValueError(f"upgrade amount must be >= 0, got {by}")

        before = self._player.lives
        self._player.lives = min(before + by, self._player.maximum_lives)

        record = UpgradeRecord(
            action=UpgradeAction.LIVES,
            before=before,
            after=self._player.lives,
            amount=by,
        )
        self._history.append(record)

        if record.clamped:
            logger.debug(
                "Lives upgrade by %d clamped to maximum %d",
                by,
                self._player.maximum_lives,
            )
        logger.debug("Lives %d -> %d", before, self._player.lives)

    def upgrade_level(self) -> None:
        """Mark one more level as complete."""
        before = self._player.levels_complete
        self._player.levels_complete = before + 1

        self._history.append(
            UpgradeRecord(
                action=UpgradeAction.LEVEL,
                before=before,
                after=self._player.levels_complete,
            )
        )
        logger.debug("Levels complete %d -> %d", before, self._player.levels_complete)
