"""
Player Configuration

Pydantic model for player rules, read from [tool.player-upgrader] in
pyproject.toml.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from player_upgrader.player import MAXIMUM_LIVES, Player, PlayerError

logger = logging.getLogger(__name__)

CONFIG_SECTION = "player-upgrader"


class PlayerConfigError(PlayerError):
    """Raised when configured player rules are invalid."""

    pass


class PlayerConfig(BaseModel):
    """Rules applied to newly created players."""

    maximum_lives: int = Field(default=MAXIMUM_LIVES, ge=0, le=99)
    starting_lives: int = Field(default=0, ge=0)

    def new_player(self) -> Player:
        """Create a fresh player following these rules."""
        player = Player(maximum_lives=self.maximum_lives)
        player.lives = min(self.starting_lives, self.maximum_lives)
        return player


def load_config_from_pyproject(repo_root: Path) -> PlayerConfig:
    """Load configuration from pyproject.toml.

    Args:
        repo_root: Path to repository root

    Returns:
        PlayerConfig (defaults if not found)

    Raises:
        PlayerConfigError: If the section exists but holds invalid values
    """
    pyproject_path = repo_root / "pyproject.toml"

    if not pyproject_path.exists():
        return PlayerConfig()

    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        logger.warning(f"Could not parse {pyproject_path}: {e}")
        return PlayerConfig()

    tool_config = data.get("tool", {}).get(CONFIG_SECTION, {})

    if not tool_config:
        return PlayerConfig()

    try:
        return PlayerConfig(**tool_config)
    except ValidationError as e:
        raise PlayerConfigError(f"Invalid [tool.{CONFIG_SECTION}] settings: {e}") from e
