"""
Player Upgrader - Lives and level progression for a game player.

This module holds the player state, the upgrader that clamps lives to the
maximum, and the configuration and history that support them.
"""

from player_upgrader.player import (
    Player,
    PlayerError,
    InvalidValueError,
    MissingPlayerError,
    MAXIMUM_LIVES,
)
from player_upgrader.upgrader import PlayerUpgrader
from player_upgrader.history import (
    UpgradeAction,
    UpgradeRecord,
)
from player_upgrader.config import (
    PlayerConfig,
    PlayerConfigError,
    load_config_from_pyproject,
)

__all__ = [
    # player
    "Player",
    "PlayerError",
    "InvalidValueError",
    "MissingPlayerError",
    "MAXIMUM_LIVES",
    # upgrader
    "PlayerUpgrader",
    # history
    "UpgradeAction",
    "UpgradeRecord",
    # config
    "PlayerConfig",
    "PlayerConfigError",
    "load_config_from_pyproject",
]
