#!/usr/bin/env python3
"""
MCP Player Upgrader Server

Provides PlayerGet, PlayerReset, UpgradeLives, UpgradeLevel tools for a
per-project player. State is stored in .player/player.json relative to the
working directory.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from player_upgrader import (
    Player,
    PlayerError,
    PlayerUpgrader,
    load_config_from_pyproject,
)

logger = logging.getLogger(__name__)

mcp = FastMCP("Player Upgrader")

PROJECT_MARKERS = (".git", ".player", "pyproject.toml")

# Project directory is detected on every call; the server may outlive a project switch.


def _find_project_root(start_path: Path) -> Optional[Path]:
    """Return the nearest ancestor of start_path holding a project marker.

    The search stops at the home directory when start_path is inside it,
    and never considers the filesystem root.
    """
    home = Path.home().resolve()
    current = start_path.resolve()

    for candidate in (current, *current.parents):
        if candidate == candidate.parent:
            break
        if any((candidate / marker).exists() for marker in PROJECT_MARKERS):
            return candidate
        if candidate == home:
            break

    return None


def get_working_dir() -> Path:
    """Get the working directory for player storage.

    Priority:
    1. MCP_WORKING_DIR environment variable (explicit override)
    2. Detect project root from PWD/cwd
    3. Fall back to PWD or cwd
    """
    if os.environ.get("MCP_WORKING_DIR"):
        return Path(os.environ["MCP_WORKING_DIR"])

    start = Path(os.environ.get("PWD", os.getcwd()))
    project_root = _find_project_root(start)

    return project_root if project_root else start


def get_player_file(project_dir: Optional[str] = None) -> Path:
    """Get the path to the player.json file for current project."""
    base_dir = Path(project_dir) if project_dir else get_working_dir()
    player_dir = base_dir / ".player"
    player_dir.mkdir(parents=True, exist_ok=True)
    return player_dir / "player.json"


def new_player(project_dir: Optional[str] = None) -> Player:
    """Create a fresh player using the project's configured rules."""
    base_dir = Path(project_dir) if project_dir else get_working_dir()
    return load_config_from_pyproject(base_dir).new_player()


def load_player(project_dir: Optional[str] = None) -> Player:
    """Load the player from the JSON file, or create a fresh one.

    An unreadable or malformed file is logged and replaced by a fresh player.

    Raises:
        PlayerConfigError: If a fresh player is needed and the config is invalid
    """
    player_file = get_player_file(project_dir)
    if player_file.exists():
        try:
            with open(player_file, "r") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise TypeError(f"expected an object, got {type(data).__name__}")
            return Player.from_dict(data)
        except (json.JSONDecodeError, TypeError, PlayerError) as e:
            logger.warning(f"Corrupt player file {player_file}: {e}. Starting fresh.")
    return new_player(project_dir)


def save_player(player: Player, project_dir: Optional[str] = None) -> None:
    """Save the player to the JSON file."""
    player_file = get_player_file(project_dir)
    with open(player_file, "w") as f:
        json.dump(player.to_dict(), f, indent=2)


@mcp.tool()
def PlayerGet() -> dict:
    """
    Retrieve the current player.

    Returns:
        The player's lives, levels_complete and maximum_lives, or an error
        if the project's player settings are invalid
    """
    try:
        return load_player().to_dict()
    except PlayerError as e:
        return {"error": str(e)}


@mcp.tool()
def PlayerReset() -> dict:
    """
    Replace the current player with a fresh one.

    Returns:
        The new player object, or an error if the player settings are invalid
    """
    try:
        player = new_player()
    except PlayerError as e:
        return {"error": str(e)}

    save_player(player)
    return player.to_dict()


@mcp.tool()
def UpgradeLives(amount: int) -> dict:
    """
    Add lives to the player, capped at the maximum.

    Args:
        amount: Number of lives to add (must not be negative)

    Returns:
        The updated player object, or an error if the amount or the
        player settings are invalid
    """
    try:
        player = load_player()
        PlayerUpgrader(player).upgrade_lives(by=amount)
    except PlayerError as e:
        return {"error": str(e)}

    save_player(player)
    return player.to_dict()


@mcp.tool()
def UpgradeLevel() -> dict:
    """
    Mark one more level as complete.

    Returns:
        The updated player object, or an error if the player settings are invalid
    """
    try:
        player = load_player()
        PlayerUpgrader(player).upgrade_level()
    except PlayerError as e:
        return {"error": str(e)}

    save_player(player)
    return player.to_dict()


if __name__ == "__main__":
    mcp.run()
