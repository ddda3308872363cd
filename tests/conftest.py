"""
Pytest Configuration & Shared Fixtures
"""

import pytest

from player_upgrader import Player, PlayerUpgrader


@pytest.fixture
def player() -> Player:
    """A fresh player with no lives and no completed levels."""
    return Player()


@pytest.fixture
def upgrader(player: Player) -> PlayerUpgrader:
    """An upgrader bound to the player fixture."""
    return PlayerUpgrader(player)


@pytest.fixture
def player_dir(tmp_path, monkeypatch):
    """Point the MCP server's storage at a temporary project directory."""
    monkeypatch.setenv("MCP_WORKING_DIR", str(tmp_path))
    return tmp_path
