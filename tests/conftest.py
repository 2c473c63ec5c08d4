"""
Shared fixtures for the kill leaderboard tests.
"""

import pytest

from apps.kill_leaderboard_bot import bot_config


@pytest.fixture
def bot_env(monkeypatch):
    """Provide a complete environment and fresh config singletons."""
    monkeypatch.setenv("DISCORD_TOKEN", "discord-token")
    monkeypatch.setenv("DISCORD_CHANNEL_ID", "1234")
    monkeypatch.setenv("RCON_API_BASE_URL", "https://rcon.example.com/")
    monkeypatch.setenv("RCON_API_TOKEN", "rcon-token")
    monkeypatch.delenv("RESTART_TIME", raising=False)
    monkeypatch.setattr(bot_config, "_bot_config", None)
    monkeypatch.setattr(bot_config, "_api_config", None)
    yield
