"""
Kill leaderboard bot configuration from environment variables.
"""

from __future__ import annotations

import logging
import os

from datetime import time
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

APPS_DIR = Path(__file__).parent.parent
ROOT_DIR = APPS_DIR.parent
ENV_FILE = ROOT_DIR / ".env"
DOCKER_ENV_FILE = ROOT_DIR / "infra" / "docker" / ".env"

DEFAULT_RESTART_TIME = "04:00"
DETAILED_PLAYERS_ENDPOINT = "/api/get_detailed_players"


def load_env_file() -> None:
    """Seed the environment from the first .env file found, never overriding real variables."""
    for env_path in [DOCKER_ENV_FILE, ENV_FILE]:
        if env_path.exists():
            try:
                load_dotenv(dotenv_path=env_path, override=False)
                logger.info(f"Loaded .env from {env_path}")
                return
            except Exception as e:
                logger.error(f"Failed to load {env_path}: {e}", exc_info=True)
    logger.info("No .env file found")


load_env_file()


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ValueError(f"{name} environment variable is required")
    return value


def parse_restart_time(value: str) -> time:
    """
    Parse a 24h ``HH:MM`` string into a ``datetime.time``.

    Raises:
        ValueError: if the value is not two colon-separated integers in range
    """
    parts = value.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"RESTART_TIME must be in HH:MM format, got {value!r}")
    try:
        hour, minute = (int(part) for part in parts)
    except ValueError:
        raise ValueError(f"RESTART_TIME must be in HH:MM format, got {value!r}") from None
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"RESTART_TIME out of range, got {value!r}")
    return time(hour=hour, minute=minute)


class DiscordBotConfig:
    """Discord bot settings loaded from environment variables."""
    
    def __init__(self) -> None:
        self.token: str = _require_env("DISCORD_TOKEN")
        
        channel_id_str = _require_env("DISCORD_CHANNEL_ID")
        try:
            self.channel_id: int = int(channel_id_str.strip())
        except ValueError:
            raise ValueError(f"DISCORD_CHANNEL_ID must be an integer, got {channel_id_str!r}") from None
        
        self.restart_time_str: str = os.getenv("RESTART_TIME") or DEFAULT_RESTART_TIME
        self.restart_time: time = parse_restart_time(self.restart_time_str)
    
    def __repr__(self) -> str:
        return (
            f"DiscordBotConfig("
            f"token=***, "
            f"channel_id={self.channel_id}, "
            f"restart_time={self.restart_time_str!r})"
        )


class APIConfig:
    """CRCON API endpoint configuration."""
    
    def __init__(self) -> None:
        self.base_url: str = _require_env("RCON_API_BASE_URL").rstrip("/")
        self.token: str = _require_env("RCON_API_TOKEN")
        self.detailed_players_endpoint: str = DETAILED_PLAYERS_ENDPOINT
    
    @property
    def detailed_players_url(self) -> str:
        return f"{self.base_url}{self.detailed_players_endpoint}"
    
    @property
    def auth_headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"}
    
    def __repr__(self) -> str:
        return (
            f"APIConfig(base_url={self.base_url!r}, "
            f"token=***, "
            f"detailed_players_endpoint={self.detailed_players_endpoint!r})"
        )


_bot_config: Optional[DiscordBotConfig] = None
_api_config: Optional[APIConfig] = None


def get_bot_config() -> DiscordBotConfig:
    """Get or create the singleton config instance."""
    global _bot_config
    if _bot_config is None:
        _bot_config = DiscordBotConfig()
    return _bot_config


def get_api_config() -> APIConfig:
    """Get or create the singleton config instance."""
    global _api_config
    if _api_config is None:
        _api_config = APIConfig()
    return _api_config
