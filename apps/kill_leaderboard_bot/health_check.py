"""
Minimal health check for the kill leaderboard bot.

The bot creates READINESS_FILE in on_ready once its scheduled tasks are
running (and again in on_resumed), and removes it on disconnect, shutdown
and scheduled restart.
This script exits 0 if the file exists, 1 otherwise.
"""

from __future__ import annotations

import os
import sys

READINESS_FILE = "/tmp/kill-leaderboard-bot-ready"


def create_readiness_file() -> None:
    """Signal readiness to the healthcheck. Raises OSError if the file cannot be created."""
    open(READINESS_FILE, "a").close()


def remove_readiness_file() -> None:
    """Remove readiness file so healthcheck fails after shutdown."""
    try:
        os.remove(READINESS_FILE)
    except OSError:
        pass


def is_healthy() -> bool:
    """Return True only when the bot has reported ready."""
    return os.path.isfile(READINESS_FILE)


def main() -> int:
    return 0 if is_healthy() else 1


if __name__ == "__main__":
    sys.exit(main())
