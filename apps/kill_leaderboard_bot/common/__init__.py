"""
Common utilities module for the kill leaderboard bot.

This module provides centralized access to shared functionality:
- Display constants and role translations
- Pipeline exceptions
- Job logging
- Embed builders
"""

from apps.kill_leaderboard_bot.common.constants import get_role_display_name

from apps.kill_leaderboard_bot.common.errors import (
    LeaderboardError,
    UpstreamError,
    ChannelNotFoundError,
    PublishError,
)

from apps.kill_leaderboard_bot.common.logging import (
    log_job_completion,
)

from apps.kill_leaderboard_bot.common.embed_builder import (
    build_leaderboard_embed,
    build_error_embed,
)

__all__ = [
    'get_role_display_name',
    'LeaderboardError',
    'UpstreamError',
    'ChannelNotFoundError',
    'PublishError',
    'log_job_completion',
    'build_leaderboard_embed',
    'build_error_embed',
]
