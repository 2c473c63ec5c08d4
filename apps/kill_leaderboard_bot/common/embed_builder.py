"""
Builders for the Discord embeds posted to the leaderboard channel.
"""

from datetime import datetime
from typing import Optional

import discord

from apps.kill_leaderboard_bot.common.constants import (
    ERROR_COLOR,
    ERROR_DESCRIPTION,
    ERROR_TITLE,
    FOOTER_ICON_URL,
    FOOTER_TEXT,
    LEADERBOARD_COLOR,
    LEADERBOARD_THUMBNAIL_URL,
    LEADERBOARD_TITLE,
)


def build_leaderboard_embed(description: str, timestamp: Optional[datetime] = None) -> discord.Embed:
    """
    Build the kill leaderboard card.
    
    Args:
        description: Rendered leaderboard body (or the no-data placeholder)
        timestamp: Refresh time shown next to the footer (default: now, UTC)
        
    Returns:
        Embed with the fixed title, colour, thumbnail and footer
    """
    embed = discord.Embed(
        title=LEADERBOARD_TITLE,
        description=description,
        color=LEADERBOARD_COLOR,
        timestamp=timestamp or discord.utils.utcnow(),
    )
    embed.set_thumbnail(url=LEADERBOARD_THUMBNAIL_URL)
    embed.set_footer(text=FOOTER_TEXT, icon_url=FOOTER_ICON_URL)
    return embed


def build_error_embed(timestamp: Optional[datetime] = None) -> discord.Embed:
    """Build the red card posted when a leaderboard refresh fails."""
    embed = discord.Embed(
        title=ERROR_TITLE,
        description=ERROR_DESCRIPTION,
        color=ERROR_COLOR,
        timestamp=timestamp or discord.utils.utcnow(),
    )
    embed.set_footer(text=FOOTER_TEXT, icon_url=FOOTER_ICON_URL)
    return embed
