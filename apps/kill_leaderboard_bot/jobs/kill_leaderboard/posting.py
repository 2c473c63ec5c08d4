"""
Discord message posting for the kill leaderboard.

Handles:
- Editing the stored leaderboard message in place
- Sending a fresh message when there is none or the edit fails
- Posting the error card when a cycle blows up
"""

import logging

import discord

from apps.kill_leaderboard_bot.common.embed_builder import build_error_embed
from apps.kill_leaderboard_bot.common.errors import ChannelNotFoundError, PublishError
from apps.kill_leaderboard_bot.jobs.kill_leaderboard.state import LeaderboardState

logger = logging.getLogger(__name__)


def get_leaderboard_channel(bot: discord.Client, channel_id: int) -> discord.abc.Messageable:
    """
    Look up the leaderboard channel in the client cache.
    
    Raises:
        ChannelNotFoundError: if the bot cannot see the channel
    """
    channel = bot.get_channel(channel_id)
    if channel is None:
        raise ChannelNotFoundError(channel_id)
    return channel


async def _edit_stored_message(
    channel: discord.abc.Messageable,
    state: LeaderboardState,
    embed: discord.Embed
) -> bool:
    """Try to edit the stored leaderboard message. Returns False when a new one must be sent."""
    message_id = state.message_id
    try:
        message = await channel.fetch_message(message_id)
        await message.edit(embeds=[embed])
        logger.debug(f"Edited leaderboard message {message_id}")
        return True
    except discord.NotFound:
        logger.info(f"Stored message {message_id} not found (may have been deleted), will create new")
    except discord.Forbidden:
        logger.warning(f"No permission to edit stored message {message_id}, will create new")
    except Exception as e:
        logger.error(f"Error editing stored message {message_id}: {e}, will create new", exc_info=True)
    return False


async def publish_leaderboard(
    bot: discord.Client,
    channel_id: int,
    state: LeaderboardState,
    embed: discord.Embed
) -> None:
    """
    Keep exactly one leaderboard message in the channel up to date.
    
    Edits the message remembered in `state`, or sends a new one and remembers
    its ID when there is no stored message or the edit fails.
    
    Raises:
        ChannelNotFoundError: if the configured channel is not visible
        PublishError: if sending a new message fails
    """
    channel = get_leaderboard_channel(bot, channel_id)
    
    if state.message_id is not None:
        if await _edit_stored_message(channel, state, embed):
            return
    
    try:
        new_message = await channel.send(embeds=[embed])
    except discord.HTTPException as e:
        raise PublishError(f"Failed to send leaderboard message to channel {channel_id}: {e}") from e
    
    state.message_id = new_message.id
    logger.info(f"Posted new leaderboard message {new_message.id}")


async def post_error_card(bot: discord.Client, channel_id: int) -> None:
    """Send the error card to the leaderboard channel. Failures are logged, never raised."""
    channel = bot.get_channel(channel_id)
    if channel is None:
        logger.error(f"Channel {channel_id} not found, cannot post error card")
        return
    
    try:
        await channel.send(embeds=[build_error_embed()])
    except Exception as e:
        logger.error(f"Failed to post error card to channel {channel_id}: {e}", exc_info=True)
