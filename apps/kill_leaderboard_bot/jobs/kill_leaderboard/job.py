"""
Scheduled task that keeps the kill leaderboard message current.

Every 15 seconds: fetch the live player list, merge it into the best-known
kill counts, render the top 20 and edit (or send) the leaderboard message.
The first cycle runs as soon as the loop starts.
"""

import logging
import time

from typing import Optional

import aiohttp
import discord

from discord.ext import tasks

from apps.kill_leaderboard_bot.bot_config import get_bot_config
from apps.kill_leaderboard_bot.common import (
    ChannelNotFoundError,
    build_leaderboard_embed,
    log_job_completion,
)
from apps.kill_leaderboard_bot.common.constants import POLL_INTERVAL_SECONDS
from apps.kill_leaderboard_bot.fetch import get_player_data
from apps.kill_leaderboard_bot.jobs.kill_leaderboard.posting import (
    post_error_card,
    publish_leaderboard,
)
from apps.kill_leaderboard_bot.jobs.kill_leaderboard.ranking import (
    get_top_players,
    render_leaderboard,
)
from apps.kill_leaderboard_bot.jobs.kill_leaderboard.state import (
    LeaderboardState,
    update_kill_data,
)

logger = logging.getLogger(__name__)

# Bot instance reference (set by setup function)
_bot_instance: Optional[discord.Client] = None

_leaderboard_state = LeaderboardState()


def set_bot_instance(bot: discord.Client) -> None:
    """Set the bot instance for posting messages."""
    global _bot_instance
    _bot_instance = bot


def get_leaderboard_state() -> LeaderboardState:
    """Get the state owned by the scheduled leaderboard task."""
    return _leaderboard_state


async def run_leaderboard_cycle(
    bot: discord.Client,
    channel_id: int,
    state: LeaderboardState,
    session: Optional[aiohttp.ClientSession] = None
) -> None:
    """
    Run one fetch, merge, render and publish pass.
    
    Never raises: a missing channel aborts the cycle, any other failure is
    reported with the error card. A cycle that starts while the previous one is
    still in flight is skipped.
    """
    if state.cycle_lock.locked():
        logger.warning("Previous leaderboard cycle still running, skipping this one")
        return
    
    async with state.cycle_lock:
        start_time = time.time()
        players = []
        try:
            players = await get_player_data(session)
            update_kill_data(players, state.player_kills)
            top_players = get_top_players(state.player_kills)
            embed = build_leaderboard_embed(render_leaderboard(top_players))
            await publish_leaderboard(bot, channel_id, state, embed)
        except ChannelNotFoundError as e:
            logger.error(f"Failed to find the Discord channel: {e}")
            log_job_completion("kill_leaderboard", start_time, success=False, channel_id=channel_id)
            return
        except Exception as e:
            logger.error(f"Error in leaderboard cycle: {e}", exc_info=True)
            await post_error_card(bot, channel_id)
            log_job_completion("kill_leaderboard", start_time, success=False, channel_id=channel_id)
            return
        
        log_job_completion(
            "kill_leaderboard",
            start_time,
            success=True,
            players_fetched=len(players),
            players_tracked=len(state.player_kills),
        )


@tasks.loop(seconds=POLL_INTERVAL_SECONDS)
async def update_kill_leaderboard():
    """Refresh the kill leaderboard message."""
    global _bot_instance
    
    if not _bot_instance:
        logger.error("Bot instance not set for kill leaderboard")
        return
    
    bot_config = get_bot_config()
    await run_leaderboard_cycle(_bot_instance, bot_config.channel_id, get_leaderboard_state())


def setup_kill_leaderboard_task(bot: discord.Client) -> None:
    """Start the scheduled kill leaderboard task."""
    set_bot_instance(bot)
    
    @update_kill_leaderboard.before_loop
    async def before_kill_leaderboard():
        await bot.wait_until_ready()
    
    if not update_kill_leaderboard.is_running():
        update_kill_leaderboard.start()
        logger.info(f"Started kill leaderboard task (every {POLL_INTERVAL_SECONDS} sec)")
    else:
        logger.warning("Kill leaderboard task already running")
