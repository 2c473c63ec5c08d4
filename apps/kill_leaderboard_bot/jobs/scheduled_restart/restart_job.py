"""
Scheduled task that restarts the bot once a day.

At RESTART_TIME (local time) the process exits with status 0 and relies on
the container or process supervisor to start it again. In-memory kill counts
are lost on restart.
"""

import logging
import os

from datetime import datetime, time
from typing import Callable

import discord
from discord.ext import tasks

from apps.kill_leaderboard_bot.bot_config import get_bot_config
from apps.kill_leaderboard_bot.health_check import remove_readiness_file

logger = logging.getLogger(__name__)


def local_restart_time(restart_time: time) -> time:
    """Attach the host's local timezone to a naive restart time."""
    local_tz = datetime.now().astimezone().tzinfo
    return restart_time.replace(tzinfo=local_tz)


def restart_process(exit_func: Callable[[int], None] = os._exit) -> None:
    """Exit immediately with status 0 so the supervisor restarts the bot."""
    logger.info("Scheduled restart initiated.")
    remove_readiness_file()
    exit_func(0)


@tasks.loop(time=time(hour=4, minute=0))
async def scheduled_restart():
    """Restart the bot at the configured time of day."""
    restart_process()


def setup_scheduled_restart_task(bot: discord.Client) -> None:
    """Start the daily restart task at the configured local time."""
    bot_config = get_bot_config()
    restart_at = local_restart_time(bot_config.restart_time)
    
    if scheduled_restart.is_running():
        logger.warning("Scheduled restart task already running")
        return
    
    scheduled_restart.change_interval(time=restart_at)
    
    @scheduled_restart.before_loop
    async def before_restart():
        await bot.wait_until_ready()
    
    scheduled_restart.start()
    logger.info(f"Restart scheduled for {bot_config.restart_time_str} every day.")
