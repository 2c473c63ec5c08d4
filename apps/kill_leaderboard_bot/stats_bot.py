"""
Discord bot entry point that keeps a live kill leaderboard posted in one channel.
"""

import logging
import signal

import discord

from discord.ext import commands

from apps.kill_leaderboard_bot.bot_config import get_api_config, get_bot_config
from apps.kill_leaderboard_bot.health_check import (
    create_readiness_file,
    remove_readiness_file,
)
from apps.kill_leaderboard_bot.jobs import (
    setup_kill_leaderboard_task,
    setup_scheduled_restart_task,
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

intents = discord.Intents.default()


async def get_prefix(bot, message):
    """Return empty prefix list (the bot takes no commands)."""
    return []


bot = commands.Bot(
    command_prefix=get_prefix,
    intents=intents,
    description="HLL Kill Leaderboard Bot"
)


@bot.event
async def on_ready():
    """Called when the bot is ready and connected to Discord."""
    logger.info("Discord bot is ready and connected.")
    logger.info(f"{bot.user} is in {len(bot.guilds)} guild(s)")
    
    try:
        setup_kill_leaderboard_task(bot)
        setup_scheduled_restart_task(bot)
        
        try:
            create_readiness_file()
            logger.info("Bot is fully ready - healthcheck file created")
        except OSError as e:
            logger.warning(f"Could not create readiness file: {e}")
    
    except Exception as e:
        logger.error(f"Error during bot initialization: {e}", exc_info=True)
        remove_readiness_file()
        raise


@bot.event
async def on_disconnect():
    """Mark the bot unhealthy while it is disconnected."""
    logger.info("Bot disconnected, removing readiness file...")
    remove_readiness_file()


@bot.event
async def on_resumed():
    """Mark the bot healthy again after a gateway resume (on_ready is not dispatched)."""
    logger.info("Bot session resumed, recreating readiness file...")
    try:
        create_readiness_file()
    except OSError as e:
        logger.warning(f"Could not create readiness file: {e}")


def main():
    """Main entry point for the Discord bot."""
    bot_config = get_bot_config()
    logger.info(f"Loaded configuration: {bot_config!r}")
    logger.info(f"Loaded configuration: {get_api_config()!r}")
    
    def handle_shutdown_signal(signum: int, frame) -> None:
        logger.info("Received signal %s, removing readiness file and exiting.", signum)
        remove_readiness_file()
        raise SystemExit(0)

    for sig in (signal.SIGTERM, signal.SIGINT):
        try:
            signal.signal(sig, handle_shutdown_signal)
        except (ValueError, OSError):
            # SIGINT not available in all contexts (e.g. threads), skip
            pass

    try:
        logger.info("Starting Discord bot...")
        bot.run(bot_config.token, log_handler=None)
    except Exception as e:
        logger.error(f"Failed to start bot: {e}", exc_info=True)
        remove_readiness_file()
        raise


if __name__ == "__main__":
    main()
