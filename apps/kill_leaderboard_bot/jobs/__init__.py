"""
Jobs module for the kill leaderboard bot.

Contains the scheduled tasks started once the bot is connected:
the leaderboard refresh and the daily restart.
"""

from apps.kill_leaderboard_bot.jobs.kill_leaderboard import setup_kill_leaderboard_task
from apps.kill_leaderboard_bot.jobs.scheduled_restart import setup_scheduled_restart_task

__all__ = [
    'setup_kill_leaderboard_task',
    'setup_scheduled_restart_task',
]
