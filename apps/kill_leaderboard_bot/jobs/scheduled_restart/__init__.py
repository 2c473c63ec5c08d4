"""
Daily restart job package.
"""

from apps.kill_leaderboard_bot.jobs.scheduled_restart.restart_job import setup_scheduled_restart_task

__all__ = ["setup_scheduled_restart_task"]
