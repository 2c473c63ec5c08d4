"""
Kill leaderboard job package.

This package polls the CRCON API, tracks the best kill count per player and
keeps a single top-20 leaderboard message up to date.
"""

from apps.kill_leaderboard_bot.jobs.kill_leaderboard.job import setup_kill_leaderboard_task

__all__ = ["setup_kill_leaderboard_task"]
