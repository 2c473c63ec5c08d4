"""
HLL Kill Leaderboard Bot package.

This package polls a CRCON server for live player stats and keeps a
ranked top-20 kill leaderboard posted in a single Discord channel.
"""

def main():
    """Main entry point for the Discord bot."""
    from apps.kill_leaderboard_bot.stats_bot import main as _main
    _main()

__all__ = ['main']
