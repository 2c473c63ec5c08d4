"""
Fetch module for the kill leaderboard bot.

Contains functions for fetching live player data from the CRCON API.
"""

from apps.kill_leaderboard_bot.fetch.detailed_players import (
    PlayerRecord,
    fetch_detailed_players,
    get_player_data,
    parse_detailed_players,
)

__all__ = [
    'PlayerRecord',
    'fetch_detailed_players',
    'get_player_data',
    'parse_detailed_players',
]
