"""
In-memory state for the kill leaderboard job.

Holds the best kill count seen for every player name since the process
started, plus the ID of the leaderboard message being kept up to date.
Nothing here is persisted; a restart starts from an empty board.
"""

import asyncio

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from apps.kill_leaderboard_bot.fetch import PlayerRecord


@dataclass
class PlayerKills:
    kills: int
    role: str


# Keyed by display name, so two accounts sharing a name share one entry
AggregateState = Dict[str, PlayerKills]


@dataclass
class LeaderboardState:
    """Everything one leaderboard job carries between cycles."""
    player_kills: AggregateState = field(default_factory=dict)
    message_id: Optional[int] = None
    cycle_lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False)


def update_kill_data(players: Iterable[PlayerRecord], player_kills: AggregateState) -> AggregateState:
    """
    Merge one poll's records into the running best-known kill counts.
    
    An entry is replaced only when the new kill count is strictly higher; the
    role is taken from that same observation. Names are never removed.
    
    Returns:
        The same mapping, updated in place
    """
    for player in players:
        current = player_kills.get(player.name)
        if current is None or player.kills > current.kills:
            player_kills[player.name] = PlayerKills(kills=player.kills, role=player.role)
    return player_kills
