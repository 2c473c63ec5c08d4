"""
Turn aggregated kill counts into the ranked leaderboard text.
"""

from dataclasses import dataclass
from typing import List

from apps.kill_leaderboard_bot.common.constants import (
    ELLIPSIS,
    LEADERBOARD_SIZE,
    MAX_LABEL_LENGTH,
    NO_DATA_DESCRIPTION,
    RANK_EMOJIS,
)
from apps.kill_leaderboard_bot.jobs.kill_leaderboard.state import AggregateState


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    name: str
    kills: int
    role: str


def get_top_players(player_kills: AggregateState, limit: int = LEADERBOARD_SIZE) -> List[LeaderboardEntry]:
    """Return the `limit` highest kill counts, ranked from 1. Ties keep insertion order."""
    ranked = sorted(player_kills.items(), key=lambda item: item[1].kills, reverse=True)[:limit]
    return [
        LeaderboardEntry(rank=rank, name=name, kills=stats.kills, role=stats.role)
        for rank, (name, stats) in enumerate(ranked, 1)
    ]


def truncate_player_name_role(name: str, role: str, max_length: int = MAX_LABEL_LENGTH) -> str:
    """Format `name (role)`, cutting it to `max_length` characters with a trailing ellipsis if needed."""
    combined = f"{name} ({role})"
    if len(combined) > max_length:
        return combined[:max_length - len(ELLIPSIS)] + ELLIPSIS
    return combined


def format_leaderboard_line(entry: LeaderboardEntry) -> str:
    """Format one ranked line; the podium places get a medal and bold text."""
    if entry.rank <= len(RANK_EMOJIS):
        rank_indicator = RANK_EMOJIS[entry.rank - 1]
    else:
        rank_indicator = f"{entry.rank}."
    
    line = f"{rank_indicator} {entry.kills} - {truncate_player_name_role(entry.name, entry.role)}"
    if entry.rank <= len(RANK_EMOJIS):
        line = f"**{line}**"
    return line


def render_leaderboard(entries: List[LeaderboardEntry]) -> str:
    """Join ranked lines into the embed description, or the no-data placeholder when empty."""
    if not entries:
        return NO_DATA_DESCRIPTION
    return "\n".join(format_leaderboard_line(entry) for entry in entries)
