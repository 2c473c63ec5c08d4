"""
Fetch the live player list from the CRCON `get_detailed_players` endpoint
and normalise it into `PlayerRecord` entries.

Entries without a positive kill count, or missing a name or role, are skipped
with a warning; a malformed entry never aborts the rest of the batch.
"""

from __future__ import annotations

import asyncio
import logging

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import aiohttp

from apps.kill_leaderboard_bot.bot_config import get_api_config
from apps.kill_leaderboard_bot.common.constants import get_role_display_name
from apps.kill_leaderboard_bot.common.errors import UpstreamError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerRecord:
    """One player as seen in a single poll."""
    name: str
    external_id: Optional[str]
    kills: int
    role: str


def _parse_player(player: Any) -> Optional[PlayerRecord]:
    if not isinstance(player, dict):
        logger.warning(f"Skipping invalid player object: {player!r}")
        return None
    
    name = player.get("name")
    kills = player.get("kills")
    role = player.get("role")
    if not kills or not name or not role:
        logger.warning(f"Skipping player with missing data: {player!r}")
        return None
    
    if isinstance(kills, bool) or not isinstance(kills, int):
        logger.warning(f"Skipping player with non-integer kills: {player!r}")
        return None
    
    if kills <= 0:
        logger.warning(f"Skipping player with non-positive kills: {player!r}")
        return None
    
    steam_id = player.get("steam_id_64")
    return PlayerRecord(
        name=str(name),
        external_id=str(steam_id) if steam_id is not None else None,
        kills=kills,
        role=get_role_display_name(str(role)),
    )


def parse_detailed_players(payload: Any) -> List[PlayerRecord]:
    """
    Extract valid player records from a `get_detailed_players` response body.
    
    Expects `{"result": {"players": {<id>: {...}}}}`. Any other shape is logged
    and yields an empty list.
    """
    result = payload.get("result") if isinstance(payload, dict) else None
    players = result.get("players") if isinstance(result, dict) else None
    if not isinstance(players, dict):
        logger.warning("Unexpected response format or no valid player data")
        return []
    
    records = []
    for player in players.values():
        record = _parse_player(player)
        if record is not None:
            records.append(record)
    return records


async def fetch_detailed_players(session: aiohttp.ClientSession) -> Dict[str, Any]:
    """
    Request the raw `get_detailed_players` payload.
    
    Raises:
        UpstreamError: on a non-200 status, a transport failure or an unreadable body
    """
    api_config = get_api_config()
    try:
        async with session.get(api_config.detailed_players_url, headers=api_config.auth_headers) as response:
            if response.status != 200:
                raise UpstreamError(f"Failed to fetch data: HTTP {response.status} {response.reason}")
            payload = await response.json(content_type=None)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        raise UpstreamError(f"Error requesting {api_config.detailed_players_url}: {e}") from e
    
    logger.debug(f"API response: {payload}")
    return payload


async def get_player_data(session: Optional[aiohttp.ClientSession] = None) -> List[PlayerRecord]:
    """
    Fetch and normalise the current player list, returning an empty list on any upstream failure.
    
    Args:
        session: Reusable HTTP session; a short-lived one is opened when omitted
    """
    try:
        if session is None:
            async with aiohttp.ClientSession() as own_session:
                payload = await fetch_detailed_players(own_session)
        else:
            payload = await fetch_detailed_players(session)
    except UpstreamError as e:
        logger.error(f"Error fetching player data: {e}", exc_info=True)
        return []
    
    return parse_detailed_players(payload)
