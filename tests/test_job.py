"""
Tests for one full leaderboard refresh cycle.
"""

import pytest

from apps.kill_leaderboard_bot.common.constants import (
    ERROR_TITLE,
    LEADERBOARD_TITLE,
    NO_DATA_DESCRIPTION,
)
from apps.kill_leaderboard_bot.fetch import PlayerRecord
from apps.kill_leaderboard_bot.jobs.kill_leaderboard import job
from apps.kill_leaderboard_bot.jobs.kill_leaderboard.state import LeaderboardState, PlayerKills

from fakes import FakeBot, FakeChannel


def _stub_player_data(monkeypatch, *batches):
    remaining = list(batches)

    async def fake_get_player_data(session=None):
        return remaining.pop(0)

    monkeypatch.setattr(job, "get_player_data", fake_get_player_data)


class TestRunLeaderboardCycle:
    """Tests for run_leaderboard_cycle."""

    async def test_publishes_ranked_players(self, monkeypatch):
        _stub_player_data(monkeypatch, [
            PlayerRecord(name="A", external_id=None, kills=5, role="Rifleman"),
            PlayerRecord(name="B", external_id=None, kills=9, role="Medic"),
        ])
        channel = FakeChannel()
        state = LeaderboardState()
        await job.run_leaderboard_cycle(FakeBot(channel), 1234, state)

        sent_embed = channel.sent[0]["embeds"][0]
        assert sent_embed.title == LEADERBOARD_TITLE
        assert sent_embed.description.split("\n")[0] == "**🥇 9 - B (Medic)**"
        assert state.message_id == 1001

    async def test_lower_count_is_ignored_between_cycles(self, monkeypatch):
        _stub_player_data(
            monkeypatch,
            [PlayerRecord(name="A", external_id=None, kills=5, role="rifleman")],
            [PlayerRecord(name="A", external_id=None, kills=3, role="medic")],
        )
        channel = FakeChannel()
        state = LeaderboardState()
        bot = FakeBot(channel)
        await job.run_leaderboard_cycle(bot, 1234, state)
        await job.run_leaderboard_cycle(bot, 1234, state)

        assert state.player_kills == {"A": PlayerKills(kills=5, role="rifleman")}
        assert len(channel.sent) == 1
        assert len(channel.messages[1001].edits) == 1

    async def test_empty_upstream_still_publishes_placeholder(self, monkeypatch):
        _stub_player_data(monkeypatch, [])
        channel = FakeChannel()
        await job.run_leaderboard_cycle(FakeBot(channel), 1234, LeaderboardState())
        assert channel.sent[0]["embeds"][0].description == NO_DATA_DESCRIPTION

    async def test_missing_channel_aborts_quietly(self, monkeypatch):
        _stub_player_data(monkeypatch, [])
        state = LeaderboardState()
        await job.run_leaderboard_cycle(FakeBot(None), 1234, state)
        assert state.message_id is None

    async def test_unexpected_error_posts_error_card(self, monkeypatch):
        async def broken_get_player_data(session=None):
            raise RuntimeError("boom")

        monkeypatch.setattr(job, "get_player_data", broken_get_player_data)
        channel = FakeChannel()
        state = LeaderboardState()
        await job.run_leaderboard_cycle(FakeBot(channel), 1234, state)

        assert channel.sent[0]["embeds"][0].title == ERROR_TITLE
        assert state.message_id is None
        assert not state.cycle_lock.locked()

    async def test_overlapping_cycle_is_skipped(self, monkeypatch):
        _stub_player_data(monkeypatch, [])
        channel = FakeChannel()
        state = LeaderboardState()
        async with state.cycle_lock:
            await job.run_leaderboard_cycle(FakeBot(channel), 1234, state)
        assert channel.sent == []


class TestSetupKillLeaderboardTask:
    """Tests for setup_kill_leaderboard_task."""

    def test_does_not_restart_running_task(self, monkeypatch):
        started = []
        monkeypatch.setattr(job.update_kill_leaderboard, "is_running", lambda: True)
        monkeypatch.setattr(job.update_kill_leaderboard, "start", lambda *a, **kw: started.append(True))
        job.setup_kill_leaderboard_task(FakeBot())
        assert started == []


class TestUpdateKillLeaderboard:
    """Tests for the scheduled update_kill_leaderboard iteration."""

    async def test_publishes_into_job_state(self, bot_env, monkeypatch):
        _stub_player_data(monkeypatch, [PlayerRecord(name="A", external_id=None, kills=4, role="Medic")])
        channel = FakeChannel()
        monkeypatch.setattr(job, "_bot_instance", FakeBot(channel))
        monkeypatch.setattr(job, "_leaderboard_state", LeaderboardState())

        await job.update_kill_leaderboard.coro()

        state = job.get_leaderboard_state()
        assert state.player_kills == {"A": PlayerKills(kills=4, role="Medic")}
        assert state.message_id == 1001

    async def test_without_bot_instance_does_nothing(self, monkeypatch):
        monkeypatch.setattr(job, "_bot_instance", None)
        monkeypatch.setattr(job, "_leaderboard_state", LeaderboardState())

        await job.update_kill_leaderboard.coro()

        assert job.get_leaderboard_state().message_id is None
