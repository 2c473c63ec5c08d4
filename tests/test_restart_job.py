"""
Tests for the daily scheduled restart.
"""

from datetime import time

from apps.kill_leaderboard_bot import health_check
from apps.kill_leaderboard_bot.jobs.scheduled_restart import restart_job

from fakes import FakeBot


class TestLocalRestartTime:
    """Tests for local_restart_time."""

    def test_keeps_clock_time_and_adds_timezone(self):
        restart_at = restart_job.local_restart_time(time(4, 0))
        assert (restart_at.hour, restart_at.minute) == (4, 0)
        assert restart_at.tzinfo is not None


class TestRestartProcess:
    """Tests for restart_process."""

    def test_exits_with_success_status(self, tmp_path, monkeypatch):
        readiness_file = tmp_path / "ready"
        readiness_file.touch()
        monkeypatch.setattr(health_check, "READINESS_FILE", str(readiness_file))

        exit_codes = []
        restart_job.restart_process(exit_func=exit_codes.append)

        assert exit_codes == [0]
        assert not readiness_file.exists()


class TestHealthCheck:
    """Tests for the readiness-file health check."""

    def test_unhealthy_without_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(health_check, "READINESS_FILE", str(tmp_path / "ready"))
        assert health_check.main() == 1

    def test_healthy_after_ready(self, tmp_path, monkeypatch):
        monkeypatch.setattr(health_check, "READINESS_FILE", str(tmp_path / "ready"))
        health_check.create_readiness_file()
        assert health_check.main() == 0
        health_check.remove_readiness_file()
        assert health_check.main() == 1


class TestSetupScheduledRestartTask:
    """Tests for setup_scheduled_restart_task."""

    def test_schedules_configured_local_time(self, bot_env, monkeypatch):
        monkeypatch.setenv("RESTART_TIME", "23:30")
        loop = restart_job.scheduled_restart
        started = []
        monkeypatch.setattr(loop, "is_running", lambda: False)
        monkeypatch.setattr(loop, "start", lambda *a, **kw: started.append(True))

        restart_job.setup_scheduled_restart_task(FakeBot())

        scheduled_at = loop.time[0]
        assert (scheduled_at.hour, scheduled_at.minute) == (23, 30)
        assert scheduled_at.tzinfo is not None
        assert started == [True]

    def test_does_not_restart_running_task(self, bot_env, monkeypatch):
        loop = restart_job.scheduled_restart
        started = []
        monkeypatch.setattr(loop, "is_running", lambda: True)
        monkeypatch.setattr(loop, "start", lambda *a, **kw: started.append(True))

        restart_job.setup_scheduled_restart_task(FakeBot())

        assert started == []
