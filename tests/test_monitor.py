"""Tests for monitor entry point wiring."""

from unittest.mock import patch

import pytest

import monitor
from core.live_scores import FootballDataSource, TelexNotifier
from tasks.live_scores import UpdateCycle


def test_load_configuration(mock_env_vars):
    """Test configuration is read from the environment."""
    with patch.object(monitor.settings, "exists", return_value=True):
        config = monitor.load_configuration()

    assert config["TELEX_WEBHOOK_URL"] == (
        "https://ping.telex.im/v1/webhooks/test-channel"
    )
    assert config["FOOTBALL_API_TOKEN"] == "test_token_123"
    assert config["SCHEDULE_CRON"] == "0 * * * *"
    assert config["TELEX_USERNAME"] == "Football Updates"


def test_load_configuration_missing_webhook(monkeypatch):
    """Test missing webhook URL aborts startup."""
    monkeypatch.delenv("TELEX_WEBHOOK_URL", raising=False)

    with patch.object(monitor.settings, "exists", return_value=True):
        with pytest.raises(ValueError, match="TELEX_WEBHOOK_URL"):
            monitor.load_configuration()


def test_load_configuration_invalid_cron(mock_env_vars, monkeypatch):
    """Test invalid schedule aborts startup."""
    monkeypatch.setenv("SCHEDULE_CRON", "every hour")

    with patch.object(monitor.settings, "exists", return_value=True):
        with pytest.raises(ValueError, match="SCHEDULE_CRON"):
            monitor.load_configuration()


def test_load_configuration_runs_wizard(mock_env_vars):
    """Test setup wizard runs when no .env exists."""
    with patch.object(monitor.settings, "exists", return_value=False):
        with patch.object(monitor.settings, "setup_interactive") as wizard:
            monitor.load_configuration()

    wizard.assert_called_once()


def test_build_update_cycle(mock_env_vars):
    with patch.object(monitor.settings, "exists", return_value=True):
        config = monitor.load_configuration()

    cycle = monitor.build_update_cycle(config)

    assert isinstance(cycle, UpdateCycle)
    assert isinstance(cycle.source, FootballDataSource)
    assert isinstance(cycle.sink, TelexNotifier)
    assert cycle.source.api_token == "test_token_123"
    assert cycle.sink.webhook_url == (
        "https://ping.telex.im/v1/webhooks/test-channel"
    )
    assert cycle.skip_if_running is False


def test_build_scheduler_jobs(mock_source, mock_sink):
    """Test scheduler gets the score cycle and health check jobs."""
    cycle = UpdateCycle(mock_source, mock_sink)

    scheduler = monitor.build_scheduler(cycle, "0 * * * *")

    live_scores = scheduler.get_job("live_scores")
    assert live_scores is not None
    assert live_scores.func == cycle.run
    assert live_scores.max_instances == 3
    assert scheduler.get_job("health_check") is not None
