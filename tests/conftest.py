"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    monkeypatch.setenv(
        "TELEX_WEBHOOK_URL", "https://ping.telex.im/v1/webhooks/test-channel"
    )
    monkeypatch.setenv("FOOTBALL_API_TOKEN", "test_token_123")
    monkeypatch.setenv("SCHEDULE_CRON", "0 * * * *")


@pytest.fixture
def match_batch():
    """Three well-formed live matches, mixing nested and flat shapes."""
    return [
        {
            "homeTeam": {"id": 57, "name": "Arsenal"},
            "awayTeam": {"id": 61, "name": "Chelsea"},
            "score": {"fulltime": "2-1"},
        },
        {
            "homeTeam": "Liverpool",
            "awayTeam": "Everton",
            "score": "0-0",
        },
        {
            "homeTeam": {"name": "Benfica"},
            "awayTeam": {"name": "FC Porto"},
            "score": {"fulltime": "1-1"},
        },
    ]


@pytest.fixture
def mock_source(match_batch):
    """Match source returning the three-match batch."""
    source = AsyncMock()
    source.fetch_summary.return_value = match_batch
    return source


@pytest.fixture
def mock_sink():
    """Notification sink that accepts every message."""
    return AsyncMock()
