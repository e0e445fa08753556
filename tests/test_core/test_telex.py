"""Tests for core.live_scores.telex module."""

from unittest.mock import MagicMock, patch

import aiohttp
import pytest

from core.live_scores.errors import NotificationError
from core.live_scores.telex import TelexNotifier, build_payload

WEBHOOK_URL = "https://ping.telex.im/v1/webhooks/test-channel"


def _mock_session(error: Exception | None = None):
    """Build a ClientSession replacement whose POST succeeds or fails."""
    response = MagicMock()
    if error is not None:
        response.raise_for_status.side_effect = error

    session = MagicMock()
    session.post.return_value.__aenter__.return_value = response

    session_cls = MagicMock()
    session_cls.return_value.__aenter__.return_value = session
    return session_cls, session


def test_build_payload():
    """Test webhook payload layout."""
    payload = build_payload("Match: Arsenal vs Chelsea:", "2-1", "Scores Bot")

    assert payload == {
        "event_name": "Football Update",
        "message": "Match: Arsenal vs Chelsea:\nScore: 2-1",
        "status": "success",
        "username": "Scores Bot",
    }


@pytest.mark.asyncio
async def test_send_posts_payload():
    """Test send posts JSON to the webhook."""
    session_cls, session = _mock_session()
    notifier = TelexNotifier(WEBHOOK_URL)

    with patch("core.live_scores.telex.aiohttp.ClientSession", session_cls):
        await notifier.send("Match: Arsenal vs Chelsea:", "2-1")

    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args[0] == WEBHOOK_URL
    assert kwargs["json"]["message"] == "Match: Arsenal vs Chelsea:\nScore: 2-1"
    assert kwargs["json"]["username"] == "Football Updates"


@pytest.mark.asyncio
async def test_send_http_error():
    """Test rejected webhook call raises NotificationError."""
    session_cls, _ = _mock_session(error=aiohttp.ClientError("404"))

    with patch("core.live_scores.telex.aiohttp.ClientSession", session_cls):
        with pytest.raises(NotificationError):
            await TelexNotifier(WEBHOOK_URL).send("msg", "N/A")


@pytest.mark.asyncio
async def test_send_timeout():
    """Test webhook timeout raises NotificationError."""
    session_cls, _ = _mock_session(error=TimeoutError())

    with patch("core.live_scores.telex.aiohttp.ClientSession", session_cls):
        with pytest.raises(NotificationError, match="timed out"):
            await TelexNotifier(WEBHOOK_URL).send("msg", "N/A")
