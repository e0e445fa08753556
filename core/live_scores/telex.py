"""Notification sink - posts score updates to a Telex channel webhook."""

import logging

import aiohttp

from config.constants import (
    DEFAULT_TELEX_USERNAME,
    REQUEST_TIMEOUT,
    TELEX_EVENT_NAME,
    TELEX_STATUS,
)
from core.live_scores.errors import NotificationError

logger = logging.getLogger(__name__)


def build_payload(message: str, score: str, username: str) -> dict:
    """Build the JSON body expected by the Telex webhook.

    Args:
        message: Composed match message.
        score: Score text sent along with the message.
        username: Display name for the sender.

    Returns:
        Webhook payload dictionary.
    """
    return {
        "event_name": TELEX_EVENT_NAME,
        "message": f"{message}\nScore: {score}",
        "status": TELEX_STATUS,
        "username": username,
    }


class TelexNotifier:
    """Sends score notifications to a Telex webhook."""

    def __init__(
        self,
        webhook_url: str,
        username: str = DEFAULT_TELEX_USERNAME,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.webhook_url = webhook_url
        self.username = username
        self.timeout = timeout

    async def send(self, message: str, score: str) -> None:
        """Post a message and its score to the webhook.

        Args:
            message: Composed match message.
            score: Score text.

        Raises:
            NotificationError: If the webhook can't be reached or answers
                with an error status.
        """
        payload = build_payload(message, score, self.username)
        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self.webhook_url, json=payload
                ) as response:
                    response.raise_for_status()
        except aiohttp.ClientError as e:
            raise NotificationError(f"Telex webhook request failed: {e}") from e
        except TimeoutError as e:
            raise NotificationError("Telex webhook request timed out") from e

        logger.debug(f"Telex webhook accepted update: {payload['message']!r}")
