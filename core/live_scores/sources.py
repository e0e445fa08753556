"""Match data source - live match summary from the football API."""

import json
import logging
from typing import Any

import aiohttp

from config.constants import (
    DEFAULT_FOOTBALL_API_URL,
    FOOTBALL_API_TOKEN_HEADER,
    REQUEST_TIMEOUT,
)
from core.live_scores.errors import MatchSourceError
from core.live_scores.models import MatchBatch

logger = logging.getLogger(__name__)


def matches_from_payload(payload: Any) -> MatchBatch | None:
    """Pull the list of match records out of a decoded API response.

    The provider answers either with a bare JSON list of matches or with an
    object carrying them under "matches".

    Args:
        payload: Decoded JSON body.

    Returns:
        List of raw match records, or None if the body holds no match list.
    """
    if isinstance(payload, dict):
        payload = payload.get("matches")
    if isinstance(payload, list):
        return payload
    return None


class FootballDataSource:
    """Fetches the current live match summary over HTTP."""

    def __init__(
        self,
        url: str = DEFAULT_FOOTBALL_API_URL,
        api_token: str | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.url = url
        self.api_token = api_token
        self.timeout = timeout

    def _get_headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.api_token:
            headers[FOOTBALL_API_TOKEN_HEADER] = self.api_token
        return headers

    async def fetch_summary(self) -> MatchBatch | None:
        """Fetch the batch of live matches.

        Returns:
            List of raw match records, or None if the response carried none.

        Raises:
            MatchSourceError: On connection, HTTP status or decoding failure.
        """
        logger.info(f"Fetching live matches from {self.url}")
        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(
                    self.url, headers=self._get_headers()
                ) as response:
                    response.raise_for_status()
                    body = await response.read()
        except aiohttp.ClientError as e:
            raise MatchSourceError(f"Request to {self.url} failed: {e}") from e
        except TimeoutError as e:
            raise MatchSourceError(f"Request to {self.url} timed out") from e

        try:
            payload = json.loads(body.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise MatchSourceError(
                f"Response from {self.url} is not valid UTF-8: {e}"
            ) from e
        except json.JSONDecodeError as e:
            raise MatchSourceError(f"Invalid JSON from {self.url}: {e}") from e

        matches = matches_from_payload(payload)
        logger.info(
            f"Fetched {len(matches) if matches is not None else 0} matches"
        )
        return matches
