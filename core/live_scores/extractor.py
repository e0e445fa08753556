"""Defensive extraction of team names and score from raw match records.

Provider records have no guaranteed shape: a team may be a plain string or
an object with a ``name``, and the score a plain string or an object with a
``fulltime`` entry. Extraction never raises; anything unexpected falls back
to a default value.
"""

import logging
from typing import Any

from config.constants import (
    AWAY_TEAM_KEY,
    HOME_TEAM_KEY,
    SCORE_FULLTIME_FIELD,
    SCORE_KEY,
    TEAM_NAME_FIELD,
    UNKNOWN_SCORE,
    UNKNOWN_TEAM,
)
from core.live_scores.models import (
    ExtractedMatch,
    NamedValue,
    TextValue,
    classify,
)

logger = logging.getLogger(__name__)


def _extract_text(record: Any, key: str, nested_field: str, default: str) -> str:
    match classify(record.get(key)):
        case TextValue(text=text):
            return text
        case NamedValue(fields=fields):
            value = fields.get(nested_field, default)
            return value if isinstance(value, str) else default
        case _:
            return default


def extract_team_name(record: Any, key: str) -> str:
    """Get a team name from a match record.

    Args:
        record: Raw match record.
        key: Team key, "homeTeam" or "awayTeam".

    Returns:
        Team name, or "Unknown Team" if missing or malformed.
    """
    try:
        return _extract_text(record, key, TEAM_NAME_FIELD, UNKNOWN_TEAM)
    except Exception as e:
        logger.error(
            f"Error extracting team name for key: {key}: {e}", exc_info=True
        )
        return UNKNOWN_TEAM


def extract_score(record: Any) -> str:
    """Get the full-time score from a match record.

    Args:
        record: Raw match record.

    Returns:
        Score text, or "N/A" if missing or malformed.
    """
    try:
        return _extract_text(
            record, SCORE_KEY, SCORE_FULLTIME_FIELD, UNKNOWN_SCORE
        )
    except Exception as e:
        logger.error(f"Error extracting score: {e}", exc_info=True)
        return UNKNOWN_SCORE


def extract_match(record: Any) -> ExtractedMatch:
    """Normalize a raw match record into an ExtractedMatch."""
    return ExtractedMatch(
        home_team=extract_team_name(record, HOME_TEAM_KEY),
        away_team=extract_team_name(record, AWAY_TEAM_KEY),
        score=extract_score(record),
    )
