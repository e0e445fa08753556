"""Data types for one polling cycle."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from config.constants import UNKNOWN_SCORE, UNKNOWN_TEAM

# Loosely-typed record as returned by the match provider
RawMatchRecord = dict[str, Any]
MatchBatch = list[RawMatchRecord]


@dataclass(frozen=True)
class TextValue:
    """A field supplied directly as text, e.g. ``"homeTeam": "Arsenal"``."""

    text: str


@dataclass(frozen=True)
class NamedValue:
    """A field supplied as a nested object, e.g. ``{"name": "Arsenal"}``."""

    fields: Mapping[str, Any]


# None stands for an absent field or one of unrecognized shape
FieldValue = TextValue | NamedValue | None


def classify(value: Any) -> FieldValue:
    """Wrap a raw field value in its variant.

    Args:
        value: Value taken from a RawMatchRecord.

    Returns:
        TextValue for strings, NamedValue for mappings, None otherwise.
    """
    if isinstance(value, str):
        return TextValue(value)
    if isinstance(value, Mapping):
        return NamedValue(value)
    return None


@dataclass(frozen=True)
class ExtractedMatch:
    home_team: str = UNKNOWN_TEAM
    away_team: str = UNKNOWN_TEAM
    score: str = UNKNOWN_SCORE


@dataclass(frozen=True)
class NotificationMessage:
    """Composed text plus the score it is sent with."""

    message: str
    score: str


class CycleState(Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    PROCESSING = "processing"
    DISPATCHING = "dispatching"


class CycleOutcome(Enum):
    """How a single update cycle ended."""

    SENT = "sent"
    SEND_FAILED = "send_failed"
    NO_MATCHES = "no_matches"
    FETCH_FAILED = "fetch_failed"
    SKIPPED = "skipped"
