"""Live scores module - fetch live matches and notify a Telex channel.

- Fetching the live match summary (football API)
- Extracting team names and scores from loosely-typed records
- Composing the notification text
- Posting notifications to a Telex webhook
"""

from core.live_scores.composer import MessageComposer, compose_line
from core.live_scores.errors import (
    LiveScoresError,
    MatchSourceError,
    NotificationError,
)
from core.live_scores.extractor import (
    extract_match,
    extract_score,
    extract_team_name,
)
from core.live_scores.models import (
    CycleOutcome,
    CycleState,
    ExtractedMatch,
    NotificationMessage,
)
from core.live_scores.sources import FootballDataSource
from core.live_scores.telex import TelexNotifier

__all__ = [
    "CycleOutcome",
    "CycleState",
    "ExtractedMatch",
    "FootballDataSource",
    "LiveScoresError",
    "MatchSourceError",
    "MessageComposer",
    "NotificationError",
    "NotificationMessage",
    "TelexNotifier",
    "compose_line",
    "extract_match",
    "extract_score",
    "extract_team_name",
]
