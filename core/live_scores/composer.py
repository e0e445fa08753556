"""Message composition for score notifications."""

from config.constants import MATCH_LINE, MESSAGE_HEADER
from core.live_scores.models import ExtractedMatch


def compose_line(match: ExtractedMatch) -> str:
    """Build the line announcing one match, e.g. "Match: A vs B:"."""
    return MATCH_LINE.format(home=match.home_team, away=match.away_team)


class MessageComposer:
    """Running text buffer for one update cycle.

    Lines are only ever appended; a new composer is created per cycle.
    """

    def __init__(self, header: str = MESSAGE_HEADER):
        self._lines: list[str] = [header]

    def append(self, match: ExtractedMatch) -> str:
        """Compose the line for a match and add it to the buffer.

        Args:
            match: Extracted match to announce.

        Returns:
            The composed line.
        """
        line = compose_line(match)
        self._lines.append(line)
        return line

    @property
    def text(self) -> str:
        """Header followed by every appended line, newline-separated."""
        return "\n".join(self._lines)
