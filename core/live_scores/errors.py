"""Errors raised by the live score collaborators."""


class LiveScoresError(Exception):
    """Base class for match source and notification failures."""


class MatchSourceError(LiveScoresError):
    """The match data provider could not be reached or returned bad data."""


class NotificationError(LiveScoresError):
    """The notification webhook rejected or failed to receive a message."""
