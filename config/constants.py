"""Immutable constants for the football live score monitor."""

# Timezone used by the scheduler
TIMEZONE = "UTC"

# Default schedule: top of every hour
DEFAULT_SCHEDULE_CRON = "0 * * * *"

# Match data provider
DEFAULT_FOOTBALL_API_URL = "https://api.football-data.org/v4/matches?status=LIVE"
FOOTBALL_API_TOKEN_HEADER = "X-Auth-Token"

# Telex webhook payload
TELEX_EVENT_NAME = "Football Update"
TELEX_STATUS = "success"
DEFAULT_TELEX_USERNAME = "Football Updates"

# HTTP timeout (seconds) for both the match source and the webhook
REQUEST_TIMEOUT = 30.0

# Message composition
MESSAGE_HEADER = "Live Football Scores:"
MATCH_LINE = "Match: {home} vs {away}:"

# Defaults for missing or malformed match fields
UNKNOWN_TEAM = "Unknown Team"
UNKNOWN_SCORE = "N/A"

# Raw match record keys
HOME_TEAM_KEY = "homeTeam"
AWAY_TEAM_KEY = "awayTeam"
SCORE_KEY = "score"
TEAM_NAME_FIELD = "name"
SCORE_FULLTIME_FIELD = "fulltime"

# Concurrent cycles the scheduler may keep in flight
MAX_OVERLAPPING_CYCLES = 3
