"""Centralized file path configuration.

All file paths used by the monitor are defined here for easy maintenance
and testing.
"""

from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Environment file with webhook URL, API token and schedule
ENV_FILE = PROJECT_ROOT / ".env"

# Heartbeat file (can be watched by cron, systemd, etc.)
HEALTH_CHECK_FILE = PROJECT_ROOT / "monitor_health.txt"

# Log files (stored in project root)
LOG_FILE = PROJECT_ROOT / "monitor.log"
