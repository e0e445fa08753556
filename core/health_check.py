"""Liveness heartbeat for process supervisors.

A scheduler job rewrites a small JSON file every minute. A watchdog (cron,
systemd, a container probe) compares its timestamp against the clock and
restarts the monitor when it goes stale.
"""

import json
import logging
import os
from datetime import UTC, datetime

from config import paths

logger = logging.getLogger(__name__)


def write_heartbeat() -> None:
    """Record that the scheduler loop is alive.

    Errors writing the file are logged; a missed beat must never take the
    scheduler down.
    """
    beat = {"timestamp": datetime.now(UTC).isoformat(), "pid": os.getpid()}
    try:
        paths.HEALTH_CHECK_FILE.write_text(json.dumps(beat))
    except OSError as e:
        logger.error(
            f"Could not write heartbeat to {paths.HEALTH_CHECK_FILE}: {e}"
        )
        return
    logger.debug(f"Heartbeat written: {beat['timestamp']}")


def last_heartbeat() -> datetime | None:
    """Timestamp of the most recent heartbeat (UTC), if one can be read."""
    if not paths.HEALTH_CHECK_FILE.exists():
        return None

    try:
        beat = json.loads(paths.HEALTH_CHECK_FILE.read_text())
        return datetime.fromisoformat(beat["timestamp"])
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.warning(f"Unreadable heartbeat file: {e}")
        return None
