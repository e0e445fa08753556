"""Football live scores monitor - Main entry point.

Polls a football API for live matches on a cron schedule and posts a score
update to a Telex channel.
"""

import asyncio
import logging
import signal

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from config import settings
from config.constants import (
    DEFAULT_FOOTBALL_API_URL,
    DEFAULT_SCHEDULE_CRON,
    DEFAULT_TELEX_USERNAME,
    MAX_OVERLAPPING_CYCLES,
    TIMEZONE,
)
from config.paths import LOG_FILE
from config.validation import validate_config
from core.health_check import write_heartbeat
from core.live_scores import FootballDataSource, TelexNotifier
from core.logging_config import configure_logging
from tasks.live_scores import UpdateCycle

logger = logging.getLogger(__name__)


def load_configuration() -> dict[str, str | None]:
    """Load configuration from .env file or run setup wizard.

    Returns:
        Dictionary with TELEX_WEBHOOK_URL, TELEX_USERNAME,
        FOOTBALL_API_URL, FOOTBALL_API_TOKEN and SCHEDULE_CRON.

    Raises:
        ValueError: If configuration is missing or invalid.
    """
    if not settings.exists():
        logger.info("No configuration found, running setup wizard")
        settings.setup_interactive()

    try:
        config = {
            "TELEX_WEBHOOK_URL": settings.get_required("TELEX_WEBHOOK_URL"),
            "TELEX_USERNAME": settings.get(
                "TELEX_USERNAME", DEFAULT_TELEX_USERNAME
            ),
            "FOOTBALL_API_URL": settings.get(
                "FOOTBALL_API_URL", DEFAULT_FOOTBALL_API_URL
            ),
            "FOOTBALL_API_TOKEN": settings.get("FOOTBALL_API_TOKEN"),
            "SCHEDULE_CRON": settings.get(
                "SCHEDULE_CRON", DEFAULT_SCHEDULE_CRON
            ),
        }
        validation_errors = validate_config(config)

        if validation_errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(
                f"  - {err}" for err in validation_errors
            )
            raise ValueError(error_msg)

        logger.info("Configuration loaded and validated successfully")
        return config

    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise


def build_update_cycle(config: dict[str, str | None]) -> UpdateCycle:
    """Wire the match source and Telex notifier into an update cycle."""
    source = FootballDataSource(
        url=config["FOOTBALL_API_URL"],
        api_token=config["FOOTBALL_API_TOKEN"],
    )
    sink = TelexNotifier(
        webhook_url=config["TELEX_WEBHOOK_URL"],
        username=config["TELEX_USERNAME"],
    )
    return UpdateCycle(source, sink)


def build_scheduler(cycle: UpdateCycle, cron: str) -> AsyncIOScheduler:
    """Create the scheduler with the score cycle and health check jobs.

    Args:
        cycle: Update cycle to run on each tick.
        cron: Crontab expression for the score cycle.

    Returns:
        Configured, not yet started, scheduler.
    """
    scheduler = AsyncIOScheduler(timezone=TIMEZONE)

    # Ticks are not held back by a slow cycle, up to MAX_OVERLAPPING_CYCLES
    scheduler.add_job(
        cycle.run,
        CronTrigger.from_crontab(cron, timezone=TIMEZONE),
        id="live_scores",
        max_instances=MAX_OVERLAPPING_CYCLES,
        coalesce=True,
    )

    scheduler.add_job(
        write_heartbeat,
        CronTrigger(minute="*", timezone=TIMEZONE),
        id="health_check",
    )
    return scheduler


async def shutdown(sig: signal.Signals, stop_event: asyncio.Event) -> None:
    """Cleanup tasks on shutdown.

    Args:
        sig: Signal received (SIGTERM or SIGINT).
        stop_event: Event released once shutdown should proceed.
    """
    logger.info(f"Received exit signal {sig.name}...")
    stop_event.set()


async def run(config: dict[str, str | None]) -> None:
    """Start the scheduler and block until a shutdown signal arrives."""
    cycle = build_update_cycle(config)
    scheduler = build_scheduler(cycle, config["SCHEDULE_CRON"])

    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(
            sig, lambda s=sig: asyncio.create_task(shutdown(s, stop_event))
        )

    scheduler.start()
    logger.info(
        f"Scheduler started, live scores on '{config['SCHEDULE_CRON']}' "
        f"({TIMEZONE})"
    )
    logger.info("Health check updates every minute")

    await stop_event.wait()

    scheduler.shutdown(wait=False)

    tasks = [t for t in asyncio.all_tasks() if t is not asyncio.current_task()]
    logger.info(f"Cancelling {len(tasks)} outstanding tasks")
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)
    logger.info("Monitor shutdown complete")


if __name__ == "__main__":
    configure_logging(LOG_FILE)
    configuration = load_configuration()

    try:
        asyncio.run(run(configuration))
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt")
    finally:
        logger.info("Monitor stopped")
