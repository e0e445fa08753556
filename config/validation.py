"""Configuration validation utilities."""

import logging
from typing import Any
from urllib.parse import urlparse

from apscheduler.triggers.cron import CronTrigger

from config.constants import DEFAULT_SCHEDULE_CRON, TIMEZONE

logger = logging.getLogger(__name__)


def _is_http_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_webhook_url(url: str) -> bool:
    """Validate Telex webhook URL format.

    Args:
        url: Webhook URL to validate.

    Returns:
        True if URL is an absolute http(s) URL and not a placeholder,
        False otherwise.
    """
    return (
        _is_http_url(url)
        and "your_" not in url
        and "YOUR_" not in url
    )


def validate_api_url(url: str) -> bool:
    """Validate match data API URL format.

    Args:
        url: API URL to validate.

    Returns:
        True if URL is an absolute http(s) URL, False otherwise.
    """
    return _is_http_url(url)


def validate_cron_expression(expression: str) -> bool:
    """Validate a standard 5-field crontab expression.

    Args:
        expression: Crontab expression (e.g. "0 * * * *").

    Returns:
        True if APScheduler can build a trigger from it, False otherwise.
    """
    try:
        CronTrigger.from_crontab(expression, timezone=TIMEZONE)
    except ValueError:
        return False
    return True


def validate_config(config: dict[str, Any]) -> list[str]:
    """Validate all configuration values.

    Args:
        config: Dictionary of configuration key-value pairs.

    Returns:
        List of validation error messages (empty if all valid).

    Example:
        >>> config = {
        ...     "TELEX_WEBHOOK_URL": "https://ping.telex.im/v1/webhooks/abc",
        ...     "SCHEDULE_CRON": "0 * * * *",
        ... }
        >>> errors = validate_config(config)
        >>> if errors:
        ...     print("Config errors:", errors)
    """
    errors = []

    webhook_url = config.get("TELEX_WEBHOOK_URL", "")
    if not validate_webhook_url(webhook_url):
        errors.append(
            "Invalid TELEX_WEBHOOK_URL (must be an http(s) URL "
            "and not be a placeholder)"
        )

    api_url = config.get("FOOTBALL_API_URL")
    if api_url is not None and not validate_api_url(api_url):
        errors.append("Invalid FOOTBALL_API_URL (must be an http(s) URL)")

    cron = config.get("SCHEDULE_CRON", DEFAULT_SCHEDULE_CRON)
    if not validate_cron_expression(cron):
        errors.append(
            "SCHEDULE_CRON must be a 5-field crontab expression "
            "(e.g. '0 * * * *')"
        )

    if errors:
        logger.error(f"Configuration validation failed: {errors}")
    else:
        logger.info("Configuration validation passed")

    return errors
