"""Environment-based settings loaded from the project's .env file."""

import logging
import os

from dotenv import load_dotenv, set_key

from config.constants import DEFAULT_SCHEDULE_CRON
from config.paths import ENV_FILE

logger = logging.getLogger(__name__)

env_path = ENV_FILE

load_dotenv(env_path)


def exists() -> bool:
    """Check whether the .env file exists.

    Returns:
        True if the .env file is present, False otherwise.
    """
    return env_path.exists()


def get(key: str, default: str | None = None) -> str | None:
    """Get a configuration value from the environment.

    Args:
        key: Environment variable name.
        default: Value returned when the variable is not set.

    Returns:
        The variable's value, or default.
    """
    return os.environ.get(key, default)


def get_required(key: str) -> str:
    """Get a configuration value that must be set.

    Args:
        key: Environment variable name.

    Returns:
        The variable's value.

    Raises:
        ValueError: If the variable is missing or empty.
    """
    value = os.environ.get(key)
    if not value:
        raise ValueError(f"Required environment variable {key} is not set")
    return value


def setup_interactive() -> None:
    """Prompt for configuration values and write them to the .env file."""
    print("Football live scores - first time setup")
    webhook_url = input("Telex webhook URL: ").strip()
    api_token = input("Football API token (optional): ").strip()
    cron = input(
        f"Schedule crontab expression [{DEFAULT_SCHEDULE_CRON}]: "
    ).strip()

    env_path.touch()
    values = {
        "TELEX_WEBHOOK_URL": webhook_url,
        "FOOTBALL_API_TOKEN": api_token,
        "SCHEDULE_CRON": cron or DEFAULT_SCHEDULE_CRON,
    }
    for key, value in values.items():
        if value:
            set_key(str(env_path), key, value)
            os.environ[key] = value

    logger.info(f"Configuration written to {env_path}")
