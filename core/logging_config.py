"""Logging setup for the monitor: console text plus JSON log file."""

import json
import logging
import logging.handlers
from datetime import UTC, datetime
from pathlib import Path

# Extra attributes copied into the JSON record when passed via `extra=`
EXTRA_FIELDS = ("cycle_id", "match_count", "outcome")


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    One JSON object per line, so cycle logs can be filtered with jq or
    shipped to a log aggregator as-is.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        return json.dumps(log_data)


def configure_logging(log_file: Path, level: int = logging.INFO) -> None:
    """Install console and rotating JSON file handlers on the root logger.

    Args:
        log_file: Path of the JSON log file.
        level: Minimum level for both handlers.
    """
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    file_handler = logging.handlers.RotatingFileHandler(
        str(log_file),
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(StructuredFormatter())

    logging.basicConfig(
        level=level,
        handlers=[console_handler, file_handler],
        force=True,
    )
