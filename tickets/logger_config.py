"""Centralized logging configuration."""

import sys

from loguru import logger as loguru_logger

from tickets.conf import get_setting

# Constants for extra fields
ACCOUNT_ID = "account_id"
STAGE = "stage"

# Id loguru gives the stderr handler it installs on import
LOGURU_DEFAULT_HANDLER_ID = 0

log_format = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}:{function}:{line}</>",
        f"<y>account={{extra[{ACCOUNT_ID}]}} stage={{extra[{STAGE}]}}</>",
        "{message}",
    )
)

custom_logger = loguru_logger.bind(**{ACCOUNT_ID: "", STAGE: ""})

_handler_id: int | None = None


def configure_logging() -> None:
    """Install the tickets stderr sink once, leaving other sinks untouched."""
    global _handler_id
    if _handler_id is not None:
        return
    try:
        loguru_logger.remove(LOGURU_DEFAULT_HANDLER_ID)
    except ValueError:
        pass  # already removed by the host process
    _handler_id = custom_logger.add(
        sys.stderr, format=log_format, level=get_setting("TICKETS_LOG_LEVEL")
    )
