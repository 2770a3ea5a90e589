"""
Logging utilities for safe log output.

Provides a custom LogRecord factory that sanitizes log arguments
to prevent log injection attacks (CWE-117). File paths and pad labels
are caller-provided and could contain newlines that forge log entries.

Install once at startup via install_safe_logging(), or let
configure_logging() do it from settings.
"""

import logging
from typing import Optional

from ffgraph.config import Settings, get_settings

logger = logging.getLogger(__name__)

_ORIGINAL_FACTORY = logging.getLogRecordFactory()

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _sanitize_value(value):
    """Strip newlines and carriage returns from a value for safe logging."""
    if isinstance(value, str):
        return value.replace('\r\n', '\\r\\n').replace('\r', '\\r').replace('\n', '\\n')
    return value


def _safe_record_factory(*args, **kwargs):
    """LogRecord factory that sanitizes args to prevent log injection."""
    record = _ORIGINAL_FACTORY(*args, **kwargs)
    if record.args:
        if isinstance(record.args, dict):
            record.args = {k: _sanitize_value(v) for k, v in record.args.items()}
        elif isinstance(record.args, tuple):
            record.args = tuple(_sanitize_value(a) for a in record.args)
    return record


def install_safe_logging():
    """
    Install a global LogRecord factory that escapes CR/LF in log arguments.

    Output paths, pad labels and filter option text reach the compile and
    validation log lines unmodified; escaping keeps each on one log line.
    Call once at startup, or through configure_logging().
    """
    logging.setLogRecordFactory(_safe_record_factory)


def set_log_level(level: str) -> str:
    """Set the level of the ffgraph loggers. Returns the level applied."""
    level_upper = level.upper()

    if level_upper not in VALID_LOG_LEVELS:
        logger.warning("Invalid log level '%s', using INFO", level)
        level_upper = "INFO"

    logging.getLogger("ffgraph").setLevel(getattr(logging, level_upper))
    return level_upper


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply logging settings: safe record factory and ffgraph log level."""
    settings = settings or get_settings()
    if settings.safe_logging:
        install_safe_logging()
    set_log_level(settings.log_level)
