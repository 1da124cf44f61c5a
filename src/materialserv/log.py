"""
Logging setup and formatters for materialserv.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from materialserv.config import LoggingConfig

LOGGER_NAME = 'materialserv'


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        structured_data = getattr(record, 'structured_data', {})

        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        for key, value in structured_data.items():
            if key not in log_entry:
                log_entry[key] = value

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class StructuredFormatter(logging.Formatter):
    """Human-readable structured formatter"""

    def __init__(self, fmt=None, datefmt=None):
        if fmt is None:
            fmt = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        super().__init__(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        structured_data = getattr(record, 'structured_data', {})
        message = super().format(record)

        extra_parts = [f"{key}={value}" for key, value in structured_data.items()]
        if extra_parts:
            message += f" {{{', '.join(extra_parts)}}}"

        return message


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """Attach a single stream handler to the package logger"""
    config = config or LoggingConfig()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.level.upper())

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if config.json_format else StructuredFormatter())
    logger.addHandler(handler)
    return logger


__all__ = ['JSONFormatter', 'StructuredFormatter', 'configure_logging', 'LOGGER_NAME']
