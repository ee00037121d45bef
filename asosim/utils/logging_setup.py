"""Logging configuration utilities."""

import logging
import time
import json
from typing import Optional

__all__ = ["JsonFormatter", "setup_logger"]


class JsonFormatter(logging.Formatter):
    """Emit one JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "time": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logger(
    name: str,
    level: Optional[str] = None,
    format_type: str = "text",
    verbose: bool = True,
) -> logging.Logger:
    """Configure and return a stderr logger.

    Calling this again for the same name keeps the existing handler but
    updates its formatter and level.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR) or None for default
        format_type: Output format: "text" or "json"
        verbose: INFO is the default level when True, WARNING otherwise

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
        logger.propagate = False

    formatter = (
        JsonFormatter()
        if format_type == "json"
        else logging.Formatter("[%(levelname)s] %(message)s")
    )
    for handler in logger.handlers:
        handler.setFormatter(formatter)

    level_name = (level or ("INFO" if verbose else "WARNING")).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    return logger
