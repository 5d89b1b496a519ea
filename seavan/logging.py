"""Structured logging helpers: JSON lines with context."""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from seavan.constants import log_level


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def get_logger(name: str = "seavan") -> logging.Logger:
    """Return *name*'s logger, attaching the JSON handler to the ``seavan`` root once.

    Child loggers (``seavan.layer`` etc.) propagate to it, so only the package
    logger carries a handler.
    """
    root = logging.getLogger("seavan")
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(JsonFormatter())
        root.addHandler(handler)
        root.setLevel(log_level())
    return logging.getLogger(name)
