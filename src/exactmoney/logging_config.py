"""Logging setup for exactmoney: namespaced loggers, optional JSON lines."""

from __future__ import annotations

import json
import logging
import sys
import threading
from datetime import datetime, timezone
from fractions import Fraction
from typing import Any

__all__ = [
    "StructuredFormatter",
    "get_logger",
    "configure_logging",
    "reset_logging",
]

_LOGGER_PREFIX = "exactmoney"

# Library default: silent unless the application configures logging.
logging.getLogger(_LOGGER_PREFIX).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the exactmoney namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


# ------------------------------------------------------------------------------
# JSON formatter
# ------------------------------------------------------------------------------

_STDLIB_KEYS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}


def _json_default(obj: Any) -> Any:
    # Fractions come from RoundingRequiredError.result
    if isinstance(obj, Fraction):
        return f"{obj.numerator}/{obj.denominator}"
    return str(obj)


class StructuredFormatter(logging.Formatter):
    """Formats each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, val in vars(record).items():
            if key not in _STDLIB_KEYS and key not in payload:
                payload[key] = val

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            payload["exc_type"] = type(exc).__name__
            payload["exc_message"] = str(exc)
            if hasattr(exc, "code"):
                payload["exc_code"] = exc.code
            for k, v in vars(exc).items():
                if not k.startswith("_"):
                    payload[f"exc_{k}"] = v

        return json.dumps(payload, default=_json_default)


# ------------------------------------------------------------------------------
# Initialization
# ------------------------------------------------------------------------------

_configured = False
_handler: logging.Handler | None = None
_lock = threading.Lock()


def configure_logging(
    *,
    level: int = logging.INFO,
    stream: Any = None,
    handler: logging.Handler | None = None,
    structured: bool = False,
) -> None:
    """Attach one handler to the exactmoney logger hierarchy (idempotent)."""
    global _configured, _handler
    with _lock:
        if _configured:
            return
        _configured = True

        h = handler if handler is not None else logging.StreamHandler(stream or sys.stderr)
        if structured:
            h.setFormatter(StructuredFormatter())
        elif handler is None:
            h.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            )

        root_logger = logging.getLogger(_LOGGER_PREFIX)
        root_logger.setLevel(level)
        root_logger.addHandler(h)
        _handler = h


def reset_logging() -> None:
    """Remove the handler added by configure_logging. For tests."""
    global _configured, _handler
    with _lock:
        root_logger = logging.getLogger(_LOGGER_PREFIX)
        if _handler is not None:
            root_logger.removeHandler(_handler)
        _handler = None
        _configured = False
        root_logger.setLevel(logging.NOTSET)
