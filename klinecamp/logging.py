"""Logging helpers for klinecamp.

    from klinecamp import configure_logging
    configure_logging(level="DEBUG", json_format=True)

Game events logged through :func:`log_event` carry their fields under the
``event`` key, which the JSON formatter writes out as a nested object.
"""

import json
import logging
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, Optional

from klinecamp.core.events import Event

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        line: Dict[str, Any] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        event = getattr(record, "event", None)
        if event is not None:
            line["event"] = event
        if record.exc_info:
            line["exc"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO", fmt: Optional[str] = None, json_format: bool = False) -> None:
    """Install a root handler for the CLI or an embedding app.

    ``json_format`` switches to one JSON object per line (ts/level/logger/msg,
    plus ``event`` and ``exc`` when present) and ignores ``fmt``. Calling it
    again replaces the previous handlers.
    """

    if json_format:
        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logging.basicConfig(level=_level(level), handlers=[handler], force=True)
    else:
        logging.basicConfig(level=_level(level), format=fmt or DEFAULT_FORMAT, force=True)


def log_event(logger: logging.Logger, event: Event, level: str = "INFO", **extra: object) -> None:
    """Log ``event`` with its dataclass fields attached as ``record.event``."""
    payload: Dict[str, Any] = asdict(event) if is_dataclass(event) else {"timestamp": event.timestamp}
    payload["event_type"] = type(event).__name__
    logger.log(_level(level), "%s", payload["event_type"], extra={"event": payload, **extra})


__all__ = ["configure_logging", "log_event"]
