"""Event loggers for engine runs and the command line."""

from __future__ import annotations

import json
import math
import sys
from typing import Any, Dict, Protocol, TextIO

LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}


class Logger(Protocol):
    """Anything accepting ``event`` names with keyword fields."""

    def debug(self, event: str, **fields: Any) -> None:
        ...

    def info(self, event: str, **fields: Any) -> None:
        ...

    def warning(self, event: str, **fields: Any) -> None:
        ...


class NoopLogger:
    """Logger that discards all events."""

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


def _plain(value: Any) -> Any:
    """Make ``value`` safe for strict JSON.

    Infinite and NaN floats (an unreachable target's distance) become ``None``.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


class StdLogger:
    """Write one line per event, as ``level event k=v`` text or a JSON object.

    Args:
        level: Lowest level that is emitted, one of :data:`LEVELS`.
        json_fmt: Emit strict JSON objects instead of plain text.
        stream: Output stream, ``sys.stderr`` when omitted.
    """

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        if level not in LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def enabled(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def _format(self, level: str, event: str, fields: Dict[str, Any]) -> str:
        if self.json_fmt:
            record = {"level": level, "event": event}
            record.update({k: _plain(v) for k, v in fields.items()})
            return json.dumps(record, default=str, allow_nan=False)
        kv = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{level} {event} {kv}".rstrip()

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit ``event`` at ``level`` if it passes the threshold."""
        if self.enabled(level):
            self.stream.write(self._format(level, event, fields) + "\n")

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self.log("warning", event, **fields)


__all__ = ["LEVELS", "Logger", "NoopLogger", "StdLogger"]
