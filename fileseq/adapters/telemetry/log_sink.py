"""Logging Telemetry adapter.

Bridges the Telemetry port onto the standard library `logging` module. The event name becomes
the log message and the fields travel in `extra`, so structured formatters can pick them up.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

_LOGGER = logging.getLogger("fileseq")

# LogRecord attributes that `extra` may not overwrite
_RESERVED = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class LoggingTelemetry:
    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.WARNING) -> None:
        self._logger = logger if logger is not None else _LOGGER
        self._level = level

    def log(self, event: str, **fields: Any) -> None:
        extra: dict[str, Any] = {"event": event}
        for key, value in fields.items():
            extra[f"field_{key}" if key in _RESERVED else key] = value
        self._logger.log(self._level, event, extra=extra)
