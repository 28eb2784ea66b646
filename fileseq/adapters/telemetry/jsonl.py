"""JSON Lines Telemetry adapter.

Implements the Telemetry port by appending structured JSON objects (one per line) to disk.
Records carry the event name, a UTC timestamp from the injected clock and, when configured,
the emitting component.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Mapping, Optional


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class JsonlTelemetry:
    def __init__(
        self,
        sink_path: Path | str,
        component: Optional[str] = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._sink_path = sink_path if isinstance(sink_path, Path) else Path(sink_path)
        self._component = component
        self._clock = clock

    @property
    def sink_path(self) -> Path:
        return self._sink_path

    def log(self, event: str, **fields: Any) -> None:
        if not event or not event.strip():
            raise ValueError("Telemetry event name must be a non-empty string")

        extras = dict(fields)
        # Per-event override of the configured component
        component = extras.pop("component", self._component)

        record: dict[str, Any] = {
            "event": event,
            "ts_utc": self._clock().isoformat(),
            **{key: self._jsonable(value) for key, value in extras.items()},
        }
        if component is not None:
            record["component"] = component

        self._write_record(record)

    @staticmethod
    def _jsonable(value: Any) -> Any:
        if isinstance(value, Path):
            return str(value)
        return value

    def _write_record(self, record: Mapping[str, Any]) -> None:
        payload = json.dumps(record, sort_keys=True, separators=(",", ":"), ensure_ascii=True)
        self._sink_path.parent.mkdir(parents=True, exist_ok=True)
        with self._sink_path.open("a", encoding="utf-8") as handle:
            handle.write(payload + "\n")
