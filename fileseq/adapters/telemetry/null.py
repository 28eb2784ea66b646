"""Null Telemetry adapter.

Default sink for sequence stores that were not given one: accepts every event and drops it.
"""

from __future__ import annotations

from typing import Any


class NullTelemetry:
    def log(self, event: str, **fields: Any) -> None:
        return None
