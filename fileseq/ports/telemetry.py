"""Telemetry Port Interface.

Contract: Receive structured, non-fatal events (self-healing, stray slot cleanup) emitted by a
sequence store. Implementations must not raise for well-formed events.
"""

from __future__ import annotations

from typing import Any, Protocol


class Telemetry(Protocol):
    def log(self, event: str, **fields: Any) -> None: ...
