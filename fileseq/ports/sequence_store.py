"""SequenceStore Port Interface.

Contract: Durable monotonic u64 counter. Reads recover a consistent value after a crash;
increments rotate slots before installing the new value.
"""

from __future__ import annotations

from typing import Protocol


class SequenceStore(Protocol):
    def value(self) -> int: ...

    """
    Return the current value without advancing it. May repair an inconsistent
    slot pair as a side effect.
    """

    def get_and_increment(self, delta: int) -> int: ...

    """Persist value + delta and return the value observed before the increment."""

    def increment_and_get(self, delta: int) -> int: ...

    """Persist value + delta and return it (computed, not re-read)."""

    def delete(self) -> None: ...

    """Remove both slot files. Fails if either of them is missing."""
