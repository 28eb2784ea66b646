from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

import pytest

from fileseq.core.codec import encode
from fileseq.core.file_seq import FileSeq


@dataclass
class StubTelemetry:
    events: List[Tuple[str, Dict[str, Any]]] = field(default_factory=list)

    def log(self, event: str, **fields: Any) -> None:
        self.events.append((event, fields))

    def names(self) -> List[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def telemetry() -> StubTelemetry:
    return StubTelemetry()


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    """A not-yet-existing nested directory, so construction has to create parents."""
    return tmp_path / "state" / "seq"


@pytest.fixture
def make_seq(store_dir: Path, telemetry: StubTelemetry) -> Callable[..., FileSeq]:
    def _make(initial_value: int = 1) -> FileSeq:
        return FileSeq(store_dir, initial_value, telemetry=telemetry)

    return _make


@pytest.fixture
def write_slot() -> Callable[[Path, int], None]:
    """Overwrite a slot file with a raw encoded value (simulates tampering)."""

    def _write(path: Path, value: int) -> None:
        path.write_bytes(encode(value))

    return _write
