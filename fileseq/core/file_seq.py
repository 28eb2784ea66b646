"""
File-backed monotonic sequence.

Two fixed-name slot files live in the store directory:

- latest (``_2.seq``): every write installs the new value here.
- backup (``_1.seq``): before a write, the current latest file is renamed onto this path.

A write is therefore ``rename(latest -> backup)`` followed by ``write(latest)``. Rename is atomic
within one filesystem, the 8-byte write is not. A crash in between leaves the backup holding the
previous value and the latest slot missing or truncated; reads reconcile both slots and repair
the pair.

The store assumes a single writer. Callers with several writers must serialize the whole
read-modify-write of an increment themselves.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from fileseq.adapters.telemetry.null import NullTelemetry
from fileseq.config.configs import (
    DEFAULT_BACKUP_NAME,
    DEFAULT_LATEST_NAME,
    SequenceConfig,
    check_slot_names,
)
from fileseq.core.codec import U64_MAX, check_u64, decode, encode
from fileseq.errors.errors import CorruptedSequenceError, SequenceOverflowError
from fileseq.ports.telemetry import Telemetry

_LOGGER = logging.getLogger(__name__)


class FileSeq:
    def __init__(
        self,
        store_dir: Path | str,
        initial_value: int = 0,
        *,
        telemetry: Optional[Telemetry] = None,
        latest_name: str = DEFAULT_LATEST_NAME,
        backup_name: str = DEFAULT_BACKUP_NAME,
        fsync: bool = False,
    ) -> None:
        """
        Bind to `store_dir`, creating it (and its parents) if needed, and seed the
        latest slot with `initial_value` unless a slot file already exists.
        """
        check_u64(initial_value, "initial_value")
        check_slot_names(latest_name, backup_name)

        self._store_dir = Path(store_dir)
        self._latest_path = self._store_dir / latest_name
        self._backup_path = self._store_dir / backup_name
        self._telemetry: Telemetry = telemetry if telemetry is not None else NullTelemetry()
        self._fsync = fsync

        self._store_dir.mkdir(parents=True, exist_ok=True)
        self._initialize_if_necessary(initial_value)

    @classmethod
    def open(
        cls,
        store_dir: Path | str,
        initial_value: int = 0,
        *,
        telemetry: Optional[Telemetry] = None,
    ) -> "FileSeq":
        return cls(store_dir, initial_value, telemetry=telemetry)

    @classmethod
    def from_config(cls, cfg: SequenceConfig, telemetry: Optional[Telemetry] = None) -> "FileSeq":
        return cls(
            cfg.store_dir,
            cfg.initial_value,
            telemetry=telemetry,
            latest_name=cfg.latest_name,
            backup_name=cfg.backup_name,
            fsync=cfg.fsync,
        )

    # --- Introspection ---

    @property
    def store_dir(self) -> Path:
        return self._store_dir

    @property
    def latest_path(self) -> Path:
        return self._latest_path

    @property
    def backup_path(self) -> Path:
        return self._backup_path

    def __repr__(self) -> str:
        return f"FileSeq(store_dir={str(self._store_dir)!r})"

    # --- Public operations ---

    def value(self) -> int:
        return self._read()

    def get_and_increment(self, delta: int = 1) -> int:
        check_u64(delta, "delta")
        value = self._read()
        if value > U64_MAX - delta:
            raise SequenceOverflowError(
                "Increment would exceed the unsigned 64-bit range",
                current=value,
                delta=delta,
                store_dir=self._store_dir,
            )
        self._write(value + delta)
        return value

    def increment_and_get(self, delta: int = 1) -> int:
        return self.get_and_increment(delta) + delta

    def delete(self) -> None:
        """
        Remove both slot files. Non-idempotent: a missing file raises FileNotFoundError.
        Both removals are attempted before the first error is re-raised.
        """
        first_error: Optional[OSError] = None
        for path in (self._backup_path, self._latest_path):
            try:
                path.unlink()
            except OSError as exc:
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error

        _LOGGER.debug(
            "sequence_deleted",
            extra={"event": "sequence_deleted", "store_dir": str(self._store_dir)},
        )

    # --- Internals ---

    def _initialize_if_necessary(self, initial_value: int) -> None:
        if self._latest_path.exists() or self._backup_path.exists():
            return
        self._write(initial_value)
        _LOGGER.debug(
            "sequence_initialized",
            extra={
                "event": "sequence_initialized",
                "store_dir": str(self._store_dir),
                "initial_value": initial_value,
            },
        )

    def _read(self) -> int:
        latest = self._read_slot(self._latest_path)
        backup = self._read_slot(self._backup_path)

        if latest is not None:
            if backup is None or latest > backup:
                return latest
            # The newest write must be strictly greater than the one before it
            removed = self._remove_quietly(self._latest_path)
            self._emit(
                "sequence_anomaly_healed",
                store_dir=str(self._store_dir),
                latest=latest,
                backup=backup,
                removed=removed,
            )
            return backup

        if self._latest_path.exists():
            removed = self._remove_quietly(self._latest_path)
            self._emit(
                "sequence_corrupt_slot_removed",
                store_dir=str(self._store_dir),
                path=str(self._latest_path),
                removed=removed,
            )

        if backup is not None:
            return backup

        raise CorruptedSequenceError(
            "Both backup and latest sequence files are corrupted",
            store_dir=self._store_dir,
            details={"latest": str(self._latest_path), "backup": str(self._backup_path)},
        )

    def _read_slot(self, path: Path) -> Optional[int]:
        """Decode one slot; missing, unreadable or wrongly sized files yield None."""
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            _LOGGER.debug(
                "sequence_slot_unreadable",
                extra={"event": "sequence_slot_unreadable", "path": str(path), "error": str(exc)},
            )
            return None
        return decode(raw)

    def _remove_quietly(self, path: Path) -> bool:
        try:
            path.unlink()
        except OSError as exc:
            _LOGGER.debug(
                "sequence_slot_remove_failed",
                extra={
                    "event": "sequence_slot_remove_failed",
                    "path": str(path),
                    "error": str(exc),
                },
            )
            return False
        return True

    def _emit(self, event: str, **fields) -> None:
        try:
            self._telemetry.log(event, **fields)
        except Exception as exc:  # a failing sink must not fail the read
            _LOGGER.warning(
                "sequence_telemetry_failed",
                extra={"event": "sequence_telemetry_failed", "dropped": event, "error": str(exc)},
            )

    def _write(self, value: int) -> None:
        payload = encode(value)
        if self._latest_path.exists():
            os.replace(self._latest_path, self._backup_path)
            if self._fsync:
                self._sync_dir()
        with self._latest_path.open("wb") as handle:
            handle.write(payload)
            if self._fsync:
                handle.flush()
                os.fsync(handle.fileno())
        if self._fsync:
            self._sync_dir()

    def _sync_dir(self) -> None:
        """Persist directory entries (rename, create). Directories cannot be opened on Windows."""
        if os.name != "posix":
            return
        fd = os.open(self._store_dir, os.O_RDONLY)
        try:
            os.fsync(fd)
        finally:
            os.close(fd)
