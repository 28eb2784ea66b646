"""
Custom exceptions for the file sequence store.

Exception hierarchy:
- SequenceError (base)
  - CorruptedSequenceError: neither slot holds a decodable value
  - SequenceOverflowError: an increment would leave the unsigned 64-bit range
  - ConfigurationError: invalid store configuration

Filesystem failures are not wrapped; they surface as the original OSError.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional


class SequenceError(Exception):
    """Base exception for all sequence store errors."""

    def __init__(
        self,
        message: str,
        *,
        store_dir: Optional[Path | str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.store_dir = store_dir
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.store_dir is not None:
            parts.append(f"[store_dir={self.store_dir}]")
        if self.details:
            parts.append(f"[details={self.details}]")
        return " ".join(parts)


class CorruptedSequenceError(SequenceError):
    """Raised when both the latest and the backup slot are unusable."""


class SequenceOverflowError(SequenceError, OverflowError):
    """Raised when an increment would push the value past the u64 maximum."""

    def __init__(
        self,
        message: str,
        *,
        current: int,
        delta: int,
        store_dir: Optional[Path | str] = None,
    ) -> None:
        self.current = current
        self.delta = delta
        super().__init__(
            message,
            store_dir=store_dir,
            details={"current": current, "delta": delta},
        )


class ConfigurationError(SequenceError, ValueError):
    """Raised when a sequence store configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Any = None,
    ) -> None:
        self.field = field
        self.value = value
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
            details["value"] = value
        super().__init__(message, details=details)
