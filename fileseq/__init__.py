"""
Durable file-backed monotonic sequence.

A store keeps an unsigned 64-bit counter in two rotating 8-byte slot files so that the value
survives restarts and crashes mid-write.

Components:
- FileSeq: the store (value, get_and_increment, increment_and_get, delete)
- SequenceConfig / ConfigLoader: validated settings, optionally loaded from TOML
- Telemetry adapters: NullTelemetry (default), LoggingTelemetry, JsonlTelemetry

Usage:
    from fileseq import FileSeq, LoggingTelemetry

    seq = FileSeq("state/ids", initial_value=1, telemetry=LoggingTelemetry())
    next_id = seq.get_and_increment(1)
"""

from fileseq.adapters.telemetry.jsonl import JsonlTelemetry
from fileseq.adapters.telemetry.log_sink import LoggingTelemetry
from fileseq.adapters.telemetry.null import NullTelemetry
from fileseq.config.config_loader import ConfigLoader
from fileseq.config.configs import SequenceConfig
from fileseq.core.codec import U64_MAX
from fileseq.core.file_seq import FileSeq
from fileseq.errors.errors import (
    ConfigurationError,
    CorruptedSequenceError,
    SequenceError,
    SequenceOverflowError,
)

__all__ = [
    # Main entry point
    "FileSeq",
    "U64_MAX",
    # Config
    "SequenceConfig",
    "ConfigLoader",
    # Telemetry
    "NullTelemetry",
    "LoggingTelemetry",
    "JsonlTelemetry",
    # Errors
    "SequenceError",
    "CorruptedSequenceError",
    "SequenceOverflowError",
    "ConfigurationError",
]
