from __future__ import annotations

from pathlib import Path, PurePath

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from fileseq.core.codec import U64_MAX
from fileseq.errors.errors import ConfigurationError

DEFAULT_LATEST_NAME = "_2.seq"
DEFAULT_BACKUP_NAME = "_1.seq"


def check_slot_name(name: str, field: str = "slot_name") -> str:
    """Slot names must be plain file names inside the store directory."""
    if not isinstance(name, str) or not name or name in (".", "..") or PurePath(name).name != name:
        raise ConfigurationError(
            f"slot name must be a plain file name, got {name!r}", field=field, value=name
        )
    return name


def check_slot_names(latest_name: str, backup_name: str) -> None:
    check_slot_name(latest_name, "latest_name")
    check_slot_name(backup_name, "backup_name")
    if latest_name == backup_name:
        raise ConfigurationError(
            "latest_name and backup_name must differ", field="backup_name", value=backup_name
        )


class SequenceConfig(BaseModel):
    """Settings for one on-disk sequence store."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    store_dir: Path  # Directory holding the two slot files
    initial_value: int = Field(default=0, ge=0, le=U64_MAX)  # Ignored if the store exists
    latest_name: str = DEFAULT_LATEST_NAME  # Slot every write installs into
    backup_name: str = DEFAULT_BACKUP_NAME  # Slot the previous latest is rotated onto
    fsync: bool = False  # fsync each written slot and the store directory

    @field_validator("latest_name", "backup_name")
    @classmethod
    def _plain_file_name(cls, name: str, info: ValidationInfo) -> str:
        return check_slot_name(name, info.field_name)

    @model_validator(mode="after")
    def _distinct_slots(self) -> "SequenceConfig":
        check_slot_names(self.latest_name, self.backup_name)
        return self
