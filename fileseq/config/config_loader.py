"""
Purpose:
    - Load a sequence store config from a TOML file
    - Validate it into a SequenceConfig

Expected layout:

    [sequence]
    store_dir = "state/seq"
    initial_value = 1
    fsync = true
"""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fileseq.config.configs import SequenceConfig
from fileseq.errors.errors import ConfigurationError


class ConfigLoader:
    """
    Config-loader; loading toml file.
    """

    def __init__(self, base_dir: str | Path = ".") -> None:
        self._base_dir = Path(base_dir)

    def load(self, file_name: str | Path) -> dict[str, Any]:
        path = Path(file_name)
        if not path.is_absolute():
            path = self._base_dir / path

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with path.open("rb") as f:
            return tomllib.load(f)

    def load_sequence_config(self, file_name: str | Path, section: str = "sequence") -> SequenceConfig:
        data = self.load(file_name)
        seq_data = data.get(section)
        if not isinstance(seq_data, dict):
            raise ConfigurationError(f"Missing [{section}] table in {file_name}", field=section)
        return self.build(seq_data)

    def build(self, seq_data: dict[str, Any]) -> SequenceConfig:
        """Validate a raw mapping; a relative store_dir is resolved against base_dir."""
        values = dict(seq_data)
        store_dir_raw = values.get("store_dir", "")
        if store_dir_raw == "":
            raise ConfigurationError("store_dir missing", field="store_dir", value=store_dir_raw)
        store_dir = Path(store_dir_raw)
        if not store_dir.is_absolute():
            store_dir = self._base_dir / store_dir
        values["store_dir"] = store_dir

        try:
            return SequenceConfig(**values)
        except ValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or None
            raise ConfigurationError(
                f"Invalid sequence config: {first['msg']}",
                field=field,
                value=first.get("input"),
            ) from exc
