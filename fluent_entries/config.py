"""Codec configuration — output formatting and fixture naming, loaded from YAML."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from fluent_entries.errors import ConfigError


@dataclass
class CodecConfig:
    """Settings for JSON output and fixture discovery."""

    indent: int = 2
    ensure_ascii: bool = False
    trailing_newline: bool = False

    # Fixture corpus naming
    error_marker: str = "errors"
    source_suffix: str = ".ftl"
    entries_suffix: str = ".entries.json"


def load_config(path: str | Path) -> CodecConfig:
    """Load a CodecConfig from a YAML file.

    A missing or empty file gives the defaults. Unknown keys are rejected.
    """
    path = Path(path)
    if not path.exists():
        return CodecConfig()

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return CodecConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")

    known = {f.name for f in fields(CodecConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown config keys: {', '.join(unknown)}")

    defaults = CodecConfig()
    for key, value in data.items():
        expected = type(getattr(defaults, key))
        # bool is an int subclass, so compare exact types
        if type(value) is not expected:
            raise ConfigError(
                f"{path}: '{key}' must be {expected.__name__}, got {type(value).__name__}"
            )

    return CodecConfig(**data)
