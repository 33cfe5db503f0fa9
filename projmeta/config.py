"""Configuration loading for projmeta (.projmeta.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .consistency import COMPARED_FIELDS
from .models import ConfigKind

CONFIG_FILENAME = ".projmeta.yml"
OUTPUT_FORMATS = ("text", "json", "yaml")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ConsistencyConfig:
    """Fields left out of cross-file comparison."""

    ignore_fields: List[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    """Default rendering for CLI output."""

    format: Optional[str] = None


@dataclass
class ProjMetaConfig:
    """Represents the settings defined in .projmeta.yml."""

    root: Path
    files: Dict[ConfigKind, str] = field(default_factory=dict)
    consistency: ConsistencyConfig = field(default_factory=ConsistencyConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path) -> ProjMetaConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ProjMetaConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    files: Dict[ConfigKind, str] = {}
    for key, value in _as_dict(data.get("files")).items():
        try:
            kind = ConfigKind(str(key))
        except ValueError as exc:
            raise ConfigError(f"Unknown config kind in 'files': {key}") from exc
        filename = _as_str(value)
        if not filename:
            raise ConfigError(f"Filename for '{key}' must be a non-empty string")
        files[kind] = filename

    consistency = ConsistencyConfig()
    consistency_data = _as_dict(data.get("consistency"))
    if consistency_data:
        ignore_fields = _as_str_list(consistency_data.get("ignore_fields"))
        unknown = sorted(set(ignore_fields).difference(COMPARED_FIELDS))
        if unknown:
            raise ConfigError(f"Unknown fields in 'ignore_fields': {', '.join(unknown)}")
        consistency.ignore_fields = ignore_fields

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        fmt = _as_str(output_data.get("format"))
        if fmt is not None and fmt not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unsupported output format '{fmt}' (expected one of {', '.join(OUTPUT_FORMATS)})"
            )
        output.format = fmt

    return ProjMetaConfig(root=root, files=files, consistency=consistency, output=output)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ConsistencyConfig",
    "OUTPUT_FORMATS",
    "OutputConfig",
    "ProjMetaConfig",
    "load_config",
]
