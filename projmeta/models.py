"""Core data models shared across projmeta components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class FormatFamily(str, Enum):
    """Parser family used to read a config file."""

    JSON = "json"
    TOML = "toml"


class ConfigKind(str, Enum):
    """Supported project configuration formats."""

    PACKAGE_JSON = "package-json"
    CARGO_TOML = "cargo-toml"
    DENO_JSON = "deno-json"
    PYPROJECT_TOML = "pyproject-toml"

    @property
    def filename(self) -> str:
        return _CANONICAL_FILENAMES[self]

    @property
    def family(self) -> FormatFamily:
        if self in (ConfigKind.PACKAGE_JSON, ConfigKind.DENO_JSON):
            return FormatFamily.JSON
        return FormatFamily.TOML


_CANONICAL_FILENAMES: Dict[ConfigKind, str] = {
    ConfigKind.PACKAGE_JSON: "package.json",
    ConfigKind.CARGO_TOML: "Cargo.toml",
    ConfigKind.DENO_JSON: "deno.json",
    ConfigKind.PYPROJECT_TOML: "pyproject.toml",
}


@dataclass(frozen=True)
class ConfigFileRef:
    """A candidate config file: its format and where it lives."""

    kind: ConfigKind
    path: Path

    def __post_init__(self) -> None:
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))


@dataclass(frozen=True)
class DependencyDetails:
    """Per-dependency entry for formats that allow sub-tables."""

    version: Optional[str] = None
    url: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"version": self.version, "url": self.url}


@dataclass(frozen=True)
class SimpleDependencies:
    """Flat ``name -> version spec`` dependency map."""

    packages: Dict[str, str]

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "simple", "packages": dict(self.packages)}


@dataclass(frozen=True)
class DetailedDependencies:
    """``name -> DependencyDetails`` dependency map."""

    packages: Dict[str, DependencyDetails]

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "detailed",
            "packages": {name: details.to_dict() for name, details in self.packages.items()},
        }


Dependencies = Union[SimpleDependencies, DetailedDependencies]


@dataclass(frozen=True)
class UnifiedMetadata:
    """Normalized project description shared by every config format.

    ``name`` and ``version`` fall back to empty strings when the source omits
    them; every other field is ``None`` when absent, never an empty collection.
    Records hold lists and dicts, so they compare by value but are unhashable.
    """

    name: str = ""
    version: str = ""
    description: Optional[str] = None
    authors: Optional[List[str]] = None
    license: Optional[str] = None
    keywords: Optional[List[str]] = None
    dependencies: Optional[Dependencies] = None
    scripts: Optional[Dict[str, str]] = None

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "authors": list(self.authors) if self.authors is not None else None,
            "license": self.license,
            "keywords": list(self.keywords) if self.keywords is not None else None,
            "dependencies": self.dependencies.to_dict() if self.dependencies is not None else None,
            "scripts": dict(self.scripts) if self.scripts is not None else None,
        }


@dataclass(frozen=True)
class LoadedConfig:
    """A record paired with the config file it was extracted from."""

    ref: ConfigFileRef
    metadata: UnifiedMetadata

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.ref.kind.value,
            "path": str(self.ref.path),
            "metadata": self.metadata.to_dict(),
        }


# Errors


class MetadataError(RuntimeError):
    """Base class for failures while extracting project metadata."""

    kind = "MetadataError"
    message = "Metadata extraction failed: {path}"

    def __init__(self, path: Union[str, Path, None] = None) -> None:
        self.path = str(path) if path is not None else None
        super().__init__(self.message.format(path=self.path))

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"error": self.kind, "path": self.path}


class ConfigFileNotFoundError(MetadataError):
    """The config file does not exist or could not be opened."""

    kind = "FileNotFound"
    message = "File not found: {path}"


class ConfigReadError(MetadataError):
    """The config file was opened but its contents could not be read."""

    kind = "ReadError"
    message = "Failed to read file: {path}"


class JsonParseError(MetadataError):
    """A JSON-family config file is malformed."""

    kind = "JsonParseError"
    message = "Failed to parse JSON: {path}"


class TomlParseError(MetadataError):
    """A TOML-family config file is malformed."""

    kind = "TomlParseError"
    message = "Failed to parse TOML: {path}"


class NoFilesFoundError(MetadataError):
    """None of the candidate config files exist."""

    kind = "NoFilesFound"
    message = "No configuration files found"


__all__ = [
    "ConfigFileNotFoundError",
    "ConfigFileRef",
    "ConfigKind",
    "ConfigReadError",
    "Dependencies",
    "DependencyDetails",
    "DetailedDependencies",
    "FormatFamily",
    "JsonParseError",
    "LoadedConfig",
    "MetadataError",
    "NoFilesFoundError",
    "SimpleDependencies",
    "TomlParseError",
    "UnifiedMetadata",
]
