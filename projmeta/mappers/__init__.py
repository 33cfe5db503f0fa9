"""Per-format field mappers and the registry that selects them."""

from __future__ import annotations

from typing import Any, Callable, Dict

from .base import FieldMapper
from .cargo_toml import CargoTomlMapper
from .deno_json import DenoJsonMapper
from .package_json import PackageJsonMapper
from .pyproject_toml import PyprojectTomlMapper
from ..models import ConfigKind, UnifiedMetadata

_BUILTIN_FACTORIES: Dict[ConfigKind, Callable[[], FieldMapper]] = {
    ConfigKind.PACKAGE_JSON: PackageJsonMapper,
    ConfigKind.CARGO_TOML: CargoTomlMapper,
    ConfigKind.DENO_JSON: DenoJsonMapper,
    ConfigKind.PYPROJECT_TOML: PyprojectTomlMapper,
}


def get_mapper(kind: ConfigKind) -> FieldMapper:
    """Return the mapper registered for ``kind``."""
    try:
        factory = _BUILTIN_FACTORIES[ConfigKind(kind)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"No field mapper registered for config kind '{kind}'") from exc
    return factory()


def map_document(kind: ConfigKind, document: Any) -> UnifiedMetadata:
    """Project a parsed ``document`` of the given kind onto UnifiedMetadata."""
    return get_mapper(kind).map(document)


__all__ = [
    "CargoTomlMapper",
    "DenoJsonMapper",
    "FieldMapper",
    "PackageJsonMapper",
    "PyprojectTomlMapper",
    "get_mapper",
    "map_document",
]
