"""Mapper for Rust ``Cargo.toml`` manifests."""

from __future__ import annotations

from typing import Any

from .base import FieldMapper
from .utils import as_detailed_dependencies, as_str, as_str_list, as_str_or_empty, lookup
from ..models import ConfigKind, UnifiedMetadata


class CargoTomlMapper(FieldMapper):
    """Reads the ``[package]`` table and the top-level ``[dependencies]`` tables.

    Cargo has no scripts section, so ``scripts`` is always absent.
    """

    kind = ConfigKind.CARGO_TOML

    def map(self, document: Any) -> UnifiedMetadata:
        package = lookup(document, "package")
        return UnifiedMetadata(
            name=as_str_or_empty(lookup(package, "name")),
            version=as_str_or_empty(lookup(package, "version")),
            description=as_str(lookup(package, "description")),
            authors=as_str_list(lookup(package, "authors")),
            license=as_str(lookup(package, "license")),
            keywords=as_str_list(lookup(package, "keywords")),
            dependencies=as_detailed_dependencies(lookup(document, "dependencies")),
            scripts=None,
        )
