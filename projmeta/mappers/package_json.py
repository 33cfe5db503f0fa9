"""Mapper for npm ``package.json`` manifests."""

from __future__ import annotations

from typing import Any, List, Optional

from .base import FieldMapper
from .utils import as_simple_dependencies, as_str, as_str_list, as_str_mapping, as_str_or_empty
from ..models import ConfigKind, UnifiedMetadata


class PackageJsonMapper(FieldMapper):
    """Reads top-level npm fields; ``author`` becomes a one-element author list."""

    kind = ConfigKind.PACKAGE_JSON

    def map(self, document: Any) -> UnifiedMetadata:
        data = document if isinstance(document, dict) else {}
        return UnifiedMetadata(
            name=as_str_or_empty(data.get("name")),
            version=as_str_or_empty(data.get("version")),
            description=as_str(data.get("description")),
            authors=_single_author(data.get("author")),
            license=as_str(data.get("license")),
            keywords=as_str_list(data.get("keywords")),
            dependencies=as_simple_dependencies(data.get("dependencies")),
            scripts=as_str_mapping(data.get("scripts")),
        )


def _single_author(value: Any) -> Optional[List[str]]:
    author = as_str(value)
    return [author] if author is not None else None
