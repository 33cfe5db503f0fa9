"""Mapper for ``deno.json`` runtime configs."""

from __future__ import annotations

from typing import Any

from .base import FieldMapper
from .utils import as_simple_dependencies, as_str, as_str_list, as_str_mapping, as_str_or_empty
from ..models import ConfigKind, UnifiedMetadata


class DenoJsonMapper(FieldMapper):
    """Reads deno fields; the import map doubles as the dependency list."""

    kind = ConfigKind.DENO_JSON

    def map(self, document: Any) -> UnifiedMetadata:
        data = document if isinstance(document, dict) else {}
        return UnifiedMetadata(
            name=as_str_or_empty(data.get("name")),
            version=as_str_or_empty(data.get("version")),
            description=as_str(data.get("description")),
            # deno.json has no authors field
            authors=None,
            license=as_str(data.get("license")),
            keywords=as_str_list(data.get("keywords")),
            dependencies=as_simple_dependencies(data.get("imports")),
            scripts=as_str_mapping(data.get("scripts")),
        )
