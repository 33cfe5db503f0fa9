"""Mapper for ``pyproject.toml`` packaging manifests."""

from __future__ import annotations

from typing import Any

from .base import FieldMapper
from .utils import as_detailed_dependencies, as_str, as_str_list, as_str_or_empty, lookup
from ..models import ConfigKind, UnifiedMetadata


class PyprojectTomlMapper(FieldMapper):
    """Reads the ``[project]`` table.

    Only a table-of-tables ``project.dependencies`` is understood; a PEP 621
    requirement array leaves dependencies absent.
    """

    kind = ConfigKind.PYPROJECT_TOML

    def map(self, document: Any) -> UnifiedMetadata:
        project = lookup(document, "project")
        return UnifiedMetadata(
            name=as_str_or_empty(lookup(project, "name")),
            version=as_str_or_empty(lookup(project, "version")),
            description=as_str(lookup(project, "description")),
            authors=as_str_list(lookup(project, "authors")),
            license=as_str(lookup(project, "license")),
            keywords=as_str_list(lookup(project, "keywords")),
            dependencies=as_detailed_dependencies(lookup(project, "dependencies")),
            scripts=None,
        )
