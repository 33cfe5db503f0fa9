"""Tests for mapper selection and shared properties of every mapper."""

from __future__ import annotations

import pytest

from projmeta.mappers import get_mapper, map_document
from projmeta.models import ConfigKind, UnifiedMetadata

MINIMAL_DOCUMENTS = {
    ConfigKind.PACKAGE_JSON: {"name": "x", "version": "1.0.0"},
    ConfigKind.CARGO_TOML: {"package": {"name": "x", "version": "1.0.0"}},
    ConfigKind.DENO_JSON: {"name": "x", "version": "1.0.0"},
    ConfigKind.PYPROJECT_TOML: {"project": {"name": "x", "version": "1.0.0"}},
}

EXTRA_FIELD_DOCUMENTS = {
    ConfigKind.PACKAGE_JSON: {"name": "x", "version": "1.0.0", "workspaces": ["a"]},
    ConfigKind.CARGO_TOML: {
        "package": {"name": "x", "version": "1.0.0", "edition": "2021"},
        "profile": {"release": {"lto": True}},
    },
    ConfigKind.DENO_JSON: {"name": "x", "version": "1.0.0", "compilerOptions": {}},
    ConfigKind.PYPROJECT_TOML: {
        "project": {"name": "x", "version": "1.0.0", "requires-python": ">=3.11"},
        "build-system": {"requires": ["setuptools"]},
    },
}


@pytest.mark.parametrize("kind", list(ConfigKind))
def test_registry_returns_mapper_for_kind(kind: ConfigKind) -> None:
    assert get_mapper(kind).kind is kind


def test_registry_accepts_kind_values() -> None:
    assert get_mapper("deno-json").kind is ConfigKind.DENO_JSON  # type: ignore[arg-type]


def test_registry_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError, match="No field mapper registered"):
        get_mapper("setup-cfg")  # type: ignore[arg-type]


@pytest.mark.parametrize("kind", list(ConfigKind))
def test_minimal_documents_leave_optional_fields_absent(kind: ConfigKind) -> None:
    assert map_document(kind, MINIMAL_DOCUMENTS[kind]) == UnifiedMetadata(
        name="x", version="1.0.0"
    )


@pytest.mark.parametrize("kind", list(ConfigKind))
def test_extra_fields_do_not_surface(kind: ConfigKind) -> None:
    assert map_document(kind, EXTRA_FIELD_DOCUMENTS[kind]) == UnifiedMetadata(
        name="x", version="1.0.0"
    )


@pytest.mark.parametrize("kind", list(ConfigKind))
@pytest.mark.parametrize("document", [None, "text", 3, [], {}])
def test_mappers_are_total(kind: ConfigKind, document: object) -> None:
    assert map_document(kind, document) == UnifiedMetadata()
