"""Tests for projmeta.readers."""

from __future__ import annotations

from pathlib import Path

import pytest

from projmeta import readers
from projmeta.models import (
    ConfigFileNotFoundError,
    ConfigFileRef,
    ConfigKind,
    ConfigReadError,
    FormatFamily,
    JsonParseError,
    TomlParseError,
)
from tests._fixtures.project_builder import ProjectBuilder


def test_read_document_parses_json_family(project: ProjectBuilder) -> None:
    project.write({"deno.json": '{"name": "x", "imports": {"std": "jsr:@std/x"}}'})
    ref = ConfigFileRef(ConfigKind.DENO_JSON, project.path("deno.json"))

    assert readers.read_document(ref) == {"name": "x", "imports": {"std": "jsr:@std/x"}}


def test_read_document_parses_toml_family(project: ProjectBuilder) -> None:
    project.write({"Cargo.toml": '[package]\nname = "x"\nversion = "1.0.0"\n'})
    ref = ConfigFileRef(ConfigKind.CARGO_TOML, project.path("Cargo.toml"))

    assert readers.read_document(ref) == {"package": {"name": "x", "version": "1.0.0"}}


def test_read_document_accepts_non_object_json(project: ProjectBuilder) -> None:
    project.write({"package.json": "[1, 2, 3]"})
    ref = ConfigFileRef(ConfigKind.PACKAGE_JSON, project.path("package.json"))

    assert readers.read_document(ref) == [1, 2, 3]


def test_missing_file_raises_file_not_found(tmp_path: Path) -> None:
    ref = ConfigFileRef(ConfigKind.PACKAGE_JSON, tmp_path / "nonexistent.json")

    with pytest.raises(ConfigFileNotFoundError) as excinfo:
        readers.read_document(ref)

    assert excinfo.value.path == str(tmp_path / "nonexistent.json")


def test_invalid_utf8_raises_read_error(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_bytes(b'{"name": "\xff\xfe"}')

    with pytest.raises(ConfigReadError):
        readers.read_document(ConfigFileRef(ConfigKind.PACKAGE_JSON, path))


def test_io_failure_while_reading_raises_read_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "Cargo.toml"
    path.write_text("[package]\n", encoding="utf-8")

    class _FailingHandle:
        def __enter__(self) -> "_FailingHandle":
            return self

        def __exit__(self, *exc_info: object) -> None:
            return None

        def read(self) -> bytes:
            raise OSError("device unavailable")

    monkeypatch.setattr(Path, "open", lambda self, *args, **kwargs: _FailingHandle())

    with pytest.raises(ConfigReadError) as excinfo:
        readers.read_text(path)

    assert str(excinfo.value) == f"Failed to read file: {path}"


def test_malformed_json_raises_json_parse_error(project: ProjectBuilder) -> None:
    project.write({"package.json": '{"name": "x",'})
    ref = ConfigFileRef(ConfigKind.PACKAGE_JSON, project.path("package.json"))

    with pytest.raises(JsonParseError) as excinfo:
        readers.read_document(ref)

    assert excinfo.value.path == str(project.path("package.json"))


def test_malformed_toml_raises_toml_parse_error(project: ProjectBuilder) -> None:
    project.write({"pyproject.toml": "[project\nname = 'x'\n"})
    ref = ConfigFileRef(ConfigKind.PYPROJECT_TOML, project.path("pyproject.toml"))

    with pytest.raises(TomlParseError):
        readers.read_document(ref)


def test_parse_document_uses_declared_family_not_content() -> None:
    # Valid JSON is not valid TOML.
    with pytest.raises(TomlParseError):
        readers.parse_document('{"name": "x"}', FormatFamily.TOML, Path("Cargo.toml"))


@pytest.mark.parametrize(
    "kind, content, error",
    [
        (ConfigKind.PACKAGE_JSON, "[" * 200000, JsonParseError),
        (ConfigKind.CARGO_TOML, "a = " + "[" * 200000, TomlParseError),
    ],
)
def test_deeply_nested_input_raises_parse_error(
    project: ProjectBuilder, kind: ConfigKind, content: str, error: type
) -> None:
    project.write({kind.filename: content})

    with pytest.raises(error) as excinfo:
        readers.read_document(ConfigFileRef(kind, project.path(kind.filename)))

    assert excinfo.value.path == str(project.path(kind.filename))


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_standard_json_constants_are_rejected(constant: str) -> None:
    with pytest.raises(JsonParseError):
        readers.parse_document(
            f'{{"name": "x", "version": {constant}}}', FormatFamily.JSON, Path("package.json")
        )
