"""Read config files from disk and parse them into plain Python values."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from .logging import get_logger
from .models import (
    ConfigFileNotFoundError,
    ConfigFileRef,
    ConfigReadError,
    FormatFamily,
    JsonParseError,
    TomlParseError,
)

_LOGGER = get_logger(__name__)


def read_text(path: Path) -> str:
    """Return the UTF-8 contents of ``path``.

    Raises ConfigFileNotFoundError when the file cannot be opened and
    ConfigReadError when it was opened but could not be read or decoded.
    """
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise ConfigFileNotFoundError(path) from exc

    with handle:
        try:
            raw = handle.read()
        except OSError as exc:
            raise ConfigReadError(path) from exc

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigReadError(path) from exc


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_document(text: str, family: FormatFamily, path: Path) -> Any:
    """Parse ``text`` with the parser for ``family``. No schema checks.

    Nesting too deep for the parser counts as malformed input.
    """
    if family is FormatFamily.JSON:
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            _LOGGER.debug("Invalid JSON in %s: %s", path, exc)
            raise JsonParseError(path) from exc

    try:
        return tomllib.loads(text)
    except (tomllib.TOMLDecodeError, RecursionError) as exc:
        _LOGGER.debug("Invalid TOML in %s: %s", path, exc)
        raise TomlParseError(path) from exc


def read_document(ref: ConfigFileRef) -> Any:
    """Load and parse the file behind ``ref`` according to its format family."""
    text = read_text(ref.path)
    return parse_document(text, ref.kind.family, ref.path)


__all__ = ["parse_document", "read_document", "read_text"]
