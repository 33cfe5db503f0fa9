"""Load project metadata from one or more config files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Mapping, Optional

from .logging import get_logger
from .mappers import map_document
from .models import (
    ConfigFileNotFoundError,
    ConfigFileRef,
    ConfigKind,
    LoadedConfig,
    NoFilesFoundError,
    UnifiedMetadata,
)
from .readers import read_document

_LOGGER = get_logger(__name__)

DETECTION_ORDER = (
    ConfigKind.PACKAGE_JSON,
    ConfigKind.CARGO_TOML,
    ConfigKind.DENO_JSON,
    ConfigKind.PYPROJECT_TOML,
)


def extract_metadata(ref: ConfigFileRef) -> UnifiedMetadata:
    """Read ``ref`` and map it onto UnifiedMetadata. Reader errors propagate."""
    document = read_document(ref)
    return map_document(ref.kind, document)


def load_sources(refs: Iterable[ConfigFileRef]) -> List[LoadedConfig]:
    """Extract every ref in order, skipping files that do not exist.

    Any error other than a missing file aborts the whole batch. Raises
    NoFilesFoundError when nothing could be loaded.
    """
    loaded: List[LoadedConfig] = []
    for ref in refs:
        try:
            metadata = extract_metadata(ref)
        except ConfigFileNotFoundError:
            _LOGGER.debug("Skipping absent %s file %s", ref.kind.value, ref.path)
            continue
        _LOGGER.debug("Loaded %s metadata from %s", ref.kind.value, ref.path)
        loaded.append(LoadedConfig(ref=ref, metadata=metadata))

    if not loaded:
        raise NoFilesFoundError()
    return loaded


def load_config_files(refs: Iterable[ConfigFileRef]) -> List[UnifiedMetadata]:
    """Return the records of :func:`load_sources` without their refs."""
    return [source.metadata for source in load_sources(refs)]


def detect_config_files(
    root: Path | str, filenames: Optional[Mapping[ConfigKind, str]] = None
) -> List[ConfigFileRef]:
    """Build the canonical refs for ``root`` in fixed detection order.

    ``filenames`` overrides the conventional filename of individual kinds.
    """
    root_path = Path(root)
    overrides = dict(filenames or {})
    return [
        ConfigFileRef(kind=kind, path=root_path / overrides.get(kind, kind.filename))
        for kind in DETECTION_ORDER
    ]


def load_detected_sources(
    root: Path | str, filenames: Optional[Mapping[ConfigKind, str]] = None
) -> List[LoadedConfig]:
    return load_sources(detect_config_files(root, filenames))


def load_detected_config_files(
    root: Path | str, filenames: Optional[Mapping[ConfigKind, str]] = None
) -> List[UnifiedMetadata]:
    """Detect and load every canonical config file present under ``root``."""
    return load_config_files(detect_config_files(root, filenames))


__all__ = [
    "DETECTION_ORDER",
    "detect_config_files",
    "extract_metadata",
    "load_config_files",
    "load_detected_config_files",
    "load_detected_sources",
    "load_sources",
]
