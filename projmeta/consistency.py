"""Cross-check the config files of one project for matching metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .loader import load_detected_sources
from .logging import get_logger
from .models import ConfigKind, LoadedConfig, UnifiedMetadata

_LOGGER = get_logger(__name__)

COMPARED_FIELDS: Tuple[str, ...] = (
    "name",
    "version",
    "description",
    "authors",
    "license",
    "keywords",
    "dependencies",
    "scripts",
)

FIELD_LABELS: Dict[str, str] = {
    "name": "Name",
    "version": "Version",
    "description": "Description",
    "authors": "Authors",
    "license": "License",
    "keywords": "Keywords",
    "dependencies": "Dependencies",
    "scripts": "Scripts",
}


@dataclass(frozen=True)
class Discrepancy:
    """One field on which two config files disagree."""

    field: str
    first_value: Any
    other_value: Any
    first_path: str
    other_path: str

    @property
    def label(self) -> str:
        return FIELD_LABELS.get(self.field, self.field)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field,
            "first_value": _plain(self.first_value),
            "other_value": _plain(self.other_value),
            "first_path": self.first_path,
            "other_path": self.other_path,
        }


@dataclass
class ConsistencyReport:
    """Outcome of comparing the first loaded config file against the rest."""

    sources: List[LoadedConfig] = field(default_factory=list)
    discrepancies: List[Discrepancy] = field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        return not self.discrepancies

    def comparisons(self) -> List[Tuple[str, str, List[Discrepancy]]]:
        """Group discrepancies per compared pair, preserving report order."""
        grouped: Dict[Tuple[str, str], List[Discrepancy]] = {}
        for item in self.discrepancies:
            grouped.setdefault((item.first_path, item.other_path), []).append(item)
        return [(first, other, items) for (first, other), items in grouped.items()]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sources": [str(source.ref.path) for source in self.sources],
            "consistent": self.is_consistent,
            "discrepancies": [item.to_dict() for item in self.discrepancies],
        }


def compare_metadata(
    first: UnifiedMetadata,
    other: UnifiedMetadata,
    *,
    first_path: str = "",
    other_path: str = "",
    ignore_fields: Iterable[str] = (),
) -> List[Discrepancy]:
    """Return one Discrepancy per differing field, in fixed field order."""
    ignored = _validate_fields(ignore_fields)
    discrepancies: List[Discrepancy] = []
    for name in COMPARED_FIELDS:
        if name in ignored:
            continue
        first_value = getattr(first, name)
        other_value = getattr(other, name)
        if first_value != other_value:
            discrepancies.append(
                Discrepancy(
                    field=name,
                    first_value=first_value,
                    other_value=other_value,
                    first_path=first_path,
                    other_path=other_path,
                )
            )
    return discrepancies


def check_sources(
    sources: List[LoadedConfig], *, ignore_fields: Iterable[str] = ()
) -> ConsistencyReport:
    """Compare ``sources[0]`` against every later source."""
    ignored = _validate_fields(ignore_fields)
    report = ConsistencyReport(sources=list(sources))
    if len(sources) < 2:
        return report

    reference = sources[0]
    first_path = str(reference.ref.path)
    for source in sources[1:]:
        other_path = str(source.ref.path)
        found = compare_metadata(
            reference.metadata,
            source.metadata,
            first_path=first_path,
            other_path=other_path,
            ignore_fields=ignored,
        )
        if found:
            _LOGGER.info(
                "Difference found between first config file '%s' and config file '%s'",
                first_path,
                other_path,
            )
            for item in found:
                _LOGGER.debug("%s: %r vs %r", item.label, item.first_value, item.other_value)
        report.discrepancies.extend(found)
    return report


def check_config_files(
    root: Path | str,
    filenames: Optional[Mapping[ConfigKind, str]] = None,
    *,
    ignore_fields: Iterable[str] = (),
) -> ConsistencyReport:
    """Load the config files under ``root`` and report where they disagree.

    Loader errors propagate unchanged; discrepancies never raise.
    """
    sources = load_detected_sources(root, filenames)
    return check_sources(sources, ignore_fields=ignore_fields)


def _validate_fields(names: Iterable[str] | str) -> frozenset[str]:
    selected = frozenset([names] if isinstance(names, str) else names)
    unknown = selected.difference(COMPARED_FIELDS)
    if unknown:
        raise ValueError(f"Unknown metadata fields: {', '.join(sorted(unknown))}")
    return selected


def _plain(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    return value


__all__ = [
    "COMPARED_FIELDS",
    "ConsistencyReport",
    "Discrepancy",
    "check_config_files",
    "check_sources",
    "compare_metadata",
]
