"""Render metadata records and consistency reports for display."""

from __future__ import annotations

import json
from typing import Any, List, Sequence

import yaml

from .consistency import ConsistencyReport, Discrepancy
from .models import DetailedDependencies, LoadedConfig, SimpleDependencies, UnifiedMetadata


def render_metadata(sources: Sequence[LoadedConfig], fmt: str = "text") -> str:
    """Render loaded records as text, JSON or YAML."""
    if fmt == "text":
        blocks = [_metadata_text(source) for source in sources]
        return "\n\n".join(blocks)
    return _dump([source.to_dict() for source in sources], fmt)


def render_report(report: ConsistencyReport, fmt: str = "text") -> str:
    """Render a consistency report as text, JSON or YAML."""
    if fmt != "text":
        return _dump(report.to_dict(), fmt)

    checked = ", ".join(str(source.ref.path) for source in report.sources)
    if report.is_consistent:
        return f"Config files are consistent ({checked})"

    lines: List[str] = []
    for first_path, other_path, items in report.comparisons():
        lines.append(
            f"Difference found between first config file '{first_path}' "
            f"and config file '{other_path}':"
        )
        lines.extend(describe_discrepancy(item) for item in items)
    return "\n".join(lines)


def describe_discrepancy(item: Discrepancy) -> str:
    return f"{item.label}: {format_value(item.first_value)} vs {format_value(item.other_value)}"


def format_value(value: Any) -> str:
    """Compact single-line form used in text reports."""
    if value is None:
        return "(none)"
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "[" + ", ".join(value) + "]"
    if isinstance(value, SimpleDependencies):
        return _format_pairs(value.packages)
    if isinstance(value, DetailedDependencies):
        return _format_pairs(
            {
                name: format_value(details.version)
                for name, details in value.packages.items()
            }
        )
    if isinstance(value, dict):
        return _format_pairs(value)
    return str(value)


def _format_pairs(pairs: dict) -> str:
    return "{" + ", ".join(f"{key}={val}" for key, val in pairs.items()) + "}"


def _metadata_text(source: LoadedConfig) -> str:
    metadata: UnifiedMetadata = source.metadata
    lines = [f"{source.ref.path} ({source.ref.kind.value})"]
    lines.append(f"  name: {metadata.name}")
    lines.append(f"  version: {metadata.version}")
    for name in ("description", "authors", "license", "keywords", "dependencies", "scripts"):
        value = getattr(metadata, name)
        if value is not None:
            lines.append(f"  {name}: {format_value(value)}")
    return "\n".join(lines)


def _dump(payload: Any, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(payload, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True).rstrip("\n")
    raise ValueError(f"Unsupported output format: {fmt}")


__all__ = ["describe_discrepancy", "format_value", "render_metadata", "render_report"]
