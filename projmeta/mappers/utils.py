"""Shared coercion helpers for mapper implementations.

Every helper is total: values of the wrong type degrade to ``None`` (or the
empty string inside collections) instead of raising.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import DependencyDetails, DetailedDependencies, SimpleDependencies


def lookup(document: Any, *keys: str) -> Any:
    """Walk nested mappings along ``keys``; return None on any miss."""
    current = document
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def as_str_or_empty(value: Any) -> str:
    return value if isinstance(value, str) else ""


def as_str_list(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    return [as_str_or_empty(item) for item in value]


def as_str_mapping(value: Any) -> Optional[Dict[str, str]]:
    if not isinstance(value, dict):
        return None
    return {str(key): as_str_or_empty(item) for key, item in value.items()}


def as_simple_dependencies(value: Any) -> Optional[SimpleDependencies]:
    packages = as_str_mapping(value)
    if packages is None:
        return None
    return SimpleDependencies(packages=packages)


def as_detailed_dependencies(value: Any) -> Optional[DetailedDependencies]:
    if not isinstance(value, dict):
        return None
    packages: Dict[str, DependencyDetails] = {}
    for name, entry in value.items():
        # No format in scope carries a per-dependency URL.
        packages[str(name)] = DependencyDetails(version=as_str(lookup(entry, "version")))
    return DetailedDependencies(packages=packages)


__all__ = [
    "as_detailed_dependencies",
    "as_simple_dependencies",
    "as_str",
    "as_str_list",
    "as_str_mapping",
    "as_str_or_empty",
    "lookup",
]
