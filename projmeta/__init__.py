"""Extract and cross-check project metadata from heterogeneous config files."""

from .consistency import ConsistencyReport, Discrepancy, check_config_files, compare_metadata
from .loader import (
    detect_config_files,
    extract_metadata,
    load_config_files,
    load_detected_config_files,
    load_sources,
)
from .models import (
    ConfigFileNotFoundError,
    ConfigFileRef,
    ConfigKind,
    ConfigReadError,
    DependencyDetails,
    DetailedDependencies,
    JsonParseError,
    LoadedConfig,
    MetadataError,
    NoFilesFoundError,
    SimpleDependencies,
    TomlParseError,
    UnifiedMetadata,
)

__all__ = [
    "ConfigFileNotFoundError",
    "ConfigFileRef",
    "ConfigKind",
    "ConfigReadError",
    "ConsistencyReport",
    "DependencyDetails",
    "DetailedDependencies",
    "Discrepancy",
    "JsonParseError",
    "LoadedConfig",
    "MetadataError",
    "NoFilesFoundError",
    "SimpleDependencies",
    "TomlParseError",
    "UnifiedMetadata",
    "check_config_files",
    "compare_metadata",
    "detect_config_files",
    "extract_metadata",
    "load_config_files",
    "load_detected_config_files",
    "load_sources",
]
