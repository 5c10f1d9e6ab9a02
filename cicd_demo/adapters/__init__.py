"""Adapters for startup metadata files and process statistics."""

from .build_info_artifact import BUILD_INFO_FILENAME, adapter_load_build_info
from .errors import VersionManifestError
from .interfaces import ProcessMemoryPort
from .process_memory import PsutilProcessMemoryService
from .version_manifest import adapter_load_project_version, adapter_load_version

__all__ = [
    "BUILD_INFO_FILENAME",
    "ProcessMemoryPort",
    "PsutilProcessMemoryService",
    "VersionManifestError",
    "adapter_load_build_info",
    "adapter_load_project_version",
    "adapter_load_version",
]
