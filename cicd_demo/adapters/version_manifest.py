"""Version manifest adapter reading the service version from `pyproject.toml`."""

from __future__ import annotations

import importlib.metadata
import tomllib
from pathlib import Path

from .errors import VersionManifestError


def adapter_load_version(manifest_path: str | Path) -> str:
    """Load the service version from the `[project]` table of a TOML manifest.

    Args:
        manifest_path: Path to the manifest file.

    Returns:
        str: Non-blank version string.

    Raises:
        VersionManifestError: Raised when the manifest is missing, unreadable,
            not valid TOML or has no usable version.
    """

    path = Path(manifest_path)
    try:
        with path.open("rb") as manifest_file:
            manifest = tomllib.load(manifest_file)
    except OSError as error:
        raise VersionManifestError(f"version manifest could not be read: {path}", str(path)) from error
    except tomllib.TOMLDecodeError as error:
        raise VersionManifestError(f"version manifest is not valid TOML: {path}", str(path)) from error

    project_table = manifest.get("project")
    version = project_table.get("version") if isinstance(project_table, dict) else None
    if not isinstance(version, str) or not version.strip():
        raise VersionManifestError(f"version manifest has no [project].version: {path}", str(path))
    return version.strip()


def adapter_load_project_version(manifest_path: str | Path, distribution_name: str) -> str:
    """Load the version from the project manifest or installed package metadata.

    Source checkouts carry `pyproject.toml`; installed wheels do not, so their
    distribution metadata stands in for the manifest.

    Args:
        manifest_path: Project manifest location.
        distribution_name: Installed distribution to consult when the manifest is absent.

    Returns:
        str: Non-blank version string.

    Raises:
        VersionManifestError: Raised when the manifest is malformed, or when it
            is absent and the distribution is not installed.
    """

    path = Path(manifest_path)
    if path.is_file():
        return adapter_load_version(path)

    try:
        version = importlib.metadata.version(distribution_name)
    except importlib.metadata.PackageNotFoundError as error:
        raise VersionManifestError(
            f"version manifest could not be read and {distribution_name} is not installed: {path}",
            str(path),
        ) from error
    if not version or not version.strip():
        raise VersionManifestError(f"installed {distribution_name} metadata has no version", str(path))
    return version.strip()
