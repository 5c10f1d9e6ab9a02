"""Project-native typed exceptions for startup metadata adapters."""

from __future__ import annotations


class VersionManifestError(RuntimeError):
    """Raised when the version manifest is missing or malformed.

    Attributes:
        manifest_path: Path that failed to load.
    """

    def __init__(self, message: str, manifest_path: str):
        super().__init__(message)
        self.manifest_path = manifest_path
