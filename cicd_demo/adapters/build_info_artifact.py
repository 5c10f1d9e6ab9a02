"""Best-effort reader for the `build-info.json` build artifact."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

logger = logging.getLogger(__name__)

BUILD_INFO_FILENAME = "build-info.json"


def adapter_load_build_info(build_info_path: str | Path) -> Mapping[str, Any] | None:
    """Read the build artifact, treating every failure as absence.

    Args:
        build_info_path: Path to `build-info.json`.

    Returns:
        Mapping[str, Any] | None: Read-only view of the JSON object, or `None`
        when the file is missing, unreadable, malformed or not an object.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    path = Path(build_info_path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
        logger.debug("build info not available at %s: %s", path, error)
        return None

    if not isinstance(payload, dict):
        logger.debug("build info at %s is not a JSON object", path)
        return None
    return MappingProxyType(payload)
