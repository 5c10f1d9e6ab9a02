"""Build stamping job producing the deployable artifact directory.

The job copies source scripts into the output directory and writes a
`build-info.json` record describing the build.
"""

from __future__ import annotations

import json
import logging
import platform
import shutil
from datetime import datetime, timezone
from pathlib import Path

from cicd_demo.adapters import BUILD_INFO_FILENAME
from cicd_demo.config import BuildStampSettings
from cicd_demo.domain import BuildInfo

from .interfaces import BuildStampError, BuildStampResult

logger = logging.getLogger(__name__)


def job_build_timestamp(now: datetime | None = None) -> str:
    """Render a UTC timestamp as ISO-8601 with milliseconds and `Z` suffix.

    Args:
        now: Optional timestamp, defaults to the current time.

    Returns:
        str: Timestamp such as `2026-02-14T09:30:00.000Z`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def job_build_info_from_settings(settings: BuildStampSettings, now: datetime | None = None) -> BuildInfo:
    """Build the metadata record for the current build.

    Args:
        settings: Build identity settings with fallbacks applied.
        now: Optional build timestamp override.

    Returns:
        BuildInfo: Metadata record for the artifact.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return BuildInfo(
        build_time=job_build_timestamp(now),
        build_number=settings.build_number,
        git_commit=settings.git_commit,
        git_branch=settings.git_branch,
        environment=settings.environment_name,
        runtime_version=platform.python_version(),
    )


def job_build_stamp(
    source_dir: str | Path,
    output_dir: str | Path,
    settings: BuildStampSettings,
) -> BuildStampResult:
    """Copy source scripts and write `build-info.json` into the output directory.

    Args:
        source_dir: Directory scanned for source scripts.
        output_dir: Artifact directory, created with parents when missing.
        settings: Build identity and source extension settings.

    Returns:
        BuildStampResult: Written metadata and the copied file names.

    Raises:
        BuildStampError: Raised on any filesystem failure.
    """

    source_path = Path(source_dir)
    output_path = Path(output_dir)
    try:
        output_path.mkdir(parents=True, exist_ok=True)

        copied_files: list[str] = []
        for entry in sorted(source_path.iterdir()):
            if not entry.name.endswith(settings.source_extension) or not entry.is_file():
                continue
            shutil.copyfile(entry, output_path / entry.name)
            copied_files.append(entry.name)
            logger.debug("copied %s to %s", entry, output_path)

        build_info = job_build_info_from_settings(settings)
        build_info_path = output_path / BUILD_INFO_FILENAME
        build_info_path.write_text(json.dumps(build_info.domain_to_payload(), indent=2), encoding="utf-8")
    except OSError as error:
        raise BuildStampError(f"build stamping failed: {error}") from error

    logger.info(
        "build completed: %d file(s) copied, build info written to %s",
        len(copied_files),
        build_info_path,
    )
    return BuildStampResult(
        build_info=build_info,
        build_info_path=build_info_path,
        copied_files=tuple(copied_files),
    )
