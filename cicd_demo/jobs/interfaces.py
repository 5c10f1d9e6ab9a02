"""Typed interfaces for job-layer build responsibilities."""

from dataclasses import dataclass
from pathlib import Path

from cicd_demo.domain import BuildInfo


class BuildStampError(RuntimeError):
    """Raised when the build artifact cannot be written.

    Stamping is idempotent, so callers recover by re-running the job.
    """


@dataclass(frozen=True)
class BuildStampResult:
    """Result contract for one build stamping run.

    Attributes:
        build_info: Metadata record written to the artifact.
        build_info_path: Location of the written `build-info.json`.
        copied_files: Names of source files copied into the output directory.
    """

    build_info: BuildInfo
    build_info_path: Path
    copied_files: tuple[str, ...]
