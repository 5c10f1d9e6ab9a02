"""Job package for one-shot build workflows."""

from .build_stamp import job_build_info_from_settings, job_build_stamp, job_build_timestamp
from .interfaces import BuildStampError, BuildStampResult

__all__ = [
    "BuildStampError",
    "BuildStampResult",
    "job_build_info_from_settings",
    "job_build_stamp",
    "job_build_timestamp",
]
