"""Typed domain models shared across runtime layers.

This module provides simple data contracts for build metadata and the
read-only request context of the status server.
"""

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BuildInfo:
    """Metadata describing one build of the service.

    Attributes:
        build_time: ISO-8601 UTC timestamp of artifact generation.
        build_number: CI run number or `local`.
        git_commit: Commit identifier or `unknown`.
        git_branch: Branch identifier or `local`.
        environment: Target environment label.
        runtime_version: Version of the interpreter that produced the build.
    """

    build_time: str
    build_number: str
    git_commit: str
    git_branch: str
    environment: str
    runtime_version: str

    def domain_to_payload(self) -> dict[str, str]:
        """Return the artifact representation with camelCase keys.

        Returns:
            dict[str, str]: JSON-ready build metadata payload.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return {
            "buildTime": self.build_time,
            "buildNumber": self.build_number,
            "gitCommit": self.git_commit,
            "gitBranch": self.git_branch,
            "environment": self.environment,
            "runtimeVersion": self.runtime_version,
        }


@dataclass(frozen=True)
class MemoryUsage:
    """Point-in-time memory breakdown of the running process.

    Attributes:
        rss: Resident set size in bytes.
        heap_total: Virtual memory size in bytes.
        heap_used: Data segment size in bytes, RSS where unavailable.
        allocated_blocks: Interpreter allocated memory block count.
    """

    rss: int
    heap_total: int
    heap_used: int
    allocated_blocks: int

    def domain_to_payload(self) -> dict[str, int]:
        """Return the memory breakdown with camelCase keys.

        Returns:
            dict[str, int]: JSON-ready memory payload in bytes and block count.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return {
            "rss": self.rss,
            "heapTotal": self.heap_total,
            "heapUsed": self.heap_used,
            "allocatedBlocks": self.allocated_blocks,
        }


@dataclass(frozen=True)
class ServerContext:
    """Read-only application context captured once at startup.

    Attributes:
        version: Service version loaded from the manifest.
        environment_name: Runtime environment label.
        build_info: Build artifact JSON object, `None` when unavailable.
        started_at_monotonic: Clock reading taken at initialization.
        clock: Monotonic clock used for uptime calculation.
    """

    version: str
    environment_name: str
    build_info: Mapping[str, Any] | None = None
    started_at_monotonic: float = field(default_factory=time.monotonic)
    clock: Callable[[], float] = time.monotonic

    def context_uptime_seconds(self) -> float:
        """Return elapsed seconds since startup, never negative.

        Returns:
            float: Fresh uptime reading.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return max(0.0, float(self.clock() - self.started_at_monotonic))
