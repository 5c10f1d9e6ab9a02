"""Process memory reader backed by psutil."""

from __future__ import annotations

import os
import sys

import psutil

from cicd_demo.domain import MemoryUsage

from .interfaces import ProcessMemoryPort


class PsutilProcessMemoryService(ProcessMemoryPort):
    """Memory usage service for the current process."""

    def __init__(self, process: psutil.Process | None = None):
        """Initialize memory service.

        Args:
            process: Process handle to inspect, defaults to the current process.
        """

        self._process = process if process is not None else psutil.Process(os.getpid())

    def adapter_read_memory_usage(self) -> MemoryUsage:
        """Read a fresh memory breakdown.

        Returns:
            MemoryUsage: RSS, virtual size, data segment and block count.

        Raises:
            psutil.Error: Raised when the process cannot be inspected.
        """

        memory_info = self._process.memory_info()
        return MemoryUsage(
            rss=int(memory_info.rss),
            heap_total=int(memory_info.vms),
            # `data` is only reported on Linux and BSD.
            heap_used=int(getattr(memory_info, "data", memory_info.rss)),
            allocated_blocks=sys.getallocatedblocks(),
        )
