"""Typed interfaces for runtime adapter services."""

from typing import Protocol

from cicd_demo.domain import MemoryUsage


class ProcessMemoryPort(Protocol):
    """Port definition for reading process memory usage."""

    def adapter_read_memory_usage(self) -> MemoryUsage:
        """Return a fresh memory usage reading for the running process.

        Returns:
            MemoryUsage: Memory breakdown in bytes.

        Raises:
            RuntimeError: Raised when process statistics are unavailable.
        """
