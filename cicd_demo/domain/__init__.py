"""Domain models used across application layer boundaries."""

from .models import BuildInfo, MemoryUsage, ServerContext

__all__ = ["BuildInfo", "MemoryUsage", "ServerContext"]
