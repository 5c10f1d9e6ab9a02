"""Runtime performance endpoint router."""

from typing import Any

from fastapi import APIRouter

from cicd_demo.adapters import ProcessMemoryPort
from cicd_demo.domain import ServerContext


def api_create_performance_router(context: ServerContext, memory_service: ProcessMemoryPort) -> APIRouter:
    """Create router reporting uptime and process memory usage.

    Args:
        context: Read-only server context holding the start time.
        memory_service: Process memory reader.

    Returns:
        APIRouter: Router exposing `/performance` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if context is None:
        raise ValueError("context must not be None")
    if memory_service is None:
        raise ValueError("memory_service must not be None")

    router = APIRouter(tags=["performance"])

    @router.get("/performance")
    def api_performance() -> dict[str, Any]:
        """Return uptime and memory readings computed for this request.

        Returns:
            dict[str, Any]: Uptime seconds and memory breakdown.

        Raises:
            RuntimeError: Raised when process statistics are unavailable.
        """

        return {
            "uptimeSeconds": context.context_uptime_seconds(),
            "memory": memory_service.adapter_read_memory_usage().domain_to_payload(),
        }

    return router
