"""Health endpoint router for liveness and readiness probes."""

from fastapi import APIRouter

from cicd_demo.domain import ServerContext


def api_create_health_router(context: ServerContext) -> APIRouter:
    """Create health-check router reporting environment and version.

    The response never depends on subsystem state, so probes get HTTP 200 for
    as long as the process accepts connections.

    Args:
        context: Read-only server context.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when context is invalid.
    """

    if context is None:
        raise ValueError("context must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> dict[str, str]:
        """Return unconditional liveness payload.

        Returns:
            dict[str, str]: Status marker, environment label and version.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        return {"status": "ok", "env": context.environment_name, "version": context.version}

    return router
