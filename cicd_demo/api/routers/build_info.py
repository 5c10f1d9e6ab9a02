"""Build metadata endpoint router."""

from typing import Any

from fastapi import APIRouter

from cicd_demo.domain import ServerContext

BUILD_INFO_UNAVAILABLE_PAYLOAD = {"available": False, "message": "build-info not found"}


def api_create_build_info_router(context: ServerContext) -> APIRouter:
    """Create router exposing the build artifact loaded at startup.

    Args:
        context: Read-only server context.

    Returns:
        APIRouter: Router exposing `/build-info` endpoint.

    Raises:
        ValueError: Raised when context is invalid.
    """

    if context is None:
        raise ValueError("context must not be None")

    router = APIRouter(tags=["build"])

    @router.get("/build-info")
    def api_build_info() -> dict[str, Any]:
        """Return build metadata verbatim, or the documented absence payload.

        Returns:
            dict[str, Any]: Artifact JSON object or unavailable marker.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        if context.build_info is None:
            return dict(BUILD_INFO_UNAVAILABLE_PAYLOAD)
        return dict(context.build_info)

    return router
