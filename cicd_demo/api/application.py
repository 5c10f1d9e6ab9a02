"""FastAPI application factory for the status service.

This module composes the welcome route, status routers and the uniform 404
fallback around one read-only server context.
"""

from fastapi import FastAPI

from cicd_demo.adapters import ProcessMemoryPort
from cicd_demo.domain import ServerContext

from .errors import api_register_error_handlers
from .routers import (
    api_create_build_info_router,
    api_create_health_router,
    api_create_performance_router,
    api_create_sample_router,
)

WELCOME_MESSAGE = "Welcome to Simple CI/CD Demo!"


def create_api_application(context: ServerContext, memory_service: ProcessMemoryPort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        context: Read-only context captured at startup.
        memory_service: Process memory reader used by `/performance`.

    Returns:
        FastAPI: Framework application instance with all routes registered.

    Raises:
        ValueError: Raised when a dependency is missing.
    """

    if context is None:
        raise ValueError("context must not be None")

    # Slashed variants of known paths fall through to the 404 fallback.
    application = FastAPI(title="CI/CD Demo", version=context.version, redirect_slashes=False)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return the welcome message with the running version.

        Returns:
            dict[str, str]: Fixed welcome message and loaded version.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        return {"message": WELCOME_MESSAGE, "version": context.version}

    application.include_router(api_create_health_router(context=context))
    application.include_router(api_create_build_info_router(context=context))
    application.include_router(api_create_performance_router(context=context, memory_service=memory_service))
    application.include_router(api_create_sample_router())
    api_register_error_handlers(application)

    return application
