"""Uniform JSON error responses for routing misses and HTTP errors."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

NOT_FOUND_PAYLOAD = {"error": "Not Found"}

_ROUTING_MISS_STATUS_CODES = frozenset({status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED})


def api_register_error_handlers(application: FastAPI) -> None:
    """Install the terminal fallback for unmatched paths and methods.

    Args:
        application: Application receiving the handlers.

    Returns:
        None: Handlers are registered as side effect.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    @application.exception_handler(StarletteHTTPException)
    async def api_http_exception_handler(_request: Request, error: StarletteHTTPException) -> JSONResponse:
        # A known path with the wrong method is still a miss for clients.
        if error.status_code in _ROUTING_MISS_STATUS_CODES:
            return JSONResponse(content=dict(NOT_FOUND_PAYLOAD), status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(
            content={"error": str(error.detail)},
            status_code=error.status_code,
            headers=error.headers,
        )
