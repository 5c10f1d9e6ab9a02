"""Sample API router used to demonstrate pipeline deployments."""

from fastapi import APIRouter

HELLO_GREETING = "Hello from CI/CD Pipeline!"


def api_create_sample_router() -> APIRouter:
    """Create router exposing the parameterless `/api/hello` endpoint.

    Returns:
        APIRouter: Router with the sample endpoint.

    Raises:
        RuntimeError: This factory does not raise runtime errors.
    """

    router = APIRouter(prefix="/api", tags=["sample"])

    @router.get("/hello")
    def api_hello() -> dict[str, object]:
        """Return the fixed sample greeting.

        Returns:
            dict[str, object]: Greeting text and success flag.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        return {"greeting": HELLO_GREETING, "success": True}

    return router
