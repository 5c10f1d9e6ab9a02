"""API layer package for FastAPI application and route composition."""

from .application import WELCOME_MESSAGE, create_api_application

__all__ = ["WELCOME_MESSAGE", "create_api_application"]
