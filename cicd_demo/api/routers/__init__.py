"""API router package for endpoint composition."""

from .build_info import api_create_build_info_router
from .health import api_create_health_router
from .performance import api_create_performance_router
from .sample import api_create_sample_router

__all__ = [
    "api_create_build_info_router",
    "api_create_health_router",
    "api_create_performance_router",
    "api_create_sample_router",
]
