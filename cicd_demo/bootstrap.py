"""Application bootstrap wiring for startup validation and dependency assembly."""

import logging
import time

from fastapi import FastAPI

from cicd_demo.adapters import (
    PsutilProcessMemoryService,
    adapter_load_build_info,
    adapter_load_project_version,
    adapter_load_version,
)
from cicd_demo.api import create_api_application
from cicd_demo.config import (
    DEFAULT_VERSION_MANIFEST_PATH,
    DISTRIBUTION_NAME,
    AppSettings,
    config_load_settings,
)
from cicd_demo.domain import ServerContext

logger = logging.getLogger(__name__)


def bootstrap_create_context(settings: AppSettings) -> ServerContext:
    """Capture the read-only server context used by every request.

    Args:
        settings: Validated runtime settings.

    Returns:
        ServerContext: Immutable context with version, build info and start time.

    Raises:
        VersionManifestError: Raised when the version manifest cannot be loaded.
    """

    if settings.version_manifest_path is not None:
        version = adapter_load_version(settings.version_manifest_path)
    else:
        version = adapter_load_project_version(DEFAULT_VERSION_MANIFEST_PATH, DISTRIBUTION_NAME)
    build_info = adapter_load_build_info(settings.build_info_path)
    if build_info is None:
        logger.info("build info not found at %s", settings.build_info_path)
    return ServerContext(
        version=version,
        environment_name=settings.environment_name,
        build_info=build_info,
        started_at_monotonic=time.monotonic(),
        clock=time.monotonic,
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings, loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        VersionManifestError: Raised when the version manifest cannot be loaded.
    """

    resolved_settings = settings if settings is not None else config_load_settings()
    context = bootstrap_create_context(resolved_settings)
    return create_api_application(context=context, memory_service=PsutilProcessMemoryService())
