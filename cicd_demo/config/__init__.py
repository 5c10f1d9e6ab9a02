"""Configuration package for runtime settings and startup validation."""

from .settings import (
    DEFAULT_VERSION_MANIFEST_PATH,
    DISTRIBUTION_NAME,
    AppSettings,
    BuildStampSettings,
    SettingsLoadError,
    config_load_build_stamp_settings,
    config_load_settings,
    config_normalize_log_level,
)

__all__ = [
    "DEFAULT_VERSION_MANIFEST_PATH",
    "DISTRIBUTION_NAME",
    "AppSettings",
    "BuildStampSettings",
    "SettingsLoadError",
    "config_load_settings",
    "config_load_build_stamp_settings",
    "config_normalize_log_level",
]
