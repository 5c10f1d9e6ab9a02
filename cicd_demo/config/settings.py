"""Typed runtime settings with dotenv support and startup validation."""

import logging
from pathlib import Path

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_APPLICATION_PORT = 3000
DEFAULT_ENVIRONMENT_NAME = "development"
DISTRIBUTION_NAME = "cicd-demo"

# Defaults resolve against the source checkout, not the working directory.
PACKAGE_ROOT = Path(__file__).resolve().parents[1]
PROJECT_ROOT = PACKAGE_ROOT.parent
DEFAULT_VERSION_MANIFEST_PATH = PROJECT_ROOT / "pyproject.toml"
DEFAULT_BUILD_OUTPUT_DIR = PROJECT_ROOT / "dist"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


def config_normalize_log_level(value: str) -> str:
    """Normalize a logging level name and reject unknown names.

    Args:
        value: Raw level name such as `info` or ` DEBUG `.

    Returns:
        str: Upper-case level name, `INFO` when blank.

    Raises:
        ValueError: Raised when the name is not a standard logging level.
    """

    level_name = value.strip().upper() or "INFO"
    if level_name not in logging.getLevelNamesMapping():
        raise ValueError(f"unknown log level: {value!r}")
    return level_name


class AppSettings(BaseSettings):
    """Application settings for the status server runtime.

    Environment variable names map to field names in uppercase unless an
    alias is declared. Example: `build_info_path` reads from `BUILD_INFO_PATH`
    and `application_port` reads from `PORT`.

    Attributes:
        environment_name: Runtime environment label reported by `/health`.
        application_host: Host interface for web server binding.
        application_port: Web server port, falls back to 3000 when unusable.
        log_level: Root logging level name.
        version_manifest_path: Explicit manifest holding the service version. When
            unset, the project manifest is used, falling back to installed
            distribution metadata.
        build_info_path: Path to the optional build metadata artifact, by default
            `dist/build-info.json` under the project root.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    environment_name: str = Field(
        default=DEFAULT_ENVIRONMENT_NAME,
        validation_alias=AliasChoices("APP_ENV", "ENVIRONMENT_NAME"),
    )
    application_host: str = Field(default="0.0.0.0", validation_alias=AliasChoices("HOST", "APPLICATION_HOST"))
    application_port: int = Field(
        default=DEFAULT_APPLICATION_PORT,
        validation_alias=AliasChoices("PORT", "APPLICATION_PORT"),
    )
    log_level: str = Field(default="INFO")
    version_manifest_path: str | None = Field(default=None, min_length=1)
    build_info_path: str = Field(default=str(DEFAULT_BUILD_OUTPUT_DIR / "build-info.json"), min_length=1)

    @field_validator("environment_name", mode="before")
    @classmethod
    def _validate_environment_name(cls, value: object) -> object:
        if value is None or not str(value).strip():
            return DEFAULT_ENVIRONMENT_NAME
        return str(value).strip()

    @field_validator("application_port", mode="before")
    @classmethod
    def _validate_application_port(cls, value: object) -> int:
        try:
            port = int(str(value).strip())
        except (TypeError, ValueError):
            return DEFAULT_APPLICATION_PORT
        if not 1 <= port <= 65535:
            return DEFAULT_APPLICATION_PORT
        return port

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        return config_normalize_log_level(value)


class BuildStampSettings(BaseSettings):
    """Settings model used by the build stamping command.

    This model reads only CI-provided build identity and artifact paths so the
    build step can run without the server runtime settings. Blank CI values
    fall back to the documented literals.

    Attributes:
        build_number: CI run number, `GITHUB_RUN_NUMBER`.
        git_commit: Commit SHA, `GITHUB_SHA`.
        git_branch: Branch or tag name, `GITHUB_REF_NAME`.
        environment_name: Target environment, `APP_ENV`.
        log_level: Root logging level name.
        source_dir: Directory whose source scripts are copied, the package by default.
        output_dir: Artifact directory receiving scripts and `build-info.json`,
            `dist` under the project root by default.
        source_extension: File name suffix selecting source scripts.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    build_number: str = Field(default="local", validation_alias=AliasChoices("GITHUB_RUN_NUMBER", "BUILD_NUMBER"))
    git_commit: str = Field(default="unknown", validation_alias=AliasChoices("GITHUB_SHA", "GIT_COMMIT"))
    git_branch: str = Field(default="local", validation_alias=AliasChoices("GITHUB_REF_NAME", "GIT_BRANCH"))
    environment_name: str = Field(
        default=DEFAULT_ENVIRONMENT_NAME,
        validation_alias=AliasChoices("APP_ENV", "ENVIRONMENT_NAME"),
    )
    log_level: str = Field(default="INFO")
    source_dir: str = Field(default=str(PACKAGE_ROOT), validation_alias=AliasChoices("BUILD_SOURCE_DIR", "SOURCE_DIR"))
    output_dir: str = Field(
        default=str(DEFAULT_BUILD_OUTPUT_DIR),
        validation_alias=AliasChoices("BUILD_OUTPUT_DIR", "OUTPUT_DIR"),
    )
    source_extension: str = Field(default=".py", min_length=1)

    @field_validator("build_number", "git_commit", "git_branch", "environment_name", mode="before")
    @classmethod
    def _fallback_blank_identity(cls, value: object, info) -> object:
        if value is None or not str(value).strip():
            return cls.model_fields[info.field_name].default
        return str(value).strip()

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        return config_normalize_log_level(value)


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_load_build_stamp_settings() -> BuildStampSettings:
    """Load build stamping settings from CI environment and dotenv.

    Returns:
        BuildStampSettings: Build identity with fallback literals applied.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return BuildStampSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Build configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
