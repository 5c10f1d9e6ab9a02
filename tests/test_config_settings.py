"""Tests for runtime and build settings loading."""

from pathlib import Path

import pytest

from cicd_demo.config import (
    AppSettings,
    BuildStampSettings,
    SettingsLoadError,
    config_load_build_stamp_settings,
    config_load_settings,
)

_PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clear settings variables and run outside any dotenv file.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Pytest temporary directory fixture.
    """

    for variable_name in (
        "PORT",
        "APPLICATION_PORT",
        "HOST",
        "APP_ENV",
        "ENVIRONMENT_NAME",
        "LOG_LEVEL",
        "GITHUB_RUN_NUMBER",
        "GITHUB_SHA",
        "GITHUB_REF_NAME",
        "BUILD_SOURCE_DIR",
        "BUILD_OUTPUT_DIR",
        "VERSION_MANIFEST_PATH",
        "BUILD_INFO_PATH",
    ):
        monkeypatch.delenv(variable_name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_config_settings_defaults() -> None:
    """Apply documented defaults when no variables are set.

    Returns:
        None: Assertions validate defaults.

    Raises:
        AssertionError: Raised when defaults differ.
    """

    settings = config_load_settings()

    assert settings.application_port == 3000
    assert settings.environment_name == "development"
    assert settings.application_host == "0.0.0.0"
    assert settings.build_info_path == str(_PROJECT_ROOT / "dist" / "build-info.json")
    assert settings.version_manifest_path is None


def test_config_settings_reads_port_and_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read `PORT` and `APP_ENV` from the environment."""

    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("APP_ENV", "production")

    settings = config_load_settings()

    assert settings.application_port == 8080
    assert settings.environment_name == "production"


@pytest.mark.parametrize("port_value", ["", "abc", "0", "70000", "-1"])
def test_config_settings_invalid_port_falls_back_to_default(
    monkeypatch: pytest.MonkeyPatch,
    port_value: str,
) -> None:
    """Fall back to port 3000 for unusable port values.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        port_value: Raw `PORT` value under test.

    Returns:
        None: Assertions validate fallback.

    Raises:
        AssertionError: Raised when fallback is not applied.
    """

    monkeypatch.setenv("PORT", port_value)

    assert config_load_settings().application_port == 3000


def test_config_settings_direct_construction_by_field_name() -> None:
    """Allow explicit construction for tests and embedding."""

    settings = AppSettings(environment_name="test", application_port=9000, log_level=" debug ")

    assert settings.environment_name == "test"
    assert settings.application_port == 9000
    assert settings.log_level == "DEBUG"


def test_config_settings_invalid_manifest_path_raises_load_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Wrap validation failures in the project settings error."""

    monkeypatch.setenv("VERSION_MANIFEST_PATH", "")

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_build_stamp_settings_reads_ci_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read CI identity from GitHub Actions variables."""

    monkeypatch.setenv("GITHUB_RUN_NUMBER", "55")
    monkeypatch.setenv("GITHUB_SHA", "feedface")
    monkeypatch.setenv("GITHUB_REF_NAME", "release")
    monkeypatch.setenv("APP_ENV", "staging")

    settings = config_load_build_stamp_settings()

    assert (settings.build_number, settings.git_commit, settings.git_branch, settings.environment_name) == (
        "55",
        "feedface",
        "release",
        "staging",
    )


def test_config_build_stamp_settings_fallback_literals() -> None:
    """Use documented fallback literals when CI variables are absent."""

    settings = BuildStampSettings()

    assert (settings.build_number, settings.git_commit, settings.git_branch, settings.environment_name) == (
        "local",
        "unknown",
        "local",
        "development",
    )
    assert settings.source_dir == str(_PROJECT_ROOT / "cicd_demo")
    assert settings.output_dir == str(_PROJECT_ROOT / "dist")
    assert settings.source_extension == ".py"


@pytest.mark.parametrize("loader", [config_load_settings, config_load_build_stamp_settings])
def test_config_settings_unknown_log_level_raises_load_error(monkeypatch: pytest.MonkeyPatch, loader) -> None:
    """Reject unknown log level names during settings validation.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        loader: Settings loader under test.

    Returns:
        None: Assertions validate raised error.

    Raises:
        AssertionError: Raised when the level name is accepted.
    """

    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(SettingsLoadError, match="unknown log level"):
        loader()


def test_config_settings_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    """Accept standard level names in any case."""

    monkeypatch.setenv("LOG_LEVEL", " warning ")

    assert config_load_settings().log_level == "WARNING"
