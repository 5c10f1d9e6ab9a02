"""Tests for the runtime entrypoint build command."""

import json
from pathlib import Path

import pytest

from cicd_demo import main as main_module
from cicd_demo.config import SettingsLoadError


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clear CI variables and run from a temporary directory.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Pytest temporary directory fixture.
    """

    for variable_name in (
        "GITHUB_RUN_NUMBER",
        "GITHUB_SHA",
        "GITHUB_REF_NAME",
        "APP_ENV",
        "HOST",
        "PORT",
        "LOG_LEVEL",
        "VERSION_MANIFEST_PATH",
    ):
        monkeypatch.delenv(variable_name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_main_build_writes_artifact_and_reports_success(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Run the build command against configured directories.

    Args:
        tmp_path: Pytest temporary directory fixture.
        monkeypatch: Pytest monkeypatch fixture.
        capsys: Pytest output capture fixture.

    Returns:
        None: Assertions validate artifact and output.

    Raises:
        AssertionError: Raised when build output is missing.
    """

    source_dir = tmp_path / "source"
    source_dir.mkdir()
    (source_dir / "service.py").write_text("VALUE = 1\n", encoding="utf-8")
    monkeypatch.setenv("BUILD_SOURCE_DIR", str(source_dir))
    monkeypatch.setenv("BUILD_OUTPUT_DIR", str(tmp_path / "dist"))
    monkeypatch.setenv("GITHUB_RUN_NUMBER", "9")

    main_module.main(["build"])

    payload = json.loads((tmp_path / "dist" / "build-info.json").read_text(encoding="utf-8"))
    assert payload["buildNumber"] == "9"
    assert (tmp_path / "dist" / "service.py").exists()
    assert "Build completed successfully!" in capsys.readouterr().out


def test_main_build_exits_non_zero_on_filesystem_failure(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Exit with code 1 and a diagnostic when the source directory is missing."""

    monkeypatch.setenv("BUILD_SOURCE_DIR", str(tmp_path / "missing"))
    monkeypatch.setenv("BUILD_OUTPUT_DIR", str(tmp_path / "dist"))

    with pytest.raises(SystemExit) as exit_info:
        main_module.main(["build"])

    assert exit_info.value.code == 1
    assert "Build failed:" in capsys.readouterr().err


def test_main_api_runs_uvicorn_with_configured_port(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Start the server on the configured host and port."""

    (tmp_path / "pyproject.toml").write_text('[project]\nversion = "3.0.0"\n', encoding="utf-8")
    monkeypatch.setenv("VERSION_MANIFEST_PATH", str(tmp_path / "pyproject.toml"))
    monkeypatch.setenv("PORT", "4100")
    captured: dict[str, object] = {}

    def _fake_run(application, host: str, port: int) -> None:
        captured.update({"application": application, "host": host, "port": port})

    monkeypatch.setattr(main_module.uvicorn, "run", _fake_run)

    main_module.main([])

    assert captured["port"] == 4100
    assert captured["host"] == "0.0.0.0"
    assert captured["application"].version == "3.0.0"


def test_main_build_unknown_log_level_raises_settings_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Report an unknown log level as a settings failure before logging is configured."""

    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(SettingsLoadError, match="unknown log level"):
        main_module.main(["build"])
