"""Tests for shared configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from packages.authgate_shared.config import AuthgateSettings, load_settings


def test_load_settings_uses_authgate_precedence_cascade(tmp_path: Path) -> None:
    """CLI params should override env, env should override YAML, then defaults."""
    config_file = tmp_path / "authgate.yaml"
    config_file.write_text(
        "\n".join(
            [
                "logging:",
                "  level: WARNING",
                "http:",
                "  port: 8100",
                "  status_overrides:",
                "    not_found: 404",
                "    too_young: 400",
            ]
        ),
        encoding="utf-8",
    )

    settings = load_settings(
        cli_params={"logging": {"level": "DEBUG"}},
        environ={
            "AUTHGATE_LOGGING__LEVEL": "ERROR",
            "AUTHGATE_HTTP__STATUS_OVERRIDES__TOO_YOUNG": "422",
            "AUTHGATE_ERRORS__STRICT_CODES": "true",
            "UNRELATED": "ignored",
        },
        config_path=config_file,
    )

    assert settings.logging.level == "DEBUG"
    assert settings.http.port == 8100
    assert settings.http.status_overrides == {"not_found": 404, "too_young": 422}
    assert settings.errors.strict_codes is True


def test_load_settings_uses_model_defaults_when_sources_missing(tmp_path: Path) -> None:
    """Settings should fall back to model defaults when env and YAML are absent."""
    settings = load_settings(config_path=tmp_path / "authgate.yaml", environ={})

    assert settings.logging.service == "authgate"
    assert settings.logging.level == "INFO"
    assert settings.http.status_overrides == {}
    assert settings.errors.strict_codes is False


def test_load_settings_rejects_non_mapping_yaml(tmp_path: Path) -> None:
    """A YAML file must contain a top-level mapping."""
    config_file = tmp_path / "authgate.yaml"
    config_file.write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        load_settings(config_path=config_file, environ={})


def test_load_settings_validates_status_override_types(tmp_path: Path) -> None:
    """Non-integer statuses should fail settings validation."""
    with pytest.raises(ValidationError):
        load_settings(
            config_path=tmp_path / "authgate.yaml",
            environ={"AUTHGATE_HTTP__STATUS_OVERRIDES__TOO_YOUNG": "unprocessable"},
        )


def test_settings_model_reads_no_sources_on_its_own(monkeypatch: pytest.MonkeyPatch) -> None:
    """Only load_settings applies env vars; the model itself is plain data."""
    monkeypatch.setenv("AUTHGATE_HTTP__PORT", "9100")

    assert AuthgateSettings().http.port == 8000


def test_load_settings_reads_process_environment_by_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Without an explicit environ, the process environment is used."""
    monkeypatch.setenv("AUTHGATE_HTTP__PORT", "9100")
    monkeypatch.setenv("AUTHGATE_HTTP__STATUS_OVERRIDES__NOT_FOUND", "410")

    settings = load_settings(config_path=tmp_path / "authgate.yaml")

    assert settings.http.port == 9100
    assert settings.http.status_overrides == {"not_found": 410}


def test_load_settings_explicit_environ_ignores_process_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """An explicit environ mapping replaces the process environment."""
    monkeypatch.setenv("AUTHGATE_HTTP__PORT", "9100")

    settings = load_settings(config_path=tmp_path / "authgate.yaml", environ={})

    assert settings.http.port == 8000
