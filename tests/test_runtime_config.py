from __future__ import annotations

import pytest

from equacaopro.runtime_config import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    RuntimeSettings,
    load_runtime_settings,
)


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings = load_runtime_settings()

    assert settings.credential() is None
    assert settings.model == DEFAULT_MODEL
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.log_level == "INFO"


@pytest.mark.parametrize(
    "variable", ["EQUACAOPRO_API_KEY", "API_KEY", "GEMINI_API_KEY", "OPENAI_API_KEY"]
)
def test_credential_aliases(monkeypatch: pytest.MonkeyPatch, variable: str) -> None:
    monkeypatch.setenv(variable, "  secret-token  ")
    assert load_runtime_settings().credential() == "secret-token"


def test_project_variable_wins_over_generic(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EQUACAOPRO_API_KEY", "project")
    monkeypatch.setenv("OPENAI_API_KEY", "generic")
    assert load_runtime_settings().credential() == "project"


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_credential_counts_as_missing(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("API_KEY", value)
    settings = load_runtime_settings()
    assert settings.api_key is None
    assert settings.credential() is None


def test_model_and_endpoint_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EQUACAOPRO_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("EQUACAOPRO_BASE_URL", "https://api.example.test/v1")
    settings = load_runtime_settings()
    assert settings.model == "gpt-4o-mini"
    assert settings.base_url == "https://api.example.test/v1"


def test_blank_overrides_fall_back() -> None:
    settings = RuntimeSettings(model=" ", base_url="")
    assert settings.model == DEFAULT_MODEL
    assert settings.base_url is None


def test_secret_is_not_leaked_in_repr() -> None:
    settings = RuntimeSettings(api_key="super-secret")
    assert "super-secret" not in repr(settings)
    assert settings.credential() == "super-secret"


def test_env_file_is_read(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("EQUACAOPRO_API_KEY=from-file\nLOG_LEVEL=DEBUG\n", encoding="utf-8")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = RuntimeSettings(_env_file=str(env_file))

    assert settings.credential() == "from-file"
    assert settings.log_level == "DEBUG"
