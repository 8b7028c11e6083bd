from __future__ import annotations

import pytest

from linkportal.shared.config import AppConfig, SecurityConfig


def test_allowed_origins_accept_comma_separated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.example, http://b.example")

    config = SecurityConfig()

    assert config.allowed_origins == ["http://a.example", "http://b.example"]


def test_boolean_flags_parse_strings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COOKIE_SECURE", "yes")
    monkeypatch.setenv("ENABLE_HSTS", "0")

    config = SecurityConfig()

    assert config.cookie_secure is True
    assert config.enable_hsts is False


def test_production_rejects_default_secret() -> None:
    with pytest.raises(SystemExit):
        AppConfig(app_env="production", secret_key="dev")


def test_defaults_trust_local_frontend() -> None:
    config = AppConfig(app_env="test")

    assert config.security.allowed_origins == ["http://localhost:5173"]
    assert config.session.cookie_name == "auth_token"
    assert config.password_hash_method == "scrypt"
