"""Tests for Settings defaults and validation."""

import pytest
from pydantic import ValidationError

from taskboard.core.config import Settings


def test_environment_defaults_to_production(monkeypatch: pytest.MonkeyPatch) -> None:
    """Diagnostic 500 detail must be opted into; the default hides it."""
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.environment == "production"
    assert settings.is_production is True


def test_development_is_explicit_opt_in(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    assert Settings(_env_file=None).is_production is False


def test_missing_secret_key_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SECRET_KEY", raising=False)
    with pytest.raises(ValidationError, match="SECRET_KEY is required"):
        Settings(_env_file=None)


def test_unknown_environment_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")
    with pytest.raises(ValidationError, match="environment must be one of"):
        Settings(_env_file=None)
