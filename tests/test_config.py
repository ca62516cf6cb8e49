import pytest
from pydantic import ValidationError

from inkrypt.config import DEFAULT_LOG_FORMAT, Settings, load_settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("INKRYPT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("INKRYPT_LOG_FORMAT", raising=False)

    settings = load_settings()

    assert settings.log_level == "WARNING"
    assert settings.log_format == DEFAULT_LOG_FORMAT


def test_environment_override(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("INKRYPT_LOG_LEVEL", "debug")

    assert load_settings().log_level == "DEBUG"


def test_rejects_unknown_level():
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")
