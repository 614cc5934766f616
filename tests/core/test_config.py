import pytest
from pydantic import ValidationError

from core.config import DEFAULT_API_URL, AppSettings, SymbolsMode, get_user_config_dir


def test_defaults():
    settings = AppSettings()
    assert settings.api_url == DEFAULT_API_URL
    assert settings.proxy is None
    assert settings.http_timeout_seconds == 20.0
    assert settings.symbols_mode is SymbolsMode.TARGET


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FIATCONV_API_URL", "https://rates.example.com/v1")
    monkeypatch.setenv("FIATCONV_PROXY", "http://proxy.local:3128")
    monkeypatch.setenv("FIATCONV_SYMBOLS_MODE", "pair")
    settings = AppSettings()
    assert settings.api_url == "https://rates.example.com/v1"
    assert settings.proxy == "http://proxy.local:3128"
    assert settings.symbols_mode is SymbolsMode.PAIR


def test_env_file_in_cwd_is_read(tmp_path):
    (tmp_path / ".env").write_text("FIATCONV_HTTP_TIMEOUT_SECONDS=3.5\n", encoding="utf-8")
    assert AppSettings().http_timeout_seconds == 3.5


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        AppSettings(http_timeout_seconds=0)


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    if get_user_config_dir().parent != tmp_path / "config":
        pytest.skip("XDG_CONFIG_HOME only applies on Linux")
    assert get_user_config_dir() == tmp_path / "config" / "fiatconv"
