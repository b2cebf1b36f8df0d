from unittest.mock import patch

import pytest

import cli
from config import DEFAULT_BASE_URL, Settings, load_settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in [
        "OPENWEATHER_API_KEY",
        "VITE_API_KEY",
        "OPENWEATHER_BASE_URL",
        "WEATHER_DEFAULT_CITY",
        "WEATHER_TIMEOUT",
        "LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)
    with patch("config.load_dotenv"):
        yield monkeypatch


def test_defaults(clean_env):
    assert load_settings() == Settings(api_key="", base_url=DEFAULT_BASE_URL, default_city="Durban")


def test_environment_overrides(clean_env):
    clean_env.setenv("OPENWEATHER_API_KEY", "k1")
    clean_env.setenv("OPENWEATHER_BASE_URL", "http://localhost:9000/")
    clean_env.setenv("WEATHER_DEFAULT_CITY", "Oslo")
    clean_env.setenv("WEATHER_TIMEOUT", "2.5")
    clean_env.setenv("LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.api_key == "k1"
    assert settings.base_url == "http://localhost:9000"
    assert settings.default_city == "Oslo"
    assert settings.timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_vite_key_is_accepted_and_empty_values_are_unset(clean_env):
    clean_env.setenv("OPENWEATHER_API_KEY", "")
    clean_env.setenv("VITE_API_KEY", "k2")
    clean_env.setenv("WEATHER_DEFAULT_CITY", "")
    settings = load_settings()
    assert settings.api_key == "k2"
    assert settings.default_city == "Durban"


def test_cli_prints_panel(clean_env, fake_client, capsys):
    with patch("cli.OpenWeatherClient", return_value=fake_client):
        status = cli.main(["Durban"])

    out = capsys.readouterr().out
    assert status == 0
    assert "Durban, ZA" in out
    assert "23°C" in out
    assert fake_client.calls == ["Durban"]


def test_cli_reports_failure(clean_env, fake_client, capsys):
    with patch("cli.OpenWeatherClient", return_value=fake_client):
        status = cli.main(["Atlantis"])

    assert status == 1
    assert "City not found" in capsys.readouterr().out


def test_cli_rejects_blank_city(clean_env):
    with pytest.raises(SystemExit):
        cli.main(["  "])
