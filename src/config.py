"""Runtime configuration for the weather view.

Values come from the process environment, after loading a local `.env` file
when one is present.
"""

from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv


DEFAULT_BASE_URL = "https://api.openweathermap.org"
DEFAULT_CITY = "Durban"


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Helper to read environment variables with a default value."""
    val = os.getenv(name)
    return val if val is not None and val != "" else default


@dataclass(frozen=True)
class Settings:
    """
    Settings shared by the app factory and the CLI.

    Attributes
    ----------
    api_key : str
        OpenWeatherMap API key. Empty when not configured.
    base_url : str
        Provider host, without the `/data/2.5/weather` path.
    default_city : str
        City looked up automatically when the view mounts.
    timeout : float | None
        Request timeout in seconds. None leaves it to the transport.
    log_level : str
        Name of the root log level used by the CLI.
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    default_city: str = DEFAULT_CITY
    timeout: float | None = None
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build `Settings` from `.env` and the environment."""
    load_dotenv()
    timeout = _get_env("WEATHER_TIMEOUT")
    return Settings(
        api_key=_get_env("OPENWEATHER_API_KEY") or _get_env("VITE_API_KEY", "") or "",
        base_url=(_get_env("OPENWEATHER_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL).rstrip("/"),
        default_city=_get_env("WEATHER_DEFAULT_CITY", DEFAULT_CITY) or DEFAULT_CITY,
        timeout=float(timeout) if timeout else None,
        log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
