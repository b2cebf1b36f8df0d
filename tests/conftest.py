import time
from typing import Any, Dict, List

import pytest

from services.weather_service import CityNotFoundError, WeatherServiceError


DURBAN = {
    "name": "Durban",
    "sys": {"country": "ZA"},
    "weather": [{"main": "Clear", "description": "clear sky"}],
    "main": {"temp": 22.5},
    "wind": {"speed": 3.1},
    "clouds": {"all": 10},
}


class FakeWeatherClient:
    """Stands in for OpenWeatherClient; answers from a table of cities."""

    def __init__(self, answers: Dict[str, Any] | None = None, delays: Dict[str, float] | None = None):
        self.answers = answers or {}
        self.delays = delays or {}
        self.calls: List[str] = []

    def fetch_current(self, city_name: str) -> Dict[str, Any]:
        self.calls.append(city_name)
        time.sleep(self.delays.get(city_name, 0))
        answer = self.answers.get(city_name)
        if answer is None:
            raise CityNotFoundError()
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def durban_payload():
    return dict(DURBAN)


@pytest.fixture
def fake_client(durban_payload):
    return FakeWeatherClient(
        {
            "Durban": durban_payload,
            "Oslo": {
                "name": "Oslo",
                "sys": {"country": "NO"},
                "weather": [{"main": "Snow", "description": "light snow"}],
                "main": {"temp": -2.5},
                "wind": {"speed": 5.0},
                "clouds": {"all": 90},
            },
            "Offline": WeatherServiceError("Failed to resolve 'api.openweathermap.org'"),
        }
    )
