from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
import logging

import requests


logger = logging.getLogger(__name__)

CITY_NOT_FOUND = "City not found"


class WeatherServiceError(Exception):
    """A lookup failed before a usable payload was received."""


class CityNotFoundError(WeatherServiceError):
    """The provider answered with a non-success status."""

    def __init__(self, message: str = CITY_NOT_FOUND):
        super().__init__(message)


@dataclass
class WeatherSnapshot:
    """
    Display projection of a current-conditions payload.

    Attributes
    ----------
    city : str
        City display name reported by the provider.
    country : str
        Country code.
    condition : str
        Primary condition keyword, e.g. "Clear" or "Rain".
    description : str
        Human-readable description.
    temp_c : float
        Temperature in Celsius degrees.
    wind_speed : float
        Wind speed in metres per second.
    clouds_pct : float
        Cloud cover percentage.
    """

    city: str
    country: str
    condition: str
    description: str
    temp_c: float
    wind_speed: float
    clouds_pct: float

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "WeatherSnapshot":
        """
        Pick the displayed fields out of a provider payload.

        Raises `KeyError`, `IndexError` or `TypeError` when the payload does
        not have the expected shape.
        """
        conditions = payload["weather"][0]
        return cls(
            city=payload["name"],
            country=payload["sys"]["country"],
            condition=conditions["main"],
            description=conditions["description"],
            temp_c=payload["main"]["temp"],
            wind_speed=payload["wind"]["speed"],
            clouds_pct=payload["clouds"]["all"],
        )


class OpenWeatherClient:
    """Blocking client for the OpenWeatherMap current weather endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openweathermap.org",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the weather client.

        Parameters
        ----------
        api_key : str
            Provider credential sent as `appid`.
        base_url : str
            Provider host (e.g., https://api.openweathermap.org)
        timeout : Optional[float]
            Seconds before giving up. None keeps the transport default.
        session : Optional[requests.Session]
            Session to send requests through, if any
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/data/2.5/weather"

    def fetch_current(self, city_name: str) -> Dict[str, Any]:
        """
        Fetch current conditions for a city in metric units.

        Parameters
        ----------
        city_name : str
            City name, sent as given.

        Returns
        -------
        Dict[str, Any]
            Parsed JSON body of the provider response.

        Raises
        ------
        CityNotFoundError
            The provider answered with a non-success status.
        WeatherServiceError
            The request could not be sent, failed before a response arrived,
            or the body was not JSON.
        """
        params = {"q": city_name, "appid": self.api_key, "units": "metric"}
        try:
            r = self.session.get(self.endpoint, params=params, timeout=self.timeout)
        except (requests.RequestException, ValueError) as e:
            raise WeatherServiceError(str(e)) from e

        if not r.ok:
            logger.info("Provider answered %s for %r", r.status_code, city_name)
            raise CityNotFoundError()

        try:
            return r.json()
        except ValueError as e:
            raise WeatherServiceError(str(e)) from e
