"""Command-line entrypoint for the weather view.

Without `--serve`, looks up one city and prints the result panel to the
terminal. With `--serve`, hosts the page with uvicorn.
"""

from typing import List, Optional
import argparse
import asyncio
import logging
import sys

from config import load_settings
from services.weather_service import OpenWeatherClient
from ui.render import render_text
from ui.weather_view import WeatherView


def _lookup(view: WeatherView, city: str) -> int:
    """Run one lookup and print the panel. Returns the exit status."""
    asyncio.run(view.fetch_weather(city))
    print(render_text(view.state))
    return 1 if view.state.error else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entrypoint for the `weather-view` command."""
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)

    parser = argparse.ArgumentParser(prog="weather-view", description="Current weather for a city.")
    parser.add_argument("city", nargs="?", default=settings.default_city, help="City name to look up")
    parser.add_argument("--serve", action="store_true", help="Serve the weather page instead")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    if args.serve:
        import uvicorn

        from app import create_app

        uvicorn.run(create_app(settings), host=args.host, port=args.port)
        return 0

    if not args.city.strip():
        parser.error("city must not be blank")

    if not settings.api_key:
        logging.getLogger(__name__).warning("OPENWEATHER_API_KEY is not set; the lookup will fail")
    client = OpenWeatherClient(settings.api_key, settings.base_url, timeout=settings.timeout)
    view = WeatherView(client, default_city=settings.default_city)
    view.set_city_query(args.city)
    return _lookup(view, args.city)


if __name__ == "__main__":
    sys.exit(main())
