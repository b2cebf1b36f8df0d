import logging
from contextlib import asynccontextmanager
from typing import Any, Dict

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from config import Settings, load_settings
from services.weather_service import OpenWeatherClient
from ui.render import render_page
from ui.weather_view import WeatherProvider, WeatherView


logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    client: WeatherProvider | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application hosting the weather page.

    Parameters
    ----------
    settings : Settings | None, optional
        Runtime settings. If omitted, read from `.env` and the environment.
    client : WeatherProvider | None, optional
        Weather provider client. If omitted, an `OpenWeatherClient` is built
        from the settings.

    Returns
    -------
    FastAPI
        Configured app serving the page at `/`, searches at `/search`, the raw
        view state at `/api/state` and a health endpoint.
    """
    load_dotenv()
    settings = settings or load_settings()
    if client is None:
        if not settings.api_key:
            logger.warning("OPENWEATHER_API_KEY is not set; every lookup will fail")
        client = OpenWeatherClient(settings.api_key, settings.base_url, timeout=settings.timeout)

    view = WeatherView(client, default_city=settings.default_city)

    @asynccontextmanager
    async def _lifespan(_app: FastAPI):  # noqa: D401
        view.mount()
        yield
        await view.settle()

    app = FastAPI(lifespan=_lifespan)
    app.state.view = view

    @app.get("/", response_class=HTMLResponse)
    async def index():
        """Render the page for the current view state."""
        return HTMLResponse(render_page(view.state))

    @app.get("/search")
    async def search(city: str = ""):
        """Apply the submitted query, start a lookup and go back to the page."""
        view.set_city_query(city)
        view.submit_search()
        return RedirectResponse("/", status_code=303)

    @app.get("/api/state")
    async def state() -> Dict[str, Any]:
        current = view.state
        return {
            "city_query": current.city_query,
            "loading": current.loading,
            "error": current.error,
            "snapshot": current.snapshot,
        }

    @app.get("/health")
    async def health():
        """Simple health endpoint indicating the service is running."""
        return PlainTextResponse("weather-view is running")

    return app
