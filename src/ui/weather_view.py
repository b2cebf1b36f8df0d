"""The weather view component.

Owns the city query, the loading flag, the error slot and the last payload,
and turns edit/submit events into provider lookups.
"""

from typing import Any, Optional, Protocol, Set
import asyncio
import logging

from starlette.concurrency import run_in_threadpool

from services.weather_service import WeatherServiceError
from ui.state import (
    ViewState,
    begin_fetch,
    edit_query,
    fetch_rejected,
    fetch_resolved,
    fetch_settled,
)


logger = logging.getLogger(__name__)


class WeatherProvider(Protocol):
    def fetch_current(self, city_name: str) -> Any: ...


class WeatherView:
    """Single-page weather lookup component."""

    def __init__(self, client: WeatherProvider, default_city: str = "Durban"):
        """Initialize the view.

        Parameters
        ----------
        client : WeatherProvider
            Provider client exposing a blocking `fetch_current(city_name)`
        default_city : str
            City prefilled in the query and fetched on mount
        """
        self.client = client
        self.default_city = default_city
        self._state = ViewState(city_query=default_city)
        self._tasks: Set[asyncio.Task] = set()
        self.mounted = False

    @property
    def state(self) -> ViewState:
        return self._state

    def set_city_query(self, text: str) -> None:
        self._state = edit_query(self._state, text)

    def submit_search(self) -> Optional[asyncio.Task]:
        """Start a lookup for the current query.

        Returns the scheduled task, or None when the query is blank. Must be
        called from a running event loop.
        """
        return self._start(self._state.city_query)

    async def fetch_weather(self, city_name: str) -> None:
        """Look up `city_name` and record the outcome in the state."""
        if not city_name.strip():
            return
        self._state = begin_fetch(self._state)
        await self._settle_fetch(city_name)

    def mount(self) -> Optional[asyncio.Task]:
        """Fetch the default city. Only the first call does anything."""
        if self.mounted:
            return None
        self.mounted = True
        return self._start(self.default_city)

    async def settle(self) -> None:
        """Wait for every outstanding lookup to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _start(self, city_name: str) -> Optional[asyncio.Task]:
        if not city_name.strip():
            return None
        self._state = begin_fetch(self._state)
        return self._spawn(self._settle_fetch(city_name))

    def _spawn(self, coro) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _settle_fetch(self, city_name: str) -> None:
        # Overlapping lookups are not sequenced: whichever settles last wins.
        logger.info("Fetching weather for %r", city_name)
        try:
            payload = await run_in_threadpool(self.client.fetch_current, city_name)
        except WeatherServiceError as e:
            logger.warning("Weather lookup for %r failed: %s", city_name, e)
            self._state = fetch_rejected(self._state, str(e))
        except Exception as e:
            logger.exception("Unexpected failure looking up %r", city_name)
            self._state = fetch_rejected(self._state, str(e))
        else:
            self._state = fetch_resolved(self._state, payload)
        finally:
            self._state = fetch_settled(self._state)
