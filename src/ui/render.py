"""HTML and terminal rendering of a `ViewState`."""

from pathlib import Path
from typing import Any, Dict, Mapping
import math

from jinja2 import Environment, FileSystemLoader, select_autoescape

from services.weather_service import WeatherSnapshot
from ui.icons import map_condition_to_icon
from ui.state import ViewState


TEMPLATES_DIR = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)


def round_half_up(value: float) -> int:
    """Round like JavaScript's Math.round: halves go towards +infinity."""
    return math.floor(value + 0.5)


def format_number(value: Any) -> str:
    """Print a JSON number the way a browser does (3.0 -> "3", 3.1 -> "3.1")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def display_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Derive the results panel fields from a provider payload."""
    snap = WeatherSnapshot.from_payload(payload)
    return {
        "header": f"{snap.city}, {snap.country}",
        "icon": map_condition_to_icon(snap.condition),
        "temperature": f"{round_half_up(snap.temp_c)}°C",
        "wind": f"{format_number(snap.wind_speed)} m/s",
        "description": snap.description,
        "clouds": f"{format_number(snap.clouds_pct)}%",
    }


def render_page(state: ViewState) -> str:
    weather = display_fields(state.snapshot) if state.snapshot is not None else None
    return _env.get_template("weather.html").render(state=state, weather=weather)


def render_text(state: ViewState) -> str:
    lines = []
    if state.loading:
        lines.append("Loading...")
    if state.error:
        lines.append(state.error)
    if state.snapshot is not None:
        w = display_fields(state.snapshot)
        lines.extend(
            [
                w["header"],
                f"{w['icon'].glyph}  {w['temperature']}",
                f"Wind: {w['wind']}",
                f"{w['description']}  Clouds: {w['clouds']}",
            ]
        )
    return "\n".join(lines)
