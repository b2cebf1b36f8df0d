from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Icon:
    """Bundled condition icon."""

    name: str
    alt: str
    glyph: str


ICONS: Dict[str, Icon] = {
    "clear": Icon("clear", "sun", "☀️"),
    "clouds": Icon("clouds", "cloudy", "☁️"),
    "rain": Icon("rain", "rain", "\U0001f327️"),
    "snow": Icon("snow", "snow", "❄️"),
    "wind": Icon("wind", "wind", "\U0001f32c️"),
}

# Generic cloud glyph for any keyword without a bundled icon.
FALLBACK_ICON = Icon("generic", "cloud", "☁")


def map_condition_to_icon(condition: str) -> Icon:
    """
    Pick the icon for a provider condition keyword.

    Parameters
    ----------
    condition : str
        Condition keyword such as "Clear" or "Rain". Matching ignores case.

    Returns
    -------
    Icon
        The bundled icon, or `FALLBACK_ICON` for unknown keywords.
    """
    return ICONS.get((condition or "").lower(), FALLBACK_ICON)
