"""State record of the weather view and the transitions applied to it.

Each transition returns a new `ViewState`; nothing here performs I/O.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ViewState:
    """
    Everything the page renders from.

    Attributes
    ----------
    city_query : str
        Editable search text.
    loading : bool
        True while a fetch is in flight.
    error : str | None
        Message of the last failed attempt.
    snapshot : Dict[str, Any] | None
        Parsed body of the last successful lookup.
    """

    city_query: str = ""
    loading: bool = False
    error: Optional[str] = None
    snapshot: Optional[Dict[str, Any]] = None


def edit_query(state: ViewState, text: str) -> ViewState:
    return replace(state, city_query=text)


def begin_fetch(state: ViewState) -> ViewState:
    # No stale error is visible while loading.
    return replace(state, loading=True, error=None)


def fetch_resolved(state: ViewState, payload: Dict[str, Any]) -> ViewState:
    return replace(state, snapshot=payload, error=None)


def fetch_rejected(state: ViewState, message: str) -> ViewState:
    return replace(state, snapshot=None, error=message)


def fetch_settled(state: ViewState) -> ViewState:
    return replace(state, loading=False)
