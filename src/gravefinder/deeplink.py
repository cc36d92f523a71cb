"""Decoding of deep-link query strings into initial view state.

Links such as `?view=tours&tour=civil%20war` open the map with a view toggled
and a tour preselected. Only `section`, `view`, `q` and `tour` are read;
unknown parameters are ignored so older clients tolerate newer links.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional
from urllib.parse import parse_qsl

VIEW_BURIALS = "burials"
VIEW_TOURS = "tours"
KNOWN_VIEWS = (VIEW_BURIALS, VIEW_TOURS)


@dataclass(frozen=True, slots=True)
class DeepLinkState:
    section: str = ""
    query: str = ""
    view: str = ""
    raw_tour: str = ""
    selected_tour_name: Optional[str] = None
    show_burials_view: bool = False
    show_tours_view: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _first_values(raw_query_string: Optional[str]) -> Dict[str, str]:
    text = "" if raw_query_string is None else str(raw_query_string)
    if text.startswith("?"):
        text = text[1:]
    params: Dict[str, str] = {}
    for name, value in parse_qsl(text, keep_blank_values=True):
        # Like URLSearchParams.get(): the first occurrence wins
        params.setdefault(name, value)
    return params


def parse_deep_link_state(
    raw_query_string: Optional[str] = "", tour_names: Iterable[str] = ()
) -> DeepLinkState:
    """Parse a URL query string into a `DeepLinkState`.

    Parameters
    ----------
    raw_query_string:
        Query string with or without the leading "?". None counts as empty.
    tour_names:
        Known tour display names in priority order. The first name containing
        the `tour` parameter (case-insensitive) is selected.
    """
    params = _first_values(raw_query_string)

    view = params.get("view", "").strip().lower()
    if view not in KNOWN_VIEWS:
        view = ""

    raw_tour = params.get("tour", "").strip().lower()
    selected_tour_name: Optional[str] = None
    if raw_tour:
        selected_tour_name = next(
            (name for name in tour_names if raw_tour in str(name).lower()), None
        )

    return DeepLinkState(
        section=params.get("section", "").strip(),
        query=params.get("q", "").strip(),
        view=view,
        raw_tour=raw_tour,
        selected_tour_name=selected_tour_name,
        show_burials_view=view == VIEW_BURIALS,
        show_tours_view=view == VIEW_TOURS,
    )
