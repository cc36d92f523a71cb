"""Tour catalog and deep-link tools for FastMCP."""
from __future__ import annotations

from typing import Any, Callable, Dict

from fastmcp import FastMCP

from gravefinder.deeplink import parse_deep_link_state
from gravefinder.tours import TOURS, tour_names


def register_link_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:  # noqa: ARG001
    """Register tour listing and deep-link decoding tools.

    Both tools only read the static tour catalog.
    """

    @mcp.tool
    async def tours_list() -> Dict[str, Any]:
        """List the cemetery's tours with display names and marker colors."""
        return {
            "tours": [{"key": t.key, "name": t.name, "color": t.color} for t in TOURS.values()]
        }

    @mcp.tool
    async def deep_link_parse(query_string: str = "") -> Dict[str, Any]:
        """Decode a map deep link such as "?view=tours&tour=civil%20war".

        Returns section, query, view, raw_tour, selected_tour_name and the
        show_burials_view / show_tours_view flags.
        """
        return parse_deep_link_state(query_string, tour_names()).to_dict()
