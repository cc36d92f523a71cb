"""Burial search tools for FastMCP.

These tools read the `BurialDirectory` held on the server state, so the index
is built once at startup and reused by every query.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from fastmcp import FastMCP

from gravefinder.records import identity_key
from gravefinder.search.directory import BurialDirectory


def _serialize_record(record: Any, directory: BurialDirectory) -> Dict[str, Any]:
    resolver = directory.get_tour_name
    coords = getattr(record, "coordinates", None)
    return {
        "id": identity_key(record),
        "first_name": getattr(record, "first_name", ""),
        "last_name": getattr(record, "last_name", ""),
        "section": getattr(record, "section", ""),
        "lot": getattr(record, "lot", ""),
        "tier": getattr(record, "tier", ""),
        "grave": getattr(record, "grave", ""),
        "birth": getattr(record, "birth", ""),
        "death": getattr(record, "death", ""),
        "tour": resolver(record) if resolver else "",
        "label": getattr(record, "searchable_label", ""),
        "coordinates": list(coords) if coords else None,
    }


def register_burial_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register burial search tools on the given FastMCP instance.

    The `get_state` callable should return an object with attributes
    `directory` (a `BurialDirectory`) and `settings`.
    """

    def _directory() -> BurialDirectory:
        state = get_state()
        directory = getattr(state, "directory", None) if state is not None else None
        if directory is None:
            raise RuntimeError(
                "Burial directory is not loaded. Set GRAVEFINDER_DATA__BURIALS_PATH."
            )
        return directory

    def _default_limit() -> int:
        cfg = getattr(get_state(), "settings", None)
        cfg = getattr(cfg, "data", None)
        return int(getattr(cfg, "max_results", 100) or 0)

    @mcp.tool
    async def burials_search(query: str, limit: Optional[int] = None) -> Dict[str, Any]:
        """Search burials by name, year, section, lot, or tour.

        Parameters
        ----------
        query: str
            Free text such as "jane doe", "1851", "section 12", "lot 9",
            or "civil war tour".
        limit: int | None
            Maximum results. Defaults to the configured cap; 0 disables it.
        """
        if limit is not None and int(limit) < 0:
            raise ValueError("limit must be >= 0")
        directory = _directory()
        cap = _default_limit() if limit is None else int(limit)
        results = directory.search(query, limit=cap if cap > 0 else None)
        return {
            "query": query,
            "kind": directory.classify(query).kind.value,
            "count": len(results),
            "results": [_serialize_record(r, directory) for r in results],
        }

    @mcp.tool
    async def burials_sections() -> Dict[str, Any]:
        """List distinct cemetery sections in display order (100A last)."""
        return {"sections": _directory().sections()}

    @mcp.tool
    async def burials_in_section(
        section: str, lot: Optional[str] = None, tier: Optional[str] = None
    ) -> Dict[str, Any]:
        """Return burials in a section, optionally narrowed to a lot and/or tier."""
        if not section or not section.strip():
            raise ValueError("section is required")
        directory = _directory()
        results = directory.filter_section(section, lot=lot, tier=tier)
        return {
            "section": section.strip(),
            "count": len(results),
            "results": [_serialize_record(r, directory) for r in results],
        }
