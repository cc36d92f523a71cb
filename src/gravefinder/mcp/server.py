"""Gravefinder MCP server entrypoint using FastMCP.

Exposes burial search, section browsing, tour listing and deep-link decoding
as tools over a dataset loaded once at startup.
Run with:
  - gravefinder-mcp
  - or: python -m gravefinder.mcp.server (ensure PYTHONPATH includes ./src)
"""
from __future__ import annotations

import logging
from typing import Optional

from fastmcp import FastMCP

from gravefinder.config import Settings, load_settings
from gravefinder.dataset import load_burials
from gravefinder.log import setup_logging
from gravefinder.mcp.tools import register_burial_tools, register_link_tools
from gravefinder.search.directory import BurialDirectory
from gravefinder.tours import tour_name_for

logger = logging.getLogger(__name__)


class AppState:
    """Application state shared by MCP tools."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.directory: Optional[BurialDirectory] = None

    def init_directory(self) -> None:
        """Load the configured dataset and build its search index.

        Without a configured dataset the directory is left empty. A configured
        but unreadable dataset raises `DatasetError`.
        """
        path = self.settings.data.burials_path
        records = load_burials(path) if path else []
        if not path:
            logger.warning("No burial dataset configured; serving an empty directory")
        self.directory = BurialDirectory(records, get_tour_name=tour_name_for, version=path)


# Global state and server instance
_state: Optional[AppState] = None
mcp = FastMCP("Gravefinder MCP Server")


# ----- Tools -----

@mcp.tool
def health() -> str:
    """Simple health check tool."""
    return "ok"


# ----- Entrypoint -----

def main() -> None:
    """Initialize state and run the MCP server."""
    global _state
    settings = load_settings()
    setup_logging(settings.app.log_level)
    _state = AppState(settings)
    _state.init_directory()
    # Register tools
    register_burial_tools(mcp, get_state=lambda: _state)
    register_link_tools(mcp, get_state=lambda: _state)
    # Choose transport based on configuration: stdio (default), http, or sse
    transport = settings.app.transport
    if transport in ("http", "sse"):
        mcp.run(transport=transport, host=settings.app.host, port=settings.app.port)
    else:
        mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
