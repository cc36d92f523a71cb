"""Tool registration modules for the Gravefinder MCP server."""

from .burials import register_burial_tools
from .links import register_link_tools

__all__ = [
    "register_burial_tools",
    "register_link_tools",
]
