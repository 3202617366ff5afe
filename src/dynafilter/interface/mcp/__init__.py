"""MCP interface: FastMCP server and tool registry."""

from .server import create_server
from .tools import ALLOWED_TOOLS, register_filter_tools

__all__ = ["ALLOWED_TOOLS", "create_server", "register_filter_tools"]
