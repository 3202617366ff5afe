"""MCP server entrypoint.

Usage:
    python -m dynafilter.main
    # or via the script entrypoint:
    dynafilter-mcp
"""

from __future__ import annotations

from .interface.mcp.server import create_server


def main() -> None:
    """Run the dynafilter MCP server over stdio."""
    server = create_server()
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
