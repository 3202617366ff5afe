"""MCP server factory.

Creates the FastMCP server exposing the filter tools and the
field-schema resource.
"""

from __future__ import annotations

import json

from mcp.server.fastmcp import FastMCP

from .tools import describe_fields, register_filter_tools

SCHEMA_RESOURCE_URI = "dynafilter://schema/fields"


def create_server(name: str | None = None) -> FastMCP:
    """Build and return a configured FastMCP server.

    Args:
        name: Server name; defaults to ``FilterSettings.server_name``.
    """
    if name is None:
        from ...config.runtime import get_settings
        name = get_settings().server_name

    server = FastMCP(name)
    register_filter_tools(server)
    _register_resources(server)
    return server


def _register_resources(server: FastMCP) -> None:
    @server.resource(SCHEMA_RESOURCE_URI, mime_type="application/json")
    def get_field_schema() -> str:
        """Filterable fields, their types, options and legal operators."""
        from ...wiring import build_filter_service
        return json.dumps(describe_fields(build_filter_service()), indent=2)


if __name__ == "__main__":
    create_server().run(transport="stdio")
