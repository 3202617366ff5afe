"""Outer surfaces: command line and MCP."""
