"""MCP server exposing read-only Temporal workflow queries."""

__version__ = "1.0.0"
