"""Temporal MCP server entrypoint."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from temporalio.client import Client

from . import __version__
from .config import TemporalSettings, load_settings
from .logging_config import configure_logging
from .services.temporal_client import connect_temporal_client
from .services.temporal_errors import TemporalConfigurationError, TemporalConnectionError
from .tools.workflows import TOOL_DEFINITIONS, call_workflow_tool

logger = logging.getLogger(__name__)

SERVER_NAME = "temporal-mcp"


class ToolInvocationError(RuntimeError):
    """Raised to hand a failed tool result back to the MCP server as an error result."""


def create_server(client: Client, namespace: str) -> Server:
    """Build the MCP server with the workflow tools bound to a connected client."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return list(TOOL_DEFINITIONS)

    # Arguments are validated by the tool handlers so error text stays stable.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict[str, Any]) -> list[types.ContentBlock]:
        result = await call_workflow_tool(client, namespace, name, arguments)
        if result.isError:
            raise ToolInvocationError(result.content[0].text)
        return result.content

    return server


async def serve(settings: TemporalSettings) -> None:
    client = await connect_temporal_client(settings.address, settings.namespace)
    server = create_server(client, settings.namespace)

    logger.info("Starting %s server...", SERVER_NAME)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    try:
        settings = load_settings()
    except TemporalConfigurationError as exc:
        configure_logging()
        logger.critical("%s", exc)
        sys.exit(1)

    configure_logging(settings.log_level)
    try:
        asyncio.run(serve(settings))
    except TemporalConnectionError as exc:
        logger.critical("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
