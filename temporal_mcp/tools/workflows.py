"""Workflow query tools exposed over MCP."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from mcp import types
from pydantic import ValidationError
from temporalio.client import Client

from ..schemas.workflows import DescribeWorkflowArguments, ListWorkflowsArguments
from ..services.rendering import render_execution_detail, render_execution_list
from ..services.temporal import describe_execution, list_executions
from ..services.temporal_errors import (
    ExecutionNotFoundError,
    InvalidArgumentError,
    InvalidStatusError,
    QueryFailedError,
)
from ..services.temporal_parsers import classify_status

logger = logging.getLogger(__name__)

LIST_WORKFLOWS = "list_workflows"
DESCRIBE_WORKFLOW = "describe_workflow"

TOOL_DEFINITIONS: tuple[types.Tool, ...] = (
    types.Tool(
        name=LIST_WORKFLOWS,
        description="List Temporal workflows filtered by status (running, completed, or failed)",
        inputSchema=ListWorkflowsArguments.model_json_schema(),
    ),
    types.Tool(
        name=DESCRIBE_WORKFLOW,
        description="Retrieve detailed information about a specific workflow execution",
        inputSchema=DescribeWorkflowArguments.model_json_schema(),
    ),
)

ToolHandler = Callable[[Client, str, Mapping[str, Any]], Awaitable[types.CallToolResult]]


def _text_result(text: str) -> types.CallToolResult:
    return types.CallToolResult(content=[types.TextContent(type="text", text=text)])


def _error_result(text: str) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=True,
    )


async def list_workflows_tool(
    client: Client,
    namespace: str,
    arguments: Mapping[str, Any] | None,
) -> types.CallToolResult:
    """List executions for a running/completed/failed status keyword."""
    try:
        args = ListWorkflowsArguments.model_validate(dict(arguments or {}))
    except ValidationError:
        return _error_result("Missing or invalid 'status' parameter")

    try:
        intent = classify_status(args.status)
        executions = await list_executions(client, intent, namespace)
    except InvalidStatusError as exc:
        logger.info("Rejected status filter %r", exc.raw_status)
        return _error_result(str(exc))
    except QueryFailedError as exc:
        return _error_result(str(exc))

    return _text_result(render_execution_list(intent.value, executions))


async def describe_workflow_tool(
    client: Client,
    namespace: str,
    arguments: Mapping[str, Any] | None,
) -> types.CallToolResult:
    """Describe one execution; the latest run unless a run id is given."""
    try:
        args = DescribeWorkflowArguments.model_validate(dict(arguments or {}))
    except ValidationError as exc:
        fields = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
        if "workflow_id" in fields or not fields:
            return _error_result("Missing or invalid 'workflow_id' parameter")
        return _error_result("Missing or invalid 'run_id' parameter")

    try:
        detail = await describe_execution(client, namespace, args.workflow_id, args.run_id)
    except (InvalidArgumentError, ExecutionNotFoundError, QueryFailedError) as exc:
        logger.warning(
            "Error describing workflow %r (run %r): %s", args.workflow_id, args.run_id, exc
        )
        return _error_result(str(exc))

    return _text_result(render_execution_detail(detail))


TOOL_HANDLERS: dict[str, ToolHandler] = {
    LIST_WORKFLOWS: list_workflows_tool,
    DESCRIBE_WORKFLOW: describe_workflow_tool,
}


async def call_workflow_tool(
    client: Client,
    namespace: str,
    name: str,
    arguments: Mapping[str, Any] | None,
) -> types.CallToolResult:
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        return _error_result(f"Unknown tool: {name}")
    return await handler(client, namespace, arguments)
