"""Temporal workflow execution queries."""

from __future__ import annotations

import logging

from temporalio.client import Client
from temporalio.service import RPCError, RPCStatusCode

from .temporal_client import (
    describe_execution_raw,
    list_closed_executions_raw,
    list_open_executions_raw,
)
from .temporal_errors import (
    ExecutionNotFoundError,
    InvalidArgumentError,
    QueryFailedError,
)
from .temporal_models import ExecutionDetail, ExecutionSummary, StatusIntent
from .temporal_parsers import (
    close_status_for_intent,
    parse_execution_info,
    parse_execution_list,
)

logger = logging.getLogger(__name__)


async def list_executions(
    client: Client,
    intent: StatusIntent,
    namespace: str,
) -> list[ExecutionSummary]:
    """
    List one page of workflow executions matching a status intent.

    Args:
        client: Connected Temporal client
        intent: Classified status to list
        namespace: Temporal namespace to query

    Returns:
        Execution summaries in the order the backend returned them
    """
    try:
        if intent is StatusIntent.RUNNING:
            response = await list_open_executions_raw(client, namespace)
        else:
            response = await list_closed_executions_raw(
                client, namespace, close_status_for_intent(intent)
            )
    except RPCError as exc:
        logger.error(
            "Temporal list error: namespace=%s intent=%s grpc_status=%s error=%s",
            namespace,
            intent.value,
            exc.status.name,
            exc.message,
        )
        raise QueryFailedError(
            f"Failed to list {intent.value} workflows",
            cause=exc,
            namespace=namespace,
            intent=intent,
        ) from exc

    executions = parse_execution_list(response.executions)
    logger.info(
        "Listed %d %s workflow executions in namespace %s",
        len(executions),
        intent.value,
        namespace,
    )
    return executions


async def describe_execution(
    client: Client,
    namespace: str,
    workflow_id: str,
    run_id: str | None = None,
) -> ExecutionDetail:
    """
    Get detailed information about a single workflow execution.

    Args:
        client: Connected Temporal client
        namespace: Temporal namespace to query
        workflow_id: Workflow ID of the execution
        run_id: Run ID; the latest run is used when omitted

    Returns:
        The normalized execution record
    """
    if not workflow_id:
        raise InvalidArgumentError("workflow_id is required")

    logger.info(
        "Describing workflow execution: namespace=%s workflow_id=%s run_id=%s",
        namespace,
        workflow_id,
        run_id,
    )

    try:
        response = await describe_execution_raw(client, namespace, workflow_id, run_id)
    except RPCError as exc:
        if exc.status == RPCStatusCode.NOT_FOUND:
            raise ExecutionNotFoundError(workflow_id, run_id) from exc
        logger.error(
            "Temporal describe error: workflow_id=%s run_id=%s grpc_status=%s error=%s",
            workflow_id,
            run_id,
            exc.status.name,
            exc.message,
        )
        raise QueryFailedError(
            "Failed to describe workflow",
            cause=exc,
            namespace=namespace,
            workflow_id=workflow_id,
            run_id=run_id,
        ) from exc

    if not response.HasField("workflow_execution_info"):
        logger.warning(
            "Describe response had no execution info for workflow %s", workflow_id
        )
        raise ExecutionNotFoundError(workflow_id, run_id)

    return parse_execution_info(response.workflow_execution_info)
