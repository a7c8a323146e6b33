"""Low-level gRPC calls to the Temporal frontend service."""

from __future__ import annotations

import logging

from temporalio.api.common.v1 import WorkflowExecution
from temporalio.api.filter.v1 import StatusFilter
from temporalio.api.workflowservice.v1 import (
    DescribeWorkflowExecutionRequest,
    DescribeWorkflowExecutionResponse,
    ListClosedWorkflowExecutionsRequest,
    ListClosedWorkflowExecutionsResponse,
    ListOpenWorkflowExecutionsRequest,
    ListOpenWorkflowExecutionsResponse,
)
from temporalio.client import Client
from temporalio.service import RPCError

from .temporal_errors import TemporalConnectionError

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


async def connect_temporal_client(address: str, namespace: str) -> Client:
    try:
        client = await Client.connect(address, namespace=namespace)
    except (RuntimeError, RPCError) as exc:
        raise TemporalConnectionError(
            f"Unable to connect to Temporal at {address} (namespace {namespace}): {exc}"
        ) from exc
    logger.info("Connected to Temporal at %s (namespace: %s)", address, namespace)
    return client


async def list_open_executions_raw(client: Client, namespace: str) -> ListOpenWorkflowExecutionsResponse:
    request = ListOpenWorkflowExecutionsRequest(
        namespace=namespace,
        maximum_page_size=MAX_PAGE_SIZE,
    )
    return await client.workflow_service.list_open_workflow_executions(request)


async def list_closed_executions_raw(
    client: Client,
    namespace: str,
    close_status: int,
) -> ListClosedWorkflowExecutionsResponse:
    request = ListClosedWorkflowExecutionsRequest(
        namespace=namespace,
        maximum_page_size=MAX_PAGE_SIZE,
        status_filter=StatusFilter(status=close_status),
    )
    return await client.workflow_service.list_closed_workflow_executions(request)


async def describe_execution_raw(
    client: Client,
    namespace: str,
    workflow_id: str,
    run_id: str | None = None,
) -> DescribeWorkflowExecutionResponse:
    # An empty run id makes the frontend resolve the latest run.
    request = DescribeWorkflowExecutionRequest(
        namespace=namespace,
        execution=WorkflowExecution(workflow_id=workflow_id, run_id=run_id or ""),
    )
    return await client.workflow_service.describe_workflow_execution(request)
