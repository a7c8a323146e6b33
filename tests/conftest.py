"""Shared test fixtures and configuration."""
from __future__ import annotations

from datetime import datetime
from typing import Callable, Dict, List, Optional

import pytest
from temporalio.api.common.v1 import WorkflowExecution, WorkflowType
from temporalio.api.workflow.v1 import WorkflowExecutionInfo
from temporalio.api.workflowservice.v1 import (
    DescribeWorkflowExecutionRequest,
    DescribeWorkflowExecutionResponse,
    ListClosedWorkflowExecutionsRequest,
    ListClosedWorkflowExecutionsResponse,
    ListOpenWorkflowExecutionsRequest,
    ListOpenWorkflowExecutionsResponse,
)
from temporalio.service import RPCError, RPCStatusCode


def build_execution_info(
    workflow_id: str,
    run_id: str,
    workflow_type: str,
    status: int,
    start_time: datetime,
    close_time: Optional[datetime] = None,
) -> WorkflowExecutionInfo:
    info = WorkflowExecutionInfo(
        execution=WorkflowExecution(workflow_id=workflow_id, run_id=run_id),
        type=WorkflowType(name=workflow_type),
        status=status,
    )
    info.start_time.FromDatetime(start_time)
    if close_time is not None:
        info.close_time.FromDatetime(close_time)
    return info


class FakeWorkflowService:
    """In-memory stand-in for the Temporal frontend service."""

    def __init__(self) -> None:
        self.open_executions: List[WorkflowExecutionInfo] = []
        self.closed_executions: List[WorkflowExecutionInfo] = []
        # Runs per workflow id, oldest first.
        self.runs: Dict[str, List[WorkflowExecutionInfo]] = {}
        self.error: Optional[Exception] = None
        self.empty_describe = False
        self.requests: list = []

    async def list_open_workflow_executions(
        self, request: ListOpenWorkflowExecutionsRequest
    ) -> ListOpenWorkflowExecutionsResponse:
        self.requests.append(request)
        if self.error:
            raise self.error
        return ListOpenWorkflowExecutionsResponse(executions=self.open_executions)

    async def list_closed_workflow_executions(
        self, request: ListClosedWorkflowExecutionsRequest
    ) -> ListClosedWorkflowExecutionsResponse:
        self.requests.append(request)
        if self.error:
            raise self.error
        executions = self.closed_executions
        if request.HasField("status_filter"):
            executions = [
                info for info in executions if info.status == request.status_filter.status
            ]
        return ListClosedWorkflowExecutionsResponse(executions=executions)

    async def describe_workflow_execution(
        self, request: DescribeWorkflowExecutionRequest
    ) -> DescribeWorkflowExecutionResponse:
        self.requests.append(request)
        if self.error:
            raise self.error
        if self.empty_describe:
            return DescribeWorkflowExecutionResponse()

        runs = self.runs.get(request.execution.workflow_id, [])
        if request.execution.run_id:
            runs = [info for info in runs if info.execution.run_id == request.execution.run_id]
        if not runs:
            raise RPCError(
                f"workflow not found for ID: {request.execution.workflow_id}",
                RPCStatusCode.NOT_FOUND,
                b"",
            )
        return DescribeWorkflowExecutionResponse(workflow_execution_info=runs[-1])


class FakeClient:
    def __init__(self, workflow_service: FakeWorkflowService) -> None:
        self.workflow_service = workflow_service


@pytest.fixture
def execution_info() -> Callable[..., WorkflowExecutionInfo]:
    """Factory for backend execution info messages."""
    return build_execution_info


@pytest.fixture
def workflow_service() -> FakeWorkflowService:
    return FakeWorkflowService()


@pytest.fixture
def temporal_client(workflow_service: FakeWorkflowService) -> FakeClient:
    return FakeClient(workflow_service)
