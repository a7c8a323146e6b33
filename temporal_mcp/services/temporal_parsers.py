"""Parsing helpers for Temporal workflow execution payloads."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from temporalio.api.enums.v1 import WorkflowExecutionStatus
from temporalio.api.workflow.v1 import WorkflowExecutionInfo

from .temporal_errors import InvalidStatusError
from .temporal_models import ExecutionStatus, ExecutionSummary, StatusIntent

_EXECUTION_STATUS_MAP: dict[int, ExecutionStatus] = {
    WorkflowExecutionStatus.WORKFLOW_EXECUTION_STATUS_RUNNING: ExecutionStatus.RUNNING,
    WorkflowExecutionStatus.WORKFLOW_EXECUTION_STATUS_COMPLETED: ExecutionStatus.COMPLETED,
    WorkflowExecutionStatus.WORKFLOW_EXECUTION_STATUS_FAILED: ExecutionStatus.FAILED,
    WorkflowExecutionStatus.WORKFLOW_EXECUTION_STATUS_CANCELED: ExecutionStatus.CANCELED,
    WorkflowExecutionStatus.WORKFLOW_EXECUTION_STATUS_TERMINATED: ExecutionStatus.TERMINATED,
    WorkflowExecutionStatus.WORKFLOW_EXECUTION_STATUS_CONTINUED_AS_NEW: ExecutionStatus.CONTINUED_AS_NEW,
    WorkflowExecutionStatus.WORKFLOW_EXECUTION_STATUS_TIMED_OUT: ExecutionStatus.TIMED_OUT,
}

_CLOSE_STATUS_BY_INTENT: dict[StatusIntent, int] = {
    StatusIntent.COMPLETED: WorkflowExecutionStatus.WORKFLOW_EXECUTION_STATUS_COMPLETED,
    StatusIntent.FAILED: WorkflowExecutionStatus.WORKFLOW_EXECUTION_STATUS_FAILED,
}


def classify_status(raw_status: str) -> StatusIntent:
    """Map a caller-supplied status keyword to a query intent, ignoring case."""
    try:
        return StatusIntent(raw_status.lower())
    except ValueError:
        raise InvalidStatusError(raw_status) from None


def close_status_for_intent(intent: StatusIntent) -> int:
    """Backend close-status filter value for a closed-execution intent."""
    try:
        return _CLOSE_STATUS_BY_INTENT[intent]
    except KeyError:
        raise ValueError(f"{intent.value} executions are not closed") from None


def map_execution_status(status: int) -> ExecutionStatus:
    return _EXECUTION_STATUS_MAP.get(status, ExecutionStatus.UNKNOWN)


def _timestamp(info: WorkflowExecutionInfo, field: str) -> datetime | None:
    if not info.HasField(field):
        return None
    return getattr(info, field).ToDatetime(tzinfo=timezone.utc)


def parse_execution_info(info: WorkflowExecutionInfo) -> ExecutionSummary:
    """Normalize a backend execution info message into an execution record."""
    status = map_execution_status(info.status)
    close_time = _timestamp(info, "close_time")
    if status is ExecutionStatus.RUNNING:
        close_time = None

    return ExecutionSummary(
        workflow_id=info.execution.workflow_id,
        run_id=info.execution.run_id,
        workflow_type=info.type.name,
        status=status,
        start_time=_timestamp(info, "start_time"),
        close_time=close_time,
    )


def parse_execution_list(executions: Iterable[WorkflowExecutionInfo]) -> list[ExecutionSummary]:
    """Normalize a page of open or closed executions, keeping backend order."""
    return [parse_execution_info(info) for info in executions]
