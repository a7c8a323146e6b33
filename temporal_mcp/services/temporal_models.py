"""Shared Temporal service models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class StatusIntent(str, Enum):
    """Coarse status a caller can list executions by."""

    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class ExecutionStatus(str, Enum):
    """Execution status as reported to callers, with ``UNKNOWN`` as fallback."""

    RUNNING = "Running"
    COMPLETED = "Completed"
    FAILED = "Failed"
    CANCELED = "Canceled"
    TERMINATED = "Terminated"
    CONTINUED_AS_NEW = "ContinuedAsNew"
    TIMED_OUT = "TimedOut"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ExecutionSummary:
    """Single workflow execution, normalized from an open, closed or describe response."""

    workflow_id: str
    run_id: str
    workflow_type: str
    status: ExecutionStatus
    start_time: datetime | None
    close_time: datetime | None = None


# A describe response projects onto the same record as a list item.
ExecutionDetail = ExecutionSummary
