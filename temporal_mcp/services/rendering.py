"""Plain-text rendering of workflow executions for tool output."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from .temporal_models import ExecutionDetail, ExecutionSummary

# RFC 3339, second precision, always UTC. Clients parse this.
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(value: datetime | None) -> str:
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def render_execution_list(status_label: str, summaries: Sequence[ExecutionSummary]) -> str:
    """Render a list of executions, one line each, in the given order."""
    if not summaries:
        return f"No {status_label} workflows found.\n"

    lines = [f"Found {len(summaries)} {status_label} workflow(s):"]
    for summary in summaries:
        line = (
            f"- ID: {summary.workflow_id} | Run: {summary.run_id} | Type: {summary.workflow_type}"
            f" | Status: {summary.status.value} | Start: {format_timestamp(summary.start_time)}"
        )
        if summary.close_time is not None:
            line += f" | End: {format_timestamp(summary.close_time)}"
        lines.append(line)
    return "\n".join(lines) + "\n"


def render_execution_detail(detail: ExecutionDetail) -> str:
    """Render a single execution as a fixed-order block of labelled lines."""
    lines = [
        "Workflow Execution Details:",
        f"Workflow ID: {detail.workflow_id}",
        f"Run ID: {detail.run_id}",
        f"Type: {detail.workflow_type}",
        f"Status: {detail.status.value}",
        f"Start Time: {format_timestamp(detail.start_time)}",
    ]
    if detail.close_time is not None:
        lines.append(f"End Time: {format_timestamp(detail.close_time)}")
    return "\n".join(lines) + "\n"
