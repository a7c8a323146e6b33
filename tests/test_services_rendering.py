"""Tests for execution text rendering."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from temporal_mcp.services.rendering import (
    format_timestamp,
    render_execution_detail,
    render_execution_list,
)
from temporal_mcp.services.temporal_models import ExecutionStatus, ExecutionSummary

START = datetime(2026, 5, 1, 10, 0, 0, tzinfo=timezone.utc)
CLOSE = datetime(2026, 5, 1, 10, 2, 30, tzinfo=timezone.utc)


def _summary(workflow_id: str, close_time: datetime | None = None, **kwargs) -> ExecutionSummary:
    return ExecutionSummary(
        workflow_id=workflow_id,
        run_id=kwargs.get("run_id", f"run-{workflow_id}"),
        workflow_type=kwargs.get("workflow_type", "ShipmentWorkflow"),
        status=kwargs.get(
            "status", ExecutionStatus.COMPLETED if close_time else ExecutionStatus.RUNNING
        ),
        start_time=kwargs.get("start_time", START),
        close_time=close_time,
    )


def test_format_timestamp_normalizes_to_utc():
    sydney = timezone(timedelta(hours=10))
    assert format_timestamp(datetime(2026, 5, 1, 20, 0, 0, 999999, tzinfo=sydney)) == "2026-05-01T10:00:00Z"
    assert format_timestamp(datetime(2026, 5, 1, 10, 0, 0)) == "2026-05-01T10:00:00Z"
    assert format_timestamp(None) == ""


@pytest.mark.parametrize("label", ["running", "completed", "failed"])
def test_render_empty_list(label):
    assert render_execution_list(label, []) == f"No {label} workflows found.\n"


def test_render_list_lines():
    text = render_execution_list(
        "completed",
        [_summary("a", CLOSE), _summary("b", status=ExecutionStatus.RUNNING)],
    )

    assert text == (
        "Found 2 completed workflow(s):\n"
        "- ID: a | Run: run-a | Type: ShipmentWorkflow | Status: Completed"
        " | Start: 2026-05-01T10:00:00Z | End: 2026-05-01T10:02:30Z\n"
        "- ID: b | Run: run-b | Type: ShipmentWorkflow | Status: Running"
        " | Start: 2026-05-01T10:00:00Z\n"
    )


def test_render_list_preserves_input_order():
    summaries = [_summary("second"), _summary("first")]

    lines = render_execution_list("running", summaries).splitlines()[1:]

    assert lines[0].startswith("- ID: second |")
    assert lines[1].startswith("- ID: first |")


def test_render_detail_closed():
    detail = _summary(
        "invoice-7",
        CLOSE,
        run_id="0f1e2d",
        workflow_type="InvoiceWorkflow",
        status=ExecutionStatus.TIMED_OUT,
    )

    assert render_execution_detail(detail) == (
        "Workflow Execution Details:\n"
        "Workflow ID: invoice-7\n"
        "Run ID: 0f1e2d\n"
        "Type: InvoiceWorkflow\n"
        "Status: TimedOut\n"
        "Start Time: 2026-05-01T10:00:00Z\n"
        "End Time: 2026-05-01T10:02:30Z\n"
    )


@pytest.mark.parametrize("close_time", [None, CLOSE])
def test_render_detail_end_time_matches_close_time(close_time):
    lines = render_execution_detail(_summary("wf", close_time)).splitlines()
    end_lines = [line for line in lines if line.startswith("End Time:")]

    if close_time is None:
        assert end_lines == []
    else:
        assert end_lines == ["End Time: 2026-05-01T10:02:30Z"]


def test_render_detail_without_start_time():
    text = render_execution_detail(_summary("wf", start_time=None))
    assert "Start Time: \n" in text


def test_rendering_is_deterministic():
    summaries = [_summary("x", CLOSE), _summary("y")]
    assert render_execution_list("failed", summaries) == render_execution_list("failed", summaries)
    assert render_execution_detail(summaries[0]) == render_execution_detail(summaries[0])
