"""Pydantic models for workflow tool arguments."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ListWorkflowsArguments(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: str = Field(
        ..., description="Workflow status to filter by (running, completed, failed)"
    )

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: str) -> str:
        if not value:
            raise ValueError("status is required")
        return value


class DescribeWorkflowArguments(BaseModel):
    model_config = ConfigDict(extra="ignore")

    workflow_id: str = Field(..., description="Workflow ID of the execution to describe")
    run_id: Optional[str] = Field(
        default=None,
        description="Optional Run ID (if not provided, the latest run is used)",
    )

    @field_validator("workflow_id")
    @classmethod
    def validate_workflow_id(cls, value: str) -> str:
        if not value:
            raise ValueError("workflow_id is required")
        return value

    @field_validator("run_id")
    @classmethod
    def normalize_run_id(cls, value: Optional[str]) -> Optional[str]:
        return value or None
