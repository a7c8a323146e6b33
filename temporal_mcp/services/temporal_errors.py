"""Error types for Temporal service operations."""

from __future__ import annotations


class TemporalConfigurationError(RuntimeError):
    """Raised when Temporal configuration from the environment is invalid."""


class TemporalConnectionError(RuntimeError):
    """Raised when the Temporal client cannot be connected at startup."""


class InvalidArgumentError(RuntimeError):
    """Raised when a required tool argument is missing or empty."""


class InvalidStatusError(RuntimeError):
    """Raised when a status keyword is not running, completed or failed."""

    def __init__(self, raw_status: str) -> None:
        super().__init__(f"Unsupported status '{raw_status}' (use running, completed, or failed)")
        self.raw_status = raw_status


class ExecutionNotFoundError(RuntimeError):
    """Raised when the backend has no execution for the requested identifiers."""

    def __init__(self, workflow_id: str, run_id: str | None = None) -> None:
        message = f"No information available for the specified workflow (workflow_id={workflow_id!r}"
        if run_id:
            message += f", run_id={run_id!r}"
        super().__init__(message + ")")
        self.workflow_id = workflow_id
        self.run_id = run_id


class QueryFailedError(RuntimeError):
    """Raised when a Temporal list or describe call fails."""

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException,
        namespace: str | None = None,
        intent: object | None = None,
        workflow_id: str | None = None,
        run_id: str | None = None,
    ) -> None:
        super().__init__(f"{message}: {cause}")
        self.cause = cause
        self.namespace = namespace
        self.intent = intent
        self.workflow_id = workflow_id
        self.run_id = run_id
