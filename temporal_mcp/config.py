"""Environment-driven settings for the Temporal MCP server."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .services.temporal_errors import TemporalConfigurationError

DEFAULT_TEMPORAL_ADDRESS = "localhost:7233"
DEFAULT_TEMPORAL_NAMESPACE = "default"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class TemporalSettings:
    address: str
    namespace: str
    log_level: str = DEFAULT_LOG_LEVEL


def _get_env(key: str, default: str) -> str:
    value = (os.getenv(key) or "").strip()
    return value or default


def load_settings() -> TemporalSettings:
    """Read TEMPORAL_ADDRESS, TEMPORAL_NAMESPACE and LOG_LEVEL once at startup."""
    log_level = _get_env("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise TemporalConfigurationError(f"Invalid LOG_LEVEL: {log_level}")

    return TemporalSettings(
        address=_get_env("TEMPORAL_ADDRESS", DEFAULT_TEMPORAL_ADDRESS),
        namespace=_get_env("TEMPORAL_NAMESPACE", DEFAULT_TEMPORAL_NAMESPACE),
        log_level=log_level,
    )
