r"""Utility functions shared by the executors."""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "execution_context",
    "get_execution_id",
    "log_structured",
]

from persevere.utils.structured_logging import (
    StructuredFormatter,
    execution_context,
    get_execution_id,
    log_structured,
)
