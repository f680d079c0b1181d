"""
Execution Status Enum.

Final status of a workflow run.
"""
from enum import Enum


class ExecutionStatus(str, Enum):
    """Workflow run outcome."""

    SUCCESS = "success"
    FAILED = "failed"
