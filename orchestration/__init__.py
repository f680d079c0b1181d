"""Orchestration layer - the workflow host that runs nodes."""

from .models import UNSET, ExecutionContext, NodeExecutionData, StepResult, WorkflowResult
from .node import (
    CredentialTypeDescription,
    NodeProperty,
    NodePropertyOption,
    NodeType,
    NodeTypeDescription,
)
from .runner import WorkflowRunner
from .workflow import WorkflowDefinition, WorkflowStep

__all__ = [
    "CredentialTypeDescription",
    "ExecutionContext",
    "NodeExecutionData",
    "NodeProperty",
    "NodePropertyOption",
    "NodeType",
    "NodeTypeDescription",
    "StepResult",
    "UNSET",
    "WorkflowDefinition",
    "WorkflowResult",
    "WorkflowRunner",
    "WorkflowStep",
    "create_single_node_workflow",
]


def create_single_node_workflow(
    name: str, node: NodeType, parameters: dict, credentials: dict | None = None
) -> WorkflowDefinition:
    """Wrap one node in a single-step workflow.

    Args:
        name: Workflow and step name
        node: Node to run
        parameters: Node parameters
        credentials: Credentials by type name

    Returns:
        WorkflowDefinition instance
    """
    return WorkflowDefinition(
        name=name,
        steps=[
            WorkflowStep(
                name=name,
                node=node,
                parameters=parameters,
                credentials=credentials or {},
            )
        ],
    )
