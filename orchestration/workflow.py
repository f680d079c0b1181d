"""Workflow definitions - WorkflowStep, WorkflowDefinition."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from .models import ParameterValue
from .node import NodeType


@dataclass
class WorkflowStep:
    """A single node invocation in a workflow."""

    name: str
    node: NodeType
    parameters: dict[str, ParameterValue] = field(default_factory=dict)
    credentials: dict[str, Mapping[str, object]] = field(default_factory=dict)


@dataclass
class WorkflowDefinition:
    """Definition of a workflow."""

    name: str
    steps: list[WorkflowStep]
