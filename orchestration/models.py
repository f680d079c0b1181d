"""Orchestration models - NodeExecutionData, ExecutionContext, StepResult, WorkflowResult."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Union

from core.domain.enums.execution_status import ExecutionStatus

from .node import NodeTypeDescription

_MISSING = object()


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


# Returned by an expression to leave the parameter unset for that item
UNSET = _Unset()


@dataclass
class NodeExecutionData:
    """One item flowing between nodes."""

    json: object
    paired_item: int | None = None


# A parameter is either a fixed value or an expression evaluated per item
ParameterValue = Union[object, Callable[[NodeExecutionData], object]]


@dataclass
class ExecutionContext:
    """Context handed to a node's ``execute``."""

    description: NodeTypeDescription
    items: list[NodeExecutionData]
    parameters: dict[str, ParameterValue] = field(default_factory=dict)
    credentials: dict[str, Mapping[str, object]] = field(default_factory=dict)
    started_at: datetime | None = None

    def get_input_data(self) -> list[NodeExecutionData]:
        return self.items

    def get_node_parameter(
        self, name: str, item_index: int, default: object = _MISSING
    ) -> object:
        """Resolve a parameter for one item.

        Args:
            name: Parameter name
            item_index: Index of the input item the value is resolved for
            default: Returned when the parameter is unset

        Returns:
            Parameter value, falling back to ``default`` and then to the
            property default declared on the node description. An expression
            returning ``UNSET`` falls through the same way.

        Raises:
            KeyError: If the parameter is unset and has no default anywhere
        """
        if name in self.parameters:
            value = self.parameters[name]
            if callable(value):
                item = (
                    self.items[item_index]
                    if 0 <= item_index < len(self.items)
                    else NodeExecutionData(json={})
                )
                resolved = value(item)
                if resolved is not UNSET:
                    return resolved
            else:
                return value
        if default is not _MISSING:
            return default
        prop = self.description.get_property(name)
        if prop is None:
            raise KeyError(f"Node '{self.description.name}' has no parameter '{name}'")
        return prop.default

    def get_credentials(self, name: str) -> Mapping[str, object]:
        """Return stored credentials of the given type.

        Raises:
            LookupError: If no credentials of that type are attached
        """
        if name not in self.credentials:
            raise LookupError(
                f"Node '{self.description.name}' does not have credentials '{name}' set"
            )
        return self.credentials[name]


@dataclass
class StepResult:
    """Result of a workflow step execution."""

    name: str
    success: bool
    duration_ms: int
    error: str | None = None
    exception: BaseException | None = None
    output: list[list[NodeExecutionData]] = field(default_factory=list)


@dataclass
class WorkflowResult:
    """Result of a workflow execution."""

    name: str
    status: ExecutionStatus
    started_at: datetime
    finished_at: datetime
    steps: list[StepResult]

    @property
    def output(self) -> list[NodeExecutionData]:
        """Main output branch of the last successful step."""
        for step in reversed(self.steps):
            if step.success:
                return step.output[0] if step.output else []
        return []
