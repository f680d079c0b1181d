"""Node and credential type declarations - the host's plug-in contract."""

from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import ExecutionContext, NodeExecutionData


@dataclass(frozen=True)
class NodePropertyOption:
    """One selectable value of an ``options``/``multiOptions`` property."""

    name: str
    value: str
    description: str | None = None


@dataclass(frozen=True)
class NodeProperty:
    """A user-facing field on a node or credential form."""

    display_name: str
    name: str
    type: str
    default: object = ""
    description: str | None = None
    options: tuple[NodePropertyOption, ...] = ()
    # operation values this field is shown for, empty means always shown
    show_for_operations: tuple[str, ...] = ()

    def option_values(self) -> list[str]:
        return [option.value for option in self.options]


@dataclass(frozen=True)
class CredentialTypeDescription:
    """Schema of a credential type stored by the host."""

    name: str
    display_name: str
    properties: tuple[NodeProperty, ...]
    documentation_url: str | None = None


@dataclass(frozen=True)
class NodeTypeDescription:
    """Static description of a node type."""

    display_name: str
    name: str
    description: str
    version: int = 1
    group: tuple[str, ...] = ("transform",)
    icon: str | None = None
    color: str | None = None
    subtitle: str | None = None
    credentials: tuple[str, ...] = ()
    properties: tuple[NodeProperty, ...] = field(default_factory=tuple)

    def get_property(self, name: str) -> NodeProperty | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


class NodeType(Protocol):
    """Protocol for node implementations."""

    description: NodeTypeDescription

    def execute(
        self, context: "ExecutionContext"
    ) -> Awaitable[list[list["NodeExecutionData"]]]:
        """Process the context's input items.

        Args:
            context: ExecutionContext with items, parameters and credentials

        Returns:
            Output branches, each a list of items
        """
        ...
