"""
PA-API error kinds.

Every failure the node can surface belongs to one of three kinds:

- MISSING_PARAMETER: an operation-required field is absent on a record
- CONFIGURATION: no usable partner tag, or an unsupported operation selector
- TRANSPORT: the external call was rejected, failed or returned garbage

All of them abort the running batch with a single readable message.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of PA-API failure kinds."""

    MISSING_PARAMETER = "missing_parameter"
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"


class PAAPIError(Exception):
    """Base error carrying the failing operation and the underlying cause."""

    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(
        self,
        detail: Optional[str] = None,
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.detail = detail
        self.operation = operation
        self.cause = cause
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.operation is None:
            return self.detail or "Amazon PA API request failed due to an unknown error."
        if not self.detail:
            return f"Failed to execute {self.operation} operation due to an unknown error."
        return f"Failed to execute {self.operation} operation: {self.detail}"

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        return {
            "error": self.kind.value,
            "operation": self.operation,
            "detail": self.message,
        }


class MissingParameterError(PAAPIError):
    """Required per-operation field was not provided."""

    kind = ErrorKind.MISSING_PARAMETER

    def __init__(self, parameter: str, detail: str, operation: Optional[str] = None) -> None:
        self.parameter = parameter
        super().__init__(detail=detail, operation=operation)


class ConfigurationError(PAAPIError):
    """Shared configuration cannot produce a valid request."""

    kind = ErrorKind.CONFIGURATION


class TransportError(PAAPIError):
    """External PA-API call failed."""

    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        detail: Optional[str] = None,
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None,
        status: Optional[int] = None,
    ) -> None:
        self.status = status
        super().__init__(detail=detail, operation=operation, cause=cause)

    @classmethod
    def from_exception(cls, exc: BaseException, operation: Optional[str] = None) -> "TransportError":
        """Wrap an arbitrary client failure, keeping its text when it has any."""
        detail = str(exc) or None
        return cls(detail=detail, operation=operation, cause=exc)
