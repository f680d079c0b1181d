"""Amazon Product Advertising API 5.0 SDK module."""

from .client import CommonParameters, PAAPIClient, Paapi5Client
from .errors import (
    ConfigurationError,
    ErrorKind,
    MissingParameterError,
    PAAPIError,
    TransportError,
)
from .marketplaces import Marketplace

__all__ = [
    "CommonParameters",
    "ConfigurationError",
    "ErrorKind",
    "Marketplace",
    "MissingParameterError",
    "PAAPIClient",
    "PAAPIError",
    "Paapi5Client",
    "TransportError",
]
