"""Amazon Product Advertising API node."""

from .credentials import AMAZON_PA_API_CREDENTIALS, CREDENTIAL_NAME
from .description import AMAZON_PA_NODE_DESCRIPTION, DEFAULT_RESOURCES, RESOURCE_OPTIONS
from .node import AmazonPANode
from .requests import (
    GetBrowseNodesRequest,
    GetItemsRequest,
    Operation,
    SearchItemsRequest,
)

__all__ = [
    "AMAZON_PA_API_CREDENTIALS",
    "AMAZON_PA_NODE_DESCRIPTION",
    "AmazonPANode",
    "CREDENTIAL_NAME",
    "DEFAULT_RESOURCES",
    "GetBrowseNodesRequest",
    "GetItemsRequest",
    "Operation",
    "RESOURCE_OPTIONS",
    "SearchItemsRequest",
]
