"""Nodes shipped by this package, by node type name."""

from .amazon_pa import AMAZON_PA_API_CREDENTIALS, AmazonPANode

NODE_TYPES = {AmazonPANode.description.name: AmazonPANode}
CREDENTIAL_TYPES = {AMAZON_PA_API_CREDENTIALS.name: AMAZON_PA_API_CREDENTIALS}

__all__ = ["AmazonPANode", "CREDENTIAL_TYPES", "NODE_TYPES"]
