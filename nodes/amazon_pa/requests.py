"""
Request construction for the Amazon PA node.

Each operation has its own request type and builder; the node picks the
builder from the ``Operation`` selector. Builders raise
``MissingParameterError`` before anything is sent.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Sequence, Tuple, Union

from paapi_sdk.client import CommonParameters
from paapi_sdk.errors import ConfigurationError, MissingParameterError

from core.settings.amazon_pa_settings import AmazonPaApiCredentials


class Operation(str, Enum):
    """Operation selector values."""

    SEARCH_ITEMS = "searchItems"
    GET_ITEMS = "getItems"
    GET_BROWSE_NODES = "getBrowseNodes"

    @property
    def api_name(self) -> str:
        return self.value[0].upper() + self.value[1:]

    @classmethod
    def parse(cls, value: object) -> "Operation":
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(
                f"Unsupported operation '{value}'. "
                f"Expected one of: {', '.join(op.value for op in cls)}."
            ) from None


@dataclass(frozen=True)
class SearchItemsRequest:
    operation: ClassVar[Operation] = Operation.SEARCH_ITEMS

    keywords: str
    resources: Tuple[str, ...] = ()

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"Keywords": self.keywords}
        if self.resources:
            payload["Resources"] = list(self.resources)
        return payload


@dataclass(frozen=True)
class GetItemsRequest:
    operation: ClassVar[Operation] = Operation.GET_ITEMS

    item_ids: Tuple[str, ...]
    resources: Tuple[str, ...] = ()

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"ItemIds": list(self.item_ids)}
        if self.resources:
            payload["Resources"] = list(self.resources)
        return payload


@dataclass(frozen=True)
class GetBrowseNodesRequest:
    operation: ClassVar[Operation] = Operation.GET_BROWSE_NODES

    browse_node_ids: Tuple[str, ...]

    def to_payload(self) -> Dict[str, Any]:
        return {"BrowseNodeIds": list(self.browse_node_ids)}


OperationRequest = Union[SearchItemsRequest, GetItemsRequest, GetBrowseNodesRequest]


def split_ids(value: object) -> Tuple[str, ...]:
    """Split a comma-separated id string; a value without commas stays whole.

    Lists coming from expressions are taken as they are.
    """
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value if str(v))
    text = str(value)
    if not text:
        return ()
    return tuple(text.split(",")) if "," in text else (text,)


def normalize_resources(value: object) -> Tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    return tuple(str(v) for v in value)


def build_search_items_request(
    keywords: Optional[str], resources: Sequence[str] = ()
) -> SearchItemsRequest:
    """Whitespace-only keywords are treated as missing; others are kept exactly."""
    if keywords is None or not str(keywords).strip():
        raise MissingParameterError(
            "keywords",
            "Keywords are required but were not provided.",
            operation=Operation.SEARCH_ITEMS.api_name,
        )
    return SearchItemsRequest(keywords=str(keywords), resources=normalize_resources(resources))


def build_get_items_request(item_ids: object, resources: Sequence[str] = ()) -> GetItemsRequest:
    ids = split_ids(item_ids)
    if not ids:
        raise MissingParameterError(
            "itemIds",
            "Item IDs are required but were not provided.",
            operation=Operation.GET_ITEMS.api_name,
        )
    return GetItemsRequest(item_ids=ids, resources=normalize_resources(resources))


def build_get_browse_nodes_request(browse_node_ids: object) -> GetBrowseNodesRequest:
    ids = split_ids(browse_node_ids)
    if not ids:
        raise MissingParameterError(
            "browseNodeIds",
            "Browse Node IDs are required but were not provided.",
            operation=Operation.GET_BROWSE_NODES.api_name,
        )
    return GetBrowseNodesRequest(browse_node_ids=ids)


def resolve_partner_tag(override: Optional[str], credentials: AmazonPaApiCredentials) -> str:
    """Per-request tag wins over the credential default; one of them must be set."""
    partner_tag = override or credentials.partner_tag
    if not partner_tag:
        raise ConfigurationError(
            "PartnerTag is required but was not provided in both the request and credentials."
        )
    return partner_tag


def build_common_parameters(
    credentials: AmazonPaApiCredentials, override_partner_tag: Optional[str] = None
) -> CommonParameters:
    return CommonParameters(
        access_key=credentials.access_key,
        secret_key=credentials.secret_key,
        partner_tag=resolve_partner_tag(override_partner_tag, credentials),
        marketplace=credentials.marketplace.value,
    )
