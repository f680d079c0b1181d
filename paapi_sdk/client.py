"""
PA-API client contract and default implementation.

Signing, transport and paging belong to ``paapi5-python-sdk``; this module
only maps the node's request records onto the SDK's request models and
hands back the response body in its wire form.
"""
from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from paapi5_python_sdk.api.default_api import DefaultApi
from paapi5_python_sdk.models.get_browse_nodes_request import GetBrowseNodesRequest
from paapi5_python_sdk.models.get_items_request import GetItemsRequest
from paapi5_python_sdk.models.search_items_request import SearchItemsRequest
from paapi5_python_sdk.rest import ApiException

from .errors import TransportError
from .logging import get_logger
from .marketplaces import Marketplace

logger = get_logger("paapi_sdk.client")

PARTNER_TYPE = "Associates"


@dataclass(frozen=True)
class CommonParameters:
    """Account-level parameters sent with every request."""

    access_key: str
    secret_key: str
    partner_tag: str
    marketplace: str = Marketplace.US.value
    partner_type: str = PARTNER_TYPE

    def to_payload(self) -> Dict[str, str]:
        return {
            "AccessKey": self.access_key,
            "SecretKey": self.secret_key,
            "PartnerTag": self.partner_tag,
            "Marketplace": self.marketplace,
            "PartnerType": self.partner_type,
        }

    def redacted(self) -> Dict[str, str]:
        """Payload safe to log."""
        payload = self.to_payload()
        payload["SecretKey"] = "***"
        return payload


class PAAPIClient(Protocol):
    """The three read-only PA-API operations the node can call."""

    async def search_items(self, common: CommonParameters, request: Dict[str, Any]) -> Any:
        """SearchItems with ``{"Keywords", "Resources"?}``."""
        ...

    async def get_items(self, common: CommonParameters, request: Dict[str, Any]) -> Any:
        """GetItems with ``{"ItemIds", "Resources"?}``."""
        ...

    async def get_browse_nodes(self, common: CommonParameters, request: Dict[str, Any]) -> Any:
        """GetBrowseNodes with ``{"BrowseNodeIds"}``."""
        ...


class Paapi5Client:
    """PAAPIClient backed by the official ``paapi5-python-sdk``."""

    def __init__(self) -> None:
        self._apis: Dict[Tuple[str, str, str], DefaultApi] = {}

    async def search_items(self, common: CommonParameters, request: Dict[str, Any]) -> Any:
        sdk_request = SearchItemsRequest(
            partner_tag=common.partner_tag,
            partner_type=common.partner_type,
            marketplace=common.marketplace,
            keywords=request["Keywords"],
            resources=request.get("Resources"),
        )
        return await self._call("SearchItems", common, lambda api: api.search_items, sdk_request)

    async def get_items(self, common: CommonParameters, request: Dict[str, Any]) -> Any:
        sdk_request = GetItemsRequest(
            partner_tag=common.partner_tag,
            partner_type=common.partner_type,
            marketplace=common.marketplace,
            item_ids=list(request["ItemIds"]),
            resources=request.get("Resources"),
        )
        return await self._call("GetItems", common, lambda api: api.get_items, sdk_request)

    async def get_browse_nodes(self, common: CommonParameters, request: Dict[str, Any]) -> Any:
        sdk_request = GetBrowseNodesRequest(
            partner_tag=common.partner_tag,
            partner_type=common.partner_type,
            marketplace=common.marketplace,
            browse_node_ids=list(request["BrowseNodeIds"]),
            resources=request.get("Resources"),
        )
        return await self._call(
            "GetBrowseNodes", common, lambda api: api.get_browse_nodes, sdk_request
        )

    def api_for(self, common: CommonParameters) -> DefaultApi:
        """Return the cached SDK api for this account and marketplace."""
        key = (common.access_key, common.secret_key, common.marketplace)
        api = self._apis.get(key)
        if api is None:
            endpoint = Marketplace(common.marketplace).endpoint
            api = DefaultApi(
                access_key=common.access_key,
                secret_key=common.secret_key,
                host=endpoint.host,
                region=endpoint.region,
            )
            self._apis[key] = api
            logger.info(f"Created PA-API client for {common.marketplace} ({endpoint.host})")
        return api

    async def _call(
        self,
        operation: str,
        common: CommonParameters,
        method: Callable[[DefaultApi], Callable[[Any], Any]],
        sdk_request: Any,
    ) -> Any:
        api = self.api_for(common)
        # DefaultApi is blocking, so it runs in the default executor
        loop = asyncio.get_running_loop()
        try:
            response = await loop.run_in_executor(None, partial(method(api), sdk_request))
        except ApiException as exc:
            raise TransportError(
                detail=_api_exception_message(exc),
                operation=operation,
                cause=exc,
                status=exc.status,
            ) from exc
        return api.api_client.sanitize_for_serialization(response)


def _api_exception_message(exc: ApiException) -> Optional[str]:
    """Pull ``Errors[0].Message`` out of a PA-API error body."""
    body = exc.body
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if body:
        try:
            errors = json.loads(body).get("Errors") or []
        except (ValueError, AttributeError):
            errors = []
        if errors and isinstance(errors[0], dict) and errors[0].get("Message"):
            code = errors[0].get("Code")
            message = errors[0]["Message"]
            return f"{code}: {message}" if code else message
    if exc.status or exc.reason:
        return f"HTTP {exc.status} {exc.reason or ''}".strip()
    return None
