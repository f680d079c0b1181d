"""Amazon PA node - turns each input item into one PA-API call."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Optional

from paapi_sdk.client import CommonParameters, PAAPIClient, Paapi5Client
from paapi_sdk.errors import PAAPIError, TransportError
from paapi_sdk.logging import get_logger

from core.settings.amazon_pa_settings import AmazonPaApiCredentials
from orchestration.models import ExecutionContext, NodeExecutionData

from .credentials import CREDENTIAL_NAME
from .description import AMAZON_PA_NODE_DESCRIPTION
from .requests import (
    Operation,
    OperationRequest,
    build_common_parameters,
    build_get_browse_nodes_request,
    build_get_items_request,
    build_search_items_request,
)

logger = get_logger("nodes.amazon_pa")

ClientCall = Callable[[CommonParameters, Dict[str, Any]], Awaitable[Any]]


def build_request(context: ExecutionContext, index: int, operation: Operation) -> OperationRequest:
    """Read the fields ``operation`` needs from item ``index`` and build its request."""
    if operation is Operation.SEARCH_ITEMS:
        return build_search_items_request(
            context.get_node_parameter("keywords", index),
            context.get_node_parameter("resources", index),
        )
    if operation is Operation.GET_ITEMS:
        return build_get_items_request(
            context.get_node_parameter("itemIds", index),
            context.get_node_parameter("resources", index),
        )
    return build_get_browse_nodes_request(
        context.get_node_parameter("browseNodeIds", index)
    )


class AmazonPANode:
    """Amazon Product Advertising API node.

    Items are processed one at a time in input order. The first failure
    stops the batch; nothing after it is sent.

    Keywords made only of whitespace count as missing and fail the item
    with ``MissingParameterError``; any other keywords are sent verbatim.
    """

    description = AMAZON_PA_NODE_DESCRIPTION

    def __init__(self, client: Optional[PAAPIClient] = None) -> None:
        self._client = client if client is not None else Paapi5Client()

    async def execute(self, context: ExecutionContext) -> list[list[NodeExecutionData]]:
        items = context.get_input_data()
        credentials = AmazonPaApiCredentials.from_mapping(context.get_credentials(CREDENTIAL_NAME))

        # Resolved once per batch, before any item is sent
        common = build_common_parameters(
            credentials, context.get_node_parameter("partnerTag", 0, "")
        )

        return_data: list[NodeExecutionData] = []
        for index in range(len(items)):
            operation = Operation.parse(context.get_node_parameter("operation", index))
            request = build_request(context, index, operation)
            response = await self._dispatch(operation, common, request.to_payload())
            return_data.append(NodeExecutionData(json=response, paired_item=index))

        return [return_data]

    def _client_call(self, operation: Operation) -> ClientCall:
        calls = {
            Operation.SEARCH_ITEMS: self._client.search_items,
            Operation.GET_ITEMS: self._client.get_items,
            Operation.GET_BROWSE_NODES: self._client.get_browse_nodes,
        }
        return calls[operation]

    async def _dispatch(
        self, operation: Operation, common: CommonParameters, payload: Dict[str, Any]
    ) -> Any:
        logger.info(f"{operation.api_name} common parameters: {common.redacted()}")
        logger.info(f"{operation.api_name} request parameters: {payload}")

        try:
            response = await self._client_call(operation)(common, payload)
        except PAAPIError as exc:
            if exc.operation is None:
                exc.operation = operation.api_name
            logger.error(f"API request error: {exc}")
            raise
        except Exception as exc:
            error = TransportError.from_exception(exc, operation=operation.api_name)
            logger.error(f"API request error: {error}")
            raise error from exc

        logger.debug(f"{operation.api_name} response: {response}")
        return response
