"""
Amazon PA API endpoints.

Runs the Amazon PA node over a posted batch, with credentials taken from
the environment.
"""
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field
import logging

from api.dependencies import (
    get_amazon_pa_credentials,
    get_amazon_pa_node,
    get_workflow_runner,
)
from core.settings import AmazonPaApiCredentials
from nodes.amazon_pa import CREDENTIAL_NAME, AmazonPANode
from orchestration import UNSET, NodeExecutionData, WorkflowRunner, create_single_node_workflow
from paapi_sdk.errors import ErrorKind, PAAPIError


logger = logging.getLogger(__name__)
router = APIRouter()

_NODE_PARAMETERS = ("operation", "partnerTag", "keywords", "itemIds", "browseNodeIds", "resources")

_STATUS_BY_KIND = {
    ErrorKind.MISSING_PARAMETER: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFIGURATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.TRANSPORT: status.HTTP_502_BAD_GATEWAY,
}


class ExecuteRequestDTO(BaseModel):
    """Node parameters plus the input items they are applied to."""

    model_config = ConfigDict(populate_by_name=True)

    operation: str = "searchItems"
    partner_tag: str = Field("", alias="partnerTag")
    keywords: Optional[str] = None
    item_ids: Optional[str] = Field(None, alias="itemIds")
    browse_node_ids: Optional[str] = Field(None, alias="browseNodeIds")
    resources: Optional[list[str]] = None
    items: list[dict[str, Any]] = Field(
        default_factory=lambda: [{}],
        description="Input items; a key named like a parameter overrides it for that item",
    )

    def node_parameters(self) -> dict[str, Any]:
        fixed = self.model_dump(by_alias=True, exclude={"items"}, exclude_none=True)
        parameters = {}
        for name in _NODE_PARAMETERS:
            # unset parameters fall back to the node description defaults
            if name in fixed or any(name in item for item in self.items):
                parameters[name] = _per_item(name, fixed.get(name, UNSET))
        return parameters


def _per_item(name: str, fallback: Any):
    def resolve(item: NodeExecutionData) -> Any:
        data = item.json if isinstance(item.json, dict) else {}
        return data.get(name, fallback)

    return resolve


class ExecuteResponseDTO(BaseModel):
    operation: str
    count: int
    results: list[Any]


@router.post(
    "/execute",
    response_model=ExecuteResponseDTO,
    status_code=status.HTTP_200_OK,
    summary="Run the Amazon PA node",
    description="""
    Run one PA-API operation per input item.

    **Operations:** `searchItems`, `getItems`, `getBrowseNodes`.

    The first failing item stops the batch and the error is returned.
    """,
)
async def execute_amazon_pa(
    request: ExecuteRequestDTO,
    node: AmazonPANode = Depends(get_amazon_pa_node),
    runner: WorkflowRunner = Depends(get_workflow_runner),
    credentials: AmazonPaApiCredentials = Depends(get_amazon_pa_credentials),
):
    logger.info(f"API: Amazon PA {request.operation} for {len(request.items)} item(s)")

    workflow = create_single_node_workflow(
        name="amazon-pa",
        node=node,
        parameters=request.node_parameters(),
        credentials={CREDENTIAL_NAME: credentials.model_dump(mode="json")},
    )
    result = await runner.run(workflow, [NodeExecutionData(json=item) for item in request.items])

    failed = next((step for step in result.steps if not step.success), None)
    if failed is not None:
        exc = failed.exception
        if isinstance(exc, PAAPIError):
            raise HTTPException(status_code=_STATUS_BY_KIND[exc.kind], detail=exc.to_dict())
        logger.error(f"Amazon PA node failed: {failed.error}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "internal", "detail": failed.error},
        )

    results = [item.json for item in result.output]
    return ExecuteResponseDTO(operation=request.operation, count=len(results), results=results)
