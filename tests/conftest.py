"""Shared fakes and fixtures."""

from typing import Any

import pytest

from nodes.amazon_pa import AMAZON_PA_NODE_DESCRIPTION, CREDENTIAL_NAME
from orchestration.models import ExecutionContext, NodeExecutionData


class FakePAAPIClient:
    """PAAPIClient that records calls instead of going to Amazon."""

    def __init__(
        self, responses: dict[str, Any] | None = None, error: Exception | None = None
    ) -> None:
        self.calls: list[tuple[str, Any, dict]] = []
        self.responses = responses or {}
        self.error = error
        # 1-based call number that raises ``error``; None means every call
        self.fail_on_call: int | None = None

    async def _record(self, name: str, common: Any, request: dict) -> Any:
        self.calls.append((name, common, request))
        if self.error is not None and (
            self.fail_on_call is None or self.fail_on_call == len(self.calls)
        ):
            raise self.error
        return self.responses.get(name, {"operation": name, "request": request})

    async def search_items(self, common: Any, request: dict) -> Any:
        return await self._record("SearchItems", common, request)

    async def get_items(self, common: Any, request: dict) -> Any:
        return await self._record("GetItems", common, request)

    async def get_browse_nodes(self, common: Any, request: dict) -> Any:
        return await self._record("GetBrowseNodes", common, request)


@pytest.fixture
def fake_client() -> FakePAAPIClient:
    return FakePAAPIClient()


@pytest.fixture
def credentials() -> dict[str, str]:
    """Credential mapping the way the host stores it."""
    return {
        "accessKey": "AKIAEXAMPLE",
        "secretKey": "super-secret-value",
        "partnerTag": "tagA",
        "marketplace": "www.amazon.com",
    }


@pytest.fixture
def make_context(credentials):
    """Build an ExecutionContext for the Amazon PA node."""

    def _make(
        parameters: dict[str, Any],
        items: list[dict] | None = None,
        creds: dict[str, str] | None = None,
    ) -> ExecutionContext:
        return ExecutionContext(
            description=AMAZON_PA_NODE_DESCRIPTION,
            items=[NodeExecutionData(json=item) for item in (items if items is not None else [{}])],
            parameters=parameters,
            credentials={CREDENTIAL_NAME: creds if creds is not None else credentials},
        )

    return _make


@pytest.fixture
def make_client():
    """Factory for FakePAAPIClient with canned responses or an error."""
    return FakePAAPIClient
