"""Tests for AmazonPANode - dispatch, partner tag resolution and failures."""

import logging

import pytest

from nodes.amazon_pa import DEFAULT_RESOURCES, AmazonPANode
from orchestration import UNSET
from paapi_sdk.errors import (
    ConfigurationError,
    ErrorKind,
    MissingParameterError,
    TransportError,
)


@pytest.mark.asyncio
async def test_search_items_sends_keywords_and_resources(fake_client, make_context):
    """Test SearchItems gets the exact keywords and the chosen resources."""
    node = AmazonPANode(client=fake_client)
    context = make_context(
        {
            "operation": "searchItems",
            "keywords": "mechanical keyboard",
            "resources": ["ItemInfo.Title", "Offers.Listings.Price"],
        }
    )

    await node.execute(context)

    assert len(fake_client.calls) == 1
    name, common, request = fake_client.calls[0]
    assert name == "SearchItems"
    assert request == {
        "Keywords": "mechanical keyboard",
        "Resources": ["ItemInfo.Title", "Offers.Listings.Price"],
    }
    assert common.partner_type == "Associates"


@pytest.mark.asyncio
async def test_search_items_omits_empty_resources(fake_client, make_context):
    """Test Resources is left out entirely when the list is empty."""
    node = AmazonPANode(client=fake_client)
    context = make_context({"operation": "searchItems", "keywords": "kindle", "resources": []})

    await node.execute(context)

    _, _, request = fake_client.calls[0]
    assert request == {"Keywords": "kindle"}
    assert "Resources" not in request


@pytest.mark.asyncio
async def test_unset_resources_use_node_default(fake_client, make_context):
    """Test the declared default resource list applies when resources is unset."""
    node = AmazonPANode(client=fake_client)
    context = make_context({"operation": "searchItems", "keywords": "kindle"})

    await node.execute(context)

    _, _, request = fake_client.calls[0]
    assert request["Resources"] == list(DEFAULT_RESOURCES)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "item_ids,expected",
    [
        ("B001,B002", ["B001", "B002"]),
        ("B001", ["B001"]),
    ],
)
async def test_get_items_splits_item_ids(fake_client, make_context, item_ids, expected):
    """Test comma-separated ASINs become a list, a single one is wrapped."""
    node = AmazonPANode(client=fake_client)
    context = make_context({"operation": "getItems", "itemIds": item_ids, "resources": []})

    await node.execute(context)

    name, _, request = fake_client.calls[0]
    assert name == "GetItems"
    assert request == {"ItemIds": expected}


@pytest.mark.asyncio
async def test_get_browse_nodes_ignores_resources(fake_client, make_context):
    """Test GetBrowseNodes only sends BrowseNodeIds."""
    node = AmazonPANode(client=fake_client)
    context = make_context(
        {
            "operation": "getBrowseNodes",
            "browseNodeIds": "283155,1000",
            "resources": ["ItemInfo.Title"],
        }
    )

    await node.execute(context)

    name, _, request = fake_client.calls[0]
    assert name == "GetBrowseNodes"
    assert request == {"BrowseNodeIds": ["283155", "1000"]}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "parameters,missing",
    [
        ({"operation": "getItems", "itemIds": ""}, "itemIds"),
        ({"operation": "searchItems", "keywords": ""}, "keywords"),
        ({"operation": "getBrowseNodes"}, "browseNodeIds"),
    ],
)
async def test_missing_required_field_fails_before_call(
    fake_client, make_context, parameters, missing
):
    """Test a missing operation-required field never reaches the client."""
    node = AmazonPANode(client=fake_client)

    with pytest.raises(MissingParameterError) as exc_info:
        await node.execute(make_context(parameters))

    assert exc_info.value.kind is ErrorKind.MISSING_PARAMETER
    assert exc_info.value.parameter == missing
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_credential_partner_tag_used_when_request_empty(fake_client, make_context):
    """Test the credential default fills an empty request partner tag."""
    node = AmazonPANode(client=fake_client)
    context = make_context({"operation": "searchItems", "keywords": "tv", "partnerTag": ""})

    await node.execute(context)

    _, common, _ = fake_client.calls[0]
    assert common.partner_tag == "tagA"


@pytest.mark.asyncio
async def test_request_partner_tag_overrides_credential(fake_client, make_context):
    """Test a request partner tag wins over the credential default."""
    node = AmazonPANode(client=fake_client)
    context = make_context({"operation": "searchItems", "keywords": "tv", "partnerTag": "tagB"})

    await node.execute(context)

    _, common, _ = fake_client.calls[0]
    assert common.partner_tag == "tagB"
    assert common.to_payload()["PartnerTag"] == "tagB"


@pytest.mark.asyncio
async def test_no_partner_tag_fails_whole_batch(fake_client, make_context, credentials):
    """Test the batch fails with ConfigurationError before any item is sent."""
    node = AmazonPANode(client=fake_client)
    creds = {**credentials, "partnerTag": ""}
    context = make_context(
        {"operation": "searchItems", "keywords": "tv", "partnerTag": ""},
        items=[{}, {}, {}],
        creds=creds,
    )

    with pytest.raises(ConfigurationError) as exc_info:
        await node.execute(context)

    assert "PartnerTag is required" in str(exc_info.value)
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_raw_response_is_passed_through(make_client, make_context):
    """Test the client response is the unmodified output item json."""
    body = {"SearchResult": {"Items": [{"ASIN": "B00X4WHP5E"}], "TotalResultCount": 1}}
    client = make_client(responses={"SearchItems": body})
    node = AmazonPANode(client=client)

    output = await node.execute(make_context({"operation": "searchItems", "keywords": "tv"}))

    assert len(output) == 1
    assert len(output[0]) == 1
    assert output[0][0].json is body
    assert output[0][0].paired_item == 0


@pytest.mark.asyncio
async def test_transport_error_is_wrapped_with_operation(make_client, make_context):
    """Test a client failure carries the operation name and original text."""
    client = make_client(error=RuntimeError("timeout"))
    node = AmazonPANode(client=client)

    with pytest.raises(TransportError) as exc_info:
        await node.execute(make_context({"operation": "getItems", "itemIds": "B001"}))

    message = str(exc_info.value)
    assert "timeout" in message
    assert "GetItems" in message
    assert message == "Failed to execute GetItems operation: timeout"
    assert isinstance(exc_info.value.cause, RuntimeError)


@pytest.mark.asyncio
async def test_error_without_message_uses_unknown_error_text(make_client, make_context):
    """Test a bare exception produces the unknown-error message."""
    client = make_client(error=RuntimeError())
    node = AmazonPANode(client=client)

    with pytest.raises(TransportError) as exc_info:
        await node.execute(make_context({"operation": "searchItems", "keywords": "tv"}))

    assert str(exc_info.value) == (
        "Failed to execute SearchItems operation due to an unknown error."
    )


@pytest.mark.asyncio
async def test_client_transport_error_gets_operation_filled_in(make_client, make_context):
    """Test a TransportError raised by the client without operation is tagged."""
    client = make_client(error=TransportError(detail="InvalidSignature", status=401))
    node = AmazonPANode(client=client)

    with pytest.raises(TransportError) as exc_info:
        await node.execute(make_context({"operation": "getBrowseNodes", "browseNodeIds": "1"}))

    assert exc_info.value.operation == "GetBrowseNodes"
    assert str(exc_info.value) == "Failed to execute GetBrowseNodes operation: InvalidSignature"
    assert exc_info.value.status == 401


@pytest.mark.asyncio
async def test_items_processed_in_order_and_failure_stops_batch(make_client, make_context):
    """Test items go out in input order and the first failure stops the rest."""
    client = make_client(error=RuntimeError("throttled"))
    client.fail_on_call = 2
    node = AmazonPANode(client=client)
    context = make_context(
        {"operation": "getItems", "itemIds": lambda item: item.json["asin"], "resources": []},
        items=[{"asin": "B001"}, {"asin": "B002"}, {"asin": "B003"}],
    )

    with pytest.raises(TransportError, match="throttled"):
        await node.execute(context)

    assert [request["ItemIds"] for _, _, request in client.calls] == [["B001"], ["B002"]]


@pytest.mark.asyncio
async def test_per_item_operation_selector(fake_client, make_context):
    """Test each item may pick its own operation."""
    node = AmazonPANode(client=fake_client)
    context = make_context(
        {
            "operation": lambda item: item.json["op"],
            "keywords": "tv",
            "itemIds": "B001",
            "browseNodeIds": "42",
        },
        items=[{"op": "searchItems"}, {"op": "getItems"}, {"op": "getBrowseNodes"}],
    )

    output = await node.execute(context)

    assert [name for name, _, _ in fake_client.calls] == [
        "SearchItems",
        "GetItems",
        "GetBrowseNodes",
    ]
    assert [item.paired_item for item in output[0]] == [0, 1, 2]


@pytest.mark.asyncio
async def test_unknown_operation_is_an_error(fake_client, make_context):
    """Test an unrecognized selector fails instead of silently producing nothing."""
    node = AmazonPANode(client=fake_client)

    with pytest.raises(ConfigurationError, match="Unsupported operation 'getReviews'"):
        await node.execute(make_context({"operation": "getReviews"}))

    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_missing_credentials_raise_lookup_error(fake_client, make_context):
    """Test the node refuses to run without its credentials."""
    node = AmazonPANode(client=fake_client)
    context = make_context({"operation": "searchItems", "keywords": "tv"})
    context.credentials = {}

    with pytest.raises(LookupError):
        await node.execute(context)


@pytest.mark.asyncio
async def test_empty_batch_returns_empty_branch(fake_client, make_context):
    """Test no input items means no calls and an empty output branch."""
    node = AmazonPANode(client=fake_client)

    output = await node.execute(make_context({"operation": "searchItems"}, items=[]))

    assert output == [[]]
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_secret_key_is_never_logged(fake_client, make_context, caplog):
    """Test request logging redacts the secret key."""
    node = AmazonPANode(client=fake_client)

    with caplog.at_level(logging.INFO, logger="nodes.amazon_pa"):
        await node.execute(make_context({"operation": "searchItems", "keywords": "tv"}))

    assert "SearchItems" in caplog.text
    assert "super-secret-value" not in caplog.text


@pytest.mark.asyncio
async def test_invalid_stored_marketplace_is_configuration_error(
    fake_client, make_context, credentials
):
    """Test a credential marketplace outside the list fails as ConfigurationError."""
    node = AmazonPANode(client=fake_client)
    context = make_context(
        {"operation": "searchItems", "keywords": "tv"},
        creds={**credentials, "marketplace": "bogus"},
    )

    with pytest.raises(ConfigurationError) as exc_info:
        await node.execute(context)

    assert exc_info.value.kind is ErrorKind.CONFIGURATION
    assert "marketplace" in str(exc_info.value)
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_whitespace_keywords_fail_as_missing(fake_client, make_context):
    """Test keywords made only of whitespace are rejected before any call."""
    node = AmazonPANode(client=fake_client)

    with pytest.raises(MissingParameterError) as exc_info:
        await node.execute(make_context({"operation": "searchItems", "keywords": "  \t "}))

    assert exc_info.value.parameter == "keywords"
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_expression_returning_unset_uses_default_resources(fake_client, make_context):
    """Test an item whose expression leaves resources unset gets the declared default."""
    node = AmazonPANode(client=fake_client)
    context = make_context(
        {
            "operation": "searchItems",
            "keywords": "tv",
            "resources": lambda item: item.json.get("resources", UNSET),
        },
        items=[{"resources": ["ItemInfo.Title"]}, {}],
    )

    await node.execute(context)

    assert [request["Resources"] for _, _, request in fake_client.calls] == [
        ["ItemInfo.Title"],
        list(DEFAULT_RESOURCES),
    ]
