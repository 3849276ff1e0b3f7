import httpx
import pytest
from solders.pubkey import Pubkey

from helius_mcp.config import HeliusConfig
from helius_mcp.helius_api import (
    HeliusApiError,
    HeliusRpcClient,
    MockHeliusClient,
    NodeUnreachableError,
    RateLimitedError,
    RpcError,
    UnauthorizedError,
    build_client,
)
from helius_mcp.helius_api.mock import MAX_MOCK_ITEMS

VALID_KEY = "GsbwXfJraMomNxBcjK7xK2xQx5MQgQx8Kb71Wkgwq1Bi"


class MockResponse:
    def __init__(self, status_code: int, json_body):
        self.status_code = status_code
        self._json = json_body

    def json(self):
        if isinstance(self._json, Exception):
            raise self._json
        return self._json


class MockAsyncClient:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    async def post(self, url, json=None):
        self.calls.append({"url": url, "json": json})
        if not self.responses:
            raise RuntimeError("No mock responses")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def aclose(self):
        return None


def _config(**overrides):
    values = dict(api_key="test-key", network="devnet", rpc_url=None, test_mode=False)
    values.update(overrides)
    return HeliusConfig(**values)


def _ok(result):
    return MockResponse(200, {"jsonrpc": "2.0", "id": 1, "result": result})


@pytest.mark.asyncio
async def test_posts_jsonrpc_envelope_to_network_endpoint():
    mock = MockAsyncClient([_ok({"context": {"slot": 1}, "value": 5})])
    client = HeliusRpcClient(_config(), async_client=mock)
    assert await client.get_balance(Pubkey.from_string(VALID_KEY), "confirmed") == 5
    call = mock.calls[0]
    assert call["url"] == "https://devnet.helius-rpc.com/?api-key=test-key"
    assert call["json"]["jsonrpc"] == "2.0"
    assert call["json"]["method"] == "getBalance"
    assert call["json"]["params"] == [VALID_KEY, {"commitment": "confirmed"}]


@pytest.mark.asyncio
async def test_rpc_url_override_wins():
    mock = MockAsyncClient([_ok(10)])
    client = HeliusRpcClient(_config(rpc_url="http://localhost:8899"), async_client=mock)
    assert await client.get_slot() == 10
    assert mock.calls[0]["url"] == "http://localhost:8899"
    assert mock.calls[0]["json"]["params"] == []


@pytest.mark.asyncio
async def test_request_ids_increment():
    mock = MockAsyncClient([_ok(1), _ok(2)])
    client = HeliusRpcClient(_config(), async_client=mock)
    await client.get_slot()
    await client.get_slot()
    assert [call["json"]["id"] for call in mock.calls] == [1, 2]


@pytest.mark.asyncio
async def test_rpc_error_object_raises_rpc_error():
    mock = MockAsyncClient(
        [MockResponse(200, {"jsonrpc": "2.0", "id": 1, "error": {"code": -32602, "message": "Invalid param"}})]
    )
    client = HeliusRpcClient(_config(), async_client=mock)
    with pytest.raises(RpcError) as excinfo:
        await client.get_balance(VALID_KEY)
    assert str(excinfo.value) == "Invalid param"
    assert excinfo.value.code == -32602


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [401, 403])
async def test_unauthorized_mapping(status):
    mock = MockAsyncClient([MockResponse(status, {})])
    client = HeliusRpcClient(_config(), async_client=mock)
    with pytest.raises(UnauthorizedError):
        await client.get_slot()


@pytest.mark.asyncio
async def test_rate_limited_mapping():
    mock = MockAsyncClient([MockResponse(429, {})])
    client = HeliusRpcClient(_config(), async_client=mock)
    with pytest.raises(RateLimitedError):
        await client.get_slot()


@pytest.mark.asyncio
async def test_http_error_without_body():
    mock = MockAsyncClient([MockResponse(502, ValueError("not json"))])
    client = HeliusRpcClient(_config(), async_client=mock)
    with pytest.raises(HeliusApiError) as excinfo:
        await client.get_slot()
    assert excinfo.value.status_code == 502


@pytest.mark.asyncio
async def test_missing_result_is_unexpected():
    mock = MockAsyncClient([MockResponse(200, {"jsonrpc": "2.0", "id": 1})])
    client = HeliusRpcClient(_config(), async_client=mock)
    with pytest.raises(HeliusApiError):
        await client.get_slot()


@pytest.mark.asyncio
async def test_null_result_passes_through():
    mock = MockAsyncClient([_ok(None)])
    client = HeliusRpcClient(_config(), async_client=mock)
    assert await client.get_transaction("missing") is None


@pytest.mark.asyncio
async def test_transport_failure_maps_to_unreachable():
    mock = MockAsyncClient([httpx.ConnectError("refused")])
    client = HeliusRpcClient(_config(), async_client=mock)
    with pytest.raises(NodeUnreachableError):
        await client.get_health()


@pytest.mark.asyncio
async def test_das_methods_use_named_params():
    mock = MockAsyncClient([_ok({"items": []})])
    client = HeliusRpcClient(_config(), async_client=mock)
    await client.get_assets_by_owner(Pubkey.from_string(VALID_KEY), limit=10)
    assert mock.calls[0]["json"]["method"] == "getAssetsByOwner"
    assert mock.calls[0]["json"]["params"] == {"ownerAddress": VALID_KEY, "page": 1, "limit": 10}


@pytest.mark.asyncio
async def test_search_assets_stringifies_addresses():
    mock = MockAsyncClient([_ok({"items": []})])
    client = HeliusRpcClient(_config(), async_client=mock)
    await client.search_assets({"ownerAddress": Pubkey.from_string(VALID_KEY), "burnt": False})
    assert mock.calls[0]["json"]["params"] == {"ownerAddress": VALID_KEY, "burnt": False, "page": 1}


@pytest.mark.asyncio
async def test_jito_calls_go_to_block_engine():
    mock = MockAsyncClient([_ok("bundle-1")])
    client = HeliusRpcClient(_config(jito_api_url="https://jito.example/"), async_client=mock)
    assert await client.send_jito_bundle(["tx"]) == "bundle-1"
    assert mock.calls[0]["url"] == "https://jito.example/api/v1/bundles"
    assert mock.calls[0]["json"]["params"] == [["tx"]]


@pytest.mark.asyncio
async def test_injected_client_is_not_closed():
    closed = []

    class Closing(MockAsyncClient):
        async def aclose(self):
            closed.append(True)

    client = HeliusRpcClient(_config(), async_client=Closing([]))
    await client.aclose()
    assert closed == []


def test_build_client_selects_mock_in_test_mode():
    assert isinstance(build_client(_config(test_mode=True)), MockHeliusClient)
    assert isinstance(build_client(_config(test_mode=False)), HeliusRpcClient)


@pytest.mark.asyncio
async def test_mock_caps_caller_sized_lists():
    mock = MockHeliusClient()
    huge = 10**9
    assert len(await mock.get_blocks(0, huge)) == MAX_MOCK_ITEMS
    assert len(await mock.get_blocks_with_limit(5, huge)) == MAX_MOCK_ITEMS
    assert len(await mock.get_slot_leaders(0, huge)) == MAX_MOCK_ITEMS
    assert len(await mock.get_signatures_for_address(Pubkey.default(), limit=huge)) == MAX_MOCK_ITEMS
    assert len(await mock.get_recent_performance_samples(limit=huge)) == MAX_MOCK_ITEMS
    assert await mock.get_blocks_with_limit(5, 3) == [5, 6, 7]
