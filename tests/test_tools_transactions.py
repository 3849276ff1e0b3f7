import pytest

from helius_mcp.helius_api import RpcError
from helius_mcp.tools.envelope import ErrorKind
from helius_mcp.tools.transactions import (
    get_fee_for_message,
    get_priority_fee_estimate,
    get_recent_prioritization_fees,
    get_signature_statuses,
    get_signatures_for_address,
    get_transaction,
    get_transaction_count,
    send_transaction,
    simulate_transaction,
)

VALID_KEY = "GsbwXfJraMomNxBcjK7xK2xQx5MQgQx8Kb71Wkgwq1Bi"


@pytest.mark.asyncio
async def test_get_transaction_not_found(mock_client):
    result = await get_transaction({"signature": "non-existent-signature"}, client=mock_client)
    assert result.to_dict() == {
        "isError": True,
        "content": [
            {"type": "text", "text": "Transaction not found for signature: non-existent-signature"}
        ],
    }
    assert result.kind is ErrorKind.NOT_FOUND


@pytest.mark.asyncio
async def test_get_transaction_found(mock_client):
    result = await get_transaction({"signature": "5abc"}, client=mock_client)
    assert not result.is_error
    assert result.text.startswith("Transaction details: ")
    assert "5abc" in result.text


@pytest.mark.asyncio
async def test_get_transaction_missing_signature(mock_client):
    result = await get_transaction({}, client=mock_client)
    assert result.kind is ErrorKind.VALIDATION
    assert result.text == "Missing required parameter: signature"


@pytest.mark.asyncio
async def test_signatures_for_address(mock_client):
    result = await get_signatures_for_address({"address": VALID_KEY, "limit": 2}, client=mock_client)
    assert "MockSignature0" in result.text
    assert "MockSignature1" in result.text
    assert "MockSignature2" not in result.text


@pytest.mark.asyncio
async def test_signatures_for_address_invalid(mock_client):
    result = await get_signatures_for_address({"address": "xyz"}, client=mock_client)
    assert result.text == "Invalid public key: xyz"


@pytest.mark.asyncio
async def test_signature_statuses(mock_client):
    result = await get_signature_statuses({"signatures": ["a", "b"]}, client=mock_client)
    assert result.text.count("finalized") == 2


@pytest.mark.asyncio
async def test_transaction_count(mock_client):
    result = await get_transaction_count({}, client=mock_client)
    assert result.text == "Transaction count: 987654321"


@pytest.mark.asyncio
async def test_send_transaction_forwards_options():
    seen = {}

    class StubClient:
        async def send_transaction(self, transaction, skip_preflight=None, max_retries=None, preflight_commitment=None):
            seen.update(tx=transaction, skip=skip_preflight, retries=max_retries, commitment=preflight_commitment)
            return "Sig111"

    result = await send_transaction(
        {"transaction": "AQID", "options": {"skipPreflight": True, "maxRetries": 3}},
        client=StubClient(),
    )
    assert result.text == "Transaction sent: Sig111"
    assert seen == {"tx": "AQID", "skip": True, "retries": 3, "commitment": None}


@pytest.mark.asyncio
async def test_send_transaction_rejected():
    class StubClient:
        async def send_transaction(self, *_args, **_kwargs):
            raise RpcError("Transaction simulation failed: Blockhash not found", code=-32002)

    result = await send_transaction({"transaction": "AQID"}, client=StubClient())
    assert result.is_error
    assert result.text == "Error sending transaction: Transaction simulation failed: Blockhash not found"


@pytest.mark.asyncio
async def test_simulate_transaction(mock_client):
    result = await simulate_transaction({"transaction": "AQID", "sigVerify": False}, client=mock_client)
    assert "Transaction simulation result" in result.text
    assert '"unitsConsumed": 150' in result.text


@pytest.mark.asyncio
async def test_fee_for_message(mock_client):
    result = await get_fee_for_message({"message": "AQAB"}, client=mock_client)
    assert '"value": 5000' in result.text


@pytest.mark.asyncio
async def test_recent_prioritization_fees_optional_addresses(mock_client):
    without = await get_recent_prioritization_fees({}, client=mock_client)
    assert not without.is_error

    bad = await get_recent_prioritization_fees({"addresses": ["bad"]}, client=mock_client)
    assert bad.text == "Invalid public key: bad"


@pytest.mark.asyncio
async def test_priority_fee_estimate(mock_client):
    result = await get_priority_fee_estimate(
        {"accountKeys": [VALID_KEY], "options": {"priorityLevel": "high"}}, client=mock_client
    )
    assert result.text == 'Priority fee estimate: {\n  "priorityFeeEstimate": 10000\n}'
