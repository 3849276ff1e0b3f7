import pytest

from helius_mcp import mcp
from helius_mcp.helius_api import HeliusRpcClient, MockHeliusClient, RpcError
from helius_mcp.tools import ALL_TOOLS
from helius_mcp.tools.envelope import ErrorKind

VALID_KEY = "GsbwXfJraMomNxBcjK7xK2xQx5MQgQx8Kb71Wkgwq1Bi"


SUCCESS_LABELS = {
    "helius_get_balance": "Balance: ",
    "helius_get_account_info": "Account info: ",
    "helius_get_multiple_accounts": "Multiple accounts: ",
    "helius_get_program_accounts": "Program accounts: ",
    "helius_get_minimum_balance_for_rent_exemption": "Minimum balance for rent exemption: ",
    "helius_get_inflation_reward": "Inflation rewards: ",
    "helius_request_airdrop": "Airdrop requested: ",
    "helius_get_token_accounts_by_owner": "Context: ",
    "helius_get_token_accounts_by_delegate": "Token accounts by delegate: ",
    "helius_get_token_supply": "Token supply: ",
    "helius_get_token_account_balance": "Token balance: ",
    "helius_get_block_height": "Block height: ",
    "helius_get_slot": "Current slot: ",
    "helius_get_latest_blockhash": "Latest blockhash: ",
    "helius_is_blockhash_valid": "Blockhash validity: ",
    "helius_get_block": "Block details: ",
    "helius_get_block_time": "Block time: ",
    "helius_get_block_commitment": "Block commitment: ",
    "helius_get_blocks": "Blocks: ",
    "helius_get_blocks_with_limit": "Blocks: ",
    "helius_get_first_available_block": "First available block: ",
    "helius_get_block_production": "Block production: ",
    "helius_minimum_ledger_slot": "Minimum ledger slot: ",
    "helius_get_highest_snapshot_slot": "Highest snapshot slot: ",
    "helius_get_max_retransmit_slot": "Maximum retransmit slot: ",
    "helius_get_max_shred_insert_slot": "Maximum shred insert slot: ",
    "helius_get_slot_leader": "Slot leader: ",
    "helius_get_slot_leaders": "Slot leaders: ",
    "helius_get_transaction": "Transaction details: ",
    "helius_get_signatures_for_address": "Signatures: ",
    "helius_get_signature_statuses": "Signature statuses: ",
    "helius_get_transaction_count": "Transaction count: ",
    "helius_send_transaction": "Transaction sent: ",
    "helius_simulate_transaction": "Transaction simulation result: ",
    "helius_get_fee_for_message": "Fee for message: ",
    "helius_get_recent_prioritization_fees": "Recent prioritization fees: ",
    "helius_get_priority_fee_estimate": "Priority fee estimate: ",
    "helius_get_epoch_info": "Epoch info: ",
    "helius_get_epoch_schedule": "Epoch schedule: ",
    "helius_get_leader_schedule": "Leader schedule: ",
    "helius_get_recent_performance_samples": "Recent performance samples: ",
    "helius_get_version": "Version: ",
    "helius_get_health": "Health: ",
    "helius_get_cluster_nodes": "Cluster nodes: ",
    "helius_get_identity": "Identity: ",
    "helius_get_genesis_hash": "Genesis hash: ",
    "helius_get_vote_accounts": "Vote accounts: ",
    "helius_get_inflation_governor": "Inflation governor: ",
    "helius_get_inflation_rate": "Inflation rate: ",
    "helius_get_supply": "Supply info: ",
    "helius_get_stake_minimum_delegation": "Minimum stake delegation: ",
    "helius_get_asset": "Asset details: ",
    "helius_get_rwa_asset": "RWA Asset details: ",
    "helius_get_asset_batch": "Asset batch details: ",
    "helius_get_asset_proof": "Asset proof: ",
    "helius_get_assets_by_group": "Assets by group: ",
    "helius_get_assets_by_owner": "Assets by owner: ",
    "helius_get_assets_by_creator": "Assets by creator: ",
    "helius_get_assets_by_authority": "Assets by authority: ",
    "helius_search_assets": "Search results: ",
    "helius_get_signatures_for_asset": "Signatures for asset: ",
    "helius_get_nft_editions": "NFT editions: ",
    "helius_get_token_accounts": "Token accounts: ",
    "helius_send_jito_bundle": "Jito bundle sent: ",
    "helius_get_bundle_statuses": "Bundle statuses: ",
}


def _sample(schema):
    if schema.get("minLength") == 32:
        return VALID_KEY
    kind = schema.get("type")
    if kind == "array":
        return [_sample(schema.get("items", {}))]
    if kind == "integer":
        return max(schema.get("minimum", 0), 1)
    if kind == "boolean":
        return True
    if kind == "object":
        return {}
    if "enum" in schema:
        return schema["enum"][0]
    return "sample"


def _required_arguments(tool):
    schema = tool.input_schema
    return {name: _sample(schema["properties"][name]) for name in schema["required"]}


class BrokenClient:
    """Every remote call fails the way a rejecting node does."""

    def __getattr__(self, name):
        async def fail(*_args, **_kwargs):
            raise RpcError("node said no", code=-32000)

        return fail


def test_registry_names_are_unique_and_ordered():
    names = [tool.name for tool in ALL_TOOLS]
    assert len(names) == len(set(names))
    assert list(mcp.TOOL_REGISTRY) == names
    assert all(name.startswith("helius_") for name in names)


def test_list_tools_describes_every_tool():
    described = mcp.list_tools()
    assert len(described) == len(ALL_TOOLS)
    for entry in described:
        assert entry["inputSchema"]["type"] == "object"
        assert entry["description"]


def test_mock_mirrors_live_client_surface():
    def public_methods(cls):
        return {name for name in vars(cls) if not name.startswith("_") and callable(getattr(cls, name))}

    assert public_methods(MockHeliusClient) == public_methods(HeliusRpcClient)


@pytest.mark.asyncio
@pytest.mark.parametrize("tool", ALL_TOOLS, ids=lambda tool: tool.name)
async def test_every_tool_succeeds_with_its_label(tool):
    result = await tool(_required_arguments(tool), client=MockHeliusClient())
    assert not result.is_error, result.text
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert result.text.startswith(SUCCESS_LABELS[tool.name]), result.text


def test_every_tool_has_a_success_label():
    assert set(SUCCESS_LABELS) == set(mcp.TOOL_REGISTRY)


@pytest.mark.asyncio
@pytest.mark.parametrize("tool", ALL_TOOLS, ids=lambda tool: tool.name)
async def test_every_tool_wraps_remote_errors(tool):
    result = await tool(_required_arguments(tool), client=BrokenClient())
    assert result.is_error
    assert result.kind is ErrorKind.REMOTE
    assert result.text == f"Error {tool.action}: node said no"


@pytest.mark.asyncio
async def test_call_tool_unknown_name(mock_client):
    with pytest.raises(mcp.ToolNotFoundError):
        await mcp.call_tool("helius_does_not_exist", {}, client=mock_client)


@pytest.mark.asyncio
async def test_call_tool_dispatches(mock_client):
    result = await mcp.call_tool("helius_get_balance", {"publicKey": VALID_KEY}, client=mock_client)
    assert result.text == "Balance: 1000000000"
