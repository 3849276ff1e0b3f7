"""Block and slot tools."""

from __future__ import annotations

from typing import Any, Dict

from helius_mcp.tools import schemas
from helius_mcp.tools.operation import Operation, labelled

_COMMITMENT_ONLY = schemas.object_schema({"commitment": schemas.COMMITMENT})
_NO_INPUT = schemas.object_schema()


def _render_latest_blockhash(value: Dict[str, Any]) -> str:
    return (
        f"Latest blockhash: {value.get('blockhash')}, "
        f"Last valid block height: {value.get('lastValidBlockHeight')}"
    )


def _slot_range(args: Dict[str, Any]) -> Dict[str, Any]:
    raw = args.get("range")
    return raw if isinstance(raw, dict) else {}


get_block_height = Operation(
    name="helius_get_block_height",
    description="Get the block height of the Solana blockchain",
    action="getting block height",
    input_schema=_COMMITMENT_ONLY,
    call=lambda client, args: client.get_block_height(args.get("commitment")),
    render=labelled("Block height"),
)

get_slot = Operation(
    name="helius_get_slot",
    description="Get the current slot of the Solana blockchain",
    action="getting slot",
    input_schema=_COMMITMENT_ONLY,
    call=lambda client, args: client.get_slot(args.get("commitment")),
    render=labelled("Current slot"),
)

get_latest_blockhash = Operation(
    name="helius_get_latest_blockhash",
    description="Get the latest blockhash from the Solana blockchain",
    action="getting latest blockhash",
    input_schema=_COMMITMENT_ONLY,
    call=lambda client, args: client.get_latest_blockhash(args.get("commitment")),
    render=_render_latest_blockhash,
)

is_blockhash_valid = Operation(
    name="helius_is_blockhash_valid",
    description="Check whether a blockhash is still valid",
    action="checking blockhash validity",
    input_schema=schemas.object_schema(
        {"blockhash": schemas.string("Blockhash (Base58)"), "commitment": schemas.COMMITMENT},
        required=["blockhash"],
    ),
    call=lambda client, args: client.is_blockhash_valid(args["blockhash"], args.get("commitment")),
    render=labelled("Blockhash validity"),
)

get_block = Operation(
    name="helius_get_block",
    description="Get identity and transaction information about a confirmed block",
    action="getting block",
    input_schema=schemas.object_schema(
        {
            "slot": schemas.integer("Slot number"),
            "commitment": schemas.COMMITMENT,
            "maxSupportedTransactionVersion": schemas.integer("Max transaction version to return"),
            "transactionDetails": {
                "type": "string",
                "enum": ["full", "accounts", "signatures", "none"],
            },
            "rewards": schemas.boolean("Include rewards"),
        },
        required=["slot"],
    ),
    call=lambda client, args: client.get_block(
        args["slot"],
        args.get("commitment"),
        args.get("maxSupportedTransactionVersion", 0),
        args.get("transactionDetails"),
        args.get("rewards"),
    ),
    render=labelled("Block details"),
    not_found="Block not found for slot: {slot}",
)

get_block_time = Operation(
    name="helius_get_block_time",
    description="Get the estimated production time of a block",
    action="getting block time",
    input_schema=schemas.object_schema({"slot": schemas.integer("Slot number")}, required=["slot"]),
    call=lambda client, args: client.get_block_time(args["slot"]),
    render=labelled("Block time"),
    not_found="Block time not available for slot: {slot}",
)

get_block_commitment = Operation(
    name="helius_get_block_commitment",
    description="Get the commitment for a particular block",
    action="getting block commitment",
    input_schema=schemas.object_schema({"block": schemas.integer("Block slot")}, required=["block"]),
    call=lambda client, args: client.get_block_commitment(args["block"]),
    render=labelled("Block commitment"),
)

get_blocks = Operation(
    name="helius_get_blocks",
    description="Get a list of confirmed blocks between two slots",
    action="getting blocks",
    input_schema=schemas.object_schema(
        {
            "startSlot": schemas.integer("Start slot"),
            "endSlot": schemas.integer("End slot (inclusive)"),
            "commitment": schemas.COMMITMENT,
        },
        required=["startSlot"],
    ),
    call=lambda client, args: client.get_blocks(
        args["startSlot"], args.get("endSlot"), args.get("commitment")
    ),
    render=labelled("Blocks"),
)

get_blocks_with_limit = Operation(
    name="helius_get_blocks_with_limit",
    description="Get a list of confirmed blocks starting at a slot",
    action="getting blocks with limit",
    input_schema=schemas.object_schema(
        {
            "startSlot": schemas.integer("Start slot"),
            "limit": schemas.LIMIT,
            "commitment": schemas.COMMITMENT,
        },
        required=["startSlot", "limit"],
    ),
    call=lambda client, args: client.get_blocks_with_limit(
        args["startSlot"], args["limit"], args.get("commitment")
    ),
    render=labelled("Blocks"),
)

get_first_available_block = Operation(
    name="helius_get_first_available_block",
    description="Get the slot of the lowest confirmed block not purged from the ledger",
    action="getting first available block",
    input_schema=_NO_INPUT,
    call=lambda client, args: client.get_first_available_block(),
    render=labelled("First available block"),
)

get_block_production = Operation(
    name="helius_get_block_production",
    description="Get recent block production information",
    action="getting block production",
    input_schema=schemas.object_schema(
        {
            "range": {
                "type": "object",
                "properties": {
                    "firstSlot": schemas.integer("First slot"),
                    "lastSlot": schemas.integer("Last slot"),
                },
            },
            "identity": schemas.public_key("Validator identity (Base58)"),
            "commitment": schemas.COMMITMENT,
        }
    ),
    addresses=("identity",),
    call=lambda client, args: client.get_block_production(
        args.get("commitment"),
        _slot_range(args).get("firstSlot"),
        _slot_range(args).get("lastSlot"),
        args.get("identity"),
    ),
    render=labelled("Block production"),
)

minimum_ledger_slot = Operation(
    name="helius_minimum_ledger_slot",
    description="Get the lowest slot the node has information about in its ledger",
    action="getting minimum ledger slot",
    input_schema=_NO_INPUT,
    call=lambda client, args: client.minimum_ledger_slot(),
    render=labelled("Minimum ledger slot"),
)

get_highest_snapshot_slot = Operation(
    name="helius_get_highest_snapshot_slot",
    description="Get the highest slot the node has snapshots for",
    action="getting highest snapshot slot",
    input_schema=_NO_INPUT,
    call=lambda client, args: client.get_highest_snapshot_slot(),
    render=labelled("Highest snapshot slot"),
)

get_max_retransmit_slot = Operation(
    name="helius_get_max_retransmit_slot",
    description="Get the max slot seen from the retransmit stage",
    action="getting maximum retransmit slot",
    input_schema=_NO_INPUT,
    call=lambda client, args: client.get_max_retransmit_slot(),
    render=labelled("Maximum retransmit slot"),
)

get_max_shred_insert_slot = Operation(
    name="helius_get_max_shred_insert_slot",
    description="Get the max slot seen after shred insert",
    action="getting maximum shred insert slot",
    input_schema=_NO_INPUT,
    call=lambda client, args: client.get_max_shred_insert_slot(),
    render=labelled("Maximum shred insert slot"),
)

get_slot_leader = Operation(
    name="helius_get_slot_leader",
    description="Get the current slot leader",
    action="getting slot leader",
    input_schema=_COMMITMENT_ONLY,
    call=lambda client, args: client.get_slot_leader(args.get("commitment")),
    render=labelled("Slot leader"),
)

get_slot_leaders = Operation(
    name="helius_get_slot_leaders",
    description="Get the slot leaders for a given slot range",
    action="getting slot leaders",
    input_schema=schemas.object_schema(
        {"startSlot": schemas.integer("Start slot"), "limit": schemas.LIMIT},
        required=["startSlot", "limit"],
    ),
    call=lambda client, args: client.get_slot_leaders(args["startSlot"], args["limit"]),
    render=labelled("Slot leaders"),
)

BLOCK_TOOLS = [
    get_block_height,
    get_slot,
    get_latest_blockhash,
    is_blockhash_valid,
    get_block,
    get_block_time,
    get_block_commitment,
    get_blocks,
    get_blocks_with_limit,
    get_first_available_block,
    get_block_production,
    minimum_ledger_slot,
    get_highest_snapshot_slot,
    get_max_retransmit_slot,
    get_max_shred_insert_slot,
    get_slot_leader,
    get_slot_leaders,
]
