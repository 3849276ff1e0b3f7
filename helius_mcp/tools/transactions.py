"""Transaction lookup, submission, and fee tools."""

from __future__ import annotations

from typing import Any, Dict

from helius_mcp.tools import schemas
from helius_mcp.tools.operation import Operation, labelled

PRIORITY_LEVELS = ["min", "low", "medium", "high", "veryHigh", "unsafeMax"]


def _send_options(args: Dict[str, Any]) -> Dict[str, Any]:
    raw = args.get("options")
    return raw if isinstance(raw, dict) else {}


get_transaction = Operation(
    name="helius_get_transaction",
    description="Get a transaction by its signature",
    action="getting transaction",
    input_schema=schemas.object_schema(
        {"signature": schemas.string("Transaction signature (Base58)"), "commitment": schemas.COMMITMENT},
        required=["signature"],
    ),
    call=lambda client, args: client.get_transaction(args["signature"], args.get("commitment")),
    render=labelled("Transaction details"),
    not_found="Transaction not found for signature: {signature}",
)

get_signatures_for_address = Operation(
    name="helius_get_signatures_for_address",
    description="Get confirmed signatures for transactions involving an address",
    action="getting signatures",
    input_schema=schemas.object_schema(
        {
            "address": schemas.public_key(),
            "limit": schemas.integer("Maximum signatures to return (1-1000)", minimum=1),
            "before": schemas.string("Start searching backwards from this signature"),
            "until": schemas.string("Search until this signature"),
            "commitment": schemas.COMMITMENT,
        },
        required=["address"],
    ),
    addresses=("address",),
    call=lambda client, args: client.get_signatures_for_address(
        args["address"],
        args.get("limit"),
        args.get("before"),
        args.get("until"),
        args.get("commitment"),
    ),
    render=labelled("Signatures"),
)

get_signature_statuses = Operation(
    name="helius_get_signature_statuses",
    description="Get the statuses of a list of signatures",
    action="getting signature statuses",
    input_schema=schemas.object_schema(
        {
            "signatures": schemas.strings("Transaction signatures (Base58)"),
            "searchTransactionHistory": schemas.boolean("Search beyond the recent status cache"),
        },
        required=["signatures"],
    ),
    call=lambda client, args: client.get_signature_statuses(
        args["signatures"], args.get("searchTransactionHistory")
    ),
    render=labelled("Signature statuses"),
)

get_transaction_count = Operation(
    name="helius_get_transaction_count",
    description="Get the current transaction count from the ledger",
    action="getting transaction count",
    input_schema=schemas.object_schema({"commitment": schemas.COMMITMENT}),
    call=lambda client, args: client.get_transaction_count(args.get("commitment")),
    render=labelled("Transaction count"),
)

send_transaction = Operation(
    name="helius_send_transaction",
    description="Submit a signed, serialized (base64) transaction to the cluster",
    action="sending transaction",
    input_schema=schemas.object_schema(
        {
            "transaction": schemas.string("Signed transaction, base64 encoded"),
            "options": {
                "type": "object",
                "properties": {
                    "skipPreflight": schemas.boolean(),
                    "maxRetries": schemas.integer(),
                    "preflightCommitment": schemas.COMMITMENT,
                },
            },
        },
        required=["transaction"],
    ),
    call=lambda client, args: client.send_transaction(
        args["transaction"],
        _send_options(args).get("skipPreflight"),
        _send_options(args).get("maxRetries"),
        _send_options(args).get("preflightCommitment"),
    ),
    render=labelled("Transaction sent"),
)

simulate_transaction = Operation(
    name="helius_simulate_transaction",
    description="Simulate sending a serialized (base64) transaction",
    action="simulating transaction",
    input_schema=schemas.object_schema(
        {
            "transaction": schemas.string("Transaction, base64 encoded"),
            "sigVerify": schemas.boolean("Verify signatures"),
            "replaceRecentBlockhash": schemas.boolean("Replace the recent blockhash"),
            "commitment": schemas.COMMITMENT,
        },
        required=["transaction"],
    ),
    call=lambda client, args: client.simulate_transaction(
        args["transaction"],
        args.get("sigVerify"),
        args.get("replaceRecentBlockhash"),
        args.get("commitment"),
    ),
    render=labelled("Transaction simulation result"),
)

get_fee_for_message = Operation(
    name="helius_get_fee_for_message",
    description="Get the fee the network will charge for a message",
    action="getting fee for message",
    input_schema=schemas.object_schema(
        {"message": schemas.string("Message, base64 encoded"), "commitment": schemas.COMMITMENT},
        required=["message"],
    ),
    call=lambda client, args: client.get_fee_for_message(args["message"], args.get("commitment")),
    render=labelled("Fee for message"),
)

get_recent_prioritization_fees = Operation(
    name="helius_get_recent_prioritization_fees",
    description="Get recent prioritization fees, optionally for writable accounts",
    action="getting recent prioritization fees",
    input_schema=schemas.object_schema({"addresses": schemas.public_keys()}),
    address_lists=("addresses",),
    call=lambda client, args: client.get_recent_prioritization_fees(args.get("addresses")),
    render=labelled("Recent prioritization fees"),
)

get_priority_fee_estimate = Operation(
    name="helius_get_priority_fee_estimate",
    description="Estimate priority fees for a transaction or a set of account keys",
    action="getting priority fee estimate",
    input_schema=schemas.object_schema(
        {
            "accountKeys": schemas.public_keys("Accounts the transaction will touch"),
            "transaction": schemas.string("Serialized transaction"),
            "options": {
                "type": "object",
                "properties": {
                    "priorityLevel": {"type": "string", "enum": PRIORITY_LEVELS},
                    "includeAllPriorityFeeLevels": schemas.boolean(),
                    "transactionEncoding": {"type": "string", "enum": ["base58", "base64"]},
                    "lookbackSlots": schemas.integer(minimum=1),
                    "recommended": schemas.boolean(),
                },
            },
        }
    ),
    address_lists=("accountKeys",),
    call=lambda client, args: client.get_priority_fee_estimate(
        args.get("accountKeys"), args.get("transaction"), args.get("options")
    ),
    render=labelled("Priority fee estimate"),
)

TRANSACTION_TOOLS = [
    get_transaction,
    get_signatures_for_address,
    get_signature_statuses,
    get_transaction_count,
    send_transaction,
    simulate_transaction,
    get_fee_for_message,
    get_recent_prioritization_fees,
    get_priority_fee_estimate,
]
