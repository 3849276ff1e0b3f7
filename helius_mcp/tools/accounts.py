"""Account-related tools."""

from __future__ import annotations

from helius_mcp.tools import schemas
from helius_mcp.tools.operation import Operation, labelled

get_balance = Operation(
    name="helius_get_balance",
    description="Get the balance of a Solana address",
    action="getting balance",
    input_schema=schemas.object_schema(
        {"publicKey": schemas.public_key(), "commitment": schemas.COMMITMENT},
        required=["publicKey"],
    ),
    addresses=("publicKey",),
    call=lambda client, args: client.get_balance(args["publicKey"], args.get("commitment")),
    render=labelled("Balance"),
)

get_account_info = Operation(
    name="helius_get_account_info",
    description="Get information about a Solana account",
    action="getting account info",
    input_schema=schemas.object_schema(
        {
            "publicKey": schemas.public_key(),
            "commitment": schemas.COMMITMENT,
            "encoding": {
                "type": "string",
                "enum": ["base58", "base64", "base64+zstd", "jsonParsed"],
            },
        },
        required=["publicKey"],
    ),
    addresses=("publicKey",),
    call=lambda client, args: client.get_account_info(
        args["publicKey"], args.get("commitment"), args.get("encoding") or "base64"
    ),
    render=labelled("Account info"),
    not_found="Account not found for public key: {publicKey}",
)

get_multiple_accounts = Operation(
    name="helius_get_multiple_accounts",
    description="Get information about multiple Solana accounts",
    action="getting multiple accounts",
    input_schema=schemas.object_schema(
        {"publicKeys": schemas.public_keys(), "commitment": schemas.COMMITMENT},
        required=["publicKeys"],
    ),
    address_lists=("publicKeys",),
    call=lambda client, args: client.get_multiple_accounts(args["publicKeys"], args.get("commitment")),
    render=labelled("Multiple accounts"),
)

get_program_accounts = Operation(
    name="helius_get_program_accounts",
    description="Get all accounts owned by a program",
    action="getting program accounts",
    input_schema=schemas.object_schema(
        {"programId": schemas.public_key("Program id (Base58)"), "commitment": schemas.COMMITMENT},
        required=["programId"],
    ),
    addresses=("programId",),
    call=lambda client, args: client.get_program_accounts(args["programId"], args.get("commitment")),
    render=labelled("Program accounts"),
)

get_minimum_balance_for_rent_exemption = Operation(
    name="helius_get_minimum_balance_for_rent_exemption",
    description="Get the minimum balance required for rent exemption",
    action="getting minimum balance",
    input_schema=schemas.object_schema(
        {"dataSize": schemas.integer("Account data length in bytes"), "commitment": schemas.COMMITMENT},
        required=["dataSize"],
    ),
    call=lambda client, args: client.get_minimum_balance_for_rent_exemption(
        args["dataSize"], args.get("commitment")
    ),
    render=labelled("Minimum balance for rent exemption"),
)

get_inflation_reward = Operation(
    name="helius_get_inflation_reward",
    description="Get inflation rewards for a list of addresses",
    action="getting inflation rewards",
    input_schema=schemas.object_schema(
        {
            "addresses": schemas.public_keys(),
            "epoch": schemas.integer("Epoch (defaults to the previous epoch)"),
            "commitment": schemas.COMMITMENT,
        },
        required=["addresses"],
    ),
    address_lists=("addresses",),
    call=lambda client, args: client.get_inflation_reward(
        args["addresses"], args.get("epoch"), args.get("commitment")
    ),
    render=labelled("Inflation rewards"),
)

request_airdrop = Operation(
    name="helius_request_airdrop",
    description="Request an airdrop of lamports (devnet/testnet only)",
    action="requesting airdrop",
    input_schema=schemas.object_schema(
        {"publicKey": schemas.public_key(), "lamports": schemas.integer("Amount in lamports", minimum=1)},
        required=["publicKey", "lamports"],
    ),
    addresses=("publicKey",),
    call=lambda client, args: client.request_airdrop(args["publicKey"], args["lamports"]),
    render=labelled("Airdrop requested"),
)

ACCOUNT_TOOLS = [
    get_balance,
    get_account_info,
    get_multiple_accounts,
    get_program_accounts,
    get_minimum_balance_for_rent_exemption,
    get_inflation_reward,
    request_airdrop,
]
