"""SPL token tools."""

from __future__ import annotations

from typing import Any, List

from helius_mcp.tools import schemas
from helius_mcp.tools.operation import Operation, labelled


def _account_keys(payload: Any) -> List[str]:
    entries = payload.get("value", []) if isinstance(payload, dict) else []
    keys: List[str] = []
    for entry in entries:
        if isinstance(entry, dict) and entry.get("pubkey") is not None:
            keys.append(str(entry["pubkey"]))
    return keys


def _render_token_accounts(payload: Any) -> str:
    context = payload.get("context", {}) if isinstance(payload, dict) else {}
    return "Context: {slot}\nToken accounts: {keys}".format(
        slot=context.get("slot"),
        keys="\n".join(_account_keys(payload)),
    )


get_token_accounts_by_owner = Operation(
    name="helius_get_token_accounts_by_owner",
    description="Get token accounts owned by a Solana address",
    action="getting token accounts",
    input_schema=schemas.object_schema(
        {
            "publicKey": schemas.public_key("Owner address (Base58)"),
            "programId": schemas.public_key("Token program id (Base58)"),
        },
        required=["publicKey", "programId"],
    ),
    addresses=("publicKey", "programId"),
    call=lambda client, args: client.get_token_accounts_by_owner(args["publicKey"], args["programId"]),
    render=_render_token_accounts,
)

get_token_accounts_by_delegate = Operation(
    name="helius_get_token_accounts_by_delegate",
    description="Get token accounts delegated to a Solana address",
    action="getting token accounts by delegate",
    input_schema=schemas.object_schema(
        {
            "delegateAddress": schemas.public_key("Delegate address (Base58)"),
            "programId": schemas.public_key("Token program id (Base58)"),
            "commitment": schemas.COMMITMENT,
        },
        required=["delegateAddress", "programId"],
    ),
    addresses=("delegateAddress", "programId"),
    call=lambda client, args: client.get_token_accounts_by_delegate(
        args["delegateAddress"], args["programId"], args.get("commitment")
    ),
    render=labelled("Token accounts by delegate"),
)

get_token_supply = Operation(
    name="helius_get_token_supply",
    description="Get the supply of a token",
    action="getting token supply",
    input_schema=schemas.object_schema(
        {"tokenAddress": schemas.public_key("Token mint address (Base58)")},
        required=["tokenAddress"],
    ),
    addresses=("tokenAddress",),
    call=lambda client, args: client.get_token_supply(args["tokenAddress"]),
    render=labelled("Token supply"),
)

get_token_account_balance = Operation(
    name="helius_get_token_account_balance",
    description="Get the balance of a token account",
    action="getting token account balance",
    input_schema=schemas.object_schema(
        {
            "tokenAddress": schemas.public_key("Token account address (Base58)"),
            "commitment": schemas.COMMITMENT,
        },
        required=["tokenAddress"],
    ),
    addresses=("tokenAddress",),
    call=lambda client, args: client.get_token_account_balance(
        args["tokenAddress"], args.get("commitment")
    ),
    render=labelled("Token balance"),
)

TOKEN_TOOLS = [
    get_token_accounts_by_owner,
    get_token_accounts_by_delegate,
    get_token_supply,
    get_token_account_balance,
]
