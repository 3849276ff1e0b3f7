"""Jito bundle tools."""

from __future__ import annotations

from helius_mcp.tools import schemas
from helius_mcp.tools.operation import Operation, labelled

_JITO_URL = schemas.string("Jito block engine base URL (defaults to the configured engine)")

send_jito_bundle = Operation(
    name="helius_send_jito_bundle",
    description="Submit a bundle of signed, serialized transactions to a Jito block engine",
    action="sending Jito bundle",
    input_schema=schemas.object_schema(
        {
            "serializedTransactions": schemas.strings("Signed transactions, encoded"),
            "jitoApiUrl": _JITO_URL,
        },
        required=["serializedTransactions"],
    ),
    call=lambda client, args: client.send_jito_bundle(args["serializedTransactions"], args.get("jitoApiUrl")),
    render=labelled("Jito bundle sent"),
)

get_bundle_statuses = Operation(
    name="helius_get_bundle_statuses",
    description="Get the statuses of submitted Jito bundles",
    action="getting bundle statuses",
    input_schema=schemas.object_schema(
        {"bundleIds": schemas.strings("Bundle ids"), "jitoApiUrl": _JITO_URL},
        required=["bundleIds"],
    ),
    call=lambda client, args: client.get_bundle_statuses(args["bundleIds"], args.get("jitoApiUrl")),
    render=labelled("Bundle statuses"),
)

BUNDLE_TOOLS = [send_jito_bundle, get_bundle_statuses]
