"""Digital Asset Standard (DAS) tools."""

from __future__ import annotations

from typing import Any, Dict

from helius_mcp.tools import schemas
from helius_mcp.tools.operation import Operation, labelled

_ASSET_ID = schemas.string("Asset id (Base58)")


def _paged(properties: Dict[str, Any]) -> Dict[str, Any]:
    return {**properties, "page": schemas.PAGE, "limit": schemas.LIMIT}


def _search_criteria(args: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in args.items() if value is not None}


get_asset = Operation(
    name="helius_get_asset",
    description="Get a digital asset by its id",
    action="getting asset",
    input_schema=schemas.object_schema({"id": _ASSET_ID}, required=["id"]),
    call=lambda client, args: client.get_asset(args["id"]),
    render=labelled("Asset details"),
    not_found="Asset not found for id: {id}",
)

get_rwa_asset = Operation(
    name="helius_get_rwa_asset",
    description="Get real-world-asset controller and registry accounts for a mint",
    action="getting RWA asset",
    input_schema=schemas.object_schema({"id": _ASSET_ID}, required=["id"]),
    call=lambda client, args: client.get_rwa_asset(args["id"]),
    render=labelled("RWA Asset details"),
)

get_asset_batch = Operation(
    name="helius_get_asset_batch",
    description="Get multiple digital assets by id",
    action="getting asset batch",
    input_schema=schemas.object_schema({"ids": schemas.strings("Asset ids (Base58)")}, required=["ids"]),
    call=lambda client, args: client.get_asset_batch(args["ids"]),
    render=labelled("Asset batch details"),
)

get_asset_proof = Operation(
    name="helius_get_asset_proof",
    description="Get the Merkle proof for a compressed asset",
    action="getting asset proof",
    input_schema=schemas.object_schema({"id": _ASSET_ID}, required=["id"]),
    call=lambda client, args: client.get_asset_proof(args["id"]),
    render=labelled("Asset proof"),
)

get_assets_by_group = Operation(
    name="helius_get_assets_by_group",
    description="Get assets by group key and value (e.g. a collection)",
    action="getting assets by group",
    input_schema=schemas.object_schema(
        _paged(
            {
                "groupKey": schemas.string("Group key, e.g. 'collection'"),
                "groupValue": schemas.string("Group value, e.g. the collection address"),
            }
        ),
        required=["groupKey", "groupValue"],
    ),
    call=lambda client, args: client.get_assets_by_group(
        args["groupKey"], args["groupValue"], args.get("page"), args.get("limit")
    ),
    render=labelled("Assets by group"),
)

get_assets_by_owner = Operation(
    name="helius_get_assets_by_owner",
    description="Get assets owned by an address",
    action="getting assets by owner",
    input_schema=schemas.object_schema(
        _paged({"owner": schemas.public_key("Owner address (Base58)")}), required=["owner"]
    ),
    addresses=("owner",),
    call=lambda client, args: client.get_assets_by_owner(args["owner"], args.get("page"), args.get("limit")),
    render=labelled("Assets by owner"),
)

get_assets_by_creator = Operation(
    name="helius_get_assets_by_creator",
    description="Get assets created by an address",
    action="getting assets by creator",
    input_schema=schemas.object_schema(
        _paged(
            {
                "creator": schemas.public_key("Creator address (Base58)"),
                "onlyVerified": schemas.boolean("Only return verified creators"),
            }
        ),
        required=["creator"],
    ),
    addresses=("creator",),
    call=lambda client, args: client.get_assets_by_creator(
        args["creator"], args.get("onlyVerified"), args.get("page"), args.get("limit")
    ),
    render=labelled("Assets by creator"),
)

get_assets_by_authority = Operation(
    name="helius_get_assets_by_authority",
    description="Get assets with a given update authority",
    action="getting assets by authority",
    input_schema=schemas.object_schema(
        _paged({"authority": schemas.public_key("Authority address (Base58)")}), required=["authority"]
    ),
    addresses=("authority",),
    call=lambda client, args: client.get_assets_by_authority(
        args["authority"], args.get("page"), args.get("limit")
    ),
    render=labelled("Assets by authority"),
)

search_assets = Operation(
    name="helius_search_assets",
    description="Search assets using DAS search criteria",
    action="searching assets",
    input_schema=schemas.object_schema(
        _paged(
            {
                "ownerAddress": schemas.public_key("Owner address (Base58)"),
                "creatorAddress": schemas.public_key("Creator address (Base58)"),
                "authorityAddress": schemas.public_key("Authority address (Base58)"),
                "grouping": {"type": "array", "items": {"type": "string"}},
                "burnt": schemas.boolean(),
                "compressed": schemas.boolean(),
                "frozen": schemas.boolean(),
                "tokenType": {
                    "type": "string",
                    "enum": ["fungible", "nonFungible", "regularNft", "compressedNft", "all"],
                },
            }
        ),
        additional=True,
    ),
    addresses=("ownerAddress", "creatorAddress", "authorityAddress"),
    call=lambda client, args: client.search_assets(_search_criteria(args)),
    render=labelled("Search results"),
)

get_signatures_for_asset = Operation(
    name="helius_get_signatures_for_asset",
    description="Get transaction signatures for a compressed asset",
    action="getting signatures for asset",
    input_schema=schemas.object_schema(_paged({"id": _ASSET_ID}), required=["id"]),
    call=lambda client, args: client.get_signatures_for_asset(args["id"], args.get("page"), args.get("limit")),
    render=labelled("Signatures for asset"),
)

get_nft_editions = Operation(
    name="helius_get_nft_editions",
    description="Get the editions printed from a master edition NFT",
    action="getting NFT editions",
    input_schema=schemas.object_schema(
        _paged({"masterEditionId": schemas.string("Master edition mint (Base58)")}),
        required=["masterEditionId"],
    ),
    call=lambda client, args: client.get_nft_editions(
        args["masterEditionId"], args.get("page"), args.get("limit")
    ),
    render=labelled("NFT editions"),
)

get_token_accounts = Operation(
    name="helius_get_token_accounts",
    description="Get token accounts filtered by mint and/or owner",
    action="getting token accounts",
    input_schema=schemas.object_schema(
        _paged(
            {
                "mint": schemas.public_key("Token mint (Base58)"),
                "owner": schemas.public_key("Owner address (Base58)"),
            }
        )
    ),
    addresses=("mint", "owner"),
    call=lambda client, args: client.get_token_accounts(
        args.get("mint"), args.get("owner"), args.get("page"), args.get("limit")
    ),
    render=labelled("Token accounts"),
)

ASSET_TOOLS = [
    get_asset,
    get_rwa_asset,
    get_asset_batch,
    get_asset_proof,
    get_assets_by_group,
    get_assets_by_owner,
    get_assets_by_creator,
    get_assets_by_authority,
    search_assets,
    get_signatures_for_asset,
    get_nft_editions,
    get_token_accounts,
]
