"""
Thin JSON-RPC client for Solana RPC, Helius DAS, and Jito bundle endpoints.

Every method performs exactly one POST and maps transport and RPC failures to
internal exceptions that the tool layer turns into failure envelopes.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from helius_mcp.config import HeliusConfig, default_config

logger = logging.getLogger(__name__)

JITO_BUNDLES_PATH = "/api/v1/bundles"


class HeliusApiError(Exception):
    """Base exception for Helius API errors."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[int | str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code


class RpcError(HeliusApiError):
    """Raised when the node answers with a JSON-RPC error object."""


class UnauthorizedError(HeliusApiError):
    """Raised when the endpoint rejects the API key."""


class RateLimitedError(HeliusApiError):
    """Raised when the endpoint throttles the caller."""


class NodeUnreachableError(HeliusApiError):
    """Raised when the endpoint cannot be reached."""


def _keys(values: Sequence[Any]) -> List[str]:
    return [str(value) for value in values]


def _options(**kwargs: Any) -> Dict[str, Any]:
    """Build an RPC config object, dropping unset entries."""
    return {key: value for key, value in kwargs.items() if value is not None}


def _with_options(params: List[Any], options: Dict[str, Any]) -> List[Any]:
    if options:
        params.append(options)
    return params


def _value(payload: Any) -> Any:
    """Unwrap the ``{context, value}`` envelope most Solana RPC results carry."""
    if isinstance(payload, dict) and "value" in payload and "context" in payload:
        return payload["value"]
    return payload


class HeliusRpcClient:
    """Async client for the Solana RPC / Helius method surface."""

    def __init__(
        self,
        config: HeliusConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None
        self._ids = itertools.count(1)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _process_response(self, response: httpx.Response, method: str) -> Any:
        if response.status_code in {401, 403}:
            raise UnauthorizedError(
                "Unauthorized or invalid API key.", status_code=response.status_code
            )
        if response.status_code == 429:
            raise RateLimitedError("Rate limit exceeded.", status_code=429)

        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict) and isinstance(data.get("error"), dict):
            error = data["error"]
            message = error.get("message") or "RPC error"
            raise RpcError(str(message), code=error.get("code"), status_code=response.status_code)

        if response.status_code >= 400:
            raise HeliusApiError(
                f"HTTP {response.status_code} from {method}", status_code=response.status_code
            )

        if not isinstance(data, dict) or "result" not in data:
            raise HeliusApiError("Unexpected response from node.", status_code=response.status_code)

        return data["result"]

    async def _rpc(self, method: str, params: Any = None, *, url: Optional[str] = None) -> Any:
        client = await self._get_client()
        payload: Dict[str, Any] = {"jsonrpc": "2.0", "id": next(self._ids), "method": method}
        if params is not None:
            payload["params"] = params
        target = url or self.config.endpoint
        try:
            response = await client.post(target, json=payload)
        except httpx.RequestError as exc:
            logger.warning("Helius endpoint unreachable for method %s", method)
            raise NodeUnreachableError(f"Endpoint unreachable: {exc}") from exc
        return self._process_response(response, method)

    # Accounts

    async def get_balance(self, public_key: Any, commitment: Optional[str] = None) -> int:
        params = _with_options([str(public_key)], _options(commitment=commitment))
        return _value(await self._rpc("getBalance", params))

    async def get_account_info(
        self, public_key: Any, commitment: Optional[str] = None, encoding: str = "base64"
    ) -> Any:
        params = _with_options([str(public_key)], _options(commitment=commitment, encoding=encoding))
        return _value(await self._rpc("getAccountInfo", params))

    async def get_multiple_accounts(
        self, public_keys: Sequence[Any], commitment: Optional[str] = None, encoding: str = "base64"
    ) -> Any:
        params = _with_options([_keys(public_keys)], _options(commitment=commitment, encoding=encoding))
        return await self._rpc("getMultipleAccounts", params)

    async def get_program_accounts(
        self, program_id: Any, commitment: Optional[str] = None, encoding: str = "base64"
    ) -> Any:
        params = _with_options([str(program_id)], _options(commitment=commitment, encoding=encoding))
        return await self._rpc("getProgramAccounts", params)

    async def get_minimum_balance_for_rent_exemption(
        self, data_size: int, commitment: Optional[str] = None
    ) -> int:
        params = _with_options([data_size], _options(commitment=commitment))
        return await self._rpc("getMinimumBalanceForRentExemption", params)

    async def get_inflation_reward(
        self, addresses: Sequence[Any], epoch: Optional[int] = None, commitment: Optional[str] = None
    ) -> Any:
        params = _with_options([_keys(addresses)], _options(epoch=epoch, commitment=commitment))
        return await self._rpc("getInflationReward", params)

    async def request_airdrop(self, public_key: Any, lamports: int) -> str:
        return await self._rpc("requestAirdrop", [str(public_key), lamports])

    # Tokens

    async def get_token_accounts_by_owner(
        self, owner: Any, program_id: Any, commitment: Optional[str] = None
    ) -> Any:
        params = _with_options(
            [str(owner), {"programId": str(program_id)}],
            _options(commitment=commitment, encoding="jsonParsed"),
        )
        return await self._rpc("getTokenAccountsByOwner", params)

    async def get_token_accounts_by_delegate(
        self, delegate: Any, program_id: Any, commitment: Optional[str] = None
    ) -> Any:
        params = _with_options(
            [str(delegate), {"programId": str(program_id)}],
            _options(commitment=commitment, encoding="jsonParsed"),
        )
        return await self._rpc("getTokenAccountsByDelegate", params)

    async def get_token_supply(self, mint: Any, commitment: Optional[str] = None) -> Any:
        params = _with_options([str(mint)], _options(commitment=commitment))
        return _value(await self._rpc("getTokenSupply", params))

    async def get_token_account_balance(self, account: Any, commitment: Optional[str] = None) -> Any:
        params = _with_options([str(account)], _options(commitment=commitment))
        return _value(await self._rpc("getTokenAccountBalance", params))

    # Blocks and slots

    async def get_block_height(self, commitment: Optional[str] = None) -> int:
        return await self._rpc("getBlockHeight", _with_options([], _options(commitment=commitment)))

    async def get_slot(self, commitment: Optional[str] = None) -> int:
        return await self._rpc("getSlot", _with_options([], _options(commitment=commitment)))

    async def get_latest_blockhash(self, commitment: Optional[str] = None) -> Dict[str, Any]:
        params = _with_options([], _options(commitment=commitment))
        return _value(await self._rpc("getLatestBlockhash", params))

    async def is_blockhash_valid(self, blockhash: str, commitment: Optional[str] = None) -> bool:
        params = _with_options([blockhash], _options(commitment=commitment))
        return _value(await self._rpc("isBlockhashValid", params))

    async def get_block(
        self,
        slot: int,
        commitment: Optional[str] = None,
        max_supported_transaction_version: Optional[int] = 0,
        transaction_details: Optional[str] = None,
        rewards: Optional[bool] = None,
    ) -> Any:
        params = _with_options(
            [slot],
            _options(
                commitment=commitment,
                maxSupportedTransactionVersion=max_supported_transaction_version,
                transactionDetails=transaction_details,
                rewards=rewards,
            ),
        )
        return await self._rpc("getBlock", params)

    async def get_block_time(self, slot: int) -> Optional[int]:
        return await self._rpc("getBlockTime", [slot])

    async def get_block_commitment(self, block: int) -> Any:
        return await self._rpc("getBlockCommitment", [block])

    async def get_blocks(
        self, start_slot: int, end_slot: Optional[int] = None, commitment: Optional[str] = None
    ) -> List[int]:
        params: List[Any] = [start_slot]
        if end_slot is not None:
            params.append(end_slot)
        return await self._rpc("getBlocks", _with_options(params, _options(commitment=commitment)))

    async def get_blocks_with_limit(
        self, start_slot: int, limit: int, commitment: Optional[str] = None
    ) -> List[int]:
        params = _with_options([start_slot, limit], _options(commitment=commitment))
        return await self._rpc("getBlocksWithLimit", params)

    async def get_first_available_block(self) -> int:
        return await self._rpc("getFirstAvailableBlock")

    async def get_block_production(
        self,
        commitment: Optional[str] = None,
        first_slot: Optional[int] = None,
        last_slot: Optional[int] = None,
        identity: Any = None,
    ) -> Any:
        slot_range = _options(firstSlot=first_slot, lastSlot=last_slot) or None
        options = _options(
            commitment=commitment,
            range=slot_range,
            identity=str(identity) if identity is not None else None,
        )
        return _value(await self._rpc("getBlockProduction", _with_options([], options)))

    async def minimum_ledger_slot(self) -> int:
        return await self._rpc("minimumLedgerSlot")

    async def get_highest_snapshot_slot(self) -> Any:
        return await self._rpc("getHighestSnapshotSlot")

    async def get_max_retransmit_slot(self) -> int:
        return await self._rpc("getMaxRetransmitSlot")

    async def get_max_shred_insert_slot(self) -> int:
        return await self._rpc("getMaxShredInsertSlot")

    async def get_slot_leader(self, commitment: Optional[str] = None) -> str:
        return await self._rpc("getSlotLeader", _with_options([], _options(commitment=commitment)))

    async def get_slot_leaders(self, start_slot: int, limit: int) -> List[str]:
        return await self._rpc("getSlotLeaders", [start_slot, limit])

    # Transactions

    async def get_transaction(
        self,
        signature: str,
        commitment: Optional[str] = None,
        max_supported_transaction_version: int = 0,
    ) -> Any:
        params = _with_options(
            [signature],
            _options(
                commitment=commitment,
                maxSupportedTransactionVersion=max_supported_transaction_version,
                encoding="json",
            ),
        )
        return await self._rpc("getTransaction", params)

    async def get_signatures_for_address(
        self,
        address: Any,
        limit: Optional[int] = None,
        before: Optional[str] = None,
        until: Optional[str] = None,
        commitment: Optional[str] = None,
    ) -> Any:
        options = _options(limit=limit, before=before, until=until, commitment=commitment)
        return await self._rpc("getSignaturesForAddress", _with_options([str(address)], options))

    async def get_signature_statuses(
        self, signatures: Sequence[str], search_transaction_history: Optional[bool] = None
    ) -> Any:
        options = _options(searchTransactionHistory=search_transaction_history)
        return _value(await self._rpc("getSignatureStatuses", _with_options([list(signatures)], options)))

    async def get_transaction_count(self, commitment: Optional[str] = None) -> int:
        return await self._rpc("getTransactionCount", _with_options([], _options(commitment=commitment)))

    async def send_transaction(
        self,
        transaction: str,
        skip_preflight: Optional[bool] = None,
        max_retries: Optional[int] = None,
        preflight_commitment: Optional[str] = None,
    ) -> str:
        options = _options(
            encoding="base64",
            skipPreflight=skip_preflight,
            maxRetries=max_retries,
            preflightCommitment=preflight_commitment,
        )
        return await self._rpc("sendTransaction", [transaction, options])

    async def simulate_transaction(
        self,
        transaction: str,
        sig_verify: Optional[bool] = None,
        replace_recent_blockhash: Optional[bool] = None,
        commitment: Optional[str] = None,
    ) -> Any:
        options = _options(
            encoding="base64",
            sigVerify=sig_verify,
            replaceRecentBlockhash=replace_recent_blockhash,
            commitment=commitment,
        )
        return _value(await self._rpc("simulateTransaction", [transaction, options]))

    async def get_fee_for_message(self, message: str, commitment: Optional[str] = None) -> Any:
        params = _with_options([message], _options(commitment=commitment))
        return await self._rpc("getFeeForMessage", params)

    async def get_recent_prioritization_fees(self, addresses: Optional[Sequence[Any]] = None) -> Any:
        params = [_keys(addresses)] if addresses else []
        return await self._rpc("getRecentPrioritizationFees", params)

    async def get_priority_fee_estimate(
        self,
        account_keys: Optional[Sequence[Any]] = None,
        transaction: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        request = _options(
            accountKeys=_keys(account_keys) if account_keys else None,
            transaction=transaction,
            options=options,
        )
        return await self._rpc("getPriorityFeeEstimate", [request])

    # Network

    async def get_epoch_info(self, commitment: Optional[str] = None) -> Any:
        return await self._rpc("getEpochInfo", _with_options([], _options(commitment=commitment)))

    async def get_epoch_schedule(self) -> Any:
        return await self._rpc("getEpochSchedule")

    async def get_leader_schedule(self, slot: Optional[int] = None, commitment: Optional[str] = None) -> Any:
        params = _with_options([slot], _options(commitment=commitment))
        return await self._rpc("getLeaderSchedule", params)

    async def get_recent_performance_samples(self, limit: Optional[int] = None) -> Any:
        return await self._rpc("getRecentPerformanceSamples", [limit] if limit is not None else [])

    async def get_version(self) -> Any:
        return await self._rpc("getVersion")

    async def get_health(self) -> str:
        return await self._rpc("getHealth")

    async def get_cluster_nodes(self) -> Any:
        return await self._rpc("getClusterNodes")

    async def get_identity(self) -> Any:
        return await self._rpc("getIdentity")

    async def get_genesis_hash(self) -> str:
        return await self._rpc("getGenesisHash")

    async def get_vote_accounts(self, commitment: Optional[str] = None) -> Any:
        return await self._rpc("getVoteAccounts", _with_options([], _options(commitment=commitment)))

    async def get_inflation_governor(self, commitment: Optional[str] = None) -> Any:
        return await self._rpc("getInflationGovernor", _with_options([], _options(commitment=commitment)))

    async def get_inflation_rate(self) -> Any:
        return await self._rpc("getInflationRate")

    async def get_supply(self, commitment: Optional[str] = None) -> Any:
        return _value(await self._rpc("getSupply", _with_options([], _options(commitment=commitment))))

    async def get_stake_minimum_delegation(self, commitment: Optional[str] = None) -> int:
        params = _with_options([], _options(commitment=commitment))
        return _value(await self._rpc("getStakeMinimumDelegation", params))

    # Digital Asset Standard

    async def get_asset(self, asset_id: str) -> Any:
        return await self._rpc("getAsset", {"id": asset_id})

    async def get_rwa_asset(self, asset_id: str) -> Any:
        return await self._rpc("getRwaAccountsByMint", {"id": asset_id})

    async def get_asset_batch(self, asset_ids: Sequence[str]) -> Any:
        return await self._rpc("getAssetBatch", {"ids": list(asset_ids)})

    async def get_asset_proof(self, asset_id: str) -> Any:
        return await self._rpc("getAssetProof", {"id": asset_id})

    async def get_assets_by_group(
        self, group_key: str, group_value: str, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Any:
        params = _options(groupKey=group_key, groupValue=group_value, page=page or 1, limit=limit)
        return await self._rpc("getAssetsByGroup", params)

    async def get_assets_by_owner(
        self, owner: Any, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Any:
        params = _options(ownerAddress=str(owner), page=page or 1, limit=limit)
        return await self._rpc("getAssetsByOwner", params)

    async def get_assets_by_creator(
        self,
        creator: Any,
        only_verified: Optional[bool] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        params = _options(
            creatorAddress=str(creator), onlyVerified=only_verified, page=page or 1, limit=limit
        )
        return await self._rpc("getAssetsByCreator", params)

    async def get_assets_by_authority(
        self, authority: Any, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Any:
        params = _options(authorityAddress=str(authority), page=page or 1, limit=limit)
        return await self._rpc("getAssetsByAuthority", params)

    async def search_assets(self, criteria: Dict[str, Any]) -> Any:
        params = {key: str(value) if key.endswith("Address") else value for key, value in criteria.items()}
        params.setdefault("page", 1)
        return await self._rpc("searchAssets", params)

    async def get_signatures_for_asset(
        self, asset_id: str, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Any:
        return await self._rpc("getSignaturesForAsset", _options(id=asset_id, page=page or 1, limit=limit))

    async def get_nft_editions(
        self, mint: str, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Any:
        return await self._rpc("getNftEditions", _options(mint=mint, page=page or 1, limit=limit))

    async def get_token_accounts(
        self,
        mint: Any = None,
        owner: Any = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        params = _options(
            mint=str(mint) if mint is not None else None,
            owner=str(owner) if owner is not None else None,
            page=page or 1,
            limit=limit,
        )
        return await self._rpc("getTokenAccounts", params)

    # Jito bundles

    def _jito_url(self, jito_api_url: Optional[str]) -> str:
        return (jito_api_url or self.config.jito_api_url).rstrip("/") + JITO_BUNDLES_PATH

    async def send_jito_bundle(
        self, serialized_transactions: Sequence[str], jito_api_url: Optional[str] = None
    ) -> str:
        return await self._rpc(
            "sendBundle", [list(serialized_transactions)], url=self._jito_url(jito_api_url)
        )

    async def get_bundle_statuses(
        self, bundle_ids: Sequence[str], jito_api_url: Optional[str] = None
    ) -> Any:
        return await self._rpc(
            "getBundleStatuses", [list(bundle_ids)], url=self._jito_url(jito_api_url)
        )
