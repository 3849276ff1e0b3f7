"""Deterministic stand-in for HeliusRpcClient, selected with TEST_MODE=true."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

MOCK_SLOT = 123456789
MOCK_BLOCKHASH = "TestBlockhash123"
MOCK_BLOCK_TIME = 1700000000
SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"
MISSING_SIGNATURE = "non-existent-signature"
# Caller-sized lists stop here, whatever limit or slot range is asked for.
MAX_MOCK_ITEMS = 1000


def _capped(count: Optional[int], default: int = 10) -> int:
    requested = default if count is None else int(count)
    return max(0, min(requested, MAX_MOCK_ITEMS))


def _account(lamports: int, owner: str = SYSTEM_PROGRAM_ID) -> Dict[str, Any]:
    return {
        "data": ["base64data", "base64"],
        "executable": False,
        "lamports": lamports,
        "owner": owner,
        "rentEpoch": 123,
    }


def _asset(asset_id: str) -> Dict[str, Any]:
    return {
        "interface": "V1_NFT",
        "id": asset_id,
        "content": {"metadata": {"name": "Mock Asset", "symbol": "MOCK"}},
        "ownership": {"owner": SYSTEM_PROGRAM_ID, "frozen": False},
        "compression": {"compressed": False},
    }


def _asset_page(page: Optional[int], limit: Optional[int], count: int = 2) -> Dict[str, Any]:
    return {
        "total": count,
        "limit": limit or 1000,
        "page": page or 1,
        "items": [_asset(f"MockAsset{i}") for i in range(count)],
    }


class MockHeliusClient:
    """Canned responses with the same method signatures as the live client."""

    async def aclose(self) -> None:
        return None

    # Accounts

    async def get_balance(self, public_key: Any, commitment: Optional[str] = None) -> int:
        return 1000000000

    async def get_account_info(
        self, public_key: Any, commitment: Optional[str] = None, encoding: str = "base64"
    ) -> Any:
        return _account(1000000000)

    async def get_multiple_accounts(
        self, public_keys: Sequence[Any], commitment: Optional[str] = None, encoding: str = "base64"
    ) -> Any:
        return {
            "context": {"slot": MOCK_SLOT},
            "value": [_account(1000000000 + i) for i, _ in enumerate(public_keys)],
        }

    async def get_program_accounts(
        self, program_id: Any, commitment: Optional[str] = None, encoding: str = "base64"
    ) -> Any:
        return [
            {"pubkey": "ProgramAccount1", "account": _account(1000000000, str(program_id))},
            {"pubkey": "ProgramAccount2", "account": _account(2000000000, str(program_id))},
        ]

    async def get_minimum_balance_for_rent_exemption(
        self, data_size: int, commitment: Optional[str] = None
    ) -> int:
        return int(data_size) * 1000

    async def get_inflation_reward(
        self, addresses: Sequence[Any], epoch: Optional[int] = None, commitment: Optional[str] = None
    ) -> Any:
        return [
            {
                "epoch": epoch or 123,
                "effectiveSlot": MOCK_SLOT,
                "amount": 1000000 + i,
                "postBalance": 10000000000 + i,
                "commission": None,
            }
            for i, _ in enumerate(addresses)
        ]

    async def request_airdrop(self, public_key: Any, lamports: int) -> str:
        return "MockAirdropSignature"

    # Tokens

    async def get_token_accounts_by_owner(
        self, owner: Any, program_id: Any, commitment: Optional[str] = None
    ) -> Any:
        return {
            "context": {"slot": MOCK_SLOT},
            "value": [{"pubkey": "TokenAccount1"}, {"pubkey": "TokenAccount2"}],
        }

    async def get_token_accounts_by_delegate(
        self, delegate: Any, program_id: Any, commitment: Optional[str] = None
    ) -> Any:
        return {
            "context": {"slot": MOCK_SLOT},
            "value": [{"pubkey": "DelegatedTokenAccount1", "account": _account(2039280, str(program_id))}],
        }

    async def get_token_supply(self, mint: Any, commitment: Optional[str] = None) -> Any:
        return "1000000000"

    async def get_token_account_balance(self, account: Any, commitment: Optional[str] = None) -> Any:
        return {"amount": "1000000000", "decimals": 6, "uiAmount": 1000, "uiAmountString": "1000"}

    # Blocks and slots

    async def get_block_height(self, commitment: Optional[str] = None) -> int:
        return MOCK_SLOT

    async def get_slot(self, commitment: Optional[str] = None) -> int:
        return MOCK_SLOT

    async def get_latest_blockhash(self, commitment: Optional[str] = None) -> Dict[str, Any]:
        return {"blockhash": MOCK_BLOCKHASH, "lastValidBlockHeight": MOCK_SLOT}

    async def is_blockhash_valid(self, blockhash: str, commitment: Optional[str] = None) -> bool:
        return True

    async def get_block(
        self,
        slot: int,
        commitment: Optional[str] = None,
        max_supported_transaction_version: Optional[int] = 0,
        transaction_details: Optional[str] = None,
        rewards: Optional[bool] = None,
    ) -> Any:
        return {
            "blockhash": MOCK_BLOCKHASH,
            "previousBlockhash": "PreviousBlockhash123",
            "parentSlot": int(slot) - 1,
            "blockTime": MOCK_BLOCK_TIME,
            "blockHeight": MOCK_SLOT,
            "transactions": [],
        }

    async def get_block_time(self, slot: int) -> Optional[int]:
        return MOCK_BLOCK_TIME

    async def get_block_commitment(self, block: int) -> Any:
        return {"commitment": [0] * 32, "totalStake": 1000000000}

    async def get_blocks(
        self, start_slot: int, end_slot: Optional[int] = None, commitment: Optional[str] = None
    ) -> List[int]:
        stop = end_slot if end_slot is not None else start_slot + 10
        return list(range(int(start_slot), int(start_slot) + _capped(int(stop) - int(start_slot) + 1)))

    async def get_blocks_with_limit(
        self, start_slot: int, limit: int, commitment: Optional[str] = None
    ) -> List[int]:
        return list(range(int(start_slot), int(start_slot) + _capped(limit)))

    async def get_first_available_block(self) -> int:
        return 0

    async def get_block_production(
        self,
        commitment: Optional[str] = None,
        first_slot: Optional[int] = None,
        last_slot: Optional[int] = None,
        identity: Any = None,
    ) -> Any:
        first = first_slot if first_slot is not None else MOCK_SLOT
        return {
            "byIdentity": {"ValidatorPubkey1": [10, 9]},
            "range": {"firstSlot": first, "lastSlot": last_slot if last_slot is not None else first + 10},
        }

    async def minimum_ledger_slot(self) -> int:
        return 1000

    async def get_highest_snapshot_slot(self) -> Any:
        return {"full": 100000, "incremental": 100100}

    async def get_max_retransmit_slot(self) -> int:
        return MOCK_SLOT

    async def get_max_shred_insert_slot(self) -> int:
        return MOCK_SLOT

    async def get_slot_leader(self, commitment: Optional[str] = None) -> str:
        return "ValidatorPubkey1"

    async def get_slot_leaders(self, start_slot: int, limit: int) -> List[str]:
        return [f"ValidatorPubkey{i % 2 + 1}" for i in range(_capped(limit))]

    # Transactions

    async def get_transaction(
        self,
        signature: str,
        commitment: Optional[str] = None,
        max_supported_transaction_version: int = 0,
    ) -> Any:
        if signature == MISSING_SIGNATURE:
            return None
        return {
            "slot": MOCK_SLOT,
            "meta": {"fee": 5000},
            "transaction": {"signatures": [signature]},
        }

    async def get_signatures_for_address(
        self,
        address: Any,
        limit: Optional[int] = None,
        before: Optional[str] = None,
        until: Optional[str] = None,
        commitment: Optional[str] = None,
    ) -> Any:
        return [
            {
                "signature": f"MockSignature{i}",
                "slot": MOCK_SLOT + i,
                "err": None,
                "memo": None,
                "blockTime": MOCK_BLOCK_TIME,
            }
            for i in range(_capped(limit))
        ]

    async def get_signature_statuses(
        self, signatures: Sequence[str], search_transaction_history: Optional[bool] = None
    ) -> Any:
        return [
            {"slot": MOCK_SLOT, "confirmations": None, "err": None, "confirmationStatus": "finalized"}
            for _ in signatures
        ]

    async def get_transaction_count(self, commitment: Optional[str] = None) -> int:
        return 987654321

    async def send_transaction(
        self,
        transaction: str,
        skip_preflight: Optional[bool] = None,
        max_retries: Optional[int] = None,
        preflight_commitment: Optional[str] = None,
    ) -> str:
        return "MockTransactionSignature"

    async def simulate_transaction(
        self,
        transaction: str,
        sig_verify: Optional[bool] = None,
        replace_recent_blockhash: Optional[bool] = None,
        commitment: Optional[str] = None,
    ) -> Any:
        return {"err": None, "logs": ["Program log: mock"], "unitsConsumed": 150}

    async def get_fee_for_message(self, message: str, commitment: Optional[str] = None) -> Any:
        return {"context": {"slot": MOCK_SLOT}, "value": 5000}

    async def get_recent_prioritization_fees(self, addresses: Optional[Sequence[Any]] = None) -> Any:
        return [{"slot": MOCK_SLOT - i, "prioritizationFee": 1000 * i} for i in range(3)]

    async def get_priority_fee_estimate(
        self,
        account_keys: Optional[Sequence[Any]] = None,
        transaction: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return {"priorityFeeEstimate": 10000}

    # Network

    async def get_epoch_info(self, commitment: Optional[str] = None) -> Any:
        return {
            "epoch": 123,
            "slotIndex": 456,
            "slotsInEpoch": 432000,
            "absoluteSlot": MOCK_SLOT,
            "blockHeight": 123456000,
        }

    async def get_epoch_schedule(self) -> Any:
        return {
            "slotsPerEpoch": 432000,
            "leaderScheduleSlotOffset": 432000,
            "warmup": False,
            "firstNormalEpoch": 0,
            "firstNormalSlot": 0,
        }

    async def get_leader_schedule(self, slot: Optional[int] = None, commitment: Optional[str] = None) -> Any:
        return {"ValidatorPubkey1": [0, 1, 2, 3], "ValidatorPubkey2": [4, 5, 6, 7]}

    async def get_recent_performance_samples(self, limit: Optional[int] = None) -> Any:
        return [
            {
                "slot": MOCK_SLOT - i * 100,
                "numTransactions": 1000 + i,
                "numSlots": 1,
                "samplePeriodSecs": 60,
            }
            for i in range(_capped(limit))
        ]

    async def get_version(self) -> Any:
        return {"solana-core": "1.14.0", "feature-set": 123456789}

    async def get_health(self) -> str:
        return "ok"

    async def get_cluster_nodes(self) -> Any:
        return [
            {
                "pubkey": "ValidatorPubkey1",
                "gossip": "10.0.0.1:8001",
                "tpu": "10.0.0.1:8004",
                "rpc": "10.0.0.1:8899",
                "version": "1.14.0",
            }
        ]

    async def get_identity(self) -> Any:
        return {"identity": "ValidatorPubkey1"}

    async def get_genesis_hash(self) -> str:
        return "GenesisHash123"

    async def get_vote_accounts(self, commitment: Optional[str] = None) -> Any:
        return {
            "current": [
                {
                    "votePubkey": "VoteAccount1",
                    "nodePubkey": "ValidatorPubkey1",
                    "activatedStake": 1000000000,
                    "commission": 10,
                    "lastVote": MOCK_SLOT,
                }
            ],
            "delinquent": [],
        }

    async def get_inflation_governor(self, commitment: Optional[str] = None) -> Any:
        return {
            "initial": 0.08,
            "terminal": 0.015,
            "taper": 0.15,
            "foundation": 0.0,
            "foundationTerm": 0.0,
        }

    async def get_inflation_rate(self) -> Any:
        return {"total": 0.05, "validator": 0.05, "foundation": 0.0, "epoch": 123}

    async def get_supply(self, commitment: Optional[str] = None) -> Any:
        return {
            "total": 500000000000000000,
            "circulating": 400000000000000000,
            "nonCirculating": 100000000000000000,
            "nonCirculatingAccounts": [],
        }

    async def get_stake_minimum_delegation(self, commitment: Optional[str] = None) -> int:
        return 1000000000

    # Digital Asset Standard

    async def get_asset(self, asset_id: str) -> Any:
        return _asset(asset_id)

    async def get_rwa_asset(self, asset_id: str) -> Any:
        return {"items": {"asset_controller": {"address": asset_id}, "data_registry": None}}

    async def get_asset_batch(self, asset_ids: Sequence[str]) -> Any:
        return [_asset(asset_id) for asset_id in asset_ids]

    async def get_asset_proof(self, asset_id: str) -> Any:
        return {
            "root": "MockRoot",
            "proof": ["MockProofNode1", "MockProofNode2"],
            "node_index": 16384,
            "leaf": "MockLeaf",
            "tree_id": "MockTree",
        }

    async def get_assets_by_group(
        self, group_key: str, group_value: str, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Any:
        return _asset_page(page, limit)

    async def get_assets_by_owner(
        self, owner: Any, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Any:
        return _asset_page(page, limit)

    async def get_assets_by_creator(
        self,
        creator: Any,
        only_verified: Optional[bool] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        return _asset_page(page, limit)

    async def get_assets_by_authority(
        self, authority: Any, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Any:
        return _asset_page(page, limit)

    async def search_assets(self, criteria: Dict[str, Any]) -> Any:
        return _asset_page(criteria.get("page"), criteria.get("limit"), count=1)

    async def get_signatures_for_asset(
        self, asset_id: str, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Any:
        return {
            "total": 2,
            "limit": limit or 1000,
            "page": page or 1,
            "items": [["MockSignature0", "Transfer"], ["MockSignature1", "MintV1"]],
        }

    async def get_nft_editions(
        self, mint: str, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Any:
        return {
            "master_edition_address": mint,
            "supply": 2,
            "max_supply": 10,
            "editions": [{"mint": "EditionMint1", "edition": 1}, {"mint": "EditionMint2", "edition": 2}],
        }

    async def get_token_accounts(
        self,
        mint: Any = None,
        owner: Any = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        return {
            "total": 1,
            "limit": limit or 1000,
            "page": page or 1,
            "token_accounts": [
                {
                    "address": "TokenAccount1",
                    "mint": str(mint) if mint is not None else "MockMint",
                    "owner": str(owner) if owner is not None else SYSTEM_PROGRAM_ID,
                    "amount": 1000000,
                    "frozen": False,
                }
            ],
        }

    # Jito bundles

    async def send_jito_bundle(
        self, serialized_transactions: Sequence[str], jito_api_url: Optional[str] = None
    ) -> str:
        return "MockBundleId"

    async def get_bundle_statuses(
        self, bundle_ids: Sequence[str], jito_api_url: Optional[str] = None
    ) -> Any:
        return {
            "context": {"slot": MOCK_SLOT},
            "value": [
                {"bundle_id": bundle_id, "transactions": [], "slot": MOCK_SLOT, "confirmation_status": "finalized"}
                for bundle_id in bundle_ids
            ],
        }
