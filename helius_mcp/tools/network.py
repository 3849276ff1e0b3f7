"""Cluster, epoch, and validator tools."""

from __future__ import annotations

from helius_mcp.tools import schemas
from helius_mcp.tools.operation import Operation, labelled

_COMMITMENT_ONLY = schemas.object_schema({"commitment": schemas.COMMITMENT})
_NO_INPUT = schemas.object_schema()

get_epoch_info = Operation(
    name="helius_get_epoch_info",
    description="Get information about the current epoch",
    action="getting epoch info",
    input_schema=_COMMITMENT_ONLY,
    call=lambda client, args: client.get_epoch_info(args.get("commitment")),
    render=labelled("Epoch info"),
)

get_epoch_schedule = Operation(
    name="helius_get_epoch_schedule",
    description="Get the epoch schedule from the cluster's genesis config",
    action="getting epoch schedule",
    input_schema=_NO_INPUT,
    call=lambda client, args: client.get_epoch_schedule(),
    render=labelled("Epoch schedule"),
)

get_leader_schedule = Operation(
    name="helius_get_leader_schedule",
    description="Get the leader schedule for an epoch",
    action="getting leader schedule",
    input_schema=schemas.object_schema(
        {"slot": schemas.integer("Slot within the epoch (defaults to current)"), "commitment": schemas.COMMITMENT}
    ),
    call=lambda client, args: client.get_leader_schedule(args.get("slot"), args.get("commitment")),
    render=labelled("Leader schedule"),
)

get_recent_performance_samples = Operation(
    name="helius_get_recent_performance_samples",
    description="Get recent performance samples (transactions and slots per period)",
    action="getting performance samples",
    input_schema=schemas.object_schema({"limit": schemas.integer("Number of samples (max 720)", minimum=1)}),
    call=lambda client, args: client.get_recent_performance_samples(args.get("limit")),
    render=labelled("Recent performance samples"),
)

get_version = Operation(
    name="helius_get_version",
    description="Get the Solana version running on the node",
    action="getting version",
    input_schema=_NO_INPUT,
    call=lambda client, args: client.get_version(),
    render=labelled("Version"),
)

get_health = Operation(
    name="helius_get_health",
    description="Get the health of the node",
    action="getting health",
    input_schema=_NO_INPUT,
    call=lambda client, args: client.get_health(),
    render=labelled("Health"),
)

get_cluster_nodes = Operation(
    name="helius_get_cluster_nodes",
    description="Get information about all nodes participating in the cluster",
    action="getting cluster nodes",
    input_schema=_NO_INPUT,
    call=lambda client, args: client.get_cluster_nodes(),
    render=labelled("Cluster nodes"),
)

get_identity = Operation(
    name="helius_get_identity",
    description="Get the identity public key of the node",
    action="getting identity",
    input_schema=_NO_INPUT,
    call=lambda client, args: client.get_identity(),
    render=labelled("Identity"),
)

get_genesis_hash = Operation(
    name="helius_get_genesis_hash",
    description="Get the genesis hash of the cluster",
    action="getting genesis hash",
    input_schema=_NO_INPUT,
    call=lambda client, args: client.get_genesis_hash(),
    render=labelled("Genesis hash"),
)

get_vote_accounts = Operation(
    name="helius_get_vote_accounts",
    description="Get account info and stake for current and delinquent vote accounts",
    action="getting vote accounts",
    input_schema=_COMMITMENT_ONLY,
    call=lambda client, args: client.get_vote_accounts(args.get("commitment")),
    render=labelled("Vote accounts"),
)

get_inflation_governor = Operation(
    name="helius_get_inflation_governor",
    description="Get the current inflation governor",
    action="getting inflation governor",
    input_schema=_COMMITMENT_ONLY,
    call=lambda client, args: client.get_inflation_governor(args.get("commitment")),
    render=labelled("Inflation governor"),
)

get_inflation_rate = Operation(
    name="helius_get_inflation_rate",
    description="Get the specific inflation values for the current epoch",
    action="getting inflation rate",
    input_schema=_NO_INPUT,
    call=lambda client, args: client.get_inflation_rate(),
    render=labelled("Inflation rate"),
)

get_supply = Operation(
    name="helius_get_supply",
    description="Get information about the current SOL supply",
    action="getting supply",
    input_schema=_COMMITMENT_ONLY,
    call=lambda client, args: client.get_supply(args.get("commitment")),
    render=labelled("Supply info"),
)

get_stake_minimum_delegation = Operation(
    name="helius_get_stake_minimum_delegation",
    description="Get the stake minimum delegation in lamports",
    action="getting stake minimum delegation",
    input_schema=_COMMITMENT_ONLY,
    call=lambda client, args: client.get_stake_minimum_delegation(args.get("commitment")),
    render=labelled("Minimum stake delegation"),
)

NETWORK_TOOLS = [
    get_epoch_info,
    get_epoch_schedule,
    get_leader_schedule,
    get_recent_performance_samples,
    get_version,
    get_health,
    get_cluster_nodes,
    get_identity,
    get_genesis_hash,
    get_vote_accounts,
    get_inflation_governor,
    get_inflation_rate,
    get_supply,
    get_stake_minimum_delegation,
]
