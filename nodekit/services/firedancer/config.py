"""Firedancer ``config.toml`` model"""

from typing import BinaryIO, List, Optional

import tomli_w

from nodekit.models import ConfigModel


class LogConfig(ConfigModel):
    path: Optional[str] = None
    colorize: Optional[str] = None
    level_logfile: Optional[str] = None
    level_stderr: Optional[str] = None
    level_flush: Optional[str] = None


class ReportingConfig(ConfigModel):
    solana_metrics_config: Optional[str] = None


class LedgerConfig(ConfigModel):
    path: Optional[str] = None
    accounts_path: Optional[str] = None
    limit_size: Optional[int] = None
    account_indexes: Optional[List[str]] = None
    account_index_exclude_keys: Optional[List[str]] = None
    account_index_include_keys: Optional[List[str]] = None
    snapshot_archive_format: Optional[str] = None
    require_tower: Optional[bool] = None


class GossipConfig(ConfigModel):
    entrypoints: Optional[List[str]] = None
    port_check: Optional[bool] = None
    port: Optional[int] = None
    host: Optional[str] = None


class ConsensusConfig(ConfigModel):
    identity_path: Optional[str] = None
    vote_account_path: Optional[str] = None
    authorized_voter_paths: Optional[List[str]] = None
    snapshot_fetch: Optional[bool] = None
    genesis_fetch: Optional[bool] = None
    poh_speed_test: Optional[bool] = None
    expected_genesis_hash: Optional[str] = None
    wait_for_supermajority_at_slot: Optional[int] = None
    expected_bank_hash: Optional[str] = None
    expected_shred_version: Optional[int] = None
    wait_for_vote_to_start_leader: Optional[bool] = None
    os_network_limits_test: Optional[bool] = None
    hard_fork_at_slots: Optional[List[int]] = None
    known_validators: Optional[List[str]] = None


class RPCConfig(ConfigModel):
    port: Optional[int] = None
    full_api: Optional[bool] = None
    private: Optional[bool] = None
    transaction_history: Optional[bool] = None
    extended_tx_metadata_storage: Optional[bool] = None
    only_known: Optional[bool] = None
    pubsub_enable_block_subscription: Optional[bool] = None
    pubsub_enable_vote_subscription: Optional[bool] = None
    bigtable_ledger_storage: Optional[bool] = None


class LayoutConfig(ConfigModel):
    affinity: Optional[str] = None
    agave_affinity: Optional[str] = None
    net_tile_count: Optional[int] = None
    quic_tile_count: Optional[int] = None
    verify_tile_count: Optional[int] = None
    bank_tile_count: Optional[int] = None
    shred_tile_count: Optional[int] = None


class Config(ConfigModel):
    """
    Firedancer validator configuration.

    Field names match the TOML keys Firedancer reads; unset fields are left
    out of the encoded file so Firedancer's own defaults apply.
    """

    name: Optional[str] = None
    user: str
    scratch_directory: Optional[str] = None
    dynamic_port_range: Optional[str] = None

    log: Optional[LogConfig] = None
    reporting: Optional[ReportingConfig] = None
    ledger: Optional[LedgerConfig] = None
    gossip: Optional[GossipConfig] = None
    consensus: Optional[ConsensusConfig] = None
    rpc: Optional[RPCConfig] = None
    layout: Optional[LayoutConfig] = None

    def to_toml_dict(self) -> dict:
        """Return the TOML document as a dict, in field declaration order."""
        return self.model_dump(exclude_none=True, by_alias=False)

    def encode(self, writer: BinaryIO) -> None:
        """
        Write the configuration as TOML.

        Args:
            writer: Binary sink (e.g. a payload writer)
        """
        tomli_w.dump(self.to_toml_dict(), writer)
