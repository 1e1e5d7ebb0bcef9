"""Miner template-update record published on ``json-full-miner_data``."""

import msgspec


class TxBacklogEntry(msgspec.Struct):
    id: str
    weight: int
    fee: int


class MinerData(msgspec.Struct):
    """Everything a miner needs to build the next block template.

    Attributes:
        major_version: Hard-fork version of the next block.
        height: Height of the next block.
        prev_id: Hash of the current chain tip.
        seed_hash: RandomX seed hash.
        difficulty: Network difficulty as a ``0x``-prefixed hex string.
        median_weight: Median block weight.
        already_generated_coins: Emission so far, in atomic units.
        tx_backlog: Mempool transactions available for inclusion.
    """

    major_version: int
    height: int
    prev_id: str
    seed_hash: str
    difficulty: str
    median_weight: int
    already_generated_coins: int
    tx_backlog: list[TxBacklogEntry]
