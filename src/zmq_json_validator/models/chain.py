"""Chain-tip records published on ``*-chain_main`` topics."""

import msgspec

from .common import EncryptedAmount, Output


class ChainMainMin(msgspec.Struct):
    """Minimal chain-tip notification.

    Attributes:
        first_height: Height of the first block in ``ids``.
        first_prev_id: Hash of the block preceding ``first_height``.
        ids: Hashes of the newly added blocks, in chain order.
    """

    first_height: int
    first_prev_id: str
    ids: list[str]


class GenInput(msgspec.Struct):
    height: int


class MinerInput(msgspec.Struct):
    """Coinbase input, published as ``{"gen": {"height": n}}``."""

    gen: GenInput


class MinerRingCt(msgspec.Struct):
    """RingCT section of a coinbase transaction (never carries proofs)."""

    type: int
    encrypted: list[EncryptedAmount]
    commitments: list[str]
    fee: int


class MinerTx(msgspec.Struct):
    """Coinbase transaction embedded in a full chain-tip record."""

    version: int
    unlock_time: int
    inputs: list[MinerInput]
    outputs: list[Output]
    extra: str
    signatures: list[msgspec.Raw]
    ringct: MinerRingCt


class ChainMain(msgspec.Struct):
    """Full chain-tip record, one per newly added block.

    Attributes:
        major_version: Hard-fork version of the block.
        minor_version: Voting version of the block.
        timestamp: Block timestamp in seconds.
        prev_id: Hash of the previous block.
        nonce: Proof-of-work nonce.
        miner_tx: Coinbase transaction.
        tx_hashes: Hashes of the non-coinbase transactions in the block.
    """

    major_version: int
    minor_version: int
    timestamp: int
    prev_id: str
    nonce: int
    miner_tx: MinerTx
    tx_hashes: list[str]
