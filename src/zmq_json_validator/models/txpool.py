"""Mempool-addition records published on ``*-txpool_add`` topics."""

import msgspec

from .common import EncryptedAmount, Output


class TxPoolAddMin(msgspec.Struct):
    """Minimal mempool-addition record.

    Attributes:
        id: Transaction hash.
        blob_size: Serialized size in bytes.
        weight: Transaction weight.
        fee: Fee in atomic units.
    """

    id: str
    blob_size: int
    weight: int
    fee: int


class ToKeyInput(msgspec.Struct):
    amount: int
    key_offsets: list[int]
    key_image: str


class PoolInput(msgspec.Struct):
    """Ring input, published as ``{"to_key": {...}}``."""

    to_key: ToKeyInput


class Bulletproof(msgspec.Struct):
    commitments: list[str] = msgspec.field(name="V")
    a_point: str = msgspec.field(name="A")
    s_point: str = msgspec.field(name="S")
    t1: str = msgspec.field(name="T1")
    t2: str = msgspec.field(name="T2")
    taux: str
    mu: str
    left: list[str] = msgspec.field(name="L")
    right: list[str] = msgspec.field(name="R")
    a_scalar: str = msgspec.field(name="a")
    b_scalar: str = msgspec.field(name="b")
    t: str


class BulletproofPlus(msgspec.Struct):
    commitments: list[str] = msgspec.field(name="V")
    a_point: str = msgspec.field(name="A")
    a1_point: str = msgspec.field(name="A1")
    b_point: str = msgspec.field(name="B")
    r1: str
    s1: str
    d1: str
    left: list[str] = msgspec.field(name="L")
    right: list[str] = msgspec.field(name="R")


class Mlsag(msgspec.Struct):
    ss: list[list[str]]
    cc: str


class Clsag(msgspec.Struct):
    s: list[str]
    c1: str
    d: str = msgspec.field(name="D")


class Prunable(msgspec.Struct):
    """Prunable RingCT data.

    Legacy Borromean range proofs are carried verbatim; every other proof
    family is modelled field by field.
    """

    range_proofs: list[msgspec.Raw]
    bulletproofs: list[Bulletproof]
    bulletproofs_plus: list[BulletproofPlus]
    mlsags: list[Mlsag]
    clsags: list[Clsag]
    pseudo_outs: list[str]


class PoolRingCt(msgspec.Struct, omit_defaults=True):
    """RingCT section of a mempool transaction.

    ``prunable`` is omitted by the node when the signature carries no proofs.
    """

    type: int
    encrypted: list[EncryptedAmount]
    commitments: list[str]
    fee: int
    prunable: Prunable | None = None


class TxPoolAdd(msgspec.Struct):
    """Full mempool-addition record, one per transaction."""

    version: int
    unlock_time: int
    inputs: list[PoolInput]
    outputs: list[Output]
    extra: str
    signatures: list[msgspec.Raw]
    ringct: PoolRingCt
