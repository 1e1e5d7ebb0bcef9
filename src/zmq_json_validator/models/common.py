"""Building blocks shared by the chain and txpool record shapes.

Hex-encoded hashes, keys and blobs are kept as plain strings so their exact
text survives a decode/encode cycle.
"""

import msgspec


class TaggedKey(msgspec.Struct):
    """Output key with its one-byte view tag (hex)."""

    key: str
    view_tag: str


class OutputKey(msgspec.Struct):
    """Untagged output key used by pre-view-tag transactions."""

    key: str


class Output(msgspec.Struct, omit_defaults=True):
    """A transaction output.

    Exactly one of ``to_tagged_key`` or ``to_key`` is published by the node,
    the other is omitted from the JSON entirely.
    """

    amount: int
    to_tagged_key: TaggedKey | None = None
    to_key: OutputKey | None = None


class EncryptedAmount(msgspec.Struct):
    """ECDH-encrypted amount information of a RingCT output."""

    mask: str
    amount: str
