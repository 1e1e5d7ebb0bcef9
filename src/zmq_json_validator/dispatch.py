"""Topic label resolution and wire message splitting.

The node publishes each notification as a single UTF-8 frame of the form
``<label>:<json-body>``. The label selects one of a closed set of typed
models; anything else is reported as unknown and never validated.
"""

from enum import StrEnum

import msgspec

from .models import ChainMain, ChainMainMin, MinerData, TxPoolAdd, TxPoolAddMin


class MessageType(StrEnum):
    """Recognized JSON publication topics, valued by their wire label."""

    JSON_MINIMAL_CHAIN_MAIN = "json-minimal-chain_main"
    JSON_MINIMAL_TXPOOL_ADD = "json-minimal-txpool_add"
    JSON_FULL_CHAIN_MAIN = "json-full-chain_main"
    JSON_FULL_TXPOOL_ADD = "json-full-txpool_add"
    JSON_FULL_MINER_DATA = "json-full-miner_data"


MESSAGE_MODELS: dict[MessageType, type] = {
    MessageType.JSON_MINIMAL_CHAIN_MAIN: ChainMainMin,
    MessageType.JSON_MINIMAL_TXPOOL_ADD: list[TxPoolAddMin],
    MessageType.JSON_FULL_CHAIN_MAIN: list[ChainMain],
    MessageType.JSON_FULL_TXPOOL_ADD: list[TxPoolAdd],
    MessageType.JSON_FULL_MINER_DATA: MinerData,
}

if MESSAGE_MODELS.keys() != set(MessageType):
    raise RuntimeError("Every MessageType must map to exactly one model")

_LABELS: dict[str, MessageType] = {msg_type.value: msg_type for msg_type in MessageType}


class DecodedMessage(msgspec.Struct, frozen=True):
    """A wire message split into its raw label and raw JSON body."""

    msg_type: str
    body: str


def resolve(tag: str) -> MessageType | None:
    """Map a wire label onto its MessageType.

    Matching is exact: no case folding and no whitespace trimming.

    Args:
        tag (str): Label taken from the wire message.

    Returns:
        MessageType | None: The matching type, or None if the label is unknown.
    """
    return _LABELS.get(tag)


def model_for(msg_type: MessageType) -> type:
    """Return the typed model a message of ``msg_type`` decodes into."""
    return MESSAGE_MODELS[msg_type]


def split_message(raw: str | bytes) -> DecodedMessage:
    """Split a wire message on its first colon.

    The JSON body may itself contain colons, so only the first one is treated
    as the delimiter. A message without any colon yields an empty body.

    Args:
        raw (str | bytes): The message as received. Bytes are decoded as
            UTF-8, with undecodable sequences replaced.

    Returns:
        DecodedMessage: The label and body.
    """
    if isinstance(raw, (bytes, bytearray, memoryview)):
        raw = bytes(raw).decode("utf-8", errors="replace")
    msg_type, _, body = raw.partition(":")
    return DecodedMessage(msg_type=msg_type, body=body)
