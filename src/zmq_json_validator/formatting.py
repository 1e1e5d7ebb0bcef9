"""Human-readable rendering of JSON message bodies."""

import msgspec

from .validation.compare import MAX_NESTING_DEPTH, nesting_depth

_decoder = msgspec.json.Decoder()


def format_json(text: str | bytes, indent: int = 2) -> str:
    """Pretty-print a JSON document for display.

    Never raises; malformed input is reported in the returned string instead.
    Documents nested deeper than MAX_NESTING_DEPTH are treated as malformed.

    Args:
        text (str | bytes): The raw JSON text.
        indent (int): Spaces per indentation level. Defaults to 2.

    Returns:
        str: The indented JSON, or an ``Error parsing JSON: ...`` message.
    """
    try:
        value = _decoder.decode(text)
    except (msgspec.DecodeError, TypeError, RecursionError) as exc:
        return f"Error parsing JSON: {exc}"

    depth = nesting_depth(value)
    if depth > MAX_NESTING_DEPTH:
        return (
            "Error parsing JSON: recursion limit exceeded; "
            f"nesting depth {depth} is above {MAX_NESTING_DEPTH}"
        )

    try:
        formatted = msgspec.json.format(text, indent=indent)
    except (msgspec.DecodeError, TypeError, RecursionError) as exc:
        return f"Error formatting JSON: {exc}"

    if isinstance(formatted, str):
        return formatted
    return bytes(formatted).decode("utf-8", errors="replace")
