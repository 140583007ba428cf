"""Wire encoders for JSON-RPC quantities, calldata and variant tags.

Numeric quantities never cross the wire as JSON numbers: every allowance,
limit, value and chain id is sent as minimal ``0x``-prefixed hex text.
"""

from __future__ import annotations

from typing import Any, Union

from eth_utils import to_hex
from hexbytes import HexBytes

Quantity = Union[int, str]


def number_to_hex(value: Quantity) -> str:
    """Encode an unsigned quantity as minimal hex text.

    Args:
        value: A non-negative int, a decimal digit string or a
            ``0x``-prefixed hex string.

    Returns:
        ``0x``-prefixed lowercase hex without leading zeros (``0`` is ``0x0``).

    Raises:
        ValueError: If *value* is negative, a bool, or not a quantity.
    """
    if isinstance(value, bool):
        raise ValueError("quantity cannot be boolean")
    if isinstance(value, str):
        raw = value.strip()
        if raw.startswith(("0x", "0X")):
            try:
                value = int(raw, 16)
            except ValueError as e:
                raise ValueError(f"invalid hex quantity: {raw!r}") from e
        elif raw.isdigit():
            value = int(raw, 10)
        else:
            raise ValueError(
                "quantity must be a decimal integer or 0x-prefixed hex quantity"
            )
    if not isinstance(value, int):
        raise ValueError(f"quantity must be int or string, got {type(value).__name__}")
    if value < 0:
        raise ValueError("quantity must be non-negative")
    return to_hex(value)


def bytes_to_hex(data: Any) -> str:
    """Normalize calldata (bytes, HexBytes or hex text) to ``0x`` hex text."""
    try:
        return to_hex(HexBytes(data))
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid hex data: {data!r}") from e


def normalize_tag(tag: Any) -> str:
    """Return the string form of a variant tag.

    ``"token-allowance"`` passes through; ``{"custom": "foo"}`` becomes ``"foo"``.
    """
    if isinstance(tag, str):
        return tag
    if isinstance(tag, dict) and isinstance(tag.get("custom"), str):
        return tag["custom"]
    raise ValueError(f"invalid type tag: {tag!r}")


def is_custom_tag(tag: Any) -> bool:
    return isinstance(tag, dict) and "custom" in tag
