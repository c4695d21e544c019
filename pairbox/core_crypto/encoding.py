"""
Encoding Utilities

Text encodings used on the wire between wallet and client:
- Lower-case hexadecimal
- Base58Check (Base58 with a 4-byte double SHA-256 checksum)
- Prefixed Base58Check, where a fixed version prefix identifies the
  kind of payload (addresses, public keys)

Both encodings are pure functions with no secret state.
"""

import binascii
import logging
from typing import Iterable, Union

import base58

from ..errors import DecodeError

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def to_hex(value: Union[BytesLike, str, Iterable[int]]) -> str:
    """
    Convert a value to lower-case hex.

    Strings are encoded as UTF-8 first; iterables of ints are treated
    as raw byte values.

    Args:
        value: Bytes, text, or an iterable of byte values

    Returns:
        Hex string (empty for empty input)
    """
    if isinstance(value, str):
        return value.encode('utf-8').hex()
    return bytes(value).hex()


def is_hex(value: str) -> bool:
    """
    Check if a string is hex.

    The string must parse as a base-16 integer whose canonical
    lower-case form is exactly the lower-cased input, so leading zeros,
    '0x' prefixes and surrounding whitespace are all rejected.
    """
    try:
        parsed = int(value, 16)
    except (TypeError, ValueError):
        return False
    return format(parsed, 'x') == value.lower()


def from_hex(value: str) -> bytes:
    """
    Decode a hex string to bytes.

    Whitespace and any other non-hex characters are rejected.

    Raises:
        DecodeError: If the string is not valid hex
    """
    try:
        return binascii.unhexlify(value)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"Invalid hex string: {exc}") from exc


def b58check_encode(data: BytesLike) -> str:
    """Encode bytes as a Base58Check string."""
    return base58.b58encode_check(bytes(data)).decode('ascii')


def b58check_decode(value: str) -> bytes:
    """
    Decode a Base58Check string and verify its checksum.

    Args:
        value: Base58Check encoded text

    Returns:
        Payload bytes with the checksum removed

    Raises:
        DecodeError: On checksum mismatch or characters outside the alphabet
    """
    try:
        return base58.b58decode_check(value)
    except ValueError as exc:
        logger.debug("Base58Check decode rejected: %s", exc)
        raise DecodeError(f"Invalid Base58Check string: {exc}") from exc


def prefix_encode(prefix: BytesLike, payload: BytesLike) -> str:
    """Base58Check encode prefix || payload."""
    return b58check_encode(bytes(prefix) + bytes(payload))


def prefix_decode(value: str, prefix: BytesLike) -> bytes:
    """
    Decode a prefixed Base58Check string and strip the prefix.

    Raises:
        DecodeError: If decoding fails or the prefix does not match
    """
    prefix = bytes(prefix)
    decoded = b58check_decode(value)
    if not decoded.startswith(prefix):
        raise DecodeError("Unexpected Base58Check prefix")
    return decoded[len(prefix):]
