"""
Address Derivation

Account address from an Ed25519 public key:

    address = Base58Check( {6, 161, 159} || BLAKE2b-160(public_key) )

which yields the 36-character "tz1..." form.

Accepted public key formats:
- RAW:      64 hex characters (32 bytes)
- PREFIXED: 54-character Base58Check string tagged "edpk"
            ({13, 15, 37, 217} || public_key)

Any other shape is rejected with InvalidPublicKeyError. Legacy formats
are deliberately unsupported.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from ..core_crypto.encoding import (
    from_hex,
    prefix_decode,
    prefix_encode,
)
from ..core_crypto.generic_hash import generic_hash
from ..errors import DecodeError, InvalidPublicKeyError

logger = logging.getLogger(__name__)


# Constants
ADDRESS_PREFIX = bytes([6, 161, 159])           # tz1
ADDRESS_HASH_SIZE = 20
PUBLIC_KEY_PREFIX = bytes([13, 15, 37, 217])    # edpk
PUBLIC_KEY_TAG = "edpk"
PUBLIC_KEY_SIZE = 32
RAW_PUBLIC_KEY_LENGTH = 2 * PUBLIC_KEY_SIZE     # 64 hex characters
PREFIXED_PUBLIC_KEY_LENGTH = 54


class PublicKeyFormat(Enum):
    """Textual public key formats understood by parse_public_key."""
    RAW = "raw"
    PREFIXED = "prefixed"


@dataclass(frozen=True)
class ParsedPublicKey:
    """A public key resolved to its raw 32 bytes, tagged with its source format."""
    format: PublicKeyFormat
    key: bytes


def parse_public_key(public_key: str) -> ParsedPublicKey:
    """
    Resolve a textual public key to raw bytes.

    Args:
        public_key: 64 hex characters or an "edpk" Base58Check string

    Returns:
        ParsedPublicKey

    Raises:
        InvalidPublicKeyError: If the key matches neither format
    """
    if not isinstance(public_key, str):
        raise InvalidPublicKeyError(f"invalid publicKey: {public_key!r}")

    if len(public_key) == RAW_PUBLIC_KEY_LENGTH:
        try:
            key = from_hex(public_key)
        except DecodeError as exc:
            raise InvalidPublicKeyError(f"invalid publicKey: {public_key}") from exc
        if len(key) != PUBLIC_KEY_SIZE:
            raise InvalidPublicKeyError(f"invalid publicKey: {public_key}")
        return ParsedPublicKey(PublicKeyFormat.RAW, key)

    if (public_key.startswith(PUBLIC_KEY_TAG)
            and len(public_key) == PREFIXED_PUBLIC_KEY_LENGTH):
        try:
            key = prefix_decode(public_key, PUBLIC_KEY_PREFIX)
        except DecodeError as exc:
            raise InvalidPublicKeyError(f"invalid publicKey: {public_key}") from exc
        if len(key) != PUBLIC_KEY_SIZE:
            raise InvalidPublicKeyError(f"invalid publicKey: {public_key}")
        return ParsedPublicKey(PublicKeyFormat.PREFIXED, key)

    logger.debug("Unsupported public key format (length %d)", len(public_key))
    raise InvalidPublicKeyError(f"invalid publicKey: {public_key}")


def encode_public_key(public_key: bytes) -> str:
    """
    Encode a raw 32-byte public key in its "edpk" form.

    Raises:
        InvalidPublicKeyError: If the key is not 32 bytes
    """
    if not isinstance(public_key, (bytes, bytearray, memoryview)):
        raise InvalidPublicKeyError(
            f"Public key must be bytes, got {type(public_key).__name__}"
        )
    public_key = bytes(public_key)
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise InvalidPublicKeyError(
            f"Public key must be {PUBLIC_KEY_SIZE} bytes, got {len(public_key)}"
        )
    return prefix_encode(PUBLIC_KEY_PREFIX, public_key)


def derive_address(public_key: str) -> str:
    """
    Get an address from the public key.

    Args:
        public_key: 64 hex characters or an "edpk" Base58Check string

    Returns:
        Base58Check "tz1..." address

    Raises:
        InvalidPublicKeyError: If the public key format is not accepted
    """
    parsed = parse_public_key(public_key)
    digest = generic_hash(parsed.key, ADDRESS_HASH_SIZE)
    return prefix_encode(ADDRESS_PREFIX, digest)


def is_valid_address(address: str) -> bool:
    """Check that an address decodes to a prefixed 20-byte hash."""
    try:
        return len(prefix_decode(address, ADDRESS_PREFIX)) == ADDRESS_HASH_SIZE
    except DecodeError:
        return False


# Self-test when run directly
if __name__ == "__main__":
    print("Address Derivation Test")
    print("=" * 70)

    zero_key = "0" * RAW_PUBLIC_KEY_LENGTH
    address = derive_address(zero_key)
    print(f"  Raw key:      {zero_key}")
    print(f"  Address:      {address}")

    prefixed = encode_public_key(bytes(PUBLIC_KEY_SIZE))
    print(f"  Prefixed key: {prefixed}")

    test_pass = derive_address(prefixed) == address and is_valid_address(address)
    print(f"  Status: {'✓ PASS' if test_pass else '✗ FAIL'}")
