"""
Generic Hash (BLAKE2b)

Unkeyed BLAKE2b with a caller-selected digest size, equivalent to
libsodium's crypto_generichash. Used for:
- Seed hashing before keypair generation (32 bytes)
- Public key hashing for account addresses (20 bytes)
"""

from typing import Union

import nacl.encoding
import nacl.hash

from .encoding import to_hex
from .sodium_ready import requires_sodium


# Constants
HASH_SIZE = 32          # Default digest size
HASH_SIZE_MIN = 16      # crypto_generichash_BYTES_MIN
HASH_SIZE_MAX = 64      # crypto_generichash_BYTES_MAX


def _to_bytes(data: Union[bytes, bytearray, memoryview, str]) -> bytes:
    if isinstance(data, str):
        return data.encode('utf-8')
    return bytes(data)


@requires_sodium
def generic_hash(data: Union[bytes, str], output_length: int = HASH_SIZE) -> bytes:
    """
    Hash data with BLAKE2b.

    Args:
        data: Bytes to hash (text is UTF-8 encoded)
        output_length: Digest size in bytes (16 to 64)

    Returns:
        Digest of exactly output_length bytes

    Raises:
        ValueError: If output_length is out of range
    """
    if not HASH_SIZE_MIN <= output_length <= HASH_SIZE_MAX:
        raise ValueError(
            f"Hash output length must be between {HASH_SIZE_MIN} "
            f"and {HASH_SIZE_MAX} bytes"
        )
    return nacl.hash.blake2b(
        _to_bytes(data),
        digest_size=output_length,
        encoder=nacl.encoding.RawEncoder,
    )


def get_hex_hash(key: Union[bytes, str]) -> str:
    """Get the hex encoded 32-byte hash of a value."""
    return to_hex(generic_hash(key, HASH_SIZE))
