# Core Cryptography Module
"""
Core building blocks shared by the rest of PairBox:
- Hex and Base58Check encodings
- BLAKE2b generic hash
- One-time libsodium initialization gate
"""

from .encoding import (
    to_hex,
    is_hex,
    from_hex,
    b58check_encode,
    b58check_decode,
    prefix_encode,
    prefix_decode,
)

from .generic_hash import (
    generic_hash,
    get_hex_hash,
    HASH_SIZE,
)

from .sodium_ready import (
    ensure_sodium_ready,
    is_sodium_ready,
    requires_sodium,
)

__all__ = [
    'to_hex',
    'is_hex',
    'from_hex',
    'b58check_encode',
    'b58check_decode',
    'prefix_encode',
    'prefix_decode',
    'generic_hash',
    'get_hex_hash',
    'HASH_SIZE',
    'ensure_sodium_ready',
    'is_sodium_ready',
    'requires_sodium',
]
