# Address Module
"""
Account addresses ("tz1...") derived from Ed25519 public keys.
"""

from .address import (
    PublicKeyFormat,
    ParsedPublicKey,
    parse_public_key,
    encode_public_key,
    derive_address,
    is_valid_address,
    ADDRESS_PREFIX,
    PUBLIC_KEY_PREFIX,
)

__all__ = [
    'PublicKeyFormat',
    'ParsedPublicKey',
    'parse_public_key',
    'encode_public_key',
    'derive_address',
    'is_valid_address',
    'ADDRESS_PREFIX',
    'PUBLIC_KEY_PREFIX',
]
