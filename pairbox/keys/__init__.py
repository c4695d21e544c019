# Keys Module
"""
Deterministic Ed25519 keypairs and their X25519 counterparts.
"""

from .keypair import (
    SigningKeypair,
    ExchangeKeypair,
    derive_keypair,
    keypair_from_seed_bytes,
    to_exchange_public_key,
    to_exchange_private_key,
    to_exchange_keypair,
    SEED_SIZE,
    SIGNING_PUBLIC_KEY_SIZE,
    SIGNING_PRIVATE_KEY_SIZE,
    EXCHANGE_KEY_SIZE,
)

__all__ = [
    'SigningKeypair',
    'ExchangeKeypair',
    'derive_keypair',
    'keypair_from_seed_bytes',
    'to_exchange_public_key',
    'to_exchange_private_key',
    'to_exchange_keypair',
    'SEED_SIZE',
    'SIGNING_PUBLIC_KEY_SIZE',
    'SIGNING_PRIVATE_KEY_SIZE',
    'EXCHANGE_KEY_SIZE',
]
