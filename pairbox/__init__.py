# PairBox
"""
Cryptographic primitives for wallet <-> client pairing:
- Deterministic Ed25519 keypairs from a seed (BLAKE2b + seeded keygen)
- Ed25519 -> X25519 key conversion
- SecretBox channel encryption with a pre-shared key
- Anonymous sealed-box encryption for handshake messages
- "tz1" account addresses from public keys

All functions are pure transforms; libsodium is initialized once per
process on first use (see core_crypto.sodium_ready).
"""

import logging

from .errors import (
    PairBoxError,
    InvalidKeyFormatError,
    InvalidPublicKeyError,
    AuthenticationError,
    DecodeError,
)

from .core_crypto import (
    to_hex,
    is_hex,
    b58check_encode,
    b58check_decode,
    generic_hash,
    get_hex_hash,
    ensure_sodium_ready,
)

from .keys import (
    SigningKeypair,
    ExchangeKeypair,
    derive_keypair,
    to_exchange_public_key,
    to_exchange_private_key,
)

from .messaging import (
    encrypt_cryptobox_payload,
    decrypt_cryptobox_payload,
    seal_cryptobox,
    open_cryptobox,
    recipient_string,
)

from .address import (
    derive_address,
    parse_public_key,
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    'PairBoxError',
    'InvalidKeyFormatError',
    'InvalidPublicKeyError',
    'AuthenticationError',
    'DecodeError',
    # Core
    'to_hex',
    'is_hex',
    'b58check_encode',
    'b58check_decode',
    'generic_hash',
    'get_hex_hash',
    'ensure_sodium_ready',
    # Keys
    'SigningKeypair',
    'ExchangeKeypair',
    'derive_keypair',
    'to_exchange_public_key',
    'to_exchange_private_key',
    # Messaging
    'encrypt_cryptobox_payload',
    'decrypt_cryptobox_payload',
    'seal_cryptobox',
    'open_cryptobox',
    'recipient_string',
    # Address
    'derive_address',
    'parse_public_key',
]
