"""
Keypair Derivation and Key-Format Conversion

A single long-term Ed25519 signing identity is derived from a seed and
reused as an X25519 encryption identity:

    seed --BLAKE2b-256--> 32-byte seed --> Ed25519 keypair --> X25519 keypair

Key layout (libsodium):
- Ed25519 public key: 32 bytes
- Ed25519 private key: 64 bytes (seed || public key)
- X25519 public/private key: 32 bytes each

Derivation and conversion are pure functions; the same seed always
yields the same keys and no randomness is involved.
"""

import logging
from dataclasses import dataclass, field
from typing import Union

import nacl.bindings
from nacl.exceptions import CryptoError

from ..core_crypto.encoding import to_hex
from ..core_crypto.generic_hash import generic_hash
from ..core_crypto.sodium_ready import requires_sodium
from ..errors import InvalidKeyFormatError

logger = logging.getLogger(__name__)


# Constants
SEED_SIZE = nacl.bindings.crypto_sign_SEEDBYTES                 # 32
SIGNING_PUBLIC_KEY_SIZE = nacl.bindings.crypto_sign_PUBLICKEYBYTES  # 32
SIGNING_PRIVATE_KEY_SIZE = nacl.bindings.crypto_sign_SECRETKEYBYTES  # 64
EXCHANGE_KEY_SIZE = nacl.bindings.crypto_box_PUBLICKEYBYTES     # 32


@dataclass(frozen=True)
class SigningKeypair:
    """Ed25519 signing keypair in raw libsodium byte layout."""
    public_key: bytes
    private_key: bytes = field(repr=False)

    @property
    def public_key_hex(self) -> str:
        """Public key as 64 lower-case hex characters."""
        return to_hex(self.public_key)

    def to_exchange_keypair(self) -> 'ExchangeKeypair':
        """Convert to the X25519 keypair of the same secret."""
        return to_exchange_keypair(self)


@dataclass(frozen=True)
class ExchangeKeypair:
    """X25519 key-exchange keypair derived from a signing keypair."""
    public_key: bytes
    private_key: bytes = field(repr=False)


def _require_key(key: Union[bytes, bytearray], size: int, name: str) -> bytes:
    """Check key type and length before handing it to libsodium."""
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise InvalidKeyFormatError(
            f"{name} must be bytes, got {type(key).__name__}"
        )
    key = bytes(key)
    if len(key) != size:
        logger.debug("Rejected %s of length %d", name, len(key))
        raise InvalidKeyFormatError(
            f"{name} must be {size} bytes, got {len(key)}"
        )
    return key


@requires_sodium
def keypair_from_seed_bytes(seed: bytes) -> SigningKeypair:
    """
    Generate an Ed25519 keypair from a 32-byte seed.

    Args:
        seed: Exactly 32 bytes of key material

    Returns:
        SigningKeypair

    Raises:
        InvalidKeyFormatError: If seed is not 32 bytes
    """
    seed = _require_key(seed, SEED_SIZE, "Keypair seed")
    public_key, private_key = nacl.bindings.crypto_sign_seed_keypair(seed)
    return SigningKeypair(public_key=public_key, private_key=private_key)


def derive_keypair(seed: Union[str, bytes]) -> SigningKeypair:
    """
    Get a keypair from a seed.

    The seed is hashed to 32 bytes with BLAKE2b and fed to deterministic
    Ed25519 keypair generation. An empty seed is accepted; choosing a
    strong seed is the caller's responsibility.

    Args:
        seed: Secret seed (text is UTF-8 encoded)

    Returns:
        SigningKeypair, identical for identical seeds
    """
    return keypair_from_seed_bytes(generic_hash(seed, SEED_SIZE))


@requires_sodium
def to_exchange_public_key(signing_public_key: bytes) -> bytes:
    """
    Convert an Ed25519 public key to an X25519 public key.

    Raises:
        InvalidKeyFormatError: If the key has the wrong length or is
            not a valid curve point
    """
    key = _require_key(signing_public_key, SIGNING_PUBLIC_KEY_SIZE,
                       "Signing public key")
    try:
        return nacl.bindings.crypto_sign_ed25519_pk_to_curve25519(key)
    except CryptoError as exc:
        raise InvalidKeyFormatError(
            "Signing public key is not a valid Ed25519 point"
        ) from exc


@requires_sodium
def to_exchange_private_key(signing_private_key: bytes) -> bytes:
    """
    Convert an Ed25519 private key to an X25519 private key.

    Raises:
        InvalidKeyFormatError: If the key is not 64 bytes
    """
    key = _require_key(signing_private_key, SIGNING_PRIVATE_KEY_SIZE,
                       "Signing private key")
    try:
        return nacl.bindings.crypto_sign_ed25519_sk_to_curve25519(key)
    except CryptoError as exc:
        raise InvalidKeyFormatError("Invalid signing private key") from exc


def to_exchange_keypair(keypair: SigningKeypair) -> ExchangeKeypair:
    """Convert both halves of a signing keypair to exchange form."""
    return ExchangeKeypair(
        public_key=to_exchange_public_key(keypair.public_key),
        private_key=to_exchange_private_key(keypair.private_key),
    )
