"""
Asymmetric Sealed-Box Cipher

Anonymous public-key encryption for the first handshake message, sent
before any shared key exists:
- Recipient's Ed25519 signing key converted to X25519
- NaCl sealed box (ephemeral X25519 + XSalsa20-Poly1305)

Envelope Format (opaque, produced by libsodium):
    [ephemeral public key (32 bytes) | ciphertext | tag (16 bytes)]

The sender's identity cannot be recovered from the ciphertext; only
the holder of the recipient's private key can open it.
"""

import logging
from typing import Union

import nacl.bindings
from nacl.exceptions import CryptoError
from nacl.public import PublicKey, SealedBox

from ..core_crypto.encoding import from_hex, to_hex
from ..core_crypto.sodium_ready import requires_sodium
from ..errors import AuthenticationError, DecodeError
from ..keys.keypair import (
    SigningKeypair,
    to_exchange_private_key,
    to_exchange_public_key,
)

logger = logging.getLogger(__name__)


# Constants
SEAL_OVERHEAD = nacl.bindings.crypto_box_SEALBYTES  # 48 bytes


@requires_sodium
def seal_cryptobox(payload: Union[str, bytes], public_key: bytes) -> str:
    """
    Encrypt a message with a public key.

    Args:
        payload: Message text (UTF-8 encoded) or raw bytes
        public_key: Recipient's 32-byte Ed25519 public key

    Returns:
        Hex encoded sealed box

    Raises:
        InvalidKeyFormatError: If the public key cannot be converted
    """
    if isinstance(payload, str):
        payload = payload.encode('utf-8')
    kx_public_key = PublicKey(to_exchange_public_key(public_key))
    encrypted = SealedBox(kx_public_key).encrypt(bytes(payload))
    return to_hex(encrypted)


@requires_sodium
def open_cryptobox_bytes(encrypted_payload: Union[bytes, str],
                         public_key: bytes, private_key: bytes) -> bytes:
    """
    Open a sealed box to raw bytes.

    Args:
        encrypted_payload: Sealed box as raw bytes or hex
        public_key: Recipient's 32-byte Ed25519 public key
        private_key: Recipient's 64-byte Ed25519 private key

    Raises:
        InvalidKeyFormatError: If either key cannot be converted
        AuthenticationError: If the box was not sealed for this keypair
            or was tampered with
        DecodeError: If a hex payload is not valid hex
    """
    kx_private_key = to_exchange_private_key(private_key)
    kx_public_key = to_exchange_public_key(public_key)

    if isinstance(encrypted_payload, str):
        ciphertext = from_hex(encrypted_payload)
    else:
        ciphertext = bytes(encrypted_payload)

    if len(ciphertext) < SEAL_OVERHEAD:
        raise AuthenticationError("Sealed box is shorter than its overhead")

    try:
        return nacl.bindings.crypto_box_seal_open(
            ciphertext, kx_public_key, kx_private_key
        )
    except CryptoError as exc:
        logger.debug("Sealed box could not be opened (%d bytes)", len(ciphertext))
        raise AuthenticationError("Sealed box could not be opened with this keypair") from exc


def open_cryptobox(encrypted_payload: Union[bytes, str],
                   public_key: bytes, private_key: bytes) -> str:
    """
    Decrypt a message with public + private key.

    Returns:
        Decrypted UTF-8 text

    Raises:
        AuthenticationError: If the box cannot be opened
        DecodeError: If the plaintext is not valid UTF-8
    """
    plaintext = open_cryptobox_bytes(encrypted_payload, public_key, private_key)
    try:
        return plaintext.decode('utf-8')
    except UnicodeDecodeError as exc:
        raise DecodeError("Decrypted payload is not valid UTF-8 text") from exc


def open_cryptobox_with_keypair(encrypted_payload: Union[bytes, str],
                                keypair: SigningKeypair) -> str:
    """Open a sealed box using both halves of a signing keypair."""
    return open_cryptobox(encrypted_payload, keypair.public_key, keypair.private_key)
