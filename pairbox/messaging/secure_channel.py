"""
Symmetric Channel Cipher

Authenticated encryption for messages exchanged after the handshake,
once both peers hold the same 32-byte shared key:
- XSalsa20-Poly1305 (NaCl SecretBox)
- Fresh random 24-byte nonce per message

Envelope Format:
    [nonce (24 bytes) | ciphertext | tag (16 bytes)]

The nonce travels in front of the ciphertext so no out-of-band nonce
transport is needed. Its fixed length makes the split unambiguous.

Security features:
- Confidentiality and integrity in one primitive (no separate MAC)
- Never reuse a nonce with the same key (one random nonce per call)
- No partial plaintext is ever returned on authentication failure
"""

import logging
from dataclasses import dataclass
from typing import Union

import nacl.utils
from nacl.exceptions import CryptoError
from nacl.secret import SecretBox

from ..core_crypto.encoding import from_hex, to_hex
from ..core_crypto.sodium_ready import requires_sodium
from ..errors import AuthenticationError, DecodeError, InvalidKeyFormatError

logger = logging.getLogger(__name__)


# Constants
KEY_SIZE = SecretBox.KEY_SIZE       # 32 bytes
NONCE_SIZE = SecretBox.NONCE_SIZE   # 24 bytes
TAG_SIZE = SecretBox.MACBYTES       # 16 bytes


def _to_bytes(payload: Union[bytes, bytearray, memoryview, str]) -> bytes:
    """Accept raw bytes or their hex encoding."""
    if isinstance(payload, str):
        return from_hex(payload)
    return bytes(payload)


def _decode_text(plaintext: bytes) -> str:
    try:
        return plaintext.decode('utf-8')
    except UnicodeDecodeError as exc:
        raise DecodeError("Decrypted payload is not valid UTF-8 text") from exc


def generate_nonce() -> bytes:
    """
    Generate a random nonce for SecretBox.

    CRITICAL: Never reuse a nonce with the same key!

    Returns:
        24 random bytes from the OS CSPRNG
    """
    return nacl.utils.random(NONCE_SIZE)


@dataclass(frozen=True)
class CryptoboxEnvelope:
    """
    Container for a symmetric envelope.

    Format: [nonce | ciphertext]
    """
    nonce: bytes          # 24 bytes
    ciphertext: bytes     # plaintext length + 16 byte tag

    def to_bytes(self) -> bytes:
        return self.nonce + self.ciphertext

    def to_hex(self) -> str:
        return to_hex(self.to_bytes())

    @classmethod
    def from_bytes(cls, data: bytes) -> 'CryptoboxEnvelope':
        """Split an envelope at the fixed nonce boundary."""
        return cls(nonce=data[:NONCE_SIZE], ciphertext=data[NONCE_SIZE:])


class SecretBoxCipher:
    """
    XSalsa20-Poly1305 authenticated encryption bound to one shared key.

    The shared key is established out-of-band; this class only consumes it.

    Example:
        >>> cipher = SecretBoxCipher(shared_key)
        >>> envelope = cipher.encrypt("hello")
        >>> cipher.decrypt(envelope)
        'hello'
    """

    @requires_sodium
    def __init__(self, shared_key: bytes):
        """
        Initialize with the shared key.

        Args:
            shared_key: 32-byte symmetric key

        Raises:
            InvalidKeyFormatError: If the key is not 32 bytes
        """
        if not isinstance(shared_key, (bytes, bytearray, memoryview)):
            raise InvalidKeyFormatError(
                f"Shared key must be bytes, got {type(shared_key).__name__}"
            )
        if len(shared_key) != KEY_SIZE:
            raise InvalidKeyFormatError(f"Shared key must be {KEY_SIZE} bytes")
        self._box = SecretBox(bytes(shared_key))

    def encrypt(self, plaintext: Union[str, bytes]) -> str:
        """
        Encrypt a message.

        Args:
            plaintext: Message text (UTF-8 encoded) or raw bytes

        Returns:
            Hex encoding of nonce || ciphertext
        """
        if isinstance(plaintext, str):
            plaintext = plaintext.encode('utf-8')
        nonce = generate_nonce()
        encrypted = self._box.encrypt(bytes(plaintext), nonce)
        return CryptoboxEnvelope(encrypted.nonce, encrypted.ciphertext).to_hex()

    def decrypt_bytes(self, envelope: Union[bytes, str]) -> bytes:
        """
        Decrypt an envelope to raw bytes.

        Raises:
            AuthenticationError: If the envelope fails authentication
            DecodeError: If a hex envelope is not valid hex
        """
        parts = CryptoboxEnvelope.from_bytes(_to_bytes(envelope))
        if len(parts.nonce) != NONCE_SIZE:
            raise AuthenticationError("Envelope is shorter than the nonce")
        try:
            return self._box.decrypt(parts.ciphertext, parts.nonce)
        except CryptoError as exc:
            logger.debug("Secret box authentication failed")
            raise AuthenticationError("Decryption failed: message could not be authenticated") from exc

    def decrypt(self, envelope: Union[bytes, str]) -> str:
        """
        Decrypt an envelope to text.

        Args:
            envelope: Raw envelope bytes or their hex encoding

        Returns:
            Decrypted UTF-8 text

        Raises:
            AuthenticationError: If the envelope fails authentication
            DecodeError: If the plaintext is not valid UTF-8
        """
        return _decode_text(self.decrypt_bytes(envelope))


def encrypt_cryptobox_payload(message: str, shared_key: bytes) -> str:
    """
    Encrypt a message with a shared key.

    Args:
        message: Plaintext message
        shared_key: 32-byte shared key

    Returns:
        Hex encoded nonce || ciphertext
    """
    return SecretBoxCipher(shared_key).encrypt(message)


def decrypt_cryptobox_payload(payload: Union[bytes, str], shared_key: bytes) -> str:
    """
    Decrypt a message with a shared key.

    Args:
        payload: Envelope as raw bytes or hex
        shared_key: 32-byte shared key

    Returns:
        Decrypted message text
    """
    return SecretBoxCipher(shared_key).decrypt(payload)


# Self-test when run directly
if __name__ == "__main__":
    print("Symmetric Channel Cipher Test")
    print("=" * 70)

    key = bytes(KEY_SIZE)
    envelope = encrypt_cryptobox_payload("hello", key)
    print(f"  Envelope: {envelope}")
    print(f"  Length: {len(envelope)} hex chars (expected {2 * (NONCE_SIZE + 5 + TAG_SIZE)})")

    decrypted = decrypt_cryptobox_payload(envelope, key)
    test_pass = decrypted == "hello"
    print(f"  Decrypted: {decrypted}")
    print(f"  Status: {'✓ PASS' if test_pass else '✗ FAIL'}")
