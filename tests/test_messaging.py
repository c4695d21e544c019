"""
Unit tests for Secure Messaging module.

Tests:
- SecretBox channel encryption
- Envelope format (nonce || ciphertext)
- Sealed box handshake encryption
- Relay recipient strings
"""

import os

import pytest

from pairbox.errors import AuthenticationError, DecodeError, InvalidKeyFormatError
from pairbox.keys.keypair import derive_keypair
from pairbox.messaging.secure_channel import (
    CryptoboxEnvelope, SecretBoxCipher, generate_nonce,
    encrypt_cryptobox_payload, decrypt_cryptobox_payload,
    NONCE_SIZE, TAG_SIZE
)
from pairbox.messaging.sealed_box import (
    seal_cryptobox, open_cryptobox, open_cryptobox_bytes,
    open_cryptobox_with_keypair, SEAL_OVERHEAD
)
from pairbox.messaging.relay import recipient_string


ZERO_KEY = bytes(32)


class TestSecretBoxChannel:
    """Tests for symmetric channel encryption."""

    def test_hello_example(self):
        """'hello' under the zero key gives 90 hex chars and decrypts back."""
        envelope = encrypt_cryptobox_payload("hello", ZERO_KEY)
        assert len(envelope) == 2 * (24 + 5 + 16) == 90
        assert decrypt_cryptobox_payload(bytes.fromhex(envelope), ZERO_KEY) == "hello"

    def test_output_is_lowercase_hex(self):
        """Envelope should be lower-case hex."""
        envelope = encrypt_cryptobox_payload("hello", ZERO_KEY)
        assert envelope == envelope.lower()
        bytes.fromhex(envelope)

    def test_roundtrip_various_messages(self):
        """Encryption/decryption roundtrip should work."""
        key = os.urandom(32)
        for message in ["", "a", "Hello, secure world!", "ünïcødé ✓", "x" * 4096]:
            envelope = encrypt_cryptobox_payload(message, key)
            assert decrypt_cryptobox_payload(envelope, key) == message

    def test_accepts_hex_and_bytes(self):
        """Decrypt should accept the envelope as hex or raw bytes."""
        key = os.urandom(32)
        envelope = encrypt_cryptobox_payload("both forms", key)
        assert decrypt_cryptobox_payload(envelope, key) == "both forms"
        assert decrypt_cryptobox_payload(bytes.fromhex(envelope), key) == "both forms"
        assert decrypt_cryptobox_payload(bytearray.fromhex(envelope), key) == "both forms"

    def test_fresh_nonce_per_call(self):
        """Each encryption should use a different nonce."""
        env1 = bytes.fromhex(encrypt_cryptobox_payload("same", ZERO_KEY))
        env2 = bytes.fromhex(encrypt_cryptobox_payload("same", ZERO_KEY))
        assert env1[:NONCE_SIZE] != env2[:NONCE_SIZE]
        assert env1 != env2

    def test_generate_nonce(self):
        """Nonces are 24 random bytes."""
        assert len(generate_nonce()) == NONCE_SIZE
        assert generate_nonce() != generate_nonce()

    def test_cipher_object(self):
        """SecretBoxCipher should match the one-shot functions."""
        key = os.urandom(32)
        cipher = SecretBoxCipher(key)
        envelope = cipher.encrypt("object form")
        assert decrypt_cryptobox_payload(envelope, key) == "object form"
        assert cipher.decrypt(encrypt_cryptobox_payload("function form", key)) == "function form"

    def test_cipher_bytes_plaintext(self):
        """Raw bytes plaintext should roundtrip through decrypt_bytes."""
        cipher = SecretBoxCipher(ZERO_KEY)
        data = os.urandom(100)
        assert cipher.decrypt_bytes(cipher.encrypt(data)) == data

    def test_wrong_key_size_rejected(self):
        """Shared key must be 32 bytes."""
        with pytest.raises(InvalidKeyFormatError):
            encrypt_cryptobox_payload("hi", bytes(16))
        with pytest.raises(InvalidKeyFormatError):
            decrypt_cryptobox_payload("00" * 60, bytes(33))
        with pytest.raises(InvalidKeyFormatError):
            SecretBoxCipher("0" * 32)


class TestCryptoboxEnvelope:
    """Tests for envelope splitting."""

    def test_split_at_nonce_boundary(self):
        """Envelope splits at byte 24."""
        data = bytes(range(60))
        env = CryptoboxEnvelope.from_bytes(data)
        assert env.nonce == data[:24]
        assert env.ciphertext == data[24:]
        assert env.to_bytes() == data
        assert env.to_hex() == data.hex()

    def test_ciphertext_length(self):
        """Ciphertext is plaintext plus the 16-byte tag."""
        envelope = bytes.fromhex(encrypt_cryptobox_payload("abcdefgh", ZERO_KEY))
        env = CryptoboxEnvelope.from_bytes(envelope)
        assert len(env.ciphertext) == 8 + TAG_SIZE


class TestSealedBox:
    """Tests for sealed box handshake encryption."""

    def test_roundtrip(self):
        """Sealed payload should open with the recipient's keypair."""
        kp = derive_keypair("wallet-seed")
        sealed = seal_cryptobox("handshake", kp.public_key)
        assert open_cryptobox(sealed, kp.public_key, kp.private_key) == "handshake"

    def test_bytes_payload(self):
        """Bytes payloads should be sealed as-is."""
        kp = derive_keypair("wallet-seed")
        payload = os.urandom(64)
        sealed = seal_cryptobox(payload, kp.public_key)
        assert open_cryptobox_bytes(sealed, kp.public_key, kp.private_key) == payload

    def test_accepts_hex_and_bytes(self):
        """Open should accept hex or raw bytes."""
        kp = derive_keypair("wallet-seed")
        sealed = seal_cryptobox("either", kp.public_key)
        assert open_cryptobox(sealed, kp.public_key, kp.private_key) == "either"
        assert open_cryptobox(bytes.fromhex(sealed), kp.public_key, kp.private_key) == "either"

    def test_overhead(self):
        """Sealed box adds 48 bytes (ephemeral key + tag)."""
        kp = derive_keypair("wallet-seed")
        sealed = bytes.fromhex(seal_cryptobox("12345", kp.public_key))
        assert SEAL_OVERHEAD == 48
        assert len(sealed) == 5 + SEAL_OVERHEAD

    def test_anonymous_and_randomized(self):
        """Sealing twice gives different ciphertexts (fresh ephemeral key)."""
        kp = derive_keypair("wallet-seed")
        assert seal_cryptobox("same", kp.public_key) != seal_cryptobox("same", kp.public_key)

    def test_open_with_keypair(self):
        """Keypair convenience wrapper should open the box."""
        kp = derive_keypair("wallet-seed")
        sealed = seal_cryptobox("kp", kp.public_key)
        assert open_cryptobox_with_keypair(sealed, kp) == "kp"

    def test_unicode_payload(self):
        """Text is sealed as UTF-8."""
        kp = derive_keypair("wallet-seed")
        sealed = seal_cryptobox("ключ ✓", kp.public_key)
        assert open_cryptobox(sealed, kp.public_key, kp.private_key) == "ключ ✓"

    def test_invalid_recipient_key(self):
        """Recipient key of the wrong shape is rejected before encryption."""
        with pytest.raises(InvalidKeyFormatError):
            seal_cryptobox("x", bytes(31))

    def test_non_utf8_plaintext(self):
        """Opening to text fails with DecodeError on non-UTF-8 bytes."""
        kp = derive_keypair("wallet-seed")
        sealed = seal_cryptobox(b"\xff\xfe\xfd", kp.public_key)
        with pytest.raises(DecodeError):
            open_cryptobox(sealed, kp.public_key, kp.private_key)

    def test_wrong_recipient_rejected(self):
        """A box sealed for one keypair cannot be opened by another."""
        alice = derive_keypair("alice")
        bob = derive_keypair("bob")
        sealed = seal_cryptobox("for alice", alice.public_key)
        with pytest.raises(AuthenticationError):
            open_cryptobox(sealed, bob.public_key, bob.private_key)


class TestRecipientString:
    """Tests for relay recipient strings."""

    def test_format(self):
        """Recipient string has the @hash:server form."""
        assert recipient_string("abc123", "relay.example.com") == "@abc123:relay.example.com"
