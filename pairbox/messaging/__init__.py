# Secure Messaging Module
"""
Wallet <-> client message encryption:
- Sealed box (anonymous X25519) for the handshake message
- SecretBox (XSalsa20-Poly1305) for messages on an established channel

Symmetric envelope format: [nonce (24) | ciphertext | tag (16)]

Security features:
- Signing identity reused as encryption identity (Ed25519 -> X25519)
- Fresh random nonce per message
- Authentication failures always raise, never return partial plaintext
"""

from .secure_channel import (
    CryptoboxEnvelope,
    SecretBoxCipher,
    generate_nonce,
    encrypt_cryptobox_payload,
    decrypt_cryptobox_payload,
    KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
)

from .sealed_box import (
    seal_cryptobox,
    open_cryptobox,
    open_cryptobox_bytes,
    open_cryptobox_with_keypair,
    SEAL_OVERHEAD,
)

from .relay import recipient_string

__all__ = [
    'CryptoboxEnvelope',
    'SecretBoxCipher',
    'generate_nonce',
    'encrypt_cryptobox_payload',
    'decrypt_cryptobox_payload',
    'KEY_SIZE',
    'NONCE_SIZE',
    'TAG_SIZE',
    'seal_cryptobox',
    'open_cryptobox',
    'open_cryptobox_bytes',
    'open_cryptobox_with_keypair',
    'SEAL_OVERHEAD',
    'recipient_string',
]
