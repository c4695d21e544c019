"""
Error taxonomy for PairBox.

Every failure in this package is raised immediately to the caller.
Callers should treat any of these as "the operation did not happen".
"""


class PairBoxError(Exception):
    """Base class for all PairBox errors."""
    pass


class InvalidKeyFormatError(PairBoxError, ValueError):
    """Raised when key material has the wrong length or structure."""
    pass


class InvalidPublicKeyError(PairBoxError, ValueError):
    """Raised when a public key string matches no accepted textual format."""
    pass


class AuthenticationError(PairBoxError):
    """Raised when ciphertext authentication fails during decryption."""
    pass


class DecodeError(PairBoxError, ValueError):
    """Raised when an encoded string or decrypted text cannot be decoded."""
    pass
