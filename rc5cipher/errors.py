"""
Exceptions

All errors raised by the cipher derive from RC5Error, which is itself a
ValueError so callers validating parameters the usual way keep working.
"""


class RC5Error(ValueError):
    """Base class for RC5 errors."""


class InvalidKeyLength(RC5Error):
    """The key does not match the configured key length or word size."""


class InvalidBlockLength(RC5Error):
    """A plaintext or ciphertext block is not exactly two words long."""


class InvalidParameter(RC5Error):
    """Unsupported word size, round count or key length."""
