"""
Block Cipher Implementation

This module provides the core implementation of RC5, a word-oriented
block cipher built from data-dependent rotations. Word size (16, 32 or
64 bits), number of rounds and key length are all parameters.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Tuple, Union

from ..errors import InvalidBlockLength, InvalidKeyLength, InvalidParameter
from ..key_schedule.rc5_key_schedule import generate_key_schedule
from ..word import get_word_type

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

# Default parameters (RC5-32/12/16)
RC5_DEFAULT_PARAMS = {
    'word_bytes': 4,      # 32-bit words, 64-bit blocks
    'rounds': 12,
    'key_bytes_len': 16,  # 128-bit key
}


def _as_bytes(data: BytesLike, name: str) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, got {type(data).__name__}")
    return bytes(data)


class BlockCipher(ABC):
    """Single-block encryption interface. Chaining and padding are left to callers."""

    @property
    @abstractmethod
    def block_size(self) -> int:
        """Block size in bytes."""

    @abstractmethod
    def encrypt_block(self, plaintext: BytesLike) -> bytes:
        ...

    @abstractmethod
    def decrypt_block(self, ciphertext: BytesLike) -> bytes:
        ...


class RC5BlockCipher(BlockCipher):
    """
    RC5 block cipher bound to a single key.

    The instance is never mutated after construction and every call works
    on local buffers, so one cipher may be shared between threads.
    """

    def __init__(self,
                 key: BytesLike,
                 word_bytes: int = RC5_DEFAULT_PARAMS['word_bytes'],
                 rounds: int = RC5_DEFAULT_PARAMS['rounds'],
                 key_bytes_len: int = RC5_DEFAULT_PARAMS['key_bytes_len']):
        """
        Initialize the block cipher with specified parameters.

        The key length is checked against key_bytes_len when a block is
        processed, not here.

        Args:
            key: Raw key material
            word_bytes: Word size in bytes: 2, 4 or 8 (default: 4)
            rounds: Number of rounds (default: 12)
            key_bytes_len: Required key length in bytes (default: 16)
        """
        self.word = get_word_type(word_bytes)

        if not isinstance(rounds, int) or rounds < 0:
            raise InvalidParameter(f"Number of rounds must be a non-negative integer, got {rounds!r}")

        if not isinstance(key_bytes_len, int) or key_bytes_len < 0:
            raise InvalidParameter(f"Key length must be a non-negative integer, got {key_bytes_len!r}")

        self.key = _as_bytes(key, "Key")
        self.word_bytes = word_bytes
        self.rounds = rounds
        self.key_bytes_len = key_bytes_len

        logger.debug(f"RC5-{self.word.bits}/{rounds}/{key_bytes_len} cipher created")

    @property
    def block_size(self) -> int:
        return 2 * self.word_bytes

    def _check_key(self):
        if len(self.key) != self.key_bytes_len:
            raise InvalidKeyLength(
                f"Key must be exactly {self.key_bytes_len} bytes, got {len(self.key)}")

    def _split_block(self, block: BytesLike, name: str) -> Tuple[int, int]:
        block = _as_bytes(block, name)
        if len(block) != self.block_size:
            raise InvalidBlockLength(
                f"{name} must be exactly {self.block_size} bytes, got {len(block)}")

        a, b = self.word.words_from_bytes(block)
        return a, b

    def generate_key_schedule(self) -> List[int]:
        """
        Derive the round subkeys S from the stored key.

        Returns:
            A list of 2 * (rounds + 1) words
        """
        return generate_key_schedule(self.key, self.word_bytes, self.rounds)

    def encrypt_block(self, plaintext: BytesLike) -> bytes:
        """
        Encrypt a single block of plaintext.

        Args:
            plaintext: The plaintext block (exactly 2 * word_bytes bytes)

        Returns:
            The encrypted ciphertext block
        """
        self._check_key()
        a, b = self._split_block(plaintext, "Plaintext")
        s = self.generate_key_schedule()
        w = self.word

        a = w.wrapping_add(a, s[0])
        b = w.wrapping_add(b, s[1])

        for i in range(1, self.rounds + 1):
            a = w.wrapping_add(w.rotate_left(a ^ b, b), s[2 * i])
            b = w.wrapping_add(w.rotate_left(b ^ a, a), s[2 * i + 1])

        return w.words_to_bytes((a, b))

    def decrypt_block(self, ciphertext: BytesLike) -> bytes:
        """
        Decrypt a single block of ciphertext.

        Args:
            ciphertext: The ciphertext block (exactly 2 * word_bytes bytes)

        Returns:
            The decrypted plaintext block
        """
        self._check_key()
        a, b = self._split_block(ciphertext, "Ciphertext")
        s = self.generate_key_schedule()
        w = self.word

        for i in range(self.rounds, 0, -1):
            b = w.rotate_right(w.wrapping_sub(b, s[2 * i + 1]), a) ^ a
            a = w.rotate_right(w.wrapping_sub(a, s[2 * i]), b) ^ b

        a = w.wrapping_sub(a, s[0])
        b = w.wrapping_sub(b, s[1])

        return w.words_to_bytes((a, b))


def encrypt_block(plaintext: BytesLike, key: BytesLike,
                  word_bytes: int = RC5_DEFAULT_PARAMS['word_bytes'],
                  rounds: int = RC5_DEFAULT_PARAMS['rounds']) -> bytes:
    """
    Convenience function to encrypt a single block.

    Args:
        plaintext: The plaintext block to encrypt
        key: The raw key (any length that is a multiple of word_bytes)
        word_bytes: Word size in bytes (default: 4)
        rounds: Number of rounds (default: 12)

    Returns:
        The encrypted ciphertext block
    """
    cipher = RC5BlockCipher(key, word_bytes=word_bytes, rounds=rounds,
                            key_bytes_len=len(key))
    return cipher.encrypt_block(plaintext)


def decrypt_block(ciphertext: BytesLike, key: BytesLike,
                  word_bytes: int = RC5_DEFAULT_PARAMS['word_bytes'],
                  rounds: int = RC5_DEFAULT_PARAMS['rounds']) -> bytes:
    """
    Convenience function to decrypt a single block.

    Args:
        ciphertext: The ciphertext block to decrypt
        key: The raw key
        word_bytes: Word size in bytes (default: 4)
        rounds: Number of rounds (default: 12)

    Returns:
        The decrypted plaintext block
    """
    cipher = RC5BlockCipher(key, word_bytes=word_bytes, rounds=rounds,
                            key_bytes_len=len(key))
    return cipher.decrypt_block(ciphertext)
