"""
Word Arithmetic

This module implements the unsigned word operations RC5 is built from
(modular addition, rotation, XOR) for 16, 32 and 64-bit words, together
with the little-endian codec that maps bytes to words.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

import numpy as np

from ..errors import InvalidParameter

# (P, Q) per word size in bits: odd parts of (e - 2) and (phi - 1)
MAGIC_CONSTANTS: Dict[int, Tuple[int, int]] = {
    16: (0xB7E1, 0x9E37),
    32: (0xB7E15163, 0x9E3779B9),
    64: (0xB7E151628AED2A6B, 0x9E3779B97F47C15),
}


def rotate_left(value: int, shift: int, size: int = 32) -> int:
    """
    Rotate a value left by the specified number of bits.

    Only the low bits of the shift are significant: the rotation is
    taken modulo the word size.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by
        size: The bit size of the value

    Returns:
        The rotated value
    """
    shift %= size
    mask = (1 << size) - 1
    value &= mask
    return ((value << shift) | (value >> (size - shift))) & mask


def rotate_right(value: int, shift: int, size: int = 32) -> int:
    """
    Rotate a value right by the specified number of bits.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by
        size: The bit size of the value

    Returns:
        The rotated value
    """
    shift %= size
    mask = (1 << size) - 1
    value &= mask
    return ((value >> shift) | (value << (size - shift))) & mask


@dataclass(frozen=True)
class WordType:
    """Unsigned integer word of a fixed bit width."""
    bits: int
    P: int
    Q: int
    mask: int = field(init=False)
    dtype: np.dtype = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'mask', (1 << self.bits) - 1)
        object.__setattr__(self, 'dtype', np.dtype(f'<u{self.bits // 8}'))

    @property
    def byte_size(self) -> int:
        return self.bits // 8

    def from_bytes_le(self, data: bytes) -> int:
        if len(data) != self.byte_size:
            raise ValueError(f"Word must be exactly {self.byte_size} bytes")
        return int.from_bytes(data, byteorder='little')

    def to_bytes_le(self, value: int) -> bytes:
        return (value & self.mask).to_bytes(self.byte_size, byteorder='little')

    def words_from_bytes(self, data: bytes) -> List[int]:
        """
        Decode a buffer into consecutive little-endian words.

        Args:
            data: Buffer whose length is a multiple of the word size

        Returns:
            The words as Python integers
        """
        if len(data) % self.byte_size:
            raise ValueError(
                f"Buffer length {len(data)} is not a multiple of {self.byte_size}")
        return np.frombuffer(bytes(data), dtype=self.dtype).tolist()

    def words_to_bytes(self, words: Iterable[int]) -> bytes:
        """Encode words as concatenated little-endian bytes."""
        return np.array([w & self.mask for w in words], dtype=self.dtype).tobytes()

    def wrapping_add(self, a: int, b: int) -> int:
        return (a + b) & self.mask

    def wrapping_sub(self, a: int, b: int) -> int:
        return (a - b) & self.mask

    def wrapping_mul(self, a: int, b: int) -> int:
        return (a * b) & self.mask

    def rotate_left(self, value: int, amount: int) -> int:
        return rotate_left(value, amount, self.bits)

    def rotate_right(self, value: int, amount: int) -> int:
        return rotate_right(value, amount, self.bits)

    def xor(self, a: int, b: int) -> int:
        return (a ^ b) & self.mask


WORD_TYPES: Dict[int, WordType] = {
    bits // 8: WordType(bits, p, q) for bits, (p, q) in MAGIC_CONSTANTS.items()
}


def get_word_type(word_bytes: int) -> WordType:
    """
    Look up the word type for a word size given in bytes.

    Args:
        word_bytes: 2, 4 or 8

    Returns:
        The matching WordType
    """
    try:
        return WORD_TYPES[word_bytes]
    except (KeyError, TypeError):
        raise InvalidParameter(
            f"Word size must be one of {sorted(WORD_TYPES)} bytes, got {word_bytes!r}"
        ) from None
