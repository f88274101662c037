"""
RC5 Key Schedule Implementation

This module expands a raw key into the table S of 2 * (rounds + 1) round
subkeys. The table is seeded from the word size's magic constants and then
mixed with the key words using ARX (Addition, Rotation, XOR) operations.
"""

import logging
import secrets
from typing import List

import numpy as np

from ..errors import InvalidKeyLength, InvalidParameter
from ..word import WordType, get_word_type

logger = logging.getLogger(__name__)


def generate_key(key_size: int = 16) -> bytes:
    """
    Generate a cryptographically secure random key.

    Args:
        key_size: Size of the key in bytes (default: 16)

    Returns:
        A random key as bytes
    """
    return secrets.token_bytes(key_size)


def expand_key_words(key: bytes, word: WordType) -> List[int]:
    """
    Split the raw key into little-endian words (the L buffer).

    Args:
        key: The raw key; its length must be a multiple of the word size
        word: Word type the key is loaded into

    Returns:
        The key words, or [0] for an empty key
    """
    if not key:
        return [0]

    if len(key) % word.byte_size:
        raise InvalidKeyLength(
            f"Key length {len(key)} is not a multiple of the {word.byte_size}-byte word size")

    return word.words_from_bytes(key)


def initial_schedule(num_rounds: int, word: WordType) -> List[int]:
    """
    Build the unmixed table S[i] = i * Q + P modulo 2^w.

    Args:
        num_rounds: Number of rounds
        word: Word type of the table entries

    Returns:
        A list of 2 * (num_rounds + 1) words
    """
    size = 2 * (num_rounds + 1)
    # Array arithmetic on unsigned dtypes wraps modulo 2^w
    indices = np.arange(size, dtype=np.uint64).astype(word.dtype)
    table = indices * word.dtype.type(word.Q) + word.dtype.type(word.P)
    return table.tolist()


def mix_key(table: List[int], key_words: List[int], word: WordType) -> List[int]:
    """
    Mix the key words into the subkey table.

    Both lists are modified in place; the mixed table is also returned.
    """
    a = b = i = j = 0
    t = len(table)
    c = len(key_words)

    for _ in range(3 * max(t, c)):
        a = table[i] = word.rotate_left(word.wrapping_add(table[i], a + b), 3)
        b = key_words[j] = word.rotate_left(word.wrapping_add(key_words[j], a + b), a + b)

        i = (i + 1) % t
        j = (j + 1) % c

    return table


def generate_key_schedule(key: bytes, word_bytes: int, num_rounds: int) -> List[int]:
    """
    Expand a raw key into the RC5 round subkeys.

    Args:
        key: The raw key
        word_bytes: Word size in bytes (2, 4 or 8)
        num_rounds: Number of rounds

    Returns:
        The key schedule S as a list of 2 * (num_rounds + 1) words
    """
    if num_rounds < 0:
        raise InvalidParameter(f"Number of rounds must be non-negative, got {num_rounds}")

    word = get_word_type(word_bytes)
    key_words = expand_key_words(bytes(key), word)
    table = mix_key(initial_schedule(num_rounds, word), key_words, word)

    logger.debug(f"Expanded {len(key)}-byte key into {len(table)} "
                 f"{word.bits}-bit subkeys")
    return table
