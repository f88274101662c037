"""
Word Package

This package implements the word abstraction shared by the key schedule
and the cipher: modular arithmetic, rotations, the little-endian codec and
the per-width magic constants.
"""

from .word_ops import (
    MAGIC_CONSTANTS, WORD_TYPES, WordType, get_word_type, rotate_left, rotate_right,
)

__all__ = [
    'MAGIC_CONSTANTS', 'WORD_TYPES', 'WordType', 'get_word_type',
    'rotate_left', 'rotate_right',
]
