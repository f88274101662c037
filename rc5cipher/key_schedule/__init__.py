"""
Key Schedule Package

This package implements the key expansion algorithm that transforms
a raw key into the round subkeys used by the block cipher.
"""

from .rc5_key_schedule import (
    expand_key_words, generate_key, generate_key_schedule, initial_schedule, mix_key,
)

__all__ = [
    'expand_key_words', 'generate_key', 'generate_key_schedule',
    'initial_schedule', 'mix_key',
]
