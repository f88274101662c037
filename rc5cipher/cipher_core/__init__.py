"""
Cipher Core Package

This package implements the RC5 block cipher: single-block encryption and
decryption over 16, 32 or 64-bit words.
"""

from .block_cipher import (
    RC5_DEFAULT_PARAMS, BlockCipher, RC5BlockCipher, decrypt_block, encrypt_block,
)

__all__ = ['RC5_DEFAULT_PARAMS', 'BlockCipher', 'RC5BlockCipher', 'encrypt_block', 'decrypt_block']
