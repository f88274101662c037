"""
rc5cipher - RC5 Symmetric Block Cipher Library

This library implements the RC5 block cipher, parameterized by word size,
number of rounds and key length (RC5-w/r/b).

Key Features:
- 16, 32 and 64-bit words (32, 64 and 128-bit blocks)
- Any number of rounds
- Keys of any length that is a multiple of the word size
- Single-block encryption and decryption; modes of operation and padding
  are left to the caller

"""

from .cipher_core import RC5_DEFAULT_PARAMS, BlockCipher, RC5BlockCipher, decrypt_block, encrypt_block
from .errors import InvalidBlockLength, InvalidKeyLength, InvalidParameter, RC5Error
from .key_schedule import generate_key, generate_key_schedule

__version__ = '0.1.0'

__all__ = [
    'RC5_DEFAULT_PARAMS', 'BlockCipher', 'RC5BlockCipher', 'encrypt_block', 'decrypt_block',
    'RC5Error', 'InvalidKeyLength', 'InvalidBlockLength', 'InvalidParameter',
    'generate_key', 'generate_key_schedule',
]
