"""
Unit tests for the RC5 key schedule.
"""

import pytest

from rc5cipher.errors import InvalidKeyLength, InvalidParameter
from rc5cipher.key_schedule import (
    expand_key_words, generate_key, generate_key_schedule, initial_schedule, mix_key,
)
from rc5cipher.word import get_word_type


class TestExpandKeyWords:
    """Loading the raw key into the L buffer."""

    def test_little_endian_chunks(self):
        key = bytes(range(8))
        assert expand_key_words(key, get_word_type(4)) == [0x03020100, 0x07060504]

    def test_16_bit_chunks(self):
        assert expand_key_words(b"\x01\x02\x03\x04", get_word_type(2)) == [0x0201, 0x0403]

    def test_empty_key(self):
        assert expand_key_words(b"", get_word_type(8)) == [0]

    def test_misaligned_key(self):
        with pytest.raises(InvalidKeyLength):
            expand_key_words(b"\x00" * 10, get_word_type(4))


class TestInitialSchedule:
    """Unmixed table S[i] = i * Q + P."""

    @pytest.mark.parametrize("word_bytes", [2, 4, 8])
    def test_matches_formula(self, word_bytes):
        word = get_word_type(word_bytes)
        table = initial_schedule(12, word)
        assert len(table) == 26
        for i, value in enumerate(table):
            assert value == (i * word.Q + word.P) & word.mask

    def test_first_entries(self):
        table = initial_schedule(0, get_word_type(4))
        assert table == [0xB7E15163, (0xB7E15163 + 0x9E3779B9) & 0xFFFFFFFF]

    def test_wraps_for_large_tables(self):
        word = get_word_type(2)
        table = initial_schedule(40000, word)
        assert table[70000] == (70000 * word.Q + word.P) & word.mask


class TestMixKey:
    """Key mixing pass."""

    def test_mixes_in_place(self):
        word = get_word_type(4)
        table = initial_schedule(1, word)
        key_words = [0x03020100]
        result = mix_key(table, key_words, word)
        assert result is table
        assert table != initial_schedule(1, word)
        assert key_words != [0x03020100]

    def test_values_stay_in_range(self):
        word = get_word_type(2)
        table = mix_key(initial_schedule(20, word), [0xFFFF] * 9, word)
        assert all(0 <= v <= word.mask for v in table)


class TestGenerateKeySchedule:
    """Full key expansion."""

    @pytest.mark.parametrize("word_bytes,rounds", [(2, 16), (4, 12), (8, 24), (4, 0)])
    def test_length(self, word_bytes, rounds):
        key = bytes(range(2 * word_bytes))
        table = generate_key_schedule(key, word_bytes, rounds)
        assert len(table) == 2 * (rounds + 1)

    def test_deterministic(self):
        key = bytes(range(16))
        assert generate_key_schedule(key, 4, 12) == generate_key_schedule(key, 4, 12)

    def test_key_sensitivity(self):
        key = bytes(range(16))
        modified = bytes([key[0] ^ 0x01]) + key[1:]
        assert generate_key_schedule(key, 4, 12) != generate_key_schedule(modified, 4, 12)

    def test_does_not_modify_key(self):
        key = bytearray(range(16))
        generate_key_schedule(key, 4, 12)
        assert key == bytearray(range(16))

    def test_empty_key(self):
        table = generate_key_schedule(b"", 4, 12)
        assert len(table) == 26

    def test_key_longer_than_table(self):
        table = generate_key_schedule(bytes(range(64)), 2, 1)
        assert len(table) == 4

    def test_negative_rounds(self):
        with pytest.raises(InvalidParameter):
            generate_key_schedule(bytes(16), 4, -1)

    def test_unsupported_word_size(self):
        with pytest.raises(InvalidParameter):
            generate_key_schedule(bytes(16), 3, 12)


class TestGenerateKey:
    """Random key material."""

    def test_length(self):
        assert len(generate_key(16)) == 16
        assert len(generate_key(0)) == 0

    def test_random(self):
        assert generate_key(32) != generate_key(32)
