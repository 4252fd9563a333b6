"""
Tests for the individual round transformations.

Intermediate values come from FIPS-197 Appendix B (round 1 of the cipher
example with key 2b7e1516... and input 3243f6a8...).
"""

import random

import pytest

from rijndael.aes_core import (
    SHIFT_ROWS_PERM,
    INV_SHIFT_ROWS_PERM,
    add_round_key,
    inv_mix_columns,
    inv_mix_single_column,
    inv_shift_rows,
    inv_sub_bytes,
    inv_sub_word,
    mix_columns,
    mix_single_column,
    rot_word,
    shift_rows,
    sub_bytes,
    sub_word,
)
from rijndael.errors import BlockSizeError
from rijndael.utils import byte_index, hex_to_bytes, state_to_hex


ROUND1_START = "193de3bea0f4e22b9ac68d2ae9f84808"
ROUND1_AFTER_SUB_BYTES = "d42711aee0bf98f1b8b45de51e415230"
ROUND1_AFTER_SHIFT_ROWS = "d4bf5d30e0b452aeb84111f11e2798e5"
ROUND1_AFTER_MIX_COLUMNS = "046681e5e0cb199a48f8d37a2806264c"
ROUND1_KEY = "a0fafe1788542cb123a339392a6c7605"
ROUND2_START = "a49c7ff2689f352b6b5bea43026a5049"


def _state(hex_str: str) -> list[int]:
    return list(hex_to_bytes(hex_str))


def _random_states(count: int, seed: int = 0) -> list[list[int]]:
    rng = random.Random(seed)
    return [[rng.randint(0, 255) for _ in range(16)] for _ in range(count)]


class TestSubstitution:
    """SubBytes / InvSubBytes / SubWord / RotWord."""

    def test_sub_bytes_fips(self) -> None:
        result = sub_bytes(_state(ROUND1_START))
        assert state_to_hex(result) == ROUND1_AFTER_SUB_BYTES

    def test_inv_sub_bytes_fips(self) -> None:
        result = inv_sub_bytes(_state(ROUND1_AFTER_SUB_BYTES))
        assert state_to_hex(result) == ROUND1_START

    @pytest.mark.parametrize("state", _random_states(5))
    def test_inv_sub_bytes_undoes_sub_bytes(self, state: list[int]) -> None:
        assert inv_sub_bytes(sub_bytes(state)) == state

    def test_input_not_modified(self) -> None:
        state = _state(ROUND1_START)
        sub_bytes(state)
        assert state_to_hex(state) == ROUND1_START

    def test_sub_word(self) -> None:
        # FIPS-197 Appendix A.1, i = 4
        assert sub_word([0xcf, 0x4f, 0x3c, 0x09]) == [0x8a, 0x84, 0xeb, 0x01]

    def test_inv_sub_word(self) -> None:
        assert inv_sub_word([0x8a, 0x84, 0xeb, 0x01]) == [0xcf, 0x4f, 0x3c, 0x09]

    @pytest.mark.parametrize("word", [[0, 1, 2, 3], [0xff, 0x53, 0x7c, 0x10]])
    def test_inv_sub_word_undoes_sub_word(self, word: list[int]) -> None:
        assert inv_sub_word(sub_word(word)) == word

    def test_rot_word(self) -> None:
        assert rot_word([0x00, 0x01, 0x02, 0x03]) == [0x01, 0x02, 0x03, 0x00]
        assert rot_word([0x09, 0xcf, 0x4f, 0x3c]) == [0xcf, 0x4f, 0x3c, 0x09]


class TestShiftRows:
    """ShiftRows / InvShiftRows."""

    def test_shift_rows_fips(self) -> None:
        result = shift_rows(_state(ROUND1_AFTER_SUB_BYTES))
        assert state_to_hex(result) == ROUND1_AFTER_SHIFT_ROWS

    def test_shift_rows_permutation(self) -> None:
        assert list(SHIFT_ROWS_PERM) == [
            0, 5, 10, 15,
            4, 9, 14, 3,
            8, 13, 2, 7,
            12, 1, 6, 11,
        ]
        assert shift_rows(list(range(16))) == list(SHIFT_ROWS_PERM)

    def test_inverse_permutation(self) -> None:
        for i in range(16):
            assert INV_SHIFT_ROWS_PERM[SHIFT_ROWS_PERM[i]] == i

    def test_row_zero_unchanged(self) -> None:
        state = list(range(16))
        result = shift_rows(state)
        for col in range(4):
            assert result[byte_index(0, col)] == state[byte_index(0, col)]

    @pytest.mark.parametrize("row", [1, 2, 3])
    def test_row_rotated_left_by_row_number(self, row: int) -> None:
        state = list(range(16))
        result = shift_rows(state)
        for col in range(4):
            assert result[byte_index(row, col)] == state[byte_index(row, (col + row) % 4)]

    @pytest.mark.parametrize("state", _random_states(5, seed=1))
    def test_inv_shift_rows_undoes_shift_rows(self, state: list[int]) -> None:
        assert inv_shift_rows(shift_rows(state)) == state
        assert shift_rows(inv_shift_rows(state)) == state


class TestMixColumns:
    """MixColumns / InvMixColumns."""

    @pytest.mark.parametrize("col_in,col_out", [
        ("db135345", "8e4da1bc"),
        ("f20a225c", "9fdc589d"),
        ("01010101", "01010101"),
        ("c6c6c6c6", "c6c6c6c6"),
        ("d4d4d4d5", "d5d5d7d6"),
        ("2d26314c", "4d7ebdf8"),
    ])
    def test_mix_single_column_known(self, col_in: str, col_out: str) -> None:
        assert bytes(mix_single_column(_state(col_in))).hex() == col_out
        assert bytes(inv_mix_single_column(_state(col_out))).hex() == col_in

    def test_mix_columns_fips(self) -> None:
        result = mix_columns(_state(ROUND1_AFTER_SHIFT_ROWS))
        assert state_to_hex(result) == ROUND1_AFTER_MIX_COLUMNS

    def test_inv_mix_columns_fips(self) -> None:
        result = inv_mix_columns(_state(ROUND1_AFTER_MIX_COLUMNS))
        assert state_to_hex(result) == ROUND1_AFTER_SHIFT_ROWS

    @pytest.mark.parametrize("state", _random_states(10, seed=2))
    def test_inv_mix_columns_undoes_mix_columns(self, state: list[int]) -> None:
        assert inv_mix_columns(mix_columns(state)) == state
        assert mix_columns(inv_mix_columns(state)) == state

    def test_columns_are_independent(self) -> None:
        """Changing one column only affects that column."""
        state = _state(ROUND1_AFTER_SHIFT_ROWS)
        base = mix_columns(state)
        state[byte_index(2, 1)] ^= 0xff
        changed = mix_columns(state)
        for col in range(4):
            same = all(
                base[byte_index(row, col)] == changed[byte_index(row, col)]
                for row in range(4)
            )
            assert same == (col != 1)


class TestAddRoundKey:
    """AddRoundKey."""

    def test_add_round_key_fips(self) -> None:
        result = add_round_key(_state(ROUND1_AFTER_MIX_COLUMNS), hex_to_bytes(ROUND1_KEY))
        assert state_to_hex(result) == ROUND2_START

    @pytest.mark.parametrize("state", _random_states(5, seed=3))
    def test_self_inverse(self, state: list[int]) -> None:
        key = bytes(range(100, 116))
        assert add_round_key(add_round_key(state, key), key) == state

    def test_zero_key_is_identity(self) -> None:
        state = _state(ROUND1_START)
        assert add_round_key(state, bytes(16)) == state

    def test_wrong_round_key_length(self) -> None:
        with pytest.raises(BlockSizeError, match="Round key must be 16 bytes"):
            add_round_key(_state(ROUND1_START), bytes(15))

    @pytest.mark.parametrize("length", [15, 17])
    def test_wrong_state_length(self, length: int) -> None:
        with pytest.raises(BlockSizeError, match=f"State must be 16 bytes, got {length}"):
            add_round_key([1] * length, bytes(16))


class TestStateLength:
    """Every state transform rejects a state that is not 16 entries."""

    @pytest.mark.parametrize("func", [
        sub_bytes,
        inv_sub_bytes,
        shift_rows,
        inv_shift_rows,
        mix_columns,
        inv_mix_columns,
    ])
    @pytest.mark.parametrize("length", [0, 15, 17])
    def test_rejects_wrong_length(self, func, length: int) -> None:
        with pytest.raises(BlockSizeError, match=f"State must be 16 bytes, got {length}"):
            func([0] * length)
