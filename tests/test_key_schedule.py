"""Tests for AES-128 key expansion."""

import secrets

import pytest

from rijndael.errors import BlockSizeError
from rijndael.key_schedule import SCHEDULE_SIZE, expand_key, round_key, round_keys
from rijndael.reference import ZERO_KEY_ROUND_KEYS
from rijndael.utils import hex_to_bytes


# FIPS-197 Appendix A.1
FIPS_KEY = "2b7e151628aed2a6abf7158809cf4f3c"
FIPS_ROUND_KEYS = {
    1: "a0fafe1788542cb123a339392a6c7605",
    2: "f2c295f27a96b9435935807a7359f67f",
    10: "d014f9a8c9ee2589e13f0cc8b6630ca6",
}


class TestExpandKey:
    """Tests for expand_key."""

    def test_schedule_size(self) -> None:
        assert SCHEDULE_SIZE == 176
        assert len(expand_key(bytes(16))) == 176

    def test_round_key_zero_is_cipher_key(self) -> None:
        key = secrets.token_bytes(16)
        assert expand_key(key)[:16] == key

    @pytest.mark.parametrize("round_num,expected", sorted(FIPS_ROUND_KEYS.items()))
    def test_fips_197_appendix_a1(self, round_num: int, expected: str) -> None:
        schedule = expand_key(hex_to_bytes(FIPS_KEY))
        assert round_key(schedule, round_num).hex() == expected

    def test_all_zero_key_schedule(self) -> None:
        """The all-zero key expands to the published round-key sequence."""
        keys = round_keys(bytes(16))
        assert [k.hex() for k in keys] == ZERO_KEY_ROUND_KEYS

    def test_fips_197_appendix_c1_last_round_key(self) -> None:
        schedule = expand_key(bytes(range(16)))
        assert round_key(schedule, 10).hex() == "13111d7fe3944a17f307a78b4d2b30c5"

    def test_deterministic(self) -> None:
        key = bytes(range(16))
        assert expand_key(key) == expand_key(key) == expand_key(bytearray(key))

    def test_accepts_memoryview(self) -> None:
        key = bytes(range(16))
        assert expand_key(memoryview(key)) == expand_key(key)

    def test_distinct_keys_give_distinct_schedules(self) -> None:
        a = bytes(16)
        b = bytes(15) + b"\x01"
        assert expand_key(a)[16:] != expand_key(b)[16:]

    @pytest.mark.parametrize("length", [0, 15, 17, 24, 32])
    def test_invalid_key_length(self, length: int) -> None:
        with pytest.raises(BlockSizeError, match="Key must be 16 bytes"):
            expand_key(bytes(length))

    def test_rejects_str_key(self) -> None:
        with pytest.raises(TypeError):
            expand_key("0123456789abcdef")  # type: ignore[arg-type]


class TestRoundKey:
    """Tests for round_key / round_keys helpers."""

    def test_round_keys_concatenate_to_schedule(self) -> None:
        key = bytes(range(16))
        assert b"".join(round_keys(key)) == expand_key(key)
        assert len(round_keys(key)) == 11

    @pytest.mark.parametrize("round_num", [-1, 11])
    def test_round_out_of_range(self, round_num: int) -> None:
        with pytest.raises(ValueError, match="round_num must be 0..10"):
            round_key(expand_key(bytes(16)), round_num)

    def test_wrong_schedule_length(self) -> None:
        with pytest.raises(BlockSizeError, match="Key schedule must be 176 bytes"):
            round_key(bytes(160), 0)
