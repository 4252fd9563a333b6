"""Tests for the constant lookup tables."""

import pytest

from rijndael.tables import SBOX, INV_SBOX, RCON


class TestSbox:
    """S-box and inverse S-box properties."""

    def test_table_sizes(self) -> None:
        assert len(SBOX) == 256
        assert len(INV_SBOX) == 256
        assert len(RCON) == 32

    def test_sbox_is_permutation(self) -> None:
        """Every byte value appears exactly once."""
        assert sorted(SBOX) == list(range(256))
        assert sorted(INV_SBOX) == list(range(256))

    def test_inverse_of_sbox(self) -> None:
        for x in range(256):
            assert INV_SBOX[SBOX[x]] == x
            assert SBOX[INV_SBOX[x]] == x

    @pytest.mark.parametrize("x,expected", [
        (0x00, 0x63),
        (0x01, 0x7c),
        (0x53, 0xed),  # FIPS-197 section 5.1.1 example
        (0x19, 0xd4),
        (0xff, 0x16),
    ])
    def test_known_entries(self, x: int, expected: int) -> None:
        assert SBOX[x] == expected

    def test_no_fixed_points(self) -> None:
        """The AES S-box has no fixed points and no opposite fixed points."""
        for x in range(256):
            assert SBOX[x] != x
            assert SBOX[x] != x ^ 0xff


class TestRcon:
    """Round constant table."""

    def test_round_constants(self) -> None:
        assert list(RCON[1:11]) == [
            0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1b, 0x36,
        ]

    def test_unused_first_entry(self) -> None:
        assert RCON[0] == 0x00

    def test_tables_are_immutable(self) -> None:
        with pytest.raises(TypeError):
            SBOX[0] = 0  # type: ignore[index]
