"""
AES-128 round transformations.

All state functions take a 16-int state (see utils for the grid layout)
and return a new list; inputs are never modified. A state of any other
length raises BlockSizeError.
"""

from __future__ import annotations

from .config import BLOCK_SIZE
from .errors import require_length
from .galois import xtime
from .tables import SBOX, INV_SBOX
from .utils import byte_index


def _build_shift_permutation(direction: int) -> tuple[int, ...]:
    """
    Build the ShiftRows permutation for direction +1 (left) or -1 (right).

    The result maps output position -> source position, so a shifted state
    is ``[state[p] for p in perm]``.
    """
    perm = [0] * BLOCK_SIZE
    for row in range(4):
        for col in range(4):
            src_col = (col + direction * row) % 4
            perm[byte_index(row, col)] = byte_index(row, src_col)
    return tuple(perm)


SHIFT_ROWS_PERM = _build_shift_permutation(1)
INV_SHIFT_ROWS_PERM = _build_shift_permutation(-1)


# ----------------------------------------------------------------------
# Substitution
# ----------------------------------------------------------------------

def sub_bytes(state: list[int]) -> list[int]:
    """Apply S-box to each byte."""
    require_length(state, BLOCK_SIZE, "State")
    return [SBOX[b] for b in state]


def inv_sub_bytes(state: list[int]) -> list[int]:
    """Apply inverse S-box to each byte."""
    require_length(state, BLOCK_SIZE, "State")
    return [INV_SBOX[b] for b in state]


def sub_word(word: list[int]) -> list[int]:
    """Apply S-box to each byte of a 4-byte word (key schedule only)."""
    return [SBOX[b] for b in word]


def inv_sub_word(word: list[int]) -> list[int]:
    """Apply inverse S-box to each byte of a 4-byte word."""
    return [INV_SBOX[b] for b in word]


def rot_word(word: list[int]) -> list[int]:
    """Rotate a word left by one byte: [a, b, c, d] -> [b, c, d, a]."""
    return list(word[1:]) + [word[0]]


# ----------------------------------------------------------------------
# Row rotation
# ----------------------------------------------------------------------

def shift_rows(state: list[int]) -> list[int]:
    """Rotate row k left by k positions."""
    require_length(state, BLOCK_SIZE, "State")
    return [state[p] for p in SHIFT_ROWS_PERM]


def inv_shift_rows(state: list[int]) -> list[int]:
    """Rotate row k right by k positions."""
    require_length(state, BLOCK_SIZE, "State")
    return [state[p] for p in INV_SHIFT_ROWS_PERM]


# ----------------------------------------------------------------------
# Column mixing
# ----------------------------------------------------------------------

def mix_single_column(col: list[int]) -> list[int]:
    """
    Multiply one column by the MixColumns matrix.

    Uses the identity out[i] = a[i] ^ t ^ xtime(a[i] ^ a[i+1]) with
    t = a[0] ^ a[1] ^ a[2] ^ a[3], which needs no general GF multiply.
    """
    t = col[0] ^ col[1] ^ col[2] ^ col[3]
    return [col[i] ^ t ^ xtime(col[i] ^ col[(i + 1) % 4]) for i in range(4)]


def inv_mix_single_column(col: list[int]) -> list[int]:
    """
    Multiply one column by the inverse MixColumns matrix.

    Pre-conditions the column with u = 4*(a0^a2), v = 4*(a1^a3) and then
    runs the forward mix (The Design of Rijndael, section 4.1.3).
    """
    u = xtime(xtime(col[0] ^ col[2]))
    v = xtime(xtime(col[1] ^ col[3]))
    return mix_single_column([col[0] ^ u, col[1] ^ v, col[2] ^ u, col[3] ^ v])


def _map_columns(state: list[int], func) -> list[int]:
    require_length(state, BLOCK_SIZE, "State")
    result = [0] * BLOCK_SIZE
    for col in range(4):
        mixed = func([state[byte_index(row, col)] for row in range(4)])
        for row in range(4):
            result[byte_index(row, col)] = mixed[row]
    return result


def mix_columns(state: list[int]) -> list[int]:
    """Mix every column of the state."""
    return _map_columns(state, mix_single_column)


def inv_mix_columns(state: list[int]) -> list[int]:
    """Undo mix_columns."""
    return _map_columns(state, inv_mix_single_column)


# ----------------------------------------------------------------------
# Round key
# ----------------------------------------------------------------------

def add_round_key(state: list[int], round_key: bytes | list[int]) -> list[int]:
    """XOR state with round key."""
    require_length(state, BLOCK_SIZE, "State")
    require_length(round_key, BLOCK_SIZE, "Round key")
    return [s ^ k for s, k in zip(state, round_key)]


__all__ = [
    "SHIFT_ROWS_PERM",
    "INV_SHIFT_ROWS_PERM",
    "sub_bytes",
    "inv_sub_bytes",
    "sub_word",
    "inv_sub_word",
    "rot_word",
    "shift_rows",
    "inv_shift_rows",
    "mix_single_column",
    "inv_mix_single_column",
    "mix_columns",
    "inv_mix_columns",
    "add_round_key",
]
