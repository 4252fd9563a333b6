"""
Byte/state conversions, grid indexing and hex formatting.

The AES state is a flat list of 16 ints laid out in column-major order:

  col:   0   1   2   3
  r0 [   0   4   8  12 ]
  r1 [   1   5   9  13 ]
  r2 [   2   6  10  14 ]
  r3 [   3   7  11  15 ]

Every transformation that depends on the grid goes through byte_index(),
so column c is always the contiguous word at bytes 4c..4c+3.
"""

from __future__ import annotations

from .config import BLOCK_SIZE, WORD_SIZE
from .errors import require_length


def byte_index(row: int, col: int) -> int:
    """Column-major linear index for byte at (row, col)."""
    return col * WORD_SIZE + row


def as_bytes(data: bytes | bytearray | memoryview, label: str) -> bytes:
    """
    Return an immutable copy of a bytes-like argument.

    Raises:
        TypeError: If data is not bytes-like (e.g. str or list)
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{label} must be bytes-like, got {type(data).__name__}")
    return bytes(data)


def bytes_to_state(data: bytes) -> list[int]:
    """
    Convert a 16-byte block into a mutable working state.

    Args:
        data: 16 bytes of input

    Returns:
        List of 16 integers (0-255)
    """
    require_length(data, BLOCK_SIZE, "Block")
    return list(data)


def state_to_bytes(state: list[int]) -> bytes:
    """Convert a working state back to 16 bytes."""
    return bytes(state)


def get_word(data: bytes | list[int], index: int) -> list[int]:
    """Return word ``index`` (4 bytes) of a block or schedule."""
    start = index * WORD_SIZE
    return list(data[start:start + WORD_SIZE])


def xor_words(a: list[int], b: list[int]) -> list[int]:
    """XOR two 4-byte words."""
    return [x ^ y for x, y in zip(a, b)]


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert hex string to bytes.

    Whitespace is ignored so grouped vectors ("00112233 44556677 ...")
    can be pasted directly.
    """
    return bytes.fromhex("".join(hex_str.split()))


def bytes_to_hex(data: bytes) -> str:
    """Convert bytes to lowercase hex string."""
    return data.hex()


def state_to_hex(state: list[int]) -> str:
    """Convert state to hex string (via bytes)."""
    return bytes_to_hex(state_to_bytes(state))


def format_state_grid(state: list[int] | bytes) -> str:
    """
    Format state as a readable 4x4 grid.

    Returns multi-line string like:
      2b 28 ab 09
      7e ae f7 cf
      15 d2 15 4f
      16 a6 88 3c
    """
    lines = []
    for row in range(4):
        row_hex = [f"{state[byte_index(row, col)]:02x}" for col in range(4)]
        lines.append("  " + " ".join(row_hex))
    return "\n".join(lines)


def format_words(data: list[int] | bytes) -> str:
    """Format a block or schedule as space-separated 32-bit words."""
    return " ".join(
        bytes(get_word(data, i)).hex() for i in range(len(data) // WORD_SIZE)
    )
