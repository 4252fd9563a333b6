"""
AES-128 key expansion.

The 16-byte cipher key is expanded into 11 round keys stored back to back
in a single 176-byte buffer. Round key 0 is the cipher key itself.
"""

from __future__ import annotations

from .aes_core import rot_word, sub_word
from .config import BLOCK_SIZE, KEY_SIZE, ROUNDS, WORD_SIZE
from .errors import require_length
from .tables import RCON
from .utils import as_bytes, get_word, xor_words

SCHEDULE_SIZE = BLOCK_SIZE * (ROUNDS + 1)
WORDS_PER_KEY = BLOCK_SIZE // WORD_SIZE


def expand_key(key: bytes) -> bytes:
    """
    Expand a cipher key into the full round key schedule.

    Args:
        key: 16-byte AES-128 key

    Returns:
        176 bytes holding round keys 0..10

    Raises:
        BlockSizeError: If key is not 16 bytes
    """
    key = as_bytes(key, "Key")
    require_length(key, KEY_SIZE, "Key")

    schedule = bytearray(key)

    for round_num in range(1, ROUNDS + 1):
        last_key = schedule[(round_num - 1) * BLOCK_SIZE:round_num * BLOCK_SIZE]

        # RotWord + SubWord + Rcon on the last word of the previous key
        temp = sub_word(rot_word(get_word(last_key, WORDS_PER_KEY - 1)))
        temp[0] ^= RCON[round_num]
        word = xor_words(temp, get_word(last_key, 0))
        schedule.extend(word)

        for j in range(1, WORDS_PER_KEY):
            word = xor_words(word, get_word(last_key, j))
            schedule.extend(word)

    return bytes(schedule)


def round_key(schedule: bytes, round_num: int) -> bytes:
    """
    Return round key ``round_num`` from an expanded schedule.

    Raises:
        BlockSizeError: If schedule is not 176 bytes
        ValueError: If round_num is outside 0..10
    """
    require_length(schedule, SCHEDULE_SIZE, "Key schedule")
    if not 0 <= round_num <= ROUNDS:
        raise ValueError(f"round_num must be 0..{ROUNDS}, got {round_num}")
    start = round_num * BLOCK_SIZE
    return bytes(schedule[start:start + BLOCK_SIZE])


def round_keys(key: bytes) -> list[bytes]:
    """Expand ``key`` and split the schedule into its 11 round keys."""
    schedule = expand_key(key)
    return [round_key(schedule, r) for r in range(ROUNDS + 1)]


__all__ = [
    "SCHEDULE_SIZE",
    "expand_key",
    "round_key",
    "round_keys",
]
