"""
AES-128 block cipher driver.

Schedule (forward cipher):
- Round 0: AddRoundKey
- Rounds 1-9: SubBytes, ShiftRows, MixColumns, AddRoundKey
- Round 10: SubBytes, ShiftRows, AddRoundKey (no MixColumns)

The inverse cipher runs the same steps mirrored in reverse order using
the inverse transformations (the straightforward inverse, not the
equivalent inverse cipher of FIPS-197 section 5.3.5).
"""

from __future__ import annotations

from .aes_core import (
    add_round_key,
    inv_mix_columns,
    inv_shift_rows,
    inv_sub_bytes,
    mix_columns,
    shift_rows,
    sub_bytes,
)
from .config import CipherConfig, DEFAULT_CONFIG
from .errors import require_length
from .key_schedule import expand_key, round_key
from .trace import TraceRecorder
from .utils import as_bytes, bytes_to_state, state_to_bytes


def _build_encrypt_schedule(rounds: int) -> list[tuple[int, list[str]]]:
    schedule = [(0, ["AddRoundKey"])]
    for round_num in range(1, rounds):
        schedule.append(
            (round_num, ["SubBytes", "ShiftRows", "MixColumns", "AddRoundKey"])
        )
    schedule.append((rounds, ["SubBytes", "ShiftRows", "AddRoundKey"]))
    return schedule


def _build_decrypt_schedule(rounds: int) -> list[tuple[int, list[str]]]:
    schedule = [(rounds, ["AddRoundKey", "InvShiftRows", "InvSubBytes"])]
    for round_num in range(rounds - 1, 0, -1):
        schedule.append(
            (round_num, ["AddRoundKey", "InvMixColumns", "InvShiftRows", "InvSubBytes"])
        )
    schedule.append((0, ["AddRoundKey"]))
    return schedule


# (round, operations) in execution order
ENCRYPT_SCHEDULE = _build_encrypt_schedule(DEFAULT_CONFIG.rounds)
DECRYPT_SCHEDULE = _build_decrypt_schedule(DEFAULT_CONFIG.rounds)

# Keyless transformations by schedule name
_OPERATIONS = {
    "SubBytes": sub_bytes,
    "ShiftRows": shift_rows,
    "MixColumns": mix_columns,
    "InvSubBytes": inv_sub_bytes,
    "InvShiftRows": inv_shift_rows,
    "InvMixColumns": inv_mix_columns,
}

# XORs per operation, for op_counts
_XOR_COST = {
    "AddRoundKey": 16,
    "MixColumns": 16 * 4,
    "InvMixColumns": 16 * 4 + 4 * 6,
}


class BlockCipher:
    """
    AES-128 single-block cipher.

    The instance only holds configuration and an optional tracer. Round
    keys and the working state live for the duration of one call.
    """

    def __init__(
        self,
        config: CipherConfig | None = None,
        tracer: TraceRecorder | None = None,
    ):
        """
        Initialize the cipher.

        Args:
            config: Cipher parameters (AES-128 only)
            tracer: Optional trace recorder for verbose output
        """
        self.config = config or DEFAULT_CONFIG
        self.tracer = tracer
        self.op_counts: dict[str, int] = {}

    def encrypt(self, plaintext: bytes, key: bytes) -> bytes:
        """
        Encrypt a single 16-byte block.

        Args:
            plaintext: 16-byte plaintext
            key: 16-byte AES key

        Returns:
            16-byte ciphertext

        Raises:
            ConfigurationError: If the configuration is not AES-128
            BlockSizeError: If plaintext or key is not 16 bytes
        """
        plaintext = as_bytes(plaintext, "Plaintext")
        return self._run("encrypt", plaintext, key, ENCRYPT_SCHEDULE, "Plaintext")

    def decrypt(self, ciphertext: bytes, key: bytes) -> bytes:
        """
        Decrypt a single 16-byte block.

        Args:
            ciphertext: 16-byte ciphertext
            key: 16-byte AES key

        Returns:
            16-byte plaintext
        """
        ciphertext = as_bytes(ciphertext, "Ciphertext")
        return self._run("decrypt", ciphertext, key, DECRYPT_SCHEDULE, "Ciphertext")

    def _run(
        self,
        direction: str,
        block: bytes,
        key: bytes,
        schedule: list[tuple[int, list[str]]],
        label: str,
    ) -> bytes:
        self.config.check()
        require_length(block, self.config.block_size, label)

        self.op_counts = {"sbox_calls": 0, "xor_ops": 0}
        round_keys = expand_key(key)
        state = bytes_to_state(block)

        if self.tracer:
            self.tracer.record(
                direction=direction, round=None, operation="input", state=list(state)
            )

        for round_num, operations in schedule:
            rk = round_key(round_keys, round_num)
            for op in operations:
                state = self._apply(op, state, rk)
                if self.tracer:
                    entry = {"direction": direction, "round": round_num,
                             "operation": op, "state": list(state)}
                    if op == "AddRoundKey":
                        entry["round_key"] = rk
                    self.tracer.record(**entry)

        return state_to_bytes(state)

    def _apply(self, op: str, state: list[int], rk: bytes) -> list[int]:
        self.op_counts["xor_ops"] += _XOR_COST.get(op, 0)
        if op in ("SubBytes", "InvSubBytes"):
            self.op_counts["sbox_calls"] += 16

        if op == "AddRoundKey":
            return add_round_key(state, rk)
        try:
            func = _OPERATIONS[op]
        except KeyError:
            raise ValueError(f"Unknown operation: {op}") from None
        return func(state)


def encrypt_block(plaintext: bytes, key: bytes) -> bytes:
    """
    Encrypt one 16-byte block with a 16-byte key.

    Args:
        plaintext: 16-byte plaintext block
        key: 16-byte AES-128 key

    Returns:
        16-byte ciphertext block
    """
    return BlockCipher().encrypt(plaintext, key)


def decrypt_block(ciphertext: bytes, key: bytes) -> bytes:
    """
    Decrypt one 16-byte block with a 16-byte key.

    Args:
        ciphertext: 16-byte ciphertext block
        key: 16-byte AES-128 key

    Returns:
        16-byte plaintext block
    """
    return BlockCipher().decrypt(ciphertext, key)
