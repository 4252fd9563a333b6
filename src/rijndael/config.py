"""Cipher configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError

# AES-128 parameters (FIPS-197, Nb=4, Nk=4, Nr=10)
BLOCK_SIZE = 16
KEY_SIZE = 16
WORD_SIZE = 4
ROUNDS = 10


@dataclass(frozen=True)
class CipherConfig:
    """Parameters of the block cipher.

    Only the AES-128 values are accepted. The object exists so that the
    driver can assert the invariant before every call instead of trusting
    module constants.
    """

    block_size: int = BLOCK_SIZE
    key_size: int = KEY_SIZE
    rounds: int = ROUNDS

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self.check()

    def check(self) -> None:
        """Raise ConfigurationError if the parameters are not AES-128."""
        if self.block_size != BLOCK_SIZE:
            raise ConfigurationError(
                f"block_size must be {BLOCK_SIZE}, got {self.block_size}"
            )
        if self.key_size != KEY_SIZE:
            raise ConfigurationError(
                f"key_size must be {KEY_SIZE}, got {self.key_size}"
            )
        if self.rounds != ROUNDS:
            raise ConfigurationError(f"rounds must be {ROUNDS}, got {self.rounds}")

    @property
    def round_key_count(self) -> int:
        """Number of round keys in the expanded schedule (rounds + 1)."""
        return self.rounds + 1

    @property
    def schedule_size(self) -> int:
        """Size of the expanded key schedule in bytes."""
        return self.round_key_count * self.block_size


DEFAULT_CONFIG = CipherConfig()
