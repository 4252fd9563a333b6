"""Exceptions raised by the AES-128 block cipher."""


class RijndaelError(Exception):
    """Base class for all cipher errors."""


class ConfigurationError(RijndaelError):
    """Block size or round count does not match the fixed AES-128 parameters."""


class BlockSizeError(RijndaelError, ValueError):
    """A key, block, or round key has the wrong length."""


def require_length(data: bytes, expected: int, label: str) -> None:
    """Raise BlockSizeError unless ``data`` is exactly ``expected`` bytes long."""
    if len(data) != expected:
        raise BlockSizeError(f"{label} must be {expected} bytes, got {len(data)}")
