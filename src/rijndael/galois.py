"""GF(2^8) arithmetic used by MixColumns."""

# Low byte of the AES reduction polynomial x^8 + x^4 + x^3 + x + 1
REDUCTION_POLY = 0x1b


def xtime(a: int) -> int:
    """Multiply by x in GF(2^8)."""
    return ((a << 1) ^ REDUCTION_POLY) & 0xff if a & 0x80 else (a << 1) & 0xff
