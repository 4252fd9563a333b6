"""
AES-128 single-block cipher.

Encrypts or decrypts exactly one 16-byte block with one 16-byte key using
the 10-round Rijndael transformation. Chaining modes and padding are left
to the caller.
"""

__version__ = "1.0.0"

from .cipher import BlockCipher, encrypt_block, decrypt_block
from .config import CipherConfig
from .errors import RijndaelError, ConfigurationError, BlockSizeError
from .key_schedule import expand_key

# Default AES-128 test values from FIPS-197 Appendix C.1
DEFAULT_KEY_HEX = "000102030405060708090a0b0c0d0e0f"
DEFAULT_PT_HEX = "00112233445566778899aabbccddeeff"
DEFAULT_CT_HEX = "69c4e0d86a7b0430d8cdb78070b4c55a"

__all__ = [
    "BlockCipher",
    "encrypt_block",
    "decrypt_block",
    "expand_key",
    "CipherConfig",
    "RijndaelError",
    "ConfigurationError",
    "BlockSizeError",
]
