"""Golden reference AES-128 using PyCryptodome, plus published test vectors."""

from Crypto.Cipher import AES

from .config import BLOCK_SIZE, KEY_SIZE
from .errors import require_length


def golden_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt a single block using PyCryptodome as golden reference.

    Args:
        key: 16-byte AES-128 key
        plaintext: 16-byte plaintext block

    Returns:
        16-byte ciphertext block

    Raises:
        BlockSizeError: If key or plaintext is not 16 bytes
    """
    require_length(key, KEY_SIZE, "Key")
    require_length(plaintext, BLOCK_SIZE, "Plaintext")

    cipher = AES.new(bytes(key), AES.MODE_ECB)
    return cipher.encrypt(bytes(plaintext))


def golden_decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """Decrypt a single block using PyCryptodome as golden reference."""
    require_length(key, KEY_SIZE, "Key")
    require_length(ciphertext, BLOCK_SIZE, "Ciphertext")

    cipher = AES.new(bytes(key), AES.MODE_ECB)
    return cipher.decrypt(bytes(ciphertext))


def validate_against_golden(
    key: bytes, plaintext: bytes, candidate_ciphertext: bytes
) -> tuple[bool, str]:
    """Validate a candidate ciphertext against the golden reference.

    Returns:
        Tuple of (is_correct, error_detail)
    """
    expected = golden_encrypt(key, plaintext)
    if candidate_ciphertext == expected:
        return True, ""
    return False, (
        f"Ciphertext mismatch: expected {expected.hex()}, "
        f"got {candidate_ciphertext.hex()}"
    )


def validate_decryption_against_golden(
    key: bytes, ciphertext: bytes, candidate_plaintext: bytes
) -> tuple[bool, str]:
    """Validate a candidate plaintext against the golden reference."""
    expected = golden_decrypt(key, ciphertext)
    if candidate_plaintext == expected:
        return True, ""
    return False, (
        f"Plaintext mismatch: expected {expected.hex()}, "
        f"got {candidate_plaintext.hex()}"
    )


# FIPS-197 and NIST known-answer vectors for AES-128
FIPS_197_TEST_VECTORS = [
    # Appendix B - Cipher Example
    {
        "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
        "plaintext": bytes.fromhex("3243f6a8885a308d313198a2e0370734"),
        "ciphertext": bytes.fromhex("3925841d02dc09fbdc118597196a0b32"),
    },
    # Appendix C.1 - AES-128
    {
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a"),
    },
    # Additional test vectors from NIST
    {
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("00000000000000000000000000000000"),
        "ciphertext": bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e"),
    },
    {
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("f34481ec3cc627bacd5dc3fb08f273e6"),
        "ciphertext": bytes.fromhex("0336763e966d92595a567cc9ce537f5e"),
    },
    {
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("9798c4640bad75c7c3227db910174e72"),
        "ciphertext": bytes.fromhex("a9a1631bf4996954ebc093957b234589"),
    },
    {
        "key": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "plaintext": bytes.fromhex("00000000000000000000000000000000"),
        "ciphertext": bytes.fromhex("a1f6258c877d5fcd8964484538bfc92c"),
    },
    {
        "key": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "plaintext": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "ciphertext": bytes.fromhex("bcbf217cb280cf30b2517052193ab979"),
    },
]

# Expanded schedule of the all-zero key, round keys 0..10
ZERO_KEY_ROUND_KEYS = [
    "00000000000000000000000000000000",
    "62636363626363636263636362636363",
    "9b9898c9f9fbfbaa9b9898c9f9fbfbaa",
    "90973450696ccffaf2f457330b0fac99",
    "ee06da7b876a1581759e42b27e91ee2b",
    "7f2e2b88f8443e098dda7cbbf34b9290",
    "ec614b851425758c99ff09376ab49ba7",
    "217517873550620bacaf6b3cc61bf09b",
    "0ef903333ba9613897060a04511dfa9f",
    "b1d4d8e28a7db9da1d7bb3de4c664941",
    "b4ef5bcb3e92e21123e951cf6f8f188e",
]
