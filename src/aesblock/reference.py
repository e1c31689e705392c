"""Reference AES-128 oracle using PyCryptodome, plus FIPS-197 vectors."""

from Crypto.Cipher import AES

from .errors import InvalidBlockLengthError, InvalidKeyLengthError


def reference_encrypt(key: bytes, block: bytes) -> bytes:
    """Encrypt a single block using PyCryptodome AES-128 ECB.

    Args:
        key: 16-byte AES-128 key
        block: 16-byte plaintext block

    Returns:
        16-byte ciphertext block

    Raises:
        InvalidKeyLengthError: If key is not 16 bytes
        InvalidBlockLengthError: If block is not 16 bytes
    """
    _check(key, block)
    return AES.new(key, AES.MODE_ECB).encrypt(block)


def reference_decrypt(key: bytes, block: bytes) -> bytes:
    """Decrypt a single block using PyCryptodome AES-128 ECB."""
    _check(key, block)
    return AES.new(key, AES.MODE_ECB).decrypt(block)


def _check(key: bytes, block: bytes) -> None:
    if len(key) != 16:
        raise InvalidKeyLengthError(len(key))
    if len(block) != 16:
        raise InvalidBlockLengthError(len(block))


def check_block(cipher, key: bytes, block: bytes) -> str:
    """Compare both directions of ``cipher`` with PyCryptodome on one block.

    Args:
        cipher: Object with encrypt_block/decrypt_block, built from ``key``
        key: 16-byte AES-128 key
        block: 16-byte plaintext block

    Returns:
        Empty string when both directions agree, otherwise the first mismatch
    """
    expected = reference_encrypt(key, block)
    computed = cipher.encrypt_block(block)
    if computed != expected:
        return f"encrypt mismatch: expected {expected.hex()}, got {computed.hex()}"
    recovered = cipher.decrypt_block(expected)
    if recovered != block:
        return f"decrypt mismatch: expected {block.hex()}, got {recovered.hex()}"
    return ""


# (source, key, plaintext, ciphertext)
KNOWN_ANSWERS = (
    ("FIPS-197 C.1", "000102030405060708090a0b0c0d0e0f",
     "00112233445566778899aabbccddeeff", "69c4e0d86a7b0430d8cdb78070b4c55a"),
    ("FIPS-197 B", "2b7e151628aed2a6abf7158809cf4f3c",
     "3243f6a8885a308d313198a2e0370734", "3925841d02dc09fbdc118597196a0b32"),
    ("all zeros", "00" * 16, "00" * 16, "66e94bd4ef8a2c3b884cfa59ca342b2e"),
    ("ones key", "ff" * 16, "00" * 16, "a1f6258c877d5fcd8964484538bfc92c"),
    ("all ones", "ff" * 16, "ff" * 16, "bcbf217cb280cf30b2517052193ab979"),
)

FIPS_197_TEST_VECTORS = [
    {
        "source": source,
        "key": bytes.fromhex(key),
        "plaintext": bytes.fromhex(pt),
        "ciphertext": bytes.fromhex(ct),
    }
    for source, key, pt, ct in KNOWN_ANSWERS
]
