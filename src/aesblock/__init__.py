"""AES-128 block cipher implemented from first principles."""

from .cipher import AESCipher
from .config import CipherConfig
from .errors import (
    AESError,
    InvalidBlockLengthError,
    InvalidCiphertextLengthError,
    InvalidKeyLengthError,
    InvalidTextEncodingError,
    InvalidTransportEncodingError,
    InvariantViolation,
)
from .trace import TraceRecorder

__version__ = "0.1.0"

# FIPS-197 Appendix C.1 values
DEFAULT_KEY_HEX = "000102030405060708090a0b0c0d0e0f"
DEFAULT_PT_HEX = "00112233445566778899aabbccddeeff"
DEFAULT_CT_HEX = "69c4e0d86a7b0430d8cdb78070b4c55a"

__all__ = [
    "AESCipher",
    "CipherConfig",
    "TraceRecorder",
    "AESError",
    "InvalidBlockLengthError",
    "InvalidCiphertextLengthError",
    "InvalidKeyLengthError",
    "InvalidTextEncodingError",
    "InvalidTransportEncodingError",
    "InvariantViolation",
]
