"""AES-128 (Rijndael) block cipher with zero-padded ECB message handling."""

__version__ = "0.1.0"

# Default AES-128 test values from FIPS-197 Appendix B
DEFAULT_KEY_HEX = "2b7e151628aed2a6abf7158809cf4f3c"
DEFAULT_PT_HEX = "3243f6a8885a308d313198a2e0370734"

from .errors import (
    ErrorCode,
    AESError,
    KeyLengthError,
    WordLengthError,
    RoundKeyLengthError,
    NullStateError,
)
from .gf import gf_multiply
from .key_schedule import expand_key
from .cipher import Direction, cipher_block, encrypt_block, decrypt_block
from .interfaces import CipherConfig, CipherResult
from .modes import (
    transform,
    encrypt,
    decrypt,
    try_encrypt,
    try_decrypt,
    encrypt_text,
    decrypt_text,
)

__all__ = [
    "ErrorCode",
    "AESError",
    "KeyLengthError",
    "WordLengthError",
    "RoundKeyLengthError",
    "NullStateError",
    "gf_multiply",
    "expand_key",
    "Direction",
    "cipher_block",
    "encrypt_block",
    "decrypt_block",
    "CipherConfig",
    "CipherResult",
    "transform",
    "encrypt",
    "decrypt",
    "try_encrypt",
    "try_decrypt",
    "encrypt_text",
    "decrypt_text",
]
