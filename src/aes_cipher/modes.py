"""
Message-level AES-128: zero padding and independent block processing.

Every block is encrypted with the same expanded key and no chaining value
(ECB). Identical plaintext blocks therefore give identical ciphertext
blocks, and the padding carries no length marker: callers must track the
true plaintext length themselves.
"""

from __future__ import annotations

import base64
import binascii
import concurrent.futures

from .cipher import Direction, decrypt_block, encrypt_block
from .errors import AESError, ErrorCode
from .interfaces import CipherConfig, CipherResult
from .key_schedule import expand_key
from .utils import split_blocks, zero_pad

_DEFAULT_CONFIG = CipherConfig()


def transform(
    message: bytes,
    key: bytes,
    direction: Direction,
    config: CipherConfig | None = None,
) -> bytes:
    """
    Encrypt or decrypt a message of any length.

    Args:
        message: Input bytes (zero-padded to a multiple of 16 in both directions)
        key: 16-byte AES-128 key
        direction: Direction.ENCRYPT or Direction.DECRYPT
        config: Worker pool settings (default: sequential)

    Returns:
        Output bytes, len(message) rounded up to a multiple of 16

    Raises:
        KeyLengthError: If key is not 16 bytes
    """
    config = config or _DEFAULT_CONFIG
    expanded_key = expand_key(key)
    blocks = split_blocks(zero_pad(message))
    block_fn = encrypt_block if direction is Direction.ENCRYPT else decrypt_block

    if not config.use_pool(len(blocks)):
        return b"".join(block_fn(block, expanded_key) for block in blocks)

    n = len(blocks)
    W = min(config.workers, n)
    with concurrent.futures.ThreadPoolExecutor(max_workers=W) as executor:
        tasks = {executor.submit(_run_chunk, block_fn, blocks[i*n//W:(i+1)*n//W], expanded_key): i
                 for i in range(W)}
        chunks: list[bytes] = [b""] * W
        for task in concurrent.futures.as_completed(tasks):
            chunks[tasks[task]] = task.result()
    return b"".join(chunks)


def _run_chunk(block_fn, blocks: list[bytes], expanded_key: bytes) -> bytes:
    return b"".join(block_fn(block, expanded_key) for block in blocks)


def encrypt(plaintext: bytes, key: bytes, config: CipherConfig | None = None) -> bytes:
    """Encrypt plaintext of any length; output length is rounded up to 16."""
    return transform(plaintext, key, Direction.ENCRYPT, config)


def decrypt(ciphertext: bytes, key: bytes, config: CipherConfig | None = None) -> bytes:
    """Decrypt ciphertext; padding added at encryption time is kept."""
    return transform(ciphertext, key, Direction.DECRYPT, config)


def try_transform(
    message: bytes,
    key: bytes,
    direction: Direction,
    config: CipherConfig | None = None,
) -> CipherResult:
    """
    Like transform(), but report failure as a CipherResult instead of raising.

    Cipher errors keep their ErrorCode; malformed input types (e.g. a key
    that is not bytes) are reported as ErrorCode.UNKNOWN.
    """
    try:
        output = transform(message, key, direction, config)
    except AESError as e:
        return CipherResult(error=e.code, error_detail=str(e))
    except (TypeError, ValueError) as e:
        return CipherResult(error=ErrorCode.UNKNOWN, error_detail=str(e))
    return CipherResult(output=output)


def try_encrypt(plaintext: bytes, key: bytes, config: CipherConfig | None = None) -> CipherResult:
    return try_transform(plaintext, key, Direction.ENCRYPT, config)


def try_decrypt(ciphertext: bytes, key: bytes, config: CipherConfig | None = None) -> CipherResult:
    return try_transform(ciphertext, key, Direction.DECRYPT, config)


def encrypt_text(text: str, key: bytes, config: CipherConfig | None = None) -> str:
    """
    Encrypt a string for transmission: UTF-8 encode, encrypt, Base64.
    """
    ciphertext = encrypt(text.encode("utf-8"), key, config)
    return base64.b64encode(ciphertext).decode("ascii")


def decrypt_text(token: str, key: bytes, config: CipherConfig | None = None) -> str:
    """
    Reverse encrypt_text(). Trailing NUL padding is stripped.

    Raises:
        ValueError: If token is not valid Base64 or the plaintext is not UTF-8
    """
    try:
        ciphertext = base64.b64decode(token, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid Base64 token: {e}") from e
    plaintext = decrypt(ciphertext, key, config)
    return plaintext.rstrip(b"\x00").decode("utf-8")
