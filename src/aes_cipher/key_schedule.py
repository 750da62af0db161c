"""
AES-128 key expansion (FIPS-197 Section 5.2).

The 16-byte cipher key is expanded into NB * (NR + 1) = 44 words
(176 bytes). Word i for i >= NK is w[i - NK] XOR temp, where temp is
w[i - 1], passed through the key schedule core whenever i % NK == 0.
"""

from .constants import EXPANDED_KEY_SIZE, KEY_SIZE, NB, NK, NR, RCON, BLOCK_SIZE, sbox_lookup
from .errors import KeyLengthError, RoundKeyLengthError, WordLengthError


def rot_word(word: bytes) -> bytes:
    """Rotate a 4-byte word left by one byte: [a0,a1,a2,a3] -> [a1,a2,a3,a0]."""
    return bytes(word[1:]) + bytes(word[:1])


def sub_word(word: bytes) -> bytes:
    """Substitute each byte of a word through the S-box."""
    return bytes(sbox_lookup(b) for b in word)


def key_schedule_core(word: bytes, iteration: int) -> bytes:
    """
    RotWord, SubWord, then XOR the first byte with RCON[iteration].

    Args:
        word: 4-byte word (the previous word of the schedule)
        iteration: Word index divided by NK (1..10)

    Returns:
        Transformed 4-byte word

    Raises:
        WordLengthError: If word is not 4 bytes
    """
    if len(word) != 4:
        raise WordLengthError(f"Word must be 4 bytes, got {len(word)}")

    out = bytearray(sub_word(rot_word(word)))
    out[0] ^= RCON[iteration]
    return bytes(out)


def expand_key(key: bytes) -> bytes:
    """
    Expand a 16-byte key into the 176-byte key schedule.

    Args:
        key: 16-byte AES-128 key

    Returns:
        176 bytes: round keys 0..10 concatenated

    Raises:
        KeyLengthError: If key is not 16 bytes
    """
    if len(key) != KEY_SIZE:
        raise KeyLengthError(f"Key must be 16 bytes, got {len(key)}")

    words = [bytes(key[i:i + 4]) for i in range(0, KEY_SIZE, 4)]

    for i in range(NK, NB * (NR + 1)):
        temp = words[i - 1]
        if i % NK == 0:
            temp = key_schedule_core(temp, i // NK)
        words.append(bytes(a ^ b for a, b in zip(words[i - NK], temp)))

    return b"".join(words)


def round_key(expanded_key: bytes, round_num: int) -> bytes:
    """
    Get the 16-byte round key for a round (0..NR).

    Raises:
        RoundKeyLengthError: If the expanded key is not 176 bytes
        ValueError: If round_num is out of range
    """
    if len(expanded_key) != EXPANDED_KEY_SIZE:
        raise RoundKeyLengthError(
            f"Expanded key must be {EXPANDED_KEY_SIZE} bytes, got {len(expanded_key)}"
        )
    if not 0 <= round_num <= NR:
        raise ValueError(f"Round must be 0..{NR}, got {round_num}")
    offset = round_num * BLOCK_SIZE
    return expanded_key[offset:offset + BLOCK_SIZE]


def round_keys(expanded_key: bytes) -> list[bytes]:
    """Split an expanded key into its NR + 1 round keys."""
    return [round_key(expanded_key, r) for r in range(NR + 1)]
