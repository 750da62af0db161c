"""
Randomized tests comparing the cipher against the PyCryptodome reference.
"""

import random

import pytest

from aes_cipher import CipherConfig, decrypt, encrypt
from aes_cipher.golden import golden_decrypt, golden_encrypt
from aes_cipher.utils import bytes_to_hex


def random_bytes(n: int, rng: random.Random) -> bytes:
    """Generate n random bytes."""
    return bytes(rng.randint(0, 255) for _ in range(n))


class TestRandomized:
    @pytest.mark.parametrize("seed", range(10))
    def test_random_block(self, seed):
        rng = random.Random(seed)
        key = random_bytes(16, rng)
        pt = random_bytes(16, rng)

        expected = golden_encrypt(key, pt)
        computed = encrypt(pt, key)

        assert computed == expected, (
            f"Seed {seed}: expected {bytes_to_hex(expected)}, "
            f"got {bytes_to_hex(computed)}"
        )
        assert decrypt(computed, key) == pt

    @pytest.mark.parametrize("seed", range(5))
    def test_random_ciphertext_decrypts_like_library(self, seed):
        rng = random.Random(1000 + seed)
        key = random_bytes(16, rng)
        ct = random_bytes(64, rng)

        assert decrypt(ct, key) == golden_decrypt(key, ct)

    @pytest.mark.parametrize("seed", range(5))
    def test_random_message_with_workers(self, seed):
        rng = random.Random(2000 + seed)
        key = random_bytes(16, rng)
        length = rng.randint(1, 300)
        message = random_bytes(length, rng)
        padded = message + bytes(-length % 16)

        config = CipherConfig(workers=4, parallel_threshold=2)
        ct = encrypt(message, key, config)

        assert ct == golden_encrypt(key, padded)
        assert decrypt(ct, key, config) == padded
