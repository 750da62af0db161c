"""Tests for the PyCryptodome golden reference."""

import pytest
from Crypto.Cipher import AES

from aes_cipher.golden import (
    FIPS_197_TEST_VECTORS,
    golden_decrypt,
    golden_encrypt,
    validate_against_golden,
)


class TestGoldenEncrypt:
    """Tests for golden_encrypt / golden_decrypt."""

    def test_fips_197_appendix_c1(self) -> None:
        key = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
        plaintext = bytes.fromhex("00112233445566778899aabbccddeeff")
        expected = bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a")

        assert golden_encrypt(key, plaintext) == expected
        assert golden_decrypt(key, expected) == plaintext

    @pytest.mark.parametrize("vec", FIPS_197_TEST_VECTORS)
    def test_fips_197_all_vectors(self, vec: dict) -> None:
        assert golden_encrypt(vec["key"], vec["plaintext"]) == vec["ciphertext"]

    def test_multi_block(self) -> None:
        key = bytes(range(16))
        plaintext = bytes(range(48))
        expected = AES.new(key, AES.MODE_ECB).encrypt(plaintext)
        assert golden_encrypt(key, plaintext) == expected

    def test_invalid_key_length(self) -> None:
        with pytest.raises(ValueError, match="Key must be 16 bytes"):
            golden_encrypt(bytes(15), bytes(16))

    @pytest.mark.parametrize("length", [0, 15, 17])
    def test_invalid_plaintext_length(self, length: int) -> None:
        with pytest.raises(ValueError, match="multiple of 16"):
            golden_encrypt(bytes(16), bytes(length))


class TestValidateAgainstGolden:
    """Tests for validate_against_golden function."""

    def test_correct_ciphertext_passes(self) -> None:
        vec = FIPS_197_TEST_VECTORS[1]
        is_correct, error = validate_against_golden(vec["key"], vec["plaintext"], vec["ciphertext"])

        assert is_correct is True
        assert error == ""

    def test_single_bit_difference_fails(self) -> None:
        vec = FIPS_197_TEST_VECTORS[1]
        wrong = bytearray(vec["ciphertext"])
        wrong[0] ^= 0x01

        is_correct, error = validate_against_golden(vec["key"], vec["plaintext"], bytes(wrong))

        assert is_correct is False
        assert "mismatch" in error.lower()
