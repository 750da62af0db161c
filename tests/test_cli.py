"""Tests for the click command-line interface."""

import json

from click.testing import CliRunner

from aes_cipher.cli import main


KEY = "000102030405060708090a0b0c0d0e0f"
PT = "00112233445566778899aabbccddeeff"
CT = "69c4e0d86a7b0430d8cdb78070b4c55a"


def invoke(*args):
    return CliRunner().invoke(main, list(args))


class TestEncryptDecrypt:
    def test_encrypt_hex(self):
        result = invoke("encrypt", "--key", KEY, "--hex", PT)
        assert result.exit_code == 0
        assert result.output.strip() == CT

    def test_decrypt_hex(self):
        result = invoke("decrypt", "--key", KEY, "--hex", CT)
        assert result.exit_code == 0
        assert result.output.strip() == PT

    def test_encrypt_pads(self):
        result = invoke("encrypt", "--key", KEY, "--hex", "00" * 17)
        assert result.exit_code == 0
        assert len(result.output.strip()) == 64

    def test_text_round_trip(self):
        token = invoke("encrypt", "--key", KEY, "--text", "hello").output.strip()
        result = invoke("decrypt", "--key", KEY, "--text", token)
        assert result.exit_code == 0
        assert result.output.strip() == "hello"

    def test_workers(self):
        result = invoke("encrypt", "--key", KEY, "--hex", PT * 8, "--workers", "4")
        assert result.exit_code == 0
        assert result.output.strip() == CT * 8

    def test_bad_key_length(self):
        result = invoke("encrypt", "--key", "0011", "--hex", PT)
        assert result.exit_code == 1
        assert "Key must be 32 hex chars" in result.output

    def test_bad_hex(self):
        result = invoke("decrypt", "--key", KEY, "--hex", "zz")
        assert result.exit_code == 1
        assert "Invalid ciphertext hex" in result.output

    def test_requires_one_input(self):
        result = invoke("encrypt", "--key", KEY)
        assert result.exit_code == 1
        result = invoke("encrypt", "--key", KEY, "--hex", PT, "--text", "x")
        assert result.exit_code == 1

    def test_zero_workers_rejected(self):
        result = invoke("encrypt", "--key", KEY, "--hex", PT, "--workers", "0")
        assert result.exit_code != 0


class TestExpandKey:
    def test_round_keys(self):
        result = invoke("expand-key")
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 11
        assert lines[0] == "Round  0: 2b7e151628aed2a6abf7158809cf4f3c"
        assert lines[10] == "Round 10: d014f9a8c9ee2589e13f0cc8b6630ca6"


class TestTraceCommand:
    def test_encrypt_trace(self):
        result = invoke("trace")
        assert result.exit_code == 0
        assert "Ciphertext: 3925841d02dc09fbdc118597196a0b32" in result.output
        assert "[OK] PASS" in result.output

    def test_decrypt_trace(self):
        result = invoke("trace", "--key", KEY, "--pt", CT, "--decrypt")
        assert result.exit_code == 0
        assert f"Plaintext: {PT}" in result.output

    def test_trace_file(self, tmp_path):
        path = tmp_path / "trace.jsonl"
        result = invoke("trace", "--trace", str(path))
        assert result.exit_code == 0
        lines = path.read_text().splitlines()
        assert len(lines) == 41
        assert json.loads(lines[-1])["state"] == "3925841d02dc09fbdc118597196a0b32"

    def test_bad_block_length(self):
        result = invoke("trace", "--pt", "0011")
        assert result.exit_code == 1

    def test_grouped_block_length_reports_hex_digits(self):
        result = invoke("trace", "--pt", "0011 2233")
        assert result.exit_code == 1
        assert "got 8 chars" in result.output

    def test_header_and_input_grid_in_output(self):
        result = invoke("trace")
        assert "# AES-128 encrypt" in result.output
        assert "Input: 3243f6a8885a308d313198a2e0370734" in result.output
        assert "  32 88 31 e0" in result.output


class TestValidate:
    def test_validate_passes(self):
        result = invoke("validate", "--n", "5", "--seed", "1", "--workers", "2")
        assert result.exit_code == 0
        assert "FIPS-197 tests: 7/7 passed" in result.output
        assert "VALIDATION PASSED" in result.output
