"""Command-line interface for the AES-128 cipher."""

from __future__ import annotations

import random
import secrets
import sys
from typing import TextIO

import click

from . import DEFAULT_KEY_HEX, DEFAULT_PT_HEX, __version__
from .cipher import Direction, cipher_block
from .errors import AESError
from .golden import FIPS_197_TEST_VECTORS, golden_decrypt, golden_encrypt
from .interfaces import CipherConfig
from .key_schedule import expand_key, round_keys
from .modes import decrypt, encrypt, encrypt_text, decrypt_text
from .trace import TraceRecorder, print_header, print_result
from .utils import bytes_to_hex, bytes_to_state, format_state_grid, hex_to_bytes, state_to_bytes


def _parse_key(key_hex: str) -> bytes:
    try:
        key = hex_to_bytes(key_hex)
    except ValueError as e:
        click.echo(f"Error: Invalid key hex: {e}", err=True)
        sys.exit(1)
    if len(key) != 16:
        click.echo(
            f"Error: Key must be 32 hex chars (16 bytes), got {len(key) * 2} chars",
            err=True,
        )
        sys.exit(1)
    return key


def _parse_data(data_hex: str, label: str) -> bytes:
    try:
        return hex_to_bytes(data_hex)
    except ValueError as e:
        click.echo(f"Error: Invalid {label} hex: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="aes-cipher")
def main() -> None:
    """AES-128 block cipher.

    Messages are zero-padded to a multiple of 16 bytes and every block is
    processed independently (ECB).
    """
    pass


@main.command(name="encrypt")
@click.option("--key", "key_hex", required=True, help="AES-128 key as 32 hex chars")
@click.option("--hex", "data_hex", help="Plaintext as hex")
@click.option("--text", help="Plaintext as UTF-8 text (output is Base64)")
@click.option("--workers", type=click.IntRange(min=1), default=1, help="Worker threads (default: 1)")
def encrypt_cmd(key_hex: str, data_hex: str | None, text: str | None, workers: int) -> None:
    """Encrypt a message."""
    if (data_hex is None) == (text is None):
        click.echo("Error: Give exactly one of --hex or --text", err=True)
        sys.exit(1)

    key = _parse_key(key_hex)
    config = CipherConfig(workers=workers)
    try:
        if text is not None:
            click.echo(encrypt_text(text, key, config))
        else:
            click.echo(bytes_to_hex(encrypt(_parse_data(data_hex, "plaintext"), key, config)))
    except AESError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command(name="decrypt")
@click.option("--key", "key_hex", required=True, help="AES-128 key as 32 hex chars")
@click.option("--hex", "data_hex", help="Ciphertext as hex")
@click.option("--text", "token", help="Ciphertext as Base64 (output is UTF-8 text)")
@click.option("--workers", type=click.IntRange(min=1), default=1, help="Worker threads (default: 1)")
def decrypt_cmd(key_hex: str, data_hex: str | None, token: str | None, workers: int) -> None:
    """Decrypt a message. Zero padding is not removed from hex output."""
    if (data_hex is None) == (token is None):
        click.echo("Error: Give exactly one of --hex or --text", err=True)
        sys.exit(1)

    key = _parse_key(key_hex)
    config = CipherConfig(workers=workers)
    try:
        if token is not None:
            click.echo(decrypt_text(token, key, config))
        else:
            click.echo(bytes_to_hex(decrypt(_parse_data(data_hex, "ciphertext"), key, config)))
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command(name="expand-key")
@click.option("--key", "key_hex", default=DEFAULT_KEY_HEX,
              help="AES-128 key as 32 hex chars (default: FIPS-197 test key)")
def expand_key_cmd(key_hex: str) -> None:
    """Print the 11 round keys of the key schedule."""
    key = _parse_key(key_hex)
    for round_num, rk in enumerate(round_keys(expand_key(key))):
        click.echo(f"Round {round_num:2d}: {bytes_to_hex(rk)}")


@main.command(name="trace")
@click.option("--key", "key_hex", default=DEFAULT_KEY_HEX,
              help="AES-128 key as 32 hex chars (default: FIPS-197 test key)")
@click.option("--pt", "block_hex", default=DEFAULT_PT_HEX,
              help="Input block as 32 hex chars (default: FIPS-197 test plaintext)")
@click.option("--decrypt", "inverse", is_flag=True, help="Trace decryption instead")
@click.option("--verbose", "-v", is_flag=True, help="Show the delta after each step")
@click.option("--trace", "trace_path", type=click.Path(dir_okay=False, writable=True),
              help="Output JSON Lines trace to file")
def trace_cmd(key_hex: str, block_hex: str, inverse: bool, verbose: bool,
              trace_path: str | None) -> None:
    """Walk one block through every round transformation."""
    key = _parse_key(key_hex)
    block = _parse_data(block_hex, "block")
    if len(block) != 16:
        click.echo(f"Error: Block must be 32 hex chars (16 bytes), got {len(block) * 2} chars",
                   err=True)
        sys.exit(1)

    direction = Direction.DECRYPT if inverse else Direction.ENCRYPT
    print_header(f"AES-128 {direction.value}")
    click.echo(f"Key:   {bytes_to_hex(key)}")
    click.echo(f"Input: {bytes_to_hex(block)}")
    click.echo(format_state_grid(bytes_to_state(block)))
    click.echo()

    trace_file: TextIO | None = None
    if trace_path:
        trace_file = open(trace_path, "w")

    try:
        tracer = TraceRecorder(verbose=True, trace_file=trace_file, show_delta=verbose)
        state = cipher_block(bytes_to_state(block), expand_key(key), direction, tracer)
    finally:
        if trace_file:
            trace_file.close()

    output = state_to_bytes(state)
    if direction is Direction.ENCRYPT:
        expected = golden_encrypt(key, block)
        label = "Ciphertext"
    else:
        expected = golden_decrypt(key, block)
        label = "Plaintext"
    print_result(bytes_to_hex(output), label=label, passed=output == expected)
    if output != expected:
        click.echo(f"Expected: {bytes_to_hex(expected)}")
        sys.exit(1)


@main.command()
@click.option("--n", "num_tests", type=int, default=100,
              help="Number of random test messages (default: 100)")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--workers", type=click.IntRange(min=1), default=1, help="Worker threads (default: 1)")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
def validate(num_tests: int, seed: int | None, workers: int, verbose: bool) -> None:
    """Validate against FIPS-197 vectors and the PyCryptodome reference."""
    config = CipherConfig(workers=workers, parallel_threshold=2)

    click.echo("Running FIPS-197 KAT tests...")
    fips_passed = 0
    for i, vec in enumerate(FIPS_197_TEST_VECTORS):
        ct = encrypt(vec["plaintext"], vec["key"])
        pt = decrypt(vec["ciphertext"], vec["key"])
        if ct == vec["ciphertext"] and pt == vec["plaintext"]:
            fips_passed += 1
            if verbose:
                click.echo(f"  FIPS test {i+1}: PASS")
        else:
            click.echo(
                f"  FIPS test {i+1}: FAIL - expected {vec['ciphertext'].hex()}, got {ct.hex()}"
            )
    click.echo(f"FIPS-197 tests: {fips_passed}/{len(FIPS_197_TEST_VECTORS)} passed")

    click.echo(f"\nRunning {num_tests} random tests...")
    if seed is not None:
        rng = random.Random(seed)
        random_bytes = lambda n: bytes(rng.randint(0, 255) for _ in range(n))
    else:
        random_bytes = secrets.token_bytes

    random_passed = 0
    for i in range(num_tests):
        key = random_bytes(16)
        message = random_bytes(16 * (1 + i % 8))

        ct = encrypt(message, key, config)
        expected = golden_encrypt(key, message)
        if ct == expected and decrypt(ct, key, config) == golden_decrypt(key, ct):
            random_passed += 1
        elif verbose:
            click.echo(f"  Random test {i+1}: FAIL - key {key.hex()}")
    click.echo(f"Random tests: {random_passed}/{num_tests} passed")

    total_passed = fips_passed + random_passed
    total_tests = len(FIPS_197_TEST_VECTORS) + num_tests

    click.echo("")
    if total_passed == total_tests:
        click.echo(f"VALIDATION PASSED: All {total_tests} tests passed")
        sys.exit(0)
    else:
        click.echo(f"VALIDATION FAILED: {total_tests - total_passed} failures")
        sys.exit(1)


if __name__ == "__main__":
    main()
