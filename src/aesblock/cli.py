"""Command-line interface for the aesblock cipher."""

from __future__ import annotations

import logging
import random
import sys
from typing import TextIO

import click

from . import DEFAULT_KEY_HEX, __version__
from .cipher import AESCipher
from .config import CipherConfig
from .errors import AESError
from .reference import FIPS_197_TEST_VECTORS, check_block
from .trace import TraceRecorder
from .utils import bytes_to_hex, hex_to_bytes


def _parse_hex(ctx: click.Context, param: click.Parameter, value: str | None) -> bytes | None:
    if value is None:
        return None
    try:
        return hex_to_bytes(value)
    except ValueError as e:
        raise click.BadParameter(f"invalid hex: {e}") from e


def _make_cipher(key: bytes) -> AESCipher:
    try:
        return AESCipher(key, CipherConfig.from_env())
    except (AESError, ValueError) as e:
        _fail(e)


def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def _read_input(value: str | None) -> str:
    if value is not None:
        return value
    return sys.stdin.read().rstrip("\r\n")


key_option = click.option(
    "--key",
    default=DEFAULT_KEY_HEX,
    show_default=True,
    callback=_parse_hex,
    help="AES-128 key as 32 hex chars",
)


@click.group()
@click.version_option(version=__version__, prog_name="aesblock")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """AES-128 block cipher (ECB-style framing, base64 transport)."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@key_option
@click.argument("text", required=False)
def encrypt(key: bytes, text: str | None) -> None:
    """Encrypt TEXT (or stdin) and print base64 ciphertext."""
    cipher = _make_cipher(key)
    click.echo(cipher.encrypt(_read_input(text)))


@main.command()
@key_option
@click.argument("token", required=False)
def decrypt(key: bytes, token: str | None) -> None:
    """Decrypt base64 TOKEN (or stdin) and print the plaintext."""
    cipher = _make_cipher(key)
    try:
        click.echo(cipher.decrypt(_read_input(token)))
    except AESError as e:
        _fail(e)


@main.command()
@key_option
@click.option("--block", "block_data", required=True, callback=_parse_hex,
              help="16-byte block as 32 hex chars")
@click.option("--decrypt", "inverse", is_flag=True, help="Run the inverse transform")
@click.option("--trace", "trace_path", type=click.Path(dir_okay=False, writable=True),
              help="Write a JSON Lines step trace to FILE")
@click.option("--steps", is_flag=True, help="Print the state after every step")
def block(key: bytes, block_data: bytes, inverse: bool, trace_path: str | None, steps: bool) -> None:
    """Transform a single raw block, bypassing framing and base64."""
    cipher = _make_cipher(key)

    trace_file: TextIO | None = None
    if trace_path:
        try:
            trace_file = open(trace_path, "w")
        except OSError as e:
            _fail(e)

    tracer = TraceRecorder(verbose=steps, trace_file=trace_file) if (steps or trace_file) else None

    try:
        if inverse:
            result = cipher.decrypt_block(block_data, tracer)
        else:
            result = cipher.encrypt_block(block_data, tracer)
    except AESError as e:
        _fail(e)
    finally:
        if trace_file:
            trace_file.close()

    click.echo(bytes_to_hex(result))


@main.command()
@click.option("--n", "num_tests", type=int, default=100, show_default=True,
              help="Number of random blocks checked against PyCryptodome")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
def selftest(num_tests: int, seed: int | None) -> None:
    """Check the cipher against FIPS-197 vectors and PyCryptodome."""
    failures = 0

    click.echo("Running FIPS-197 KAT tests...")
    for vec in FIPS_197_TEST_VECTORS:
        cipher = AESCipher(vec["key"])
        ciphertext = cipher.encrypt_block(vec["plaintext"])
        if ciphertext != vec["ciphertext"]:
            failures += 1
            click.echo(f"  [FAIL] {vec['source']}: expected {vec['ciphertext'].hex()}, got {ciphertext.hex()}")
        elif cipher.decrypt_block(ciphertext) != vec["plaintext"]:
            failures += 1
            click.echo(f"  [FAIL] {vec['source']}: inverse did not recover plaintext")
    click.echo(f"  {len(FIPS_197_TEST_VECTORS)} vectors checked")

    click.echo(f"Running {num_tests} random tests vs PyCryptodome...")
    rng = random.Random(seed)
    for i in range(num_tests):
        key = bytes(rng.randint(0, 255) for _ in range(16))
        plaintext = bytes(rng.randint(0, 255) for _ in range(16))
        detail = check_block(AESCipher(key), key, plaintext)
        if detail:
            failures += 1
            click.echo(f"  [FAIL] random {i}: {detail}")

    if failures:
        click.echo(f"FAILED: {failures} mismatches")
        sys.exit(1)
    click.echo("All tests passed")


if __name__ == "__main__":
    main()
