"""Command-line interface for the AES-128 block cipher.

Usage:
    rijndael encrypt --key <hex32> --block <hex32> --verbose
    rijndael decrypt --key <hex32> --block <hex32> --check
    rijndael expand-key --key <hex32>
    rijndael validate --n 100 --seed 42
"""

from __future__ import annotations

import random
import secrets
import sys
from typing import TextIO

import click

from . import __version__, DEFAULT_KEY_HEX, DEFAULT_PT_HEX
from .cipher import BlockCipher
from .config import BLOCK_SIZE, KEY_SIZE, ROUNDS
from .errors import RijndaelError
from .key_schedule import expand_key, round_key
from .reference import (
    FIPS_197_TEST_VECTORS,
    validate_against_golden,
    validate_decryption_against_golden,
)
from .trace import TraceRecorder, print_header, print_result
from .utils import bytes_to_hex, format_state_grid, format_words, hex_to_bytes


def _parse_hex(value: str, size: int, label: str) -> bytes:
    """Parse a hex argument, exiting with status 1 on bad input."""
    try:
        data = hex_to_bytes(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label.lower()} hex: {e}", err=True)
        sys.exit(1)
    if len(data) != size:
        click.echo(
            f"Error: {label} must be {size * 2} hex chars ({size} bytes), "
            f"got {len(data) * 2} chars",
            err=True,
        )
        sys.exit(1)
    return data


def _run_cipher(
    direction: str,
    key_hex: str,
    block_hex: str,
    verbose: bool,
    trace_path: str | None,
    check: bool,
) -> None:
    key = _parse_hex(key_hex, KEY_SIZE, "Key")
    block = _parse_hex(block_hex, BLOCK_SIZE, "Block")

    print_header(f"AES-128 {direction.capitalize()}")
    click.echo(f"Key:   {key.hex()}")
    click.echo(f"Block: {block.hex()}")
    if verbose:
        click.echo(format_state_grid(block))

    trace_file: TextIO | None = None
    if trace_path:
        try:
            trace_file = open(trace_path, "w")
        except OSError as e:
            click.echo(f"Error: Cannot open trace file: {e}", err=True)
            sys.exit(1)

    tracer = TraceRecorder(verbose=verbose, trace_file=trace_file)
    cipher = BlockCipher(tracer=tracer)

    try:
        if direction == "encrypt":
            output = cipher.encrypt(block, key)
            label = "Ciphertext"
        else:
            output = cipher.decrypt(block, key)
            label = "Plaintext"
    except RijndaelError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        if trace_file:
            trace_file.close()

    passed = None
    detail = ""
    if check:
        if direction == "encrypt":
            passed, detail = validate_against_golden(key, block, output)
        else:
            passed, detail = validate_decryption_against_golden(key, block, output)

    print_result(label, bytes_to_hex(output), cipher.op_counts, passed)

    if passed is False:
        click.echo(detail, err=True)
        sys.exit(1)


_key_option = click.option(
    "--key",
    "key_hex",
    type=str,
    default=DEFAULT_KEY_HEX,
    show_default=True,
    help="AES-128 key as 32 hex chars (default: FIPS-197 C.1 key)",
)
_verbose_option = click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Print the state after every transformation",
)
_trace_option = click.option(
    "--trace",
    "trace_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write a JSON Lines trace to FILE",
)
_check_option = click.option(
    "--check",
    is_flag=True,
    help="Cross-check the result against PyCryptodome",
)


@click.group()
@click.version_option(version=__version__, prog_name="rijndael")
def main() -> None:
    """AES-128 single-block encryption and decryption."""
    pass


@main.command()
@_key_option
@click.option(
    "--block",
    "block_hex",
    type=str,
    default=DEFAULT_PT_HEX,
    show_default=True,
    help="Plaintext block as 32 hex chars",
)
@_verbose_option
@_trace_option
@_check_option
def encrypt(key_hex: str, block_hex: str, verbose: bool,
            trace_path: str | None, check: bool) -> None:
    """Encrypt one 16-byte block."""
    _run_cipher("encrypt", key_hex, block_hex, verbose, trace_path, check)


@main.command()
@_key_option
@click.option(
    "--block",
    "block_hex",
    type=str,
    required=True,
    help="Ciphertext block as 32 hex chars",
)
@_verbose_option
@_trace_option
@_check_option
def decrypt(key_hex: str, block_hex: str, verbose: bool,
            trace_path: str | None, check: bool) -> None:
    """Decrypt one 16-byte block."""
    _run_cipher("decrypt", key_hex, block_hex, verbose, trace_path, check)


@main.command(name="expand-key")
@_key_option
def expand_key_cmd(key_hex: str) -> None:
    """Print the 11 round keys derived from KEY."""
    key = _parse_hex(key_hex, KEY_SIZE, "Key")
    schedule = expand_key(key)
    for r in range(ROUNDS + 1):
        click.echo(f"round {r:2d}: {format_words(round_key(schedule, r))}")


@main.command()
@click.option(
    "--n",
    "num_tests",
    type=click.IntRange(min=0),
    default=100,
    help="Number of random test vectors (default: 100)",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed for reproducibility",
)
@_verbose_option
def validate(num_tests: int, seed: int | None, verbose: bool) -> None:
    """Validate against FIPS-197 vectors and random PyCryptodome round trips."""
    cipher = BlockCipher()

    click.echo("Running FIPS-197 KAT tests...")
    fips_passed = 0

    for i, vec in enumerate(FIPS_197_TEST_VECTORS):
        ct = cipher.encrypt(vec["plaintext"], vec["key"])
        pt = cipher.decrypt(vec["ciphertext"], vec["key"])
        if ct == vec["ciphertext"] and pt == vec["plaintext"]:
            fips_passed += 1
            if verbose:
                click.echo(f"  FIPS test {i+1}: PASS")
        else:
            click.echo(
                f"  FIPS test {i+1}: FAIL - got ct={ct.hex()} pt={pt.hex()}"
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
        key = random_bytes(KEY_SIZE)
        pt = random_bytes(BLOCK_SIZE)

        ct = cipher.encrypt(pt, key)
        ok_enc, detail = validate_against_golden(key, pt, ct)
        ok_dec = cipher.decrypt(ct, key) == pt

        if ok_enc and ok_dec:
            random_passed += 1
        elif verbose:
            reason = detail or "decryption did not recover plaintext"
            click.echo(f"  Random test {i+1}: FAIL - {reason}")

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
