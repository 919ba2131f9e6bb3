"""blake2kit command line interface.

Usage:
  blake2kit hash [FILE ...] [-a b|s] [-l N] [--key TEXT | --key-hex HEX] [--text STR] [--upper] [--tag]
  blake2kit selftest [--no-cross-check]
  blake2kit avalanche [--text STR] [-a b|s] [-l N] [--flips N]

Without FILE (or with ``-``) ``hash`` reads standard input.
Defaults come from BLAKE2KIT_VARIANT, BLAKE2KIT_DIGEST_SIZE and BLAKE2KIT_HEX_CASE.

Exit codes: 0=OK, 1=self-test failure, 2=usage/error.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Final

from . import __version__
from .analysis import avalanche_profile
from .config import Config, HexCase
from .crypto.errors import CryptoError
from .crypto.selftest import run_selftest
from .tool import Blake2Tool

_LOGGER: Final = logging.getLogger(__name__)

_ALGORITHMS = ("b", "s", "blake2b", "blake2s")


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="blake2kit", description="Pure-Python BLAKE2b / BLAKE2s hashing")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = ap.add_subparsers(dest="cmd", required=True)

    p_hash = sub.add_parser("hash", help="Hash files, stdin or a text string")
    p_hash.add_argument("inputs", nargs="*", help="Files to hash ('-' for stdin)")
    p_hash.add_argument("-a", "--algorithm", choices=_ALGORITHMS, default=None, help="BLAKE2 variant")
    p_hash.add_argument("-l", "--length", type=int, default=None, help="Digest length in bytes")
    key = p_hash.add_mutually_exclusive_group()
    key.add_argument("--key", default=None, help="Key as UTF-8 text")
    key.add_argument("--key-hex", default=None, help="Key as a hex string")
    p_hash.add_argument("--text", default=None, help="Hash this UTF-8 string instead of files")
    p_hash.add_argument("--upper", action="store_true", default=None, help="Uppercase hex output")
    p_hash.add_argument("--tag", action="store_true", help="BSD-style output: ALGO (name) = hex")

    p_self = sub.add_parser("selftest", help="Run known-answer vectors and the backend cross-check")
    p_self.add_argument("--no-cross-check", dest="cross_check", action="store_false",
                        help="Skip the comparison against the cryptography backend")

    p_av = sub.add_parser("avalanche", help="Report single-bit-flip digest distances")
    p_av.add_argument("--text", default=None, help="Input text (default: the configured example input)")
    p_av.add_argument("-a", "--algorithm", choices=_ALGORITHMS, default=None)
    p_av.add_argument("-l", "--length", type=int, default=None)
    p_av.add_argument("--flips", type=int, default=256, help="Maximum number of bits to flip")

    return ap


def _cmd_hash(args: argparse.Namespace, config: Config) -> int:
    hash_config = config.hash_config()
    tool = Blake2Tool(hash_config)
    key = bytes.fromhex(args.key_hex) if args.key_hex is not None else args.key
    case = HexCase.UPPER if args.upper else hash_config.hex_case

    def emit(name: str | None, result) -> None:
        if result is None:
            print()
        elif args.tag:
            print(f"{result.label} ({name if name is not None else '-'}) = {result.hex(case)}")
        elif name is None:
            print(result.hex(case))
        else:
            print(f"{result.hex(case)}  {name}")

    if args.text is not None:
        emit(None, tool.calculate(args.text, key=key, variant=args.algorithm, output_length=args.length))
        return 0

    for name in args.inputs or ["-"]:
        if name == "-":
            data = sys.stdin.buffer.read()
            emit(name, tool.calculate(data, key=key, variant=args.algorithm, output_length=args.length))
        else:
            emit(name, tool.hash_file(name, key=key, variant=args.algorithm, output_length=args.length))
    return 0


def _cmd_selftest(args: argparse.Namespace) -> int:
    report = run_selftest(cross_check=args.cross_check)
    for failure in report.failures:
        print(f"FAIL {failure}")
    print(f"{report.passed} passed, {len(report.failures)} failed")
    return 0 if report.ok else 1


def _cmd_avalanche(args: argparse.Namespace, config: Config) -> int:
    hash_config = config.hash_config()
    text = args.text if args.text is not None else hash_config.example_input
    profile = avalanche_profile(
        text.encode("utf-8"),
        args.algorithm or hash_config.variant,
        args.length,
        max_flips=args.flips,
    )
    print(json.dumps(profile.summary(), indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = Config()
    try:
        if args.cmd == "hash":
            return _cmd_hash(args, config)
        if args.cmd == "selftest":
            return _cmd_selftest(args)
        return _cmd_avalanche(args, config)
    except (CryptoError, OSError, ValueError) as e:
        _LOGGER.debug("command failed", exc_info=True)
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
