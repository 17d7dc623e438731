"""Command line interface for encoding and decoding IDs."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from ..blocklist import load_blocklist_file
from ..codec import IdCodec
from ..domain.models import CodecOptions
from ..parser.config_loader import load_options
from ..utils.errors import OpaqueIdError
from ..utils.logging import configure_logger

EXIT_OK = 0
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="opaque-ids",
        description="Turn non-negative integers into short reversible IDs and back",
    )
    parser.add_argument("--config", "-c", type=Path, help="Path to a JSON codec configuration")
    parser.add_argument("--alphabet", "-a", help="Characters IDs are built from (overrides --config)")
    parser.add_argument(
        "--min-length",
        "-m",
        type=int,
        help="Pad IDs to at least this many characters (overrides --config)",
    )
    blocklist_group = parser.add_mutually_exclusive_group()
    blocklist_group.add_argument(
        "--blocklist-file",
        "-b",
        type=Path,
        help="Newline separated words replacing the built-in blocklist",
    )
    blocklist_group.add_argument(
        "--no-blocklist",
        "-nb",
        action="store_true",
        help="Disable blocklist filtering entirely",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log regeneration details to stderr")

    subparsers = parser.add_subparsers(dest="command", required=True)
    encode_parser = subparsers.add_parser("encode", help="Encode numbers into a single ID")
    encode_parser.add_argument("numbers", type=int, nargs="+", help="Non-negative integers to encode")
    decode_parser = subparsers.add_parser("decode", help="Decode one or more IDs")
    decode_parser.add_argument("ids", nargs="+", help="IDs to decode")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def _resolve_options(args: argparse.Namespace) -> CodecOptions:
    options = load_options(args.config) if args.config is not None else CodecOptions()
    overrides: dict[str, object] = {}
    if args.alphabet is not None:
        overrides["alphabet"] = args.alphabet
    if args.min_length is not None:
        overrides["min_length"] = args.min_length
    if args.no_blocklist:
        overrides["blocklist"] = frozenset()
    elif args.blocklist_file is not None:
        overrides["blocklist"] = frozenset(load_blocklist_file(args.blocklist_file))
    if not overrides:
        return options
    return replace(options, **overrides)


def _run_with_args(args: argparse.Namespace) -> int:
    codec = IdCodec.from_options(_resolve_options(args))
    if args.command == "encode":
        print(codec.encode(args.numbers))
    else:
        for id_ in args.ids:
            print(" ".join(str(num) for num in codec.decode(id_)))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logger(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return _run_with_args(args)
    except OpaqueIdError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
