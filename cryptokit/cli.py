"""Command-line front end: random hex, digests and base64 JSON codec."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cryptokit import config
from cryptokit.common.codec import decode_base64, encode_base64, from_json
from cryptokit.common.errors import CryptoKitError
from cryptokit.common.models import CommandName, CommandResult
from cryptokit.crypto.digest import md5_hex, sha256_hex
from cryptokit.crypto.rand import random_hex

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("cryptokit")


def setup_logging(verbose: bool = False):
    """Route log records through rich on stderr."""
    level = logging.DEBUG if verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    logger.setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="cryptokit",
        description="Random hex, MD5/SHA-256 digests and base64 JSON encoding"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON record {command, output} instead of the bare value"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser(CommandName.RANDOM_HEX.value, help="Print random hex")
    p.add_argument(
        "bytes",
        type=int,
        nargs="?",
        default=None,
        help=f"Number of random bytes (default: {config.RANDOM_BYTES})"
    )

    p = sub.add_parser(CommandName.MD5.value, help="Print MD5 hex digest of TEXT")
    p.add_argument("text", type=str)

    p = sub.add_parser(CommandName.SHA256.value, help="Print SHA-256 hex digest of TEXT")
    p.add_argument("text", type=str)

    p = sub.add_parser(CommandName.ENCODE.value, help="Encode a JSON document as base64")
    p.add_argument("document", type=str, help="JSON text, e.g. '{\"a\": 1}'")

    p = sub.add_parser(CommandName.DECODE.value, help="Decode base64 back into JSON")
    p.add_argument("text", type=str, help="Base64 text produced by 'encode'")

    return parser


def run_command(args: argparse.Namespace):
    """
    Execute the selected subcommand.

    Returns:
        The command output (str for hex/base64, any JSON value for decode)

    Raises:
        CryptoKitError: If the underlying operation fails
    """
    command = CommandName(args.command)
    if command is CommandName.RANDOM_HEX:
        return random_hex(args.bytes)
    if command is CommandName.MD5:
        return md5_hex(args.text)
    if command is CommandName.SHA256:
        return sha256_hex(args.text)
    if command is CommandName.ENCODE:
        return encode_base64(from_json(args.document.encode("utf-8")))
    return decode_base64(args.text)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the cryptokit command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        output = run_command(args)
    except (CryptoKitError, ValueError) as e:
        logger.debug("%s failed", args.command, exc_info=True)
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        return 1

    if args.json:
        text = CommandResult(command=args.command, output=output).model_dump_json()
    elif isinstance(output, str) and args.command != CommandName.DECODE.value:
        text = output
    else:
        text = json.dumps(output, indent=2, ensure_ascii=False)

    console.print(text, markup=False, highlight=False, soft_wrap=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
