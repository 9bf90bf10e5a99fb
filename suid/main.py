"""
Command-line entry point for generating and parsing SUIDs.
"""
import argparse
import json
import logging
import sys
from datetime import datetime
from typing import List, Optional, Union

from dotenv import load_dotenv

from suid.config import settings
from suid.decoder import parse_suid
from suid.encoder import generate_suid
from suid.errors import SUIDError
from suid.models import Alphabet
from suid.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _timestamp_arg(value: str) -> Union[int, datetime]:
    """Integer milliseconds or an ISO 8601 datetime."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected milliseconds or ISO 8601, got {value!r}")


def _hex_arg(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected hex bytes, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="suid", description="Sortable unique identifiers")
    sub = parser.add_subparsers(dest="command", required=True)

    alphabets = [a.value for a in Alphabet]

    gen = sub.add_parser("generate", help="Generate SUIDs")
    gen.add_argument("--timestamp", type=_timestamp_arg, help="milliseconds or ISO 8601; default now")
    source = gen.add_mutually_exclusive_group()
    source.add_argument("--random-bytes", type=int, help="number of random bytes")
    source.add_argument("--random-hex", type=_hex_arg, help="fixed random bits as hex")
    gen.add_argument("--alphabet", choices=alphabets)
    gen.add_argument("--separator")
    gen.add_argument("--count", type=int, default=1)

    parse = sub.add_parser("parse", help="Parse a SUID")
    parse.add_argument("suid")
    parse.add_argument("--alphabet", choices=alphabets)
    parse.add_argument("--separator")

    return parser


def _generate(args: argparse.Namespace) -> None:
    random_source = args.random_hex if args.random_hex is not None else args.random_bytes
    for _ in range(args.count):
        print(generate_suid(
            timestamp=args.timestamp,
            random_source=random_source,
            alphabet=args.alphabet,
            separator=args.separator,
        ))


def _parse(args: argparse.Namespace) -> None:
    parsed = parse_suid(args.suid, alphabet=args.alphabet, separator=args.separator)
    print(json.dumps({
        "timestamp": parsed.timestamp.isoformat(timespec="milliseconds"),
        "milliseconds": parsed.milliseconds,
        "random_bits": parsed.random_bits.hex(),
        "alphabet": parsed.alphabet.value,
        "separator": parsed.separator,
    }))


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    configure_logging(settings.LOG_LEVEL)

    args = build_parser().parse_args(argv)
    try:
        if args.command == "generate":
            _generate(args)
        else:
            _parse(args)
    except SUIDError as e:
        logger.error(f"{e.code}: {e.message}", extra={"code": e.code})
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
