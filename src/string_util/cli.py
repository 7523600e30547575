"""CLI interface for string-util.

Usage:
    # Split stdin into 5-character chunks (stdout: JSON array)
    echo -n 'hello world' | python -m string_util.cli chunk --length 5

    # Three 32-character identifiers, one per line
    python -m string_util.cli random --length 32 --count 3

    # NUL-pad / trim stdin
    echo -n 'abc' | python -m string_util.cli pad --block 16
    python -m string_util.cli trim < field.bin

    # Classify addresses (exit 0 if all are local)
    python -m string_util.cli is-local 10.0.0.5 8.8.8.8

Defaults come from --config (YAML) when given.
"""

from __future__ import annotations
import argparse
import json
import logging
import sys

from .config import create_toolkit, load_from_yaml
from .errors import InvalidArgument
from .log import configure_logging
from .toolkit import StringToolkit

logger = logging.getLogger(__name__)


def _build_toolkit(args: argparse.Namespace) -> StringToolkit:
    config = load_from_yaml(args.config) if args.config else None
    return create_toolkit(config)


def cmd_chunk(args: argparse.Namespace, kit: StringToolkit) -> int:
    """Chunk stdin text."""
    chunks = kit.chunkify(sys.stdin.read(), args.length)
    json.dump(chunks, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


def cmd_random(args: argparse.Namespace, kit: StringToolkit) -> int:
    """Print random identifiers."""
    for _ in range(args.count):
        sys.stdout.write(kit.random(args.length) + "\n")
    return 0


def cmd_pad(args: argparse.Namespace, kit: StringToolkit) -> int:
    """NUL-pad stdin text; output is JSON so the NULs stay visible."""
    json.dump(kit.pad_null(sys.stdin.read(), args.block), sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


def cmd_trim(args: argparse.Namespace, kit: StringToolkit) -> int:
    """Trim stdin text at the first NUL."""
    sys.stdout.write(kit.trim_null(sys.stdin.read()))
    return 0


def cmd_is_local(args: argparse.Namespace, kit: StringToolkit) -> int:
    """Classify each address; non-zero exit if any is not local."""
    results = {addr: kit.is_local_ip_address(addr) for addr in args.addresses}
    json.dump(results, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0 if all(results.values()) else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="string_util",
        description="String helpers: chunking, random ids, NUL padding, local IP checks",
    )
    parser.add_argument("--config", default=None, help="YAML config path")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("chunk", help="Split stdin into fixed-size chunks")
    p.add_argument("--length", type=int, default=None, help="Chunk length")

    p = sub.add_parser("random", help="Generate random identifiers")
    p.add_argument("--length", type=int, default=None, help="Identifier length")
    p.add_argument("--count", type=int, default=1, help="How many to print")

    p = sub.add_parser("pad", help="NUL-pad stdin to a block multiple")
    p.add_argument("--block", type=int, default=None, help="Block size")

    sub.add_parser("trim", help="Trim stdin at the first NUL")

    p = sub.add_parser("is-local", help="Check addresses against local ranges")
    p.add_argument("addresses", nargs="+", help="IP address strings")

    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    cmds = {
        "chunk": cmd_chunk,
        "random": cmd_random,
        "pad": cmd_pad,
        "trim": cmd_trim,
        "is-local": cmd_is_local,
    }
    try:
        kit = _build_toolkit(args)
        return cmds[args.command](args, kit)
    except InvalidArgument as e:
        logger.debug("invalid argument: %s", e.details)
        sys.stderr.write(f"error: {e}\n")
        return 2


if __name__ == "__main__":
    sys.exit(main())
