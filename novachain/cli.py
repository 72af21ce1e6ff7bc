"""Command-line interface for the Nova demo chain."""

from __future__ import annotations

import argparse
import json

from . import simulate
from .demo import send

_U64_LIMIT = 1 << 64
_DEMO_SEND_AMOUNT = 10


def _u64(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {text!r}") from None
    if not 0 <= value < _U64_LIMIT:
        raise argparse.ArgumentTypeError(f"{text} is out of range for an unsigned 64-bit integer")
    return value


def _usize(text: str) -> int:
    return _u64(text)


def _debug_option(value: object) -> str:
    if value is None:
        return "None"
    if isinstance(value, str):
        return f"Some({json.dumps(value, ensure_ascii=False)})"
    return f"Some({value})"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(prog="nova-cli", description="CLI for Nova")
    commands = parser.add_subparsers(dest="command", required=True)

    wallet = commands.add_parser("wallet")
    wallet.add_argument("action")

    tx = commands.add_parser("tx")
    tx.add_argument("to", nargs="?", default=None)
    tx.add_argument("amount", nargs="?", default=None, type=_u64)

    gov = commands.add_parser("gov")
    gov.add_argument("action")

    sim = commands.add_parser("simulate")
    sim.add_argument("--storm", action="store_true")
    sim.add_argument("--count", type=_usize, default=5)
    sim.add_argument("--json", dest="json_output", action="store_true")
    sim.add_argument(
        "--backend",
        default="mem",
        choices=["mem", "none"],
        help='storage backend: "mem" keeps blocks in memory, "none" disables persistence',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    args = build_parser().parse_args(argv)
    if args.command == "wallet":
        if args.action == "send":
            send(_DEMO_SEND_AMOUNT)
        else:
            print(f"wallet action: {args.action}")
    elif args.command == "tx":
        print(f"tx to={_debug_option(args.to)} amount={_debug_option(args.amount)}")
    elif args.command == "gov":
        print(f"gov action: {args.action}")
    elif args.command == "simulate":
        simulate.run(args.count, args.storm, args.json_output, args.backend)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())