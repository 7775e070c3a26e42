"""Command-line entry point.

Usage:
    xfb [--compiler COMPILER] [--target TARGET] [--debug] [--verbose] [XFBUILD ARGS...]

Tokens the parser does not recognize are forwarded to xfbuild unchanged,
after every generated argument.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from xfb.config import DEFAULT_COMPILER, BuildConfig
from xfb.errors import XfbError
from xfb.invoke import BuildInvoker
from xfb.targets import TARGETS, default_target


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xfb",
        usage="%(prog)s [options]",
        description="Build a D demo target with xfBuild.",
        epilog="Unrecognized arguments are passed through to xfbuild.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--compiler", default=DEFAULT_COMPILER, help="The compiler to use.")
    parser.add_argument(
        "--target",
        default=default_target(),
        help=f"The target to build ({', '.join(TARGETS)}).",
    )
    parser.add_argument("--debug", action="store_true", help="Build in debug mode.")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show the xfbuild command that is executed.",
    )
    parser.add_argument("--help", action="help", help="Display this screen.")
    return parser


def parse_config(argv: Sequence[str] | None = None) -> BuildConfig:
    args, passthrough = build_parser().parse_known_args(argv)
    return BuildConfig(
        target=args.target,
        compiler=args.compiler,
        debug=args.debug,
        verbose=args.verbose,
        passthrough=tuple(passthrough),
    )


def main(argv: Sequence[str] | None = None) -> int:
    config = parse_config(argv)
    invoker = BuildInvoker()
    try:
        invoker.run(config)
    except XfbError as exc:
        print(f"error: {exc}", file=sys.stderr)
        if config.verbose:
            _print_trace(invoker, config, exc)
        return 1
    return 0


def _print_trace(invoker: BuildInvoker, config: BuildConfig, exc: XfbError) -> None:
    """Dump the error payload and the build records as JSON lines on stderr."""
    print(json.dumps(exc.to_dict(), sort_keys=True), file=sys.stderr)
    records = invoker.logger.records_for_target(config.target)
    if records:
        print(invoker.logger.to_json_lines(records), file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
