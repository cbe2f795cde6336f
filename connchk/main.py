"""
connchk command-line entry point.

Checks reachability of the TCP and HTTP(S) targets declared in a config file
and prints one line per target, in the order they were declared:

    connchk targets.toml
    CONNCHK_CONFIG=targets.toml connchk -v

Failed checks are reported but do not change the exit status; only a bad
invocation or an unusable config file does.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from connchk.config import settings
from connchk.registry import ConfigError, load_resources
from connchk.runner import check_resources

__version__ = "0.7.0"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="connchk",
        description="Check reachability of TCP and HTTP(S) endpoints declared in a config file.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="Path to the config file (.toml, .yaml or .json). Defaults to $CONNCHK_CONFIG.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.CONNCHK_LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    config_path = args.config or settings.CONNCHK_CONFIG
    if not config_path:
        parser.error("a config file is required (pass CONFIG or set CONNCHK_CONFIG)")

    try:
        resources = load_resources(config_path)
    except ConfigError as exc:
        print(f"connchk: error: {exc}", file=sys.stderr)
        return 1

    check_resources(resources)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
