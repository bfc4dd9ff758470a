from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from canister_core import __version__
from canister_core.analyzer import summarize_canisters
from canister_core.errors import CanisterCounterError
from canister_core.logging_config import get_logger
from canister_core.manifest import load_manifest
from canister_core.paths import DEFAULT_PROJECT_DIR
from canister_core.report import print_report

PROG = "dfx-canister-counter"
logger = logging.getLogger("canister_core.cli")


# -----------------------------
# Commands
# -----------------------------
def cmd_count(args: argparse.Namespace) -> None:
    """
    Read <path>/dfx.json, tally its canisters by type, and print the report.
    """
    manifest = load_manifest(args.path)
    summary = summarize_canisters(manifest)
    logger.info(
        "Found %d canister(s) across %d type(s)",
        summary.total,
        len(summary.type_counts),
    )
    print_report(summary)


# -----------------------------
# Argparse wiring
# -----------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Count the canisters in a dfx.json and summarize them by type",
    )
    p.add_argument(
        "-p",
        "--path",
        default=DEFAULT_PROJECT_DIR,
        help="Directory containing dfx.json (default: current directory)",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )
    p.add_argument(
        "--log-file",
        help="Also write log records to this file (rotated at 5 MB)",
    )
    p.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"{PROG} {__version__}",
    )
    p.set_defaults(func=cmd_count)
    return p


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    get_logger(
        "canister_core",
        level=logging.INFO if args.verbose else logging.WARNING,
        log_file=args.log_file,
    )

    try:
        args.func(args)
    except CanisterCounterError as e:
        logger.debug("Aborting: %r", e)
        raise SystemExit(f"Error: {e}")


if __name__ == "__main__":
    main()
