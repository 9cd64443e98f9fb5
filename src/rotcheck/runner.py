"""
rotcheck Command-Line Runner

Usage:
  rotcheck [options] [--] <string1> <string2>

Exit codes (from param_registry()["exit_codes"]):
  0: the two arguments are rotations of each other
  1: they are not
  2: malformed invocation (not exactly two strings, bad option value)
  3: --determinism-check found differing receipts

Options are parsed with parse_known_args; every token argparse does not
recognize as one of our options (including strings such as "-ab") is taken
as one of the two strings. Tokens after "--" are always strings.
Usage errors are reported before any checking is done.
"""

import argparse
import json
import sys
from typing import Dict, List, Optional, Tuple

from .core import DeterminismError, Receipts, assert_double_run_equal, param_registry
from .kernel import rotation_offset, rotation_receipts, search_names
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

RECEIPTS_SECTION = "rotation-cli"


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that exits with the registry's usage code."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(param_registry()["exit_codes"]["usage"], f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    registry = param_registry()

    parser = _Parser(
        prog="rotcheck",
        usage="%(prog)s [options] [--] STRING1 STRING2",
        add_help=False,
        allow_abbrev=False,
        description="Check whether one string is a rotation of another.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Exit 0: "bca" is "abc" rotated left by 1
  rotcheck abc bca

  # Exit 1
  rotcheck abcdef abcfed

  # Print the smallest rotation offset
  rotcheck --offset abcdef fabcde

  # Print receipts, checked twice for determinism
  rotcheck --receipts --determinism-check abab baba

  # Strings that look like options
  rotcheck -ab b-a
  rotcheck -- --offset offset--
        """
    )

    # No -h: a short dash token is a string
    parser.add_argument("--help", action="help", help="Show this message and exit.")

    parser.add_argument(
        "--search",
        choices=search_names(),
        default=registry["default_search"],
        help=f"Linear search primitive. Default: {registry['default_search']}."
    )

    parser.add_argument(
        "--offset",
        action="store_true",
        help="Print the smallest rotation offset (or 'none') to stdout."
    )

    parser.add_argument(
        "--receipts",
        action="store_true",
        help="Print the receipt digest for the pair as JSON to stdout."
    )

    parser.add_argument(
        "--determinism-check",
        action="store_true",
        help="Build the receipts twice and verify identical hashes (implies --receipts)."
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level for stderr diagnostics. Default: WARNING."
    )

    return parser


def pair_receipts(first: str, second: str) -> Dict:
    """Receipt digest for a single argument pair."""
    return rotation_receipts(
        RECEIPTS_SECTION,
        [{"label": "argv", "a": first, "b": second}]
    )


def pair_receipts_with_determinism_check(first: str, second: str) -> Dict:
    """
    Build the pair receipts twice and verify identical section hashes.

    Raises:
        DeterminismError: If the two digests differ.
    """
    digests = []

    def build() -> Receipts:
        digest = pair_receipts(first, second)
        digests.append(digest)

        receipts = Receipts(digest["section"])
        receipts.put("payload", digest["payload"])
        return receipts

    assert_double_run_equal(build)

    final = dict(digests[0])
    final["determinism.double_run_ok"] = True
    return final


def parse_command_line(
    parser: argparse.ArgumentParser,
    argv: List[str]
) -> Tuple[argparse.Namespace, List[str]]:
    """
    Split argv into our options and exactly two strings.

    Raises:
        SystemExit: With the usage code unless exactly two strings remain.
    """
    if "--" in argv:
        split = argv.index("--")
        option_part, forced = argv[:split], argv[split + 1:]
    else:
        option_part, forced = argv, []

    args, leftover = parser.parse_known_args(option_part)
    strings = leftover + forced

    if len(strings) != 2:
        parser.error(f"expected exactly two strings, got {len(strings)}")

    return args, strings


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line and return the process exit code.

    Raises:
        SystemExit: On usage errors (code 2) or --help (code 0).
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args, (first, second) = parse_command_line(parser, list(argv))

    setup_logging(args.log_level)
    exit_codes = param_registry()["exit_codes"]

    logger.debug(
        "checking len(first)=%d len(second)=%d search=%s",
        len(first), len(second), args.search
    )

    offset = rotation_offset(first, second, search=args.search)

    logger.debug("offset=%s", offset)

    if args.offset:
        print("none" if offset is None else offset)

    if args.receipts or args.determinism_check:
        if args.determinism_check:
            try:
                digest = pair_receipts_with_determinism_check(first, second)
            except DeterminismError as e:
                logger.error("%s", e)
                return exit_codes["nondeterministic"]
        else:
            digest = pair_receipts(first, second)

        if not digest["payload"]["agreement_ok"]:
            logger.error("search strategies disagree on %r / %r", first, second)

        print(json.dumps(digest, indent=2, ensure_ascii=False))

    if offset is None:
        return exit_codes["not_rotation"]
    return exit_codes["rotation"]


if __name__ == "__main__":
    sys.exit(main())
