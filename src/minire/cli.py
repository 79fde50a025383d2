"""Command-line front end for minire.

Reads one matching request per line in the form ``pattern|subject``,
and prints ``true`` or ``false`` for each.

Usage:
    minire [FILE ...] [-d DELIM] [--check] [--memoize] [--literal-escapes] [-v]
    python -m minire < requests.txt

Exit status:
    0  all lines processed
    1  --check rejected at least one pattern
    2  input could not be read
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from minire import __version__
from minire.config import MatchConfig
from minire.elements import iter_elements
from minire.errors import InputError, MinireError, PatternError
from minire.matcher import DEFAULT_DELIMITER, Matcher, format_result, split_line
from minire.utils.logger import get_logger

logger = get_logger(__name__)

STDIN_NAME = "-"
STDIN_SOURCE = "<stdin>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minire",
        description="Match pattern|subject lines and print true or false for each.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Files of request lines (default: standard input, also '-')",
    )
    parser.add_argument(
        "-d",
        "--delimiter",
        default=DEFAULT_DELIMITER,
        help=f"Character separating pattern from subject (default: {DEFAULT_DELIMITER!r})",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Reject malformed patterns with an error line instead of matching them",
    )
    parser.add_argument(
        "--memoize",
        action="store_true",
        help="Cache partial results to bound backtracking",
    )
    parser.add_argument(
        "--literal-escapes",
        action="store_true",
        help=r"Make escaped characters match only themselves (so \. is a literal dot)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug output)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def read_lines(path: str, stdin: TextIO) -> Iterator[str]:
    """Yield the lines of ``path`` (or ``stdin`` for ``-``), split on ``\\n`` only.

    Raises:
        InputError: If the file cannot be opened or decoded
    """
    source = STDIN_SOURCE if path == STDIN_NAME else path
    lineno = 0
    try:
        if path == STDIN_NAME:
            for lineno, line in enumerate(stdin, start=1):
                yield line
            return
        # Split on \n only, so a bare \r stays inside its request
        with open(path, encoding="utf-8", newline="\n") as fh:
            for lineno, line in enumerate(fh, start=1):
                yield line
    except UnicodeDecodeError as exc:
        raise InputError("invalid UTF-8", lineno=lineno + 1, source=source) from exc
    except OSError as exc:
        raise InputError(exc.strerror or str(exc), source=path) from exc


def run(
    matcher: Matcher,
    lines: Iterator[str],
    out: TextIO,
    *,
    check: bool = False,
) -> bool:
    """Match every line and write one result line per request.

    Returns:
        True if every pattern passed the check (always True without it)

    """
    ok = True
    count = 0
    for line in lines:
        count += 1
        pattern, subject = split_line(line, matcher.delimiter)
        if check:
            try:
                for _ in iter_elements(pattern, strict=True):
                    pass
            except PatternError as exc:
                logger.debug("Rejected pattern %r: %s", pattern, exc)
                print(f"error: {exc}", file=out)
                ok = False
                continue
        print(format_result(matcher(pattern, subject)), file=out)
    logger.info("Processed %d request(s)", count)
    return ok


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    config = MatchConfig(memoize=args.memoize, literal_escapes=args.literal_escapes)
    try:
        matcher = Matcher(config, delimiter=args.delimiter)
    except ValueError as exc:
        parser.error(str(exc))

    paths = args.files or [STDIN_NAME]
    ok = True
    try:
        for path in paths:
            logger.info("Reading %s", "standard input" if path == STDIN_NAME else path)
            ok = run(matcher, read_lines(path, sys.stdin), sys.stdout, check=args.check) and ok
    except MinireError as exc:
        print(f"minire: error: {exc}", file=sys.stderr)
        return 2
    return 0 if ok else 1


__all__ = [
    "build_parser",
    "main",
    "read_lines",
    "run",
]
