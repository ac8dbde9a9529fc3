"""Command-line front end: postprocess a JSON parse tree read from a file or stdin."""

from __future__ import annotations

import argparse as ap
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from camxes_postproc.api import ERROR_PREFIX, postprocess
from camxes_postproc.protocols import OutputSink

logger = logging.getLogger(__name__)


def parse_mode(value: str) -> int | str:
    """A run of digits is a numeric mode; anything else is flag letters."""
    return int(value) if value.isascii() and value.isdigit() else value


def build_parser() -> ap.ArgumentParser:
    parser = ap.ArgumentParser(prog="camxes-postproc", description=__doc__)
    parser.add_argument("treefile", nargs="?", type=Path,
                        help="JSON parse tree [default: stdin]")
    parser.add_argument("-m", "--mode", type=parse_mode, default=2,
                        help="numeric mode 0-31 or flag letters among SMNCTJR "
                             "[%(default)s]")
    parser.add_argument("-o", "--outputfile", type=Path,
                        help="write the result there instead of stdout")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v for info, -vv for debug messages")
    return parser


def run(text: str, mode: Any, sink: OutputSink) -> int:
    """Postprocess ``text`` and write the result to ``sink``.

    Returns:
        The exit status: 0 on success, 1 when the input was rejected.
    """
    try:
        output = postprocess(text, mode)
    except TypeError as err:
        logger.error("Malformed parse tree: %s", err)
        return 1
    sink.write(output + "\n")
    return 1 if output.startswith(ERROR_PREFIX) else 0


def main(argv: Sequence[str] | None = None, sink: OutputSink | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(format=logging.BASIC_FORMAT)
    if args.verbose > 1:
        logging.getLogger("camxes_postproc").setLevel(logging.DEBUG)
    elif args.verbose > 0:
        logging.getLogger("camxes_postproc").setLevel(logging.INFO)

    if args.treefile is None:
        text = sys.stdin.read()
    else:
        text = args.treefile.read_text(encoding="utf-8")
    logger.info("Read %d characters of parse tree", len(text))

    if sink is not None:
        return run(text, args.mode, sink)
    if args.outputfile is None:
        return run(text, args.mode, sys.stdout)
    with args.outputfile.open("w", encoding="utf-8") as out:
        return run(text, args.mode, out)
