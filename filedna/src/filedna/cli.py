"""CLI entrypoint: print the SHA-256 of a file or STDIN as a big integer."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from filedna import __version__
from filedna.config import log_level
from filedna.errors import FileDnaError
from filedna.fingerprint import fingerprint_path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-dna-for-file",
        description="Compute a SHA-256 hash for a file or STDIN and print it as a big integer",
    )
    parser.add_argument(
        "file",
        metavar="FILE",
        nargs="?",
        type=Path,
        help="Path to an input file; omit to read from STDIN",
    )
    parser.add_argument(
        "--hex",
        action="store_true",
        help="Emit the result in hexadecimal instead of decimal",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to STDERR")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else log_level()
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _discard_stdout() -> None:
    # The interpreter flushes stdout again at exit; point it at devnull first.
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(argv: list[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)

    try:
        _configure_logging(args.verbose)
        fingerprint = fingerprint_path(args.file)
    except FileDnaError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        print(fingerprint.render(hex_output=args.hex), flush=True)
    except BrokenPipeError as exc:
        _discard_stdout()
        print(f"Error: failed to write output: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
