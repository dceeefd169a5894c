from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from .engine import run
from .errors import BFRuntimeError, BFSyntaxError
from .tape import INITIAL_TAPE_LENGTH
from .translator import translate

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO = 1
EXIT_SYNTAX = 2
EXIT_RUNTIME = 3


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='bfrun', description="Brainfuck interpreter.")
    parser.add_argument("filename", help="Brainfuck source file to execute")
    parser.add_argument(
        "--tape-length", type=int, default=INITIAL_TAPE_LENGTH,
        help=f"Initial number of tape cells (default {INITIAL_TAPE_LENGTH})",
    )
    parser.add_argument("--no-coalesce", action="store_true", help="Keep one instruction per command")
    parser.add_argument("--emit", action="store_true", help="Print the translated program as source and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log translation and run details to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")

    if args.tape_length < 1:
        parser.error("--tape-length must be positive")

    try:
        source = Path(args.filename).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Unable to read {args.filename}: {exc}", file=sys.stderr)
        return EXIT_IO

    start = time.perf_counter()
    try:
        program = translate(source, coalesce_runs=not args.no_coalesce)
    except BFSyntaxError as exc:
        print(exc, file=sys.stderr)
        return EXIT_SYNTAX
    logger.debug("translation took %.2f ms", (time.perf_counter() - start) * 1000)

    if args.emit:
        sys.stdout.write(program.to_source() + "\n")
        return EXIT_OK

    start = time.perf_counter()
    try:
        run(program, sys.stdin.buffer, sys.stdout.buffer, tape_length=args.tape_length)
    except BFRuntimeError as exc:
        print(exc, file=sys.stderr)
        return EXIT_RUNTIME
    logger.debug("execution took %.2f ms", (time.perf_counter() - start) * 1000)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
