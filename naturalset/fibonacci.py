"""Print a prefix of the Fibonacci sequence."""

import argparse
import itertools
import logging
import sys
from typing import Iterator, Optional, Sequence, TextIO

_log = logging.getLogger(__name__)


def _fibonacci() -> Iterator[int]:
    a, b = 0, 1
    while True:
        yield a
        a, b = b, a + b


def sequence(count: int) -> Iterator[int]:
    """Generate the first `count` Fibonacci numbers.

    Examples
    --------
    >>> list(sequence(10))
    [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

    """
    return itertools.islice(_fibonacci(), count)


def sequence_upto(maximum: int) -> Iterator[int]:
    """Generate the Fibonacci numbers less than or equal to `maximum`.

    Examples
    --------
    >>> list(sequence_upto(50))
    [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

    """
    return itertools.takewhile(lambda term: term <= maximum, _fibonacci())


def _natural(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logger = logging.getLogger("naturalset")
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("[%(levelname)-5.5s] %(name)s: %(message)s")
    )
    logger.addHandler(handler)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Print Fibonacci numbers separated by spaces.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument(
        "n",
        nargs="?",
        type=_natural,
        default=20,
        help="How many terms to print, or the largest term with --max.",
    )
    p.add_argument(
        "-m",
        "--max",
        action="store_true",
        help="Treat N as an upper bound on the terms instead of a count.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log to stderr; repeat for more detail.",
    )
    return p.parse_args(argv)


def main(
    argv: Optional[Sequence[str]] = None, *, output: Optional[TextIO] = None
) -> int:
    """Print Fibonacci numbers according to the command line `argv`.

    Logging is left to the caller; :func:`run` configures it from `-v`.

    """
    args = parse_args(argv)

    if args.max:
        _log.debug("printing terms up to %d", args.n)
        terms = sequence_upto(args.n)
    else:
        _log.debug("printing %d terms", args.n)
        terms = sequence(args.n)

    out = sys.stdout if output is None else output
    out.write(" ".join(map(str, terms)))
    out.write("\n")
    _log.info("done")
    return 0


def run() -> int:
    """Run as a program: configure logging from the command line, then print."""
    argv = sys.argv[1:]
    _configure_logging(parse_args(argv).verbose)
    return main(argv)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(run())
