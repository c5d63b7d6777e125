"""
porterstem command line

Usage:
    porterstem stem [WORD ...] [--preserve-case]
    porterstem check [--data-dir DIR]
    porterstem bench [--data-dir DIR] [--repeat N]

With no WORD arguments, `stem` reads whitespace separated words from stdin.
"""

import argparse
import logging
import sys
import time

from porterstem import corpus
from porterstem.porter import PorterStemmer

logger = logging.getLogger(__name__)


def cmd_stem(args):
    """Print the stem of each word, one per line."""
    stemmer = PorterStemmer()
    if args.preserve_case:
        stem = stemmer.stem_without_lowercasing
    else:
        stem = stemmer.stem

    words = args.words or sys.stdin.read().split()
    for word in words:
        print(stem(word))

    return 0


def cmd_check(args):
    """Stem the reference vocabulary and compare with the reference output."""
    pairs = corpus.load_corpus(args.data_dir)
    mismatches = corpus.verify(pairs)

    for m in mismatches:
        print("%s should stem to %s but got %s" % (m.word, m.expected, m.actual))

    print("%d/%d words stemmed as expected" % (len(pairs) - len(mismatches), len(pairs)))
    return 1 if mismatches else 0


def _report(total, elapsed):
    rate = total / elapsed if elapsed > 0 else float("inf")
    return "%d words in %.3fs (%.0f words/s)" % (total, elapsed, rate)


def cmd_bench(args):
    """Time stemming the reference vocabulary, as strings and as lists."""
    vocabulary_path, _ = corpus.ensure_corpus(args.data_dir)
    words = corpus.read_words(vocabulary_path)
    stemmer = PorterStemmer()
    total = len(words) * args.repeat

    start = time.perf_counter()
    for _ in range(args.repeat):
        for word in words:
            stemmer.stem(word)
    elapsed = time.perf_counter() - start
    print("string:   %s" % _report(total, elapsed))

    # stem_in_place overwrites its buffer, so every pass gets fresh copies,
    # built outside the timed loop
    passes = [[list(word) for word in words] for _ in range(args.repeat)]
    start = time.perf_counter()
    for buffers in passes:
        for chars in buffers:
            stemmer.stem_in_place(chars)
    elapsed = time.perf_counter() - start
    print("in place: %s" % _report(total, elapsed))

    return 0


def _positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1, got %s" % value)
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="porterstem",
        description="Porter stemmer for English words",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output"
    )
    subparsers = parser.add_subparsers(dest="command")

    p_stem = subparsers.add_parser("stem", help="Stem words")
    p_stem.add_argument("words", nargs="*", help="Words to stem (default: stdin)")
    p_stem.add_argument(
        "--preserve-case",
        action="store_true",
        help="Do not lowercase words before stemming",
    )
    p_stem.set_defaults(func=cmd_stem)

    p_check = subparsers.add_parser(
        "check", help="Verify against the reference vocabulary"
    )
    p_check.add_argument("--data-dir", help="Corpus cache directory")
    p_check.set_defaults(func=cmd_check)

    p_bench = subparsers.add_parser(
        "bench", help="Time stemming the reference vocabulary"
    )
    p_bench.add_argument("--data-dir", help="Corpus cache directory")
    p_bench.add_argument(
        "--repeat", type=_positive_int, default=1, help="Passes over the vocabulary"
    )
    p_bench.set_defaults(func=cmd_bench)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except corpus.CorpusError as exc:
        logger.debug("Corpus unavailable", exc_info=True)
        print("error: %s" % exc, file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
