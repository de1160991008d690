# main.py
# Command-line entry point: benchmark the search algorithms over a list of books.

import argparse
import logging
import sys

from . import config
from .algorithms import default_algorithms
from .report import export_json, plot_timings, print_book_report, print_header
from .run_all import run_benchmark, unique_patterns

log = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="substring-bench",
        description="Compare exact substring search algorithms on large text corpora.",
    )
    parser.add_argument("books", nargs="*", default=None,
                        help="Corpus files (.txt, .pdf, .docx). Defaults to the built-in book list.")
    parser.add_argument("-p", "--pattern", dest="patterns", action="append", default=None,
                        help="Pattern to search for; repeat for several. Defaults to the built-in list.")
    parser.add_argument("--workers", type=int, default=config.WORKERS,
                        help="Run (book, pattern) pairs in this many processes (default: sequential).")
    parser.add_argument("--json", dest="json_path", default=None, help="Also save the results as JSON.")
    parser.add_argument("--chart", dest="chart_path", default=None, help="Also save a timing chart image.")
    parser.add_argument("--no-verify", action="store_true",
                        help="Accept Rabin-Karp hash hits without comparing the window.")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error("--workers must be at least 1")

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format=config.LOG_FORMAT,
        stream=sys.stderr,
    )

    books = args.books or config.BOOKS
    patterns = unique_patterns(args.patterns or config.PATTERNS)
    algorithms = default_algorithms(verify=not args.no_verify)

    print_header(len(books), len(patterns))
    run = run_benchmark(books, patterns, algorithms, workers=args.workers, on_book=print_book_report)

    if args.json_path:
        export_json(run, args.json_path)
    if args.chart_path:
        plot_timings(run, args.chart_path)

    if not run.processed:
        log.error("No books were processed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
