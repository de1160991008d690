# run_all.py
# Benchmark harness: runs every algorithm on every (book, pattern) pair and times it.

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import asdict, dataclass, field

from .algorithms import ALGORITHMS
from .config import WORKERS
from .file_utils import CorpusNotFoundError, corpus_name, load_corpus

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkRecord:
    corpus: str
    pattern: str
    algorithm: str
    matches: int
    seconds: float

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class Mismatch:
    """Algorithms whose match positions differed from the first algorithm's."""

    corpus: str
    pattern: str
    algorithms: tuple


@dataclass
class BenchmarkRun:
    patterns: list
    records: list = field(default_factory=list)
    processed: list = field(default_factory=list)
    skipped: list = field(default_factory=list)
    mismatches: list = field(default_factory=list)

    def records_for(self, corpus):
        return [r for r in self.records if r.corpus == corpus]


def time_search(algorithm, text, pattern):
    """Runs one search; the timer covers that single call and nothing else."""
    start = time.perf_counter()
    positions = algorithm.search(text, pattern)
    elapsed = time.perf_counter() - start
    return positions, elapsed


def run_pattern(text, pattern, algorithms=None, corpus=""):
    """
    Times each algorithm once on ``pattern``.

    Returns the records in algorithm order and a Mismatch if any algorithm
    disagreed with the first one, else None.
    """
    algorithms = ALGORITHMS if algorithms is None else algorithms
    records = []
    reference = None
    disagreeing = []

    for algorithm in algorithms:
        positions, elapsed = time_search(algorithm, text, pattern)
        records.append(BenchmarkRecord(corpus, pattern, algorithm.name, len(positions), elapsed))
        if reference is None:
            reference = positions
        elif positions != reference:
            disagreeing.append(algorithm.name)

    mismatch = None
    if disagreeing:
        mismatch = Mismatch(corpus, pattern, tuple(disagreeing))
        log.warning("%s: results for %r differ from %s: %s",
                    corpus or "<text>", pattern, records[0].algorithm, ", ".join(disagreeing))
    return records, mismatch


def unique_patterns(patterns):
    """Drops repeated patterns, keeping the first occurrence of each in order."""
    patterns = list(patterns)
    unique = list(dict.fromkeys(patterns))
    if len(unique) < len(patterns):
        log.info("Ignoring %d repeated pattern(s)", len(patterns) - len(unique))
    return unique


def run_all_algorithms(text, patterns, algorithms=None, corpus=""):
    """Every algorithm on every distinct pattern over one in-memory text."""
    records = []
    for pattern in unique_patterns(patterns):
        pattern_records, _ = run_pattern(text, pattern, algorithms, corpus)
        records.extend(pattern_records)
    return records


def process_book(path, patterns, algorithms=None):
    """Loads one book and benchmarks it. Raises CorpusNotFoundError if it can't be read."""
    text = load_corpus(path)
    return run_all_algorithms(text, patterns, algorithms, corpus=corpus_name(path))


def _load_books(books, run):
    for path in books:
        try:
            text = load_corpus(path)
        except CorpusNotFoundError as e:
            log.warning("%s, skipping", e)
            run.skipped.append(path)
            continue
        yield corpus_name(path), text


def _finish_book(run, name, results, on_book):
    book_records = []
    for records, mismatch in results:
        book_records.extend(records)
        if mismatch is not None:
            run.mismatches.append(mismatch)
    run.records.extend(book_records)
    run.processed.append(name)
    if on_book is not None:
        on_book(name, book_records)


def run_benchmark(books, patterns, algorithms=None, workers=WORKERS, on_book=None):
    """
    Benchmarks every book in ``books`` against ``patterns``.

    Missing books are logged and skipped. ``on_book(name, records)`` is
    called as each book completes. Repeated patterns run once. With
    ``workers > 1`` the patterns of a book run in separate processes; each
    process still times its calls one at a time, results come back in the
    sequential order, and a book's results are collected before the next
    book is loaded.
    """
    algorithms = ALGORITHMS if algorithms is None else list(algorithms)
    patterns = unique_patterns(patterns)
    run = BenchmarkRun(patterns=patterns)

    if workers <= 1:
        for name, text in _load_books(books, run):
            log.info("Processing %s", name)
            results = [run_pattern(text, p, algorithms, name) for p in patterns]
            _finish_book(run, name, results, on_book)
        return run

    with ProcessPoolExecutor(max_workers=workers) as executor:
        for name, text in _load_books(books, run):
            log.info("Processing %s", name)
            futures = [executor.submit(run_pattern, text, p, algorithms, name) for p in patterns]
            _finish_book(run, name, [f.result() for f in futures], on_book)
    return run
