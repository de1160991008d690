"""Benchmark of exact substring search algorithms over large text corpora."""

from .algorithms import (
    ALGORITHMS,
    KMPSearch,
    LibraryFindSearch,
    NaiveSearch,
    RabinKarpSearch,
    SearchAlgorithm,
    build_prefix_table,
)
from .file_utils import CorpusNotFoundError, load_corpus
from .run_all import BenchmarkRecord, BenchmarkRun, run_all_algorithms, run_benchmark

__version__ = "0.1.0"
