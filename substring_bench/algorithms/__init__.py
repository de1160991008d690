"""
Exact substring search strategies.

Every strategy implements :class:`SearchAlgorithm` and returns the same
ordered list of (possibly overlapping) match offsets for the same input.
"""

from .base import SearchAlgorithm
from .brute_force import NaiveSearch, naive_search
from .kmp import KMPSearch, build_prefix_table, kmp_search
from .library_find import LibraryFindSearch, library_find_search
from .rabin_karp import (
    RabinKarpSearch,
    create_hash,
    rabin_karp_search,
    radix_power,
    roll_hash,
    rolling_hashes,
)


def default_algorithms(verify=True):
    """A fresh registry in report order; ``verify=False`` disables Rabin-Karp's window check."""
    return [
        NaiveSearch(),
        LibraryFindSearch(),
        KMPSearch(),
        RabinKarpSearch(verify=verify),
    ]


ALGORITHMS = default_algorithms()


__all__ = [
    "ALGORITHMS",
    "KMPSearch",
    "LibraryFindSearch",
    "NaiveSearch",
    "RabinKarpSearch",
    "SearchAlgorithm",
    "build_prefix_table",
    "create_hash",
    "default_algorithms",
    "kmp_search",
    "library_find_search",
    "naive_search",
    "rabin_karp_search",
    "radix_power",
    "roll_hash",
    "rolling_hashes",
]
