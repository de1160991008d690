from .base import SearchAlgorithm


def build_prefix_table(pattern):
    """
    Longest proper prefix of ``pattern[:q + 1]`` that is also its suffix, for every q.

    >>> build_prefix_table("ababaca")
    [0, 0, 1, 2, 3, 0, 1]
    """
    m = len(pattern)
    table = [0] * m
    k = 0

    for q in range(1, m):
        while k > 0 and pattern[k] != pattern[q]:
            k = table[k - 1]
        if pattern[k] == pattern[q]:
            k += 1
        table[q] = k

    return table


class KMPSearch(SearchAlgorithm):
    """Knuth-Morris-Pratt: one left-to-right pass over the text, O(n + m)."""

    name = "KMP"

    def _scan(self, text, pattern):
        m = len(pattern)
        table = build_prefix_table(pattern)
        positions = []
        q = 0  # characters of pattern matched so far

        for i, ch in enumerate(text):
            while q > 0 and pattern[q] != ch:
                q = table[q - 1]
            if pattern[q] == ch:
                q += 1
            if q == m:
                positions.append(i - m + 1)
                q = table[q - 1]

        return positions


def kmp_search(text, pattern):
    return KMPSearch().search(text, pattern)
