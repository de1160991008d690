from .base import SearchAlgorithm


class NaiveSearch(SearchAlgorithm):
    """Compares the pattern against every window of the text, character by character."""

    name = "Naive"

    def _scan(self, text, pattern):
        n = len(text)
        m = len(pattern)
        positions = []

        for i in range(n - m + 1):
            j = 0
            while j < m:
                if text[i + j] != pattern[j]:
                    break
                j += 1
            if j == m:
                positions.append(i)

        return positions


def naive_search(text, pattern):
    return NaiveSearch().search(text, pattern)
