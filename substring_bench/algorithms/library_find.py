from .base import SearchAlgorithm


class LibraryFindSearch(SearchAlgorithm):
    """
    Repeated ``str.find`` / ``bytes.find``.

    The cursor advances one past the previous hit rather than past the whole
    match, so overlapping occurrences are reported like the other strategies.
    """

    name = "str.find"

    def _scan(self, text, pattern):
        positions = []
        pos = text.find(pattern, 0)
        while pos != -1:
            positions.append(pos)
            pos = text.find(pattern, pos + 1)
        return positions


def library_find_search(text, pattern):
    return LibraryFindSearch().search(text, pattern)
