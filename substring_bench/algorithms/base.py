# base.py
# Common contract shared by every substring search strategy.

from abc import ABC, abstractmethod


def char_code(seq):
    """Returns the function mapping an element of ``seq`` to its integer code."""
    return ord if isinstance(seq, str) else int


def check_operands(text, pattern):
    """Text and pattern must be the same kind of sequence (both str or both bytes)."""
    text_is_bytes = isinstance(text, (bytes, bytearray))
    pattern_is_bytes = isinstance(pattern, (bytes, bytearray))
    if text_is_bytes != pattern_is_bytes:
        raise TypeError(
            f"text and pattern must both be str or both be bytes, "
            f"got {type(text).__name__} and {type(pattern).__name__}"
        )


class SearchAlgorithm(ABC):
    """
    Finds every occurrence of a pattern in a text.

    Subclasses implement ``_scan`` for the general case; ``search`` handles
    the degenerate inputs once for all of them, so an empty pattern or a
    pattern longer than the text always yields an empty list.
    """

    name = "abstract"

    def search(self, text, pattern) -> list[int]:
        """Returns the strictly increasing start offsets of ``pattern`` in ``text``."""
        check_operands(text, pattern)
        if not pattern or len(pattern) > len(text):
            return []
        return self._scan(text, pattern)

    @abstractmethod
    def _scan(self, text, pattern) -> list[int]:
        """Search with 0 < len(pattern) <= len(text)."""

    def __call__(self, text, pattern):
        return self.search(text, pattern)

    def __repr__(self):
        return f"{type(self).__name__}()"

    def __str__(self):
        return self.name
