from ..config import MOD, PRIME
from .base import SearchAlgorithm, char_code


def create_hash(seq, length, base=PRIME, modulus=MOD):
    """Polynomial hash of ``seq[:length]`` by Horner's rule."""
    code = char_code(seq)
    value = 0
    for i in range(length):
        value = (value * base + code(seq[i])) % modulus
    return value


def radix_power(length, base=PRIME, modulus=MOD):
    """``base ** (length - 1) % modulus``, the weight of a window's leading character."""
    if length < 1:
        raise ValueError(f"window length must be positive, got {length}")
    return pow(base, length - 1, modulus)


def roll_hash(value, outgoing, incoming, power, base=PRIME, modulus=MOD):
    """Slides a window hash one position: drops ``outgoing`` and appends ``incoming``."""
    value = (value - outgoing * power % modulus + modulus) % modulus
    return (value * base + incoming) % modulus


def rolling_hashes(text, length, base=PRIME, modulus=MOD):
    """Yields the hash of every ``length``-wide window of ``text``, left to right."""
    n = len(text)
    if length < 1 or length > n:
        return
    code = char_code(text)
    power = radix_power(length, base, modulus)
    value = create_hash(text, length, base, modulus)

    for i in range(n - length + 1):
        yield value
        if i < n - length:
            value = roll_hash(value, code(text[i]), code(text[i + length]), power, base, modulus)


class RabinKarpSearch(SearchAlgorithm):
    """
    Rabin-Karp rolling-hash search.

    With ``verify`` off a window is reported on hash equality alone, which
    admits false positives whenever two different windows collide under
    ``modulus``. Leave it on for results identical to the other strategies.
    """

    name = "Rabin-Karp"

    def __init__(self, base=PRIME, modulus=MOD, verify=True):
        self.base = base
        self.modulus = modulus
        self.verify = verify

    def _scan(self, text, pattern):
        m = len(pattern)
        pattern_hash = create_hash(pattern, m, self.base, self.modulus)
        positions = []

        for i, window_hash in enumerate(rolling_hashes(text, m, self.base, self.modulus)):
            if window_hash != pattern_hash:
                continue
            if self.verify and text[i:i + m] != pattern:
                continue
            positions.append(i)

        return positions

    def __repr__(self):
        return f"RabinKarpSearch(base={self.base}, modulus={self.modulus}, verify={self.verify})"


def rabin_karp_search(text, pattern):
    return RabinKarpSearch().search(text, pattern)
