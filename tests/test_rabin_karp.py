import pytest
from hypothesis import example, given, strategies as st

from substring_bench.algorithms import (
    NaiveSearch,
    RabinKarpSearch,
    create_hash,
    radix_power,
    roll_hash,
    rolling_hashes,
)
from substring_bench.config import MOD, PRIME


def horner(seq, base, modulus):
    value = 0
    for ch in seq:
        code = ch if isinstance(ch, int) else ord(ch)
        value = (value * base + code) % modulus
    return value


@given(
    st.one_of(st.text(), st.binary()),
    st.integers(1, 8),
    st.integers(2, 300),
    st.integers(2, 10**9),
)
@example("said Professor McGonagall", 25, PRIME, MOD)
@example("Гарри Поттер", 4, PRIME, MOD)
@example(b"\x00\xff\x10binary\xfe", 4, 256, 101)
def test_rolling_hash_matches_direct_hash(text, length, base, modulus):
    rolled = list(rolling_hashes(text, length, base, modulus))
    direct = [horner(text[i:i + length], base, modulus) for i in range(len(text) - length + 1)]
    assert rolled == direct


def test_rolling_hashes_empty_when_window_does_not_fit():
    assert list(rolling_hashes("abc", 4)) == []
    assert list(rolling_hashes("abc", 0)) == []


def test_create_hash_uses_prefix_only():
    assert create_hash("abcdef", 3) == create_hash("abc", 3)
    assert create_hash("abc", 0) == 0


def test_radix_power():
    assert radix_power(1) == 1
    assert radix_power(3, 10, 1000) == 100
    assert radix_power(4, PRIME, MOD) == pow(PRIME, 3, MOD)
    with pytest.raises(ValueError):
        radix_power(0)


def test_roll_hash_single_step():
    power = radix_power(3)
    start = create_hash("abc", 3)
    assert roll_hash(start, ord("a"), ord("d"), power) == create_hash("bcd", 3)


def test_roll_hash_stays_non_negative():
    # outgoing contribution larger than the current value
    modulus = 7
    value = roll_hash(0, 6, 0, 6, base=10, modulus=modulus)
    assert 0 <= value < modulus


def test_collision_is_a_false_positive_without_verification():
    # modulus 2 hashes every single character by parity: 'a' and 'c' collide
    unverified = RabinKarpSearch(base=257, modulus=2, verify=False)
    assert unverified.search("abc", "a") == [0, 2]


def test_collision_rejected_with_verification():
    verified = RabinKarpSearch(base=257, modulus=2, verify=True)
    assert verified.search("abc", "a") == [0]
    text = "the cat sat on the mat with a hat"
    assert verified.search(text, "at") == NaiveSearch().search(text, "at")


def test_constants_are_injected():
    algorithm = RabinKarpSearch()
    assert (algorithm.base, algorithm.modulus, algorithm.verify) == (PRIME, MOD, True)
    assert "verify=True" in repr(algorithm)
