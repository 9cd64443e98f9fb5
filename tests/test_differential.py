"""
Differential Tests - Linear Searches vs Rotate-and-Compare Oracle

The O(n) doubling check (KMP and Z searches) must agree exactly with the
O(n^2) oracle on every generated pair: boolean, smallest offset, and the
full offset set. Also checks rotation_receipts() and its determinism.
"""

import itertools
import random

import pytest

from rotcheck.core import assert_double_run_equal, Receipts
from rotcheck.kernel import (
    is_rotation,
    rotation_offset,
    rotation_offsets,
    rotate_left,
    search_names,
    is_rotation_naive,
    rotation_offset_naive,
    rotation_offsets_naive,
    rotation_receipts,
)


def _equal_length_pairs(alphabet, max_len):
    for n in range(max_len + 1):
        words = ["".join(w) for w in itertools.product(alphabet, repeat=n)]
        for a in words:
            for b in words:
                yield a, b


def _assert_agree(a, b):
    oracle = rotation_offset_naive(a, b)
    for search in search_names():
        assert rotation_offset(a, b, search=search) == oracle, (a, b, search)
        assert is_rotation(a, b, search=search) == is_rotation_naive(a, b), (a, b, search)
    assert rotation_offsets(a, b) == rotation_offsets_naive(a, b), (a, b)


def test_oracle_on_reference_pairs():
    """The oracle itself gets the reference pairs right."""
    assert is_rotation_naive("abc", "bca")
    assert is_rotation_naive("abcdef", "fabcde")
    assert not is_rotation_naive("abcdef", "abcfed")
    assert is_rotation_naive("aaaa", "aaaa")
    assert not is_rotation_naive("ab", "aab")
    assert is_rotation_naive("", "")
    assert rotation_offsets_naive("abab", "baba") == [1, 3]


def test_exhaustive_binary_alphabet():
    """Every equal-length pair over {a,b} up to length 7."""
    count = 0
    for a, b in _equal_length_pairs("ab", 7):
        _assert_agree(a, b)
        count += 1

    print(f"✓ {count} binary pairs agree")


def test_exhaustive_ternary_alphabet():
    """Every equal-length pair over {a,b,c} up to length 4."""
    count = 0
    for a, b in _equal_length_pairs("abc", 4):
        _assert_agree(a, b)
        count += 1

    print(f"✓ {count} ternary pairs agree")


def test_mismatched_lengths_agree():
    for a, b in [("", "a"), ("ab", "aab"), ("abc", "ab"), ("aaaa", "aaa")]:
        _assert_agree(a, b)
        assert not is_rotation(a, b)


def test_random_sample():
    """Seeded random pairs: half true rotations, half perturbed."""
    rng = random.Random(20241019)

    rotations = 0
    for _ in range(400):
        n = rng.randint(1, 40)
        a = "".join(rng.choice("abcd") for _ in range(n))
        b = rotate_left(a, rng.randrange(n))

        if rng.random() < 0.5:
            i = rng.randrange(n)
            b = b[:i] + rng.choice("abcd") + b[i + 1:]

        _assert_agree(a, b)
        rotations += is_rotation(a, b)

    assert rotations >= 100, "Most unperturbed pairs must be rotations"
    print(f"✓ 400 random pairs agree ({rotations} rotations)")


def test_random_int_lists():
    rng = random.Random(7)
    for _ in range(200):
        n = rng.randint(0, 12)
        a = [rng.randint(-2, 2) for _ in range(n)]
        b = rotate_left(a, rng.randint(-n, n)) if rng.random() < 0.5 else list(reversed(a))
        _assert_agree(a, b)


def test_range_sequences_agree():
    """Sequences without + (range) go through the oracle and both searches alike."""
    for n in range(6):
        a = range(n)
        for k in range(n):
            _assert_agree(a, rotate_left(a, k))
            _assert_agree(a, list(reversed(rotate_left(a, k))))

    _assert_agree(range(4), [2, 3, 0, 1])
    _assert_agree(range(4), range(4))
    _assert_agree(range(3), range(4))

    assert rotation_offset_naive(range(4), [2, 3, 0, 1]) == 2
    assert rotation_offsets_naive(range(4), [2, 3, 0, 1]) == [2]

    print("✓ range pairs agree")


# ═══════════════════════════════════════════════════════════════════════
# rotation_receipts()
# ═══════════════════════════════════════════════════════════════════════

FIXTURES = [
    {"label": "k1", "a": "abc", "b": "bca"},
    {"label": "k5", "a": "abcdef", "b": "fabcde"},
    {"label": "swap", "a": "abcdef", "b": "abcfed"},
    {"label": "constant", "a": "aaaa", "b": "aaaa"},
    {"label": "length_mismatch", "a": "ab", "b": "aab"},
    {"label": "empty", "a": "", "b": ""},
    {"label": "periodic", "a": "abab", "b": "baba"},
    {"label": "ints", "a": [1, 2, 3], "b": [3, 1, 2]},
    {"label": "range", "a": range(4), "b": [2, 3, 0, 1]},
]


def test_rotation_receipts_contents():
    digest = rotation_receipts("test-rotation-receipts", FIXTURES)
    payload = digest["payload"]

    assert digest["section"] == "test-rotation-receipts"
    assert payload["agreement_ok"] is True
    assert payload["default_search"] == "kmp"
    assert sorted(payload["searches"]) == search_names()

    checks = {c["label"]: c for c in payload["rotation_checks"]}
    assert [c["label"] for c in payload["rotation_checks"]] == [f["label"] for f in FIXTURES]

    assert checks["k1"]["is_rotation"] is True
    assert checks["k1"]["offset"] == 1
    assert checks["k5"]["offset"] == 5
    assert checks["swap"]["is_rotation"] is False
    assert checks["swap"]["offset"] is None
    assert checks["swap"]["offsets"] == []
    assert checks["constant"]["offsets"] == [0, 1, 2, 3]
    assert checks["constant"]["minimal_period"] == 1
    assert checks["length_mismatch"]["len_a"] == 2
    assert checks["length_mismatch"]["len_b"] == 3
    assert checks["empty"]["is_rotation"] is True
    assert checks["empty"]["minimal_period"] == 0
    assert checks["periodic"]["offsets"] == [1, 3]
    assert checks["ints"]["offset"] == 2
    assert checks["range"]["offset"] == 2
    assert checks["range"]["agree"] is True

    # Distinct pairs hash differently
    hashes = [c["pair_hash"] for c in payload["rotation_checks"]]
    assert len(set(hashes)) == len(hashes)

    print(f"✓ Receipts correct: {digest['section_hash'][:16]}...")


def test_rotation_receipts_double_run():
    def build():
        digest = rotation_receipts("test-rotation-double-run", FIXTURES)
        r = Receipts(digest["section"])
        r.put("section_hash", digest["section_hash"])
        return r

    assert_double_run_equal(build)  # must not raise


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
