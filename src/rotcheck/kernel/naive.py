"""
Reference Oracle: Rotate-and-Compare

The straightforward O(n^2) check: try every rotation of a and compare it
with b. Kept as the oracle for differential tests and receipts; the
production path is rotation.is_rotation.
"""

from typing import List, Optional, Sequence

from .rotation import rotate_left


def is_rotation_naive(a: Sequence, b: Sequence) -> bool:
    """True iff some rotation of a equals b. O(n^2) time."""
    return rotation_offset_naive(a, b) is not None


def rotation_offset_naive(a: Sequence, b: Sequence) -> Optional[int]:
    """
    Smallest k in [0, len(a)) with rotate_left(a, k) == b, else None.

    0 for two empty sequences.
    """
    n = len(a)
    if n != len(b):
        return None
    if n == 0:
        return 0

    for k in range(n):
        if _same(rotate_left(a, k), b):
            return k

    return None


def rotation_offsets_naive(a: Sequence, b: Sequence) -> List[int]:
    """Every k in [0, len(a)) with rotate_left(a, k) == b; [0] for two empties."""
    n = len(a)
    if n != len(b):
        return []
    if n == 0:
        return [0]

    return [k for k in range(n) if _same(rotate_left(a, k), b)]


def _same(x: Sequence, y: Sequence) -> bool:
    # Elementwise: a list and a tuple with equal items are the same sequence
    return len(x) == len(y) and all(p == q for p, q in zip(x, y))
