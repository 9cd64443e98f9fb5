"""
Rotation Checker (doubling trick)

Decides whether one sequence is a cyclic rotation of another in O(n).

Every rotation of a by k is the window (a + a)[k:k+n], and every length-n
window of a + a is a rotation of a. So b is a rotation of a iff len(b) == len(a)
and b occurs as a contiguous block of a + a.

Components:
  - is_rotation: boolean contract
  - rotation_offset: smallest k with rotate_left(a, k) == b
  - rotation_offsets: every such k
  - rotate_left: the rotation itself
  - minimal_period: smallest cyclic period (number of distinct rotations)
"""

from typing import Callable, Dict, List, Optional, Sequence

from ..core.registry import param_registry
from .prefix import kmp_find, z_find, prefix_function

_PRIMITIVES: Dict[str, Callable[[Sequence, Sequence], int]] = {
    "kmp": kmp_find,
    "z": z_find,
}

# Names and default come from the registry; each must have a primitive
_SEARCHES = {name: _PRIMITIVES[name] for name in param_registry()["searches"]}
DEFAULT_SEARCH = param_registry()["default_search"]

# Sequence types with slicing and + that keep their own type
_CONCATENABLE = (str, bytes, bytearray, list, tuple)


def is_rotation(a: Sequence, b: Sequence, search: str = DEFAULT_SEARCH) -> bool:
    """
    Return True iff b is a cyclic rotation of a.

    Args:
        a: First sequence.
        b: Second sequence (same element type as a).
        search: Linear search primitive, "kmp" (default) or "z".

    Returns:
        bool: True iff some 0 <= k < len(a) has rotate_left(a, k) == b.
              Two empty sequences are rotations of each other.
              A length mismatch is False without further work.

    Raises:
        SearchError: If search names no known primitive.

    Complexity:
        O(n) time, O(n) extra space (n = len(a)).

    Examples:
        >>> is_rotation("abc", "bca")
        True
        >>> is_rotation("abcdef", "abcfed")
        False
        >>> is_rotation("", "")
        True
    """
    return rotation_offset(a, b, search=search) is not None


def rotation_offset(
    a: Sequence,
    b: Sequence,
    search: str = DEFAULT_SEARCH
) -> Optional[int]:
    """
    Return the smallest k in [0, len(a)) with rotate_left(a, k) == b.

    Returns:
        int | None: The offset, 0 for two empty sequences, None if b is
                    not a rotation of a.

    Raises:
        SearchError: If search names no known primitive.

    Algorithm:
        1. Length mismatch -> None (O(1))
        2. Form a + a once (O(n))
        3. Linear search for b in a + a (O(n))

    The first hit always lies in [0, n): the window at n equals a, which
    also sits at 0.
    """
    find = _search_for(search)

    n = len(a)
    if n != len(b):
        return None
    if n == 0:
        return 0

    i = find(_doubled(a), b)
    return i if i >= 0 else None


def rotation_offsets(a: Sequence, b: Sequence) -> List[int]:
    """
    Return every k in [0, len(a)) with rotate_left(a, k) == b, ascending.

    The offsets form the coset k0 + p*Z restricted to [0, n), where k0 is
    the smallest offset and p = minimal_period(a).

    Returns:
        list[int]: [] if b is not a rotation, [0] for two empty sequences.

    Examples:
        >>> rotation_offsets("abab", "baba")
        [1, 3]
    """
    k0 = rotation_offset(a, b)
    if k0 is None:
        return []

    n = len(a)
    if n == 0:
        return [0]

    return list(range(k0, n, minimal_period(a)))


def rotate_left(a: Sequence, k: int) -> Sequence:
    """
    Move the first k elements of a to its end. Negative k rotates right.

    Returns a new sequence of the same type as a for str, bytes, bytearray,
    list and tuple, and a list for any other sequence (e.g. range).
    a is not mutated.

    Examples:
        >>> rotate_left("abcdef", 1)
        'bcdefa'
        >>> rotate_left("abcdef", -1)
        'fabcde'
    """
    if not isinstance(a, _CONCATENABLE):
        a = list(a)

    n = len(a)
    if n == 0:
        return a[:0]

    k = k % n
    return a[k:] + a[:k]


def minimal_period(a: Sequence) -> int:
    """
    Return the smallest p >= 1 with p | len(a) and rotate_left(a, p) == a.

    This is the number of distinct rotations of a. 0 for an empty sequence.

    From the KMP prefix function: t = n - pi[n-1] is the smallest shift
    under which a overlaps itself; a is an exact repetition iff t | n.

    Examples:
        >>> minimal_period("abcabc")
        3
        >>> minimal_period("abcab")
        5
    """
    n = len(a)
    if n == 0:
        return 0

    pi = prefix_function(a)
    t = n - pi[n - 1]

    if n % t == 0:
        return t
    return n


def search_names() -> List[str]:
    """Known search primitive names, sorted."""
    return sorted(_SEARCHES)


def _search_for(search: str) -> Callable[[Sequence, Sequence], int]:
    try:
        return _SEARCHES[search]
    except KeyError:
        raise SearchError(
            f"Unknown search '{search}'. Known: {', '.join(search_names())}"
        ) from None


def _doubled(a: Sequence) -> Sequence:
    """Concatenate a with itself; sequences without + are copied to a list."""
    if isinstance(a, _CONCATENABLE):
        return a + a
    items = list(a)
    return items + items


class SearchError(ValueError):
    """Raised when a search primitive name is not known."""
    pass
