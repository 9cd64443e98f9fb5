"""
Linear Substring Search (KMP, Z-function)

Exact, equality-only substring search over arbitrary indexable sequences.

Components:
  - prefix_function: KMP failure table
  - kmp_find / kmp_find_all: first / every occurrence via KMP
  - z_function / z_find: Z-array and first occurrence via Z-algorithm

The empty pattern is present at offset 0 of every text (including the empty text).
"""

from typing import List, Sequence


def prefix_function(s: Sequence) -> List[int]:
    """
    Compute KMP prefix function for a sequence.

    The prefix function pi[i] is the length of the longest proper prefix
    of s[0..i] that is also a suffix of s[0..i].

    Args:
        s: Sequence (str, bytes, list, tuple, ...). Elements compared with ==.

    Returns:
        list[int]: Prefix function values pi[0..len(s)-1].

    Textbook KMP (Knuth-Morris-Pratt) prefix function.
    See Cormen et al., "Introduction to Algorithms", section 32.4.

    Complexity:
        O(len(s)) time, O(len(s)) space.

    Examples:
        >>> prefix_function("abab")
        [0, 0, 1, 2]
        >>> prefix_function("")
        []
    """
    n = len(s)
    if n == 0:
        return []

    pi = [0] * n
    k = 0  # length of previous longest prefix suffix

    for q in range(1, n):
        # While we have a mismatch and k > 0, fall back
        while k > 0 and s[k] != s[q]:
            k = pi[k - 1]

        if s[k] == s[q]:
            k += 1

        pi[q] = k

    return pi


def kmp_find(text: Sequence, pattern: Sequence) -> int:
    """
    Return the first offset at which pattern occurs in text, or -1.

    Args:
        text: Sequence to search in.
        pattern: Contiguous block to look for.

    Returns:
        int: Smallest i with text[i:i+len(pattern)] == pattern, else -1.
             0 for an empty pattern.

    Complexity:
        O(len(text) + len(pattern)) time, O(len(pattern)) extra space.

    Examples:
        >>> kmp_find("abcabc", "bca")
        1
        >>> kmp_find("abc", "abd")
        -1
    """
    m = len(pattern)
    if m == 0:
        return 0

    pi = prefix_function(pattern)
    k = 0  # number of pattern elements currently matched

    for i, x in enumerate(text):
        while k > 0 and pattern[k] != x:
            k = pi[k - 1]

        if pattern[k] == x:
            k += 1

        if k == m:
            return i - m + 1

    return -1


def kmp_find_all(text: Sequence, pattern: Sequence) -> List[int]:
    """
    Return every (possibly overlapping) offset of pattern in text, ascending.

    An empty pattern occurs at every offset 0..len(text).

    Examples:
        >>> kmp_find_all("aaaa", "aa")
        [0, 1, 2]
    """
    m = len(pattern)
    if m == 0:
        return list(range(len(text) + 1))

    pi = prefix_function(pattern)
    offsets = []
    k = 0

    for i, x in enumerate(text):
        while k > 0 and pattern[k] != x:
            k = pi[k - 1]

        if pattern[k] == x:
            k += 1

        if k == m:
            offsets.append(i - m + 1)
            # Continue from the longest border to catch overlaps
            k = pi[k - 1]

    return offsets


def z_function(s: Sequence) -> List[int]:
    """
    Compute the Z-array: z[i] is the length of the longest common prefix
    of s and s[i:]. By convention z[0] = len(s).

    Complexity:
        O(len(s)) time, O(len(s)) space.

    Examples:
        >>> z_function("aabxaab")
        [7, 1, 0, 0, 3, 1, 0]
    """
    n = len(s)
    if n == 0:
        return []

    z = [0] * n
    z[0] = n
    left, right = 0, 0  # rightmost window [left, right) matching a prefix

    for i in range(1, n):
        if i < right:
            z[i] = min(right - i, z[i - left])

        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1

        if i + z[i] > right:
            left, right = i, i + z[i]

    return z


class _Sentinel:
    """Separator that compares unequal to every element, itself included."""

    def __eq__(self, other):
        return False

    def __ne__(self, other):
        return True

    __hash__ = object.__hash__

    def __repr__(self):
        return "<sentinel>"


def z_find(text: Sequence, pattern: Sequence) -> int:
    """
    Return the first offset at which pattern occurs in text, or -1,
    using the Z-array of pattern + <sentinel> + text.

    0 for an empty pattern.

    Examples:
        >>> z_find("abcabc", "cab")
        2
    """
    m = len(pattern)
    if m == 0:
        return 0

    combined = list(pattern)
    combined.append(_Sentinel())
    combined.extend(text)

    z = z_function(combined)

    # The sentinel caps every z value past it at m
    for i in range(m + 1, len(combined)):
        if z[i] == m:
            return i - m - 1

    return -1
