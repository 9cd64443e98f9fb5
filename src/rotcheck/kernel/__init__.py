"""
Rotation Kernel

Pure operations on sequences: linear substring search and rotation checks.

Components:
  - prefix: prefix_function, kmp_find, kmp_find_all, z_function, z_find
  - rotation: is_rotation, rotation_offset, rotation_offsets, rotate_left, minimal_period
  - naive: rotate-and-compare oracle (differential checks only)
"""

from .prefix import (
    prefix_function,
    kmp_find,
    kmp_find_all,
    z_function,
    z_find
)
from .rotation import (
    DEFAULT_SEARCH,
    is_rotation,
    rotation_offset,
    rotation_offsets,
    rotate_left,
    minimal_period,
    search_names,
    SearchError
)
from .naive import (
    is_rotation_naive,
    rotation_offset_naive,
    rotation_offsets_naive
)

__all__ = [
    # Search
    "prefix_function",
    "kmp_find",
    "kmp_find_all",
    "z_function",
    "z_find",

    # Rotation
    "DEFAULT_SEARCH",
    "is_rotation",
    "rotation_offset",
    "rotation_offsets",
    "rotate_left",
    "minimal_period",
    "search_names",
    "SearchError",

    # Oracle
    "is_rotation_naive",
    "rotation_offset_naive",
    "rotation_offsets_naive",

    # Receipts
    "rotation_receipts",
]


def rotation_receipts(section_label: str, fixtures: list[dict]) -> dict:
    """
    Generate receipts for rotation checks using fixed fixtures.

    Every pair runs through each registered linear search and through the
    naive oracle; the receipt records whether they all agree.

    Args:
        section_label: ASCII identifier (e.g., "rotation-cli").
        fixtures: List of dicts with keys:
            - "label": str (description)
            - "a": first sequence
            - "b": second sequence

    Returns:
        dict: Receipt digest with one entry per fixture under
              "rotation_checks" and the overall "agreement_ok" flag.
    """
    from ..core import Receipts, blake3_hash, param_registry, serialize_pair

    registry = param_registry()
    searches = registry["searches"]
    default_search = registry["default_search"]

    receipts = Receipts(section_label)
    receipts.put("searches", searches)
    receipts.put("default_search", default_search)

    checks = []
    for fix in fixtures:
        a, b = fix["a"], fix["b"]

        by_search = {name: rotation_offset(a, b, search=name) for name in searches}
        oracle_offset = rotation_offset_naive(a, b)
        offsets = rotation_offsets(a, b)

        agree = (
            all(off == oracle_offset for off in by_search.values())
            and offsets == rotation_offsets_naive(a, b)
        )

        checks.append({
            "label": fix["label"],
            "pair_hash": blake3_hash(serialize_pair(a, b)),
            "len_a": len(a),
            "len_b": len(b),
            "is_rotation": by_search[default_search] is not None,
            "offset": by_search[default_search],
            "offsets": offsets,
            "minimal_period": minimal_period(a),
            "agree": agree
        })

    receipts.put("rotation_checks", checks)
    receipts.put("agreement_ok", all(c["agree"] for c in checks))

    return receipts.digest()
