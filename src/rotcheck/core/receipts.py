"""
Section Receipts & Double-Run Checker

A receipt is an ordered record of one checking section, sealed with a
BLAKE3 hash over its canonical JSON together with the parameter registry.
Two runs over the same inputs must seal to the same section_hash.

Payload values are limited to JSON primitives and containers; floats and
arbitrary objects are rejected so the bytes being hashed stay stable.
"""

import json
from typing import Any, Callable, Dict, Optional, Tuple

from .registry import param_registry
from .hashing import blake3_hash

_MISSING = "<MISSING>"


class Receipts:
    """
    Ordered key/value record for one section.

    Usage:
        r = Receipts("rotation-cli")
        r.put("offset", 1)
        digest = r.digest()  # section, version, param_registry_hash, payload, section_hash
    """

    def __init__(self, section: str):
        self.section = section
        self._entries: Dict[str, Any] = {}  # insertion order is preserved

    def put(self, key: str, value: Any) -> None:
        """
        Record value under key.

        Raises:
            ReceiptError: If key was already recorded or value holds a
                float or a non-JSON type.
        """
        if key in self._entries:
            raise ReceiptError(f"Duplicate key in receipts: '{key}'")

        _check_value(value, key)
        self._entries[key] = value

    def digest(self) -> dict:
        """Seal the section: the recorded payload plus its section_hash."""
        registry = param_registry()

        sealed = {
            "section": self.section,
            "version": registry["version"],
            "param_registry_hash": blake3_hash(_canonical_bytes(registry)),
            "payload": dict(self._entries),
        }
        sealed["section_hash"] = blake3_hash(_canonical_bytes(sealed))

        return sealed


def assert_double_run_equal(build_section_callable: Callable[[], Receipts]) -> None:
    """
    Build the section twice and require identical section_hash values.

    Raises:
        DeterminismError: Naming the first payload key (sorted) whose values
            differ between the runs.
    """
    first = build_section_callable().digest()
    second = build_section_callable().digest()

    if first["section_hash"] == second["section_hash"]:
        return

    key, value_a, value_b = _first_difference(first["payload"], second["payload"])

    raise DeterminismError(
        section=first["section"],
        first_differing_key=key,
        value_a=value_a,
        value_b=value_b,
        hash_a=first["section_hash"],
        hash_b=second["section_hash"]
    )


def _first_difference(
    payload_a: dict,
    payload_b: dict
) -> Tuple[Optional[str], Any, Any]:
    for key in sorted(set(payload_a) | set(payload_b)):
        value_a = payload_a.get(key, _MISSING)
        value_b = payload_b.get(key, _MISSING)
        if value_a != value_b:
            return key, value_a, value_b
    return None, None, None


def _canonical_bytes(obj: Any) -> bytes:
    # Sorted keys, compact separators, raw UTF-8 (lone surrogates passed through)
    text = json.dumps(obj, sort_keys=True, ensure_ascii=False, separators=(',', ':'))
    return text.encode('utf-8', errors='surrogatepass')


def _check_value(value: Any, path: str) -> None:
    if value is None or isinstance(value, (bool, int, str)):
        return

    if isinstance(value, float):
        raise ReceiptError(f"Floats forbidden in receipts (key: '{path}').")

    if isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _check_value(item, f"{path}[{i}]")
        return

    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise ReceiptError(f"Non-string dict key {k!r} in receipts (key: '{path}')")
            _check_value(v, f"{path}.{k}")
        return

    raise ReceiptError(
        f"Invalid type in receipts: {type(value).__name__} (key: '{path}')."
    )


class ReceiptError(Exception):
    """Raised on a duplicate receipt key or a value of a forbidden type."""
    pass


class DeterminismError(Exception):
    """Raised when two builds of the same section seal to different hashes."""

    def __init__(
        self,
        section: str,
        first_differing_key: str | None,
        value_a: Any,
        value_b: Any,
        hash_a: str,
        hash_b: str
    ):
        self.section = section
        self.first_differing_key = first_differing_key
        self.value_a = value_a
        self.value_b = value_b
        self.hash_a = hash_a
        self.hash_b = hash_b

        super().__init__(
            f"Section '{section}' is not deterministic: "
            f"first differing key '{first_differing_key}' "
            f"({value_a!r} != {value_b!r}), hashes {hash_a[:16]} != {hash_b[:16]}"
        )
