"""
Parameter Registry

Frozen constants for rotation checking: search primitives, hashing,
byte framing and command-line exit codes.

No environment lookups, no config files, no optionals.
"""

__registry_version__ = "1.0"


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by rotcheck.

    Keys and values are JSON-serializable primitives or lists/dicts.
    This registry is hashed into every section receipt to prove parametric consistency.

    A fresh dict is built on each call; callers may not rely on mutating it.

    Returns:
        dict: Frozen parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        "version": __registry_version__,

        # Linear substring searches, in preference order
        "default_search": "kmp",
        "searches": ["kmp", "z"],

        # Empty pattern is always present at this offset
        "empty_pattern_offset": 0,

        # Hashing
        "hash_algo": "BLAKE3",

        # Byte frame tag and element kinds for sequence serialization
        "byte_frame_tags": {
            "SEQUENCE": "SEQ1"
        },
        "element_kinds": {
            "str": "S",
            "bytes": "B",
            "int": "I"
        },

        # Command-line exit codes
        "exit_codes": {
            "rotation": 0,
            "not_rotation": 1,
            "usage": 2,
            "nondeterministic": 3
        }
    }

    required_keys = {
        "version", "default_search", "searches", "empty_pattern_offset",
        "hash_algo", "byte_frame_tags", "element_kinds", "exit_codes"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass
