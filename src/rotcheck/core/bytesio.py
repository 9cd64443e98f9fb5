"""
Byte Serialization (Big-Endian)

Stable, deterministic byte framing of sequences for hashing.

Frame layout (frozen):
  - 4 ASCII bytes tag: b"SEQ1"
  - 1 ASCII byte element kind: b"S" (str), b"B" (bytes), b"I" (ints)
  - 4 bytes length (uint32, big-endian), counted in elements
  - Payload:
      S: UTF-8 encoding of the string
      B: the raw bytes
      I: each element as a signed 64-bit big-endian integer

No timestamps, no padding.
"""

from typing import Sequence

_TAG = b"SEQ1"
_MAX_LEN = 0xFFFFFFFF
_INT_MIN = -(1 << 63)
_INT_MAX = (1 << 63) - 1


def serialize_sequence(seq: Sequence) -> bytes:
    """
    Encode a sequence as a deterministic byte stream for hashing.

    Args:
        seq: str, bytes, bytearray, or a sequence of ints.

    Returns:
        bytes: Framed serialization.

    Raises:
        SerializationError: If the sequence is too long, holds an element that
            is not an int (for non-str, non-bytes input), or holds an int
            outside the int64 range.

    Examples:
        >>> serialize_sequence("ab")
        b'SEQ1S\\x00\\x00\\x00\\x02ab'
        >>> serialize_sequence(b"")
        b'SEQ1B\\x00\\x00\\x00\\x00'
    """
    if len(seq) > _MAX_LEN:
        raise SerializationError(f"Sequence too long: {len(seq)} > {_MAX_LEN}")

    stream = bytearray()
    stream.extend(_TAG)

    if isinstance(seq, str):
        stream.extend(b"S")
        stream.extend(len(seq).to_bytes(4, byteorder='big'))
        stream.extend(seq.encode('utf-8', errors='surrogatepass'))
        return bytes(stream)

    if isinstance(seq, (bytes, bytearray)):
        stream.extend(b"B")
        stream.extend(len(seq).to_bytes(4, byteorder='big'))
        stream.extend(seq)
        return bytes(stream)

    stream.extend(b"I")
    stream.extend(len(seq).to_bytes(4, byteorder='big'))
    for i, item in enumerate(seq):
        # bool is an int subclass but is not a sequence element we frame
        if isinstance(item, bool) or not isinstance(item, int):
            raise SerializationError(
                f"Element {i} has unsupported type {type(item).__name__}; expected int"
            )
        if item < _INT_MIN or item > _INT_MAX:
            raise SerializationError(f"Element {i} out of int64 range: {item}")
        stream.extend(item.to_bytes(8, byteorder='big', signed=True))

    return bytes(stream)


def serialize_pair(a: Sequence, b: Sequence) -> bytes:
    """Concatenate the frames of two sequences (a first)."""
    return serialize_sequence(a) + serialize_sequence(b)


class SerializationError(Exception):
    """Raised when serialization encounters an unsupported element or length."""
    pass
