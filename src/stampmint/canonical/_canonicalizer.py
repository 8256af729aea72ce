"""
Deterministic byte encoding of the (private key, timestamp, context) triple.

Every value is written with a type tag and, where it has one, a length
prefix, so distinct inputs cannot run into each other:

    N;                null
    b:0; / b:1;       booleans
    i:<n>;            integers
    d:<repr>;         floats
    s:<len>:<bytes>;  text (UTF-8) and bytes
    a:<n>:[...]       lists and tuples
    m:<n>:{...}       mappings, in insertion order

The triple is written as a three element list. At the top level an empty
list, tuple or mapping is written as null so that "no context" and "empty
context" are interchangeable.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stampmint.schema import ContextData

# Enough for any 64-bit epoch value.
MAX_TIMESTAMP_DIGITS = 20


def is_valid_timestamp(value: Any) -> bool:
    """A non-negative int, or a non-empty string of ASCII digits, of at most 20 digits."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return 0 <= value < 10**MAX_TIMESTAMP_DIGITS
    if isinstance(value, str):
        return (
            value.isascii()
            and value.isdigit()
            and len(value) <= MAX_TIMESTAMP_DIGITS
        )
    return False


def normalize_timestamp(value: int | str) -> int:
    return int(value)


def canonicalize(
    private_key: str | bytes | int,
    timestamp: int | str,
    context: ContextData = None,
) -> bytes:
    out: list[bytes] = [b"a:3:["]
    _write_bytes(_key_bytes(private_key), out)
    _write_int(normalize_timestamp(timestamp), out)
    if _is_empty_collection(context):
        context = None
    _write_value(context, out, set())
    out.append(b"]")
    return b"".join(out)


def _key_bytes(private_key: str | bytes | int) -> bytes:
    if isinstance(private_key, (bytes, bytearray)):
        return bytes(private_key)
    return str(private_key).encode("utf-8")


def _is_empty_collection(value: Any) -> bool:
    return isinstance(value, (list, tuple, Mapping)) and len(value) == 0


def _write_value(value: Any, out: list[bytes], parents: set[int]) -> None:
    if isinstance(value, (list, tuple, Mapping)):
        if id(value) in parents:
            raise TypeError("Context data must not contain itself")
        parents.add(id(value))
        try:
            _write_collection(value, out, parents)
        finally:
            parents.discard(id(value))
        return

    if value is None:
        out.append(b"N;")
    elif isinstance(value, bool):
        out.append(b"b:1;" if value else b"b:0;")
    elif isinstance(value, int):
        _write_int(value, out)
    elif isinstance(value, float):
        out.append(f"d:{value!r};".encode("ascii"))
    elif isinstance(value, str):
        _write_bytes(value.encode("utf-8"), out)
    elif isinstance(value, (bytes, bytearray)):
        _write_bytes(bytes(value), out)
    else:
        raise TypeError(f"Unsupported context data type: {type(value).__name__}")


def _write_collection(value: Any, out: list[bytes], parents: set[int]) -> None:
    if isinstance(value, (list, tuple)):
        out.append(f"a:{len(value)}:[".encode("ascii"))
        for item in value:
            _write_value(item, out, parents)
        out.append(b"]")
    else:
        out.append(f"m:{len(value)}:{{".encode("ascii"))
        for key, item in value.items():
            if isinstance(key, bool) or not isinstance(key, (str, int)):
                raise TypeError(
                    f"Context mapping keys must be str or int, got {type(key).__name__}"
                )
            _write_value(key, out, parents)
            _write_value(item, out, parents)
        out.append(b"}")


def _write_int(value: int, out: list[bytes]) -> None:
    out.append(f"i:{value};".encode("ascii"))


def _write_bytes(value: bytes, out: list[bytes]) -> None:
    out.append(f"s:{len(value)}:".encode("ascii"))
    out.append(value)
    out.append(b";")
