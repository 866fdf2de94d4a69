"""Byte coercion and XOR helpers shared by keys and signatures."""

from __future__ import annotations

import hmac
from typing import Any, Iterable


def coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` / `memoryview` (returned as immutable `bytes`)
      - Iterables of integers in [0, 255]
      - Hex strings, with or without a '0x' prefix (e.g. "0xdeadbeef" or "deadbeef")

    Raises:
      ValueError / TypeError if conversion is not possible or out-of-range.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        # bytes.fromhex handles empty string and validates hex characters
        return bytes.fromhex(value.removeprefix("0x"))
    if isinstance(value, Iterable):
        # bytes(bytearray(iterable)) enforces each element is an int in 0..255
        return bytes(bytearray(value))
    raise TypeError(f"Cannot interpret {type(value).__name__} as bytes")


def xor_into(acc: bytearray, data: bytes) -> None:
    """XOR `data` into `acc` in place. Both must have the same length."""
    if len(acc) != len(data):
        raise ValueError(f"Cannot XOR {len(data)} bytes into a {len(acc)}-byte accumulator")
    for i, b in enumerate(data):
        acc[i] ^= b


def is_zero(data: bytes | bytearray) -> bool:
    """
    Return whether every byte of `data` is zero.

    Runs in time independent of where the first non-zero byte sits.
    """
    return hmac.compare_digest(bytes(data), bytes(len(data)))
