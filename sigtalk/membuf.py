"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_span(name: str, length: int, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name}: count must not be negative")
    if n > length:
        raise ValueError(f"{name}: count {n} exceeds buffer length {length}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (low 8 bits) and return it."""
    _check_span("memset", len(buf), n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``."""
    _check_span("memcpy", len(src), n)
    _check_span("memcpy", len(dest), n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source were copied out first.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("memmove: offsets must not be negative")
    _check_span("memmove", len(buf) - src_offset, n)
    _check_span("memmove", len(buf) - dest_offset, n)
    if dest_offset != src_offset:
        buf[dest_offset:dest_offset + n] = buf[src_offset:src_offset + n]
    return buf


def memchr(data: Bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within the first ``n`` bytes, or None."""
    _check_span("memchr", len(data), n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: Bytes, second: Bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_span("memcmp", len(first), n)
    _check_span("memcmp", len(second), n)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0