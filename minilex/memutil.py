"""Byte-buffer helpers working on bytes and bytearray objects."""

from __future__ import annotations

from typing import Optional, Union

ByteData = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *sizes: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for size in sizes:
        if length > size:
            raise ValueError(f"length {length} exceeds buffer size {size}")


def bzero(buf: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to zero and return it."""
    return memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a new zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: ByteData, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``length`` bytes.

    ``value`` is reduced to its low byte. Returns None when there is no match.
    """
    _check_length(length, len(data))
    target = value & 0xFF
    for index, byte in enumerate(bytes(data[:length])):
        if byte == target:
            return index
    return None


def memcmp(a: ByteData, b: ByteData, length: int) -> int:
    """Compare the first ``length`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_length(length, len(a), len(b))
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: ByteData, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    _check_length(length, len(dst), len(src))
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buf: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buf`` from ``src_offset`` to ``dst_offset``.

    Overlapping regions are handled correctly. Returns ``buf``.
    """
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length)
    if dst_offset + length > len(buf) or src_offset + length > len(buf):
        raise ValueError("region extends beyond the buffer")
    buf[dst_offset:dst_offset + length] = bytes(buf[src_offset:src_offset + length])
    return buf


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with the low byte of ``value``."""
    _check_length(length, len(buf))
    buf[:length] = bytes([value & 0xFF]) * length
    return buf