"""Bit-level wire format for messages carried one signal at a time.

A message goes out as its byte length in 32 bits, most significant bit
first, then every byte of the message in 8 bits, most significant bit
first, then a terminating NUL byte. The receiver collects length + 1 bytes
and delivers the text up to the first NUL.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Union

LENGTH_BITS = 32
CHAR_BITS = 8
PAUSE_MICROSECONDS = 100

_MAX_LENGTH = (1 << LENGTH_BITS) - 1


def _bits(value: int, width: int) -> List[int]:
    return [(value >> shift) & 1 for shift in reversed(range(width))]


def encode_length(length: int) -> List[int]:
    """Return the 32 bits of ``length``, most significant first."""
    if not 0 <= length <= _MAX_LENGTH:
        raise ValueError(f"length must fit in {LENGTH_BITS} unsigned bits, got {length}")
    return _bits(length, LENGTH_BITS)


def encode_byte(value: int) -> List[int]:
    """Return the 8 bits of ``value``, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value must be between 0 and 255, got {value}")
    return _bits(value, CHAR_BITS)


def encode_message(message: Union[str, bytes]) -> Iterator[int]:
    """Yield every bit of ``message`` as sent on the wire.

    Text is encoded as UTF-8. The message ends at its first NUL byte, if any.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.split(b"\0", 1)[0]
    yield from encode_length(len(data))
    for value in data:
        yield from encode_byte(value)
    yield from encode_byte(0)


class Receiver:
    """Reassembles messages from a stream of bits."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._length = 0
        self._length_bits = 0
        self._byte = 0
        self._byte_bits = 0
        self._data = bytearray()

    @property
    def active(self) -> bool:
        """True once the length has been received and bytes are expected."""
        return self._length_bits == LENGTH_BITS

    @property
    def length(self) -> Optional[int]:
        """The announced message length, or None while it is still arriving."""
        return self._length if self.active else None

    def feed(self, bit: int) -> Optional[bytes]:
        """Take one bit; return the message when it is complete, else None."""
        if isinstance(bit, bool) or bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        if not self.active:
            self._length = (self._length << 1) | bit
            self._length_bits += 1
            return None
        self._byte = (self._byte << 1) | bit
        self._byte_bits += 1
        if self._byte_bits < CHAR_BITS:
            return None
        self._data.append(self._byte)
        self._byte = 0
        self._byte_bits = 0
        if len(self._data) < self._length + 1:
            return None
        message = bytes(self._data).split(b"\0", 1)[0]
        self._reset()
        return message