"""Bit-level message encoding and decoding, with small text, buffer and list helpers."""

__version__ = "1.0.0"