"""String helpers: parsing, searching, bounded copying, splitting and mapping.

Searches return an index into the text, or None where nothing was found.
Bounded copies return the resulting string together with the length the
operation tried to create, so truncation can be detected by the caller.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_INT_BITS = 32
_WHITESPACE = " \t\n\v\f\r"


def _as_char(c: CharLike) -> str:
    """Normalise a one-character string or a character code to a string.

    Integer codes are reduced to their low eight bits, as an unsigned char.
    """
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer."""
    span = 1 << _INT_BITS
    value %= span
    return value - span if value >= span // 2 else value


def atoi(text: str) -> int:
    """Parse a decimal integer the way ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted and digits are
    read until the first non-digit. Text without digits yields 0. The result
    wraps to a signed 32-bit integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def split(text: str, sep: CharLike) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty fields."""
    separator = _as_char(sep)
    if separator == "\0":
        return [text] if text else []
    return [part for part in text.split(separator) if part]


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``.

    Searching for the NUL character finds the end of the text.
    """
    target = _as_char(c)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``.

    Searching for the NUL character finds the end of the text.
    """
    target = _as_char(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first differing pair, with the end of a
    string counting as code 0, or 0 when the compared parts are equal.
    """
    _non_negative("strncmp: n", n)
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _non_negative("strnstr: length", length)
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the length of ``src``; the copy was truncated
    when that length is ``size`` or more.
    """
    _non_negative("strlcpy: size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters including the terminator.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` does not exceed ``len(dst)`` nothing is appended
    and the length reported is ``len(src) + size``.
    """
    _non_negative("strlcat: size", size)
    dst_len = len(dst)
    src_len = len(src)
    if size <= dst_len:
        return dst, src_len + size
    return dst + src[:size - 1 - dst_len], dst_len + src_len


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    _non_negative("substr: start", start)
    _non_negative("substr: length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of the two strings."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("strjoin expects two strings")
    return first + second


def strtrim(text: str, charset: Optional[str]) -> str:
    """Strip characters in ``charset`` from both ends; None leaves the text as is."""
    if charset is None:
        return text
    return text.strip(charset)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` on every element of ``chars`` in place.

    A non-None result replaces the element. The same sequence is returned.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
    return chars