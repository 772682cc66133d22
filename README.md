# sigtalk

The message format for a chat in which text travels from one process to
another one bit at a time, each bit carried by a single signal, together with
a few small text, buffer and list helpers.

## Installing

```
pip install .
```

## Wire format

`sigtalk.protocol` defines how a message is turned into bits and back:

1. its length in bytes, as a 32-bit unsigned integer, most significant bit
   first;
2. each byte of the message, most significant bit first;
3. a closing zero byte.

- `encode_length(length)` returns the 32 bits of a length; a value outside
  the unsigned 32-bit range raises `ValueError`.
- `encode_byte(value)` returns the 8 bits of a byte; a value outside 0–255
  raises `ValueError`.
- `encode_message(message)` yields every bit of a whole message. Text is
  encoded as UTF-8, and the message ends at its first NUL byte, if any.
- `Receiver` reassembles messages. Give it one bit at a time with
  `feed(bit)`; it returns the message as bytes once the closing byte has
  arrived, and `None` before that. Anything other than 0 or 1 raises
  `ValueError`. Its `active` property tells whether the length has been
  received, and `length` holds that length (or `None` while it is still
  arriving). After a message is delivered the receiver is ready for the
  next one.

```python
from sigtalk.protocol import Receiver, encode_message

receiver = Receiver()
for bit in encode_message(b"hi"):
    message = receiver.feed(bit)
print(message)  # b'hi'
```

The module also names the pause meant between two bits,
`PAUSE_MICROSECONDS` (100).

## Helpers

- `sigtalk.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower` for single ASCII characters, given as
  an integer code or a one-character string.
- `sigtalk.membuf`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`,
  `memchr` and `memcmp` over `bytearray` and other byte buffers. A count
  larger than the buffer raises `ValueError`.
- `sigtalk.strutil`: `atoi` (wraps to a signed 32-bit integer), `itoa`,
  `split` (drops empty fields), `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy` and `strlcat` (each returns the resulting text and the length it
  tried to create), `substr`, `strjoin`, `strtrim`, `strmapi` and
  `striteri`. Searches return an index, or `None` when nothing is found.
- `sigtalk.linkedlist`: `LinkedList`, a singly linked list of `Node`s with
  `append`, `prepend`, `last`, `pop_front`, `clear`, `for_each` and `map`;
  `pop_front`, `clear` and `map` take an optional `release` callback that is
  given each removed content.
- `sigtalk.lines`: `LineReader(fd, buffer_size=10)` reads a file descriptor
  in chunks and returns one line at a time from `read_line()` (as bytes with
  the trailing newline, or `None` at end of input); it is also iterable.
  `iter_lines(fd, buffer_size=10)` yields every line.

## What it does not do

The package has no commands and sends no signals. There is no server that
listens for messages and no client that sends them: it provides the
encoding and decoding of messages, and moving the bits between processes is
left to the caller.

## Tests

```
pip install ".[test]"
pytest
```