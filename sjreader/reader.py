"""A small pull reader that walks JSON text one token at a time."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, Tuple, Union

MAX_DEPTH = 1_000_000

_SKIPPED = frozenset(" \n\r\t:,")
_NUMBER_START = frozenset("-0123456789")
_NUMBER_CONT = frozenset("0123456789eE.-+")
_LITERALS = ("null", "true", "false")


class ValueType(IntEnum):
    """Kinds of token produced by :class:`Reader`."""

    ERROR = 0
    END = 1
    ARRAY = 2
    OBJECT = 3
    NUMBER = 4
    STRING = 5
    BOOL = 6
    NULL = 7


class JSONReadError(ValueError):
    """Raised when the input cannot be tokenised."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset


@dataclass(frozen=True)
class Value:
    """A token: its kind and the span of the source text it covers.

    For strings the span excludes the surrounding quotes and escapes are
    left as written. For arrays and objects the span is the opening bracket
    and ``depth`` is the nesting level the container opened.
    """

    type: ValueType
    start: int
    end: int
    depth: int
    source: str = field(repr=False, compare=False)

    def text(self) -> str:
        """Return the raw source text of the token."""
        return self.source[self.start:self.end]


class Reader:
    """Reads tokens from JSON text without building a document tree."""

    def __init__(self, data: Union[str, bytes, bytearray]) -> None:
        if isinstance(data, (bytes, bytearray, memoryview)):
            data = bytes(data).decode("utf-8")
        self.data: str = data
        self.pos = 0
        self.depth = 0

    def _error(self, message: str) -> JSONReadError:
        return JSONReadError(message, self.pos)

    def read(self) -> Value:
        """Return the next token, skipping whitespace, colons and commas."""
        data = self.data
        size = len(data)
        while True:
            if self.pos >= size:
                raise self._error("unexpected eof")
            start = self.pos
            ch = data[start]

            if ch in _SKIPPED:
                self.pos += 1
                continue

            if ch in _NUMBER_START:
                pos = start
                while pos < size and data[pos] in _NUMBER_CONT:
                    pos += 1
                self.pos = pos
                return Value(ValueType.NUMBER, start, pos, self.depth, data)

            if ch == '"':
                return self._read_string()

            if ch in "{[":
                if self.depth > MAX_DEPTH:
                    raise self._error("max depth reached!")
                self.depth += 1
                self.pos += 1
                kind = ValueType.OBJECT if ch == "{" else ValueType.ARRAY
                return Value(kind, start, self.pos, self.depth, data)

            if ch in "}]":
                self.depth -= 1
                if self.depth < 0:
                    raise self._error(f"stray '{ch}'")
                self.pos += 1
                return Value(ValueType.END, start, self.pos, self.depth, data)

            if ch in "ntf":
                kind = ValueType.NULL if ch == "n" else ValueType.BOOL
                for word in _LITERALS:
                    if data.startswith(word, start):
                        self.pos = start + len(word)
                        return Value(kind, start, self.pos, self.depth, data)

            raise self._error("unknown token")

    def _read_string(self) -> Value:
        data = self.data
        size = len(data)
        pos = self.pos + 1
        start = pos
        while True:
            if pos >= size:
                self.pos = pos
                raise self._error("unclosed string")
            ch = data[pos]
            if ch == '"':
                break
            if ch == "\\":
                pos += 1
            if pos < size:
                pos += 1
        self.pos = pos + 1
        return Value(ValueType.STRING, start, pos, self.depth, data)

    def _discard_until(self, depth: int) -> None:
        while self.depth != depth:
            try:
                self.read()
            except JSONReadError:
                break

    def iter_array(self, array: Value) -> Iterator[Value]:
        """Yield the elements of ``array``.

        Any nested content of an element that the caller left unread is
        skipped before the next element is read.
        """
        while True:
            self._discard_until(array.depth)
            value = self.read()
            if value.type is ValueType.END:
                return
            yield value

    def iter_object(self, obj: Value) -> Iterator[Tuple[Value, Value]]:
        """Yield ``(key, value)`` pairs of ``obj``, skipping unread content."""
        while True:
            self._discard_until(obj.depth)
            key = self.read()
            if key.type is ValueType.END:
                return
            value = self.read()
            if value.type is ValueType.END:
                raise self._error("unexpected object end")
            yield key, value

    def location(self) -> Tuple[int, int]:
        """Return the 1-based ``(line, column)`` of the current position."""
        prefix = self.data[:self.pos]
        line = prefix.count("\n") + 1
        column = len(prefix) - (prefix.rfind("\n") + 1) + 1
        return line, column