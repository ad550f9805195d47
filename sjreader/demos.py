"""Small example programs built on :class:`~sjreader.reader.Reader`."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Sequence

from .reader import JSONReadError, Reader, ValueType

ARRAY_TEXT = '[ "cat", "dog", "fox", "owl" ]'

PERSON_TEXT = (
    "{\n"
    '    "first_name": "John",\n'
    '    "last_name": "Smith",\n'
    '    "age": 27,\n'
    '    "address": {\n'
    '        "street_address": "21 2nd Street",\n'
    '        "city": "New York",\n'
    '        "state": "NY",\n'
    "    },"
    '    "phone_numbers": [ "212 555-1234", "646 555-4567" ],\n'
    "}"
)

RECT_TEXT = '{ "x": 10, "y": 20, "w": 30, "h": 40 }'

_PRINTED_KEYS = frozenset({"first_name", "last_name", "age"})


@dataclass
class Rect:
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


def _atoi(text: str) -> int:
    """Parse a leading integer the way C's ``atoi`` does; 0 if there is none."""
    text = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ("0" <= ch <= "9"):
            break
        digits += ch
    return sign * int(digits) if digits else 0


def array_items(text: str) -> List[str]:
    """Return the raw text of each element of the top-level array."""
    reader = Reader(text)
    arr = reader.read()
    return [value.text() for value in reader.iter_array(arr)]


def _person_lines(text: str) -> Iterator[str]:
    reader = Reader(text)
    obj = reader.read()
    for key, value in reader.iter_object(obj):
        name = key.text()
        if name in _PRINTED_KEYS:
            yield value.text()
        elif name == "phone_numbers":
            for number in reader.iter_array(value):
                yield number.text()
        else:
            yield f"(discarded '{name}')"


def person_fields(text: str) -> List[str]:
    """Return the lines the person demo prints; unhandled keys are discarded."""
    return list(_person_lines(text))


def load_rect(text: str) -> Rect:
    """Fill a :class:`Rect` from the ``x``, ``y``, ``w`` and ``h`` keys."""
    rect = Rect()
    reader = Reader(text)
    obj = reader.read()
    for key, value in reader.iter_object(obj):
        name = key.text()
        if name in ("x", "y", "w", "h"):
            setattr(rect, name, _atoi(value.text()))
    return rect


def _run_array() -> int:
    reader = Reader(ARRAY_TEXT)
    try:
        arr = reader.read()
        print(f"Array type: {int(arr.type)}, depth: {arr.depth}")
        for index, value in enumerate(reader.iter_array(arr)):
            print(f"Item {index}: '{value.text()}'")
    except JSONReadError as exc:
        print(f"Error: {exc}")
        return 1
    print("End of array reached")
    return 0


def _run_object() -> int:
    try:
        for line in _person_lines(PERSON_TEXT):
            print(line)
    except JSONReadError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


def _run_rect() -> int:
    try:
        rect = load_rect(RECT_TEXT)
    except JSONReadError as exc:
        print(f"Error: {exc}")
        return 1
    print(f"rect: {{ {rect.x}, {rect.y}, {rect.w}, {rect.h} }}")
    return 0


_DEMOS: Dict[str, Callable[[], int]] = {
    "array": _run_array,
    "object": _run_object,
    "rect": _run_rect,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the named demos (``array``, ``object``, ``rect``), or all of them."""
    args = list(sys.argv[1:] if argv is None else argv)
    names = args or list(_DEMOS)
    for name in names:
        demo = _DEMOS.get(name)
        if demo is None:
            print(f"error: unknown demo '{name}'", file=sys.stderr)
            return 2
        status = demo()
        if status:
            return status
    return 0


if __name__ == "__main__":
    raise SystemExit(main())