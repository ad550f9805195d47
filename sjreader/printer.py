"""Re-print JSON read with :class:`~sjreader.reader.Reader`, pretty or minified."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

from .reader import JSONReadError, Reader, Value, ValueType

INDENT = "    "


def _line_break(depth: int, minify: bool) -> str:
    return "" if minify else "\n" + INDENT * depth


def _render(reader: Reader, value: Value, depth: int, minify: bool) -> Iterator[str]:
    kind = value.type
    if kind is ValueType.ARRAY or kind is ValueType.OBJECT:
        is_array = kind is ValueType.ARRAY
        yield "[" if is_array else "{"
        items = reader.iter_array(value) if is_array else reader.iter_object(value)
        count = 0
        for item in items:
            if count:
                yield ","
            count += 1
            yield _line_break(depth + 1, minify)
            if is_array:
                yield from _render(reader, item, depth + 1, minify)
            else:
                key, val = item
                yield from _render(reader, key, depth + 1, minify)
                yield ": "
                yield from _render(reader, val, depth + 1, minify)
        if count:
            yield _line_break(depth, minify)
        yield "]" if is_array else "}"
    elif kind is ValueType.NUMBER:
        yield value.text()
    elif kind is ValueType.STRING:
        yield f'"{value.text()}"'
    elif kind is ValueType.NULL:
        yield "null"
    elif kind is ValueType.BOOL:
        yield "true" if value.text().startswith("t") else "false"
    else:
        raise JSONReadError("Unexpected error in value", reader.pos)


def format_value(reader: Reader, value: Value, minify: bool = False) -> str:
    """Format ``value`` and everything nested in it, reading from ``reader``."""
    return "".join(_render(reader, value, 0, minify))


def format_document(data: Union[str, bytes], minify: bool = False) -> str:
    """Format the first JSON value found in ``data``."""
    reader = Reader(data)
    return format_value(reader, reader.read(), minify)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a JSON file; ``--minify`` as first argument removes layout."""
    args = list(sys.argv[1:] if argv is None else argv)
    minify = False
    if args and args[0] == "--minify":
        minify = True
        args = args[1:]
    if not args:
        print("error: expected .json input file argument", file=sys.stderr)
        return 1
    try:
        raw = Path(args[0]).read_bytes()
    except OSError:
        print("error: failed to open file", file=sys.stderr)
        return 1

    reader = Reader(raw.decode("utf-8", errors="replace"))
    out = sys.stdout
    try:
        value = reader.read()
        for chunk in _render(reader, value, 0, minify):
            out.write(chunk)
    except JSONReadError as exc:
        out.flush()
        line, column = reader.location()
        print(f"\nerror: {line}:{column}: {exc}", file=sys.stderr)
        return 1
    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())