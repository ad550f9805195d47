# sjreader

A small pull-style JSON reader. `sjreader` does not build a document tree.
It walks the text one token at a time and returns `Value` objects that point
at spans of the input. When you iterate a container, any nested content you
did not read is skipped before the next item.

The reader is lenient. Commas and colons count as whitespace, so it accepts
trailing commas and also missing ones.

## Installation

```
pip install .
```

Python 3.10 or later is required. The package has no runtime dependencies.

## Library use

```python
from sjreader.reader import Reader, ValueType

reader = Reader('{ "x": 10, "tags": ["a", "b"], "skip": {"deep": 1} }')
obj = reader.read()
assert obj.type is ValueType.OBJECT

for key, value in reader.iter_object(obj):
    if key.text() == "x":
        print(int(value.text()))
    elif key.text() == "tags":
        print([item.text() for item in reader.iter_array(value)])
    # the object under "skip" is passed over automatically
```

### `sjreader.reader`

- `Reader(data)` takes a `str`. It also takes `bytes` or `bytearray`, which it
  decodes as UTF-8.
- `Reader.read()` returns the next token.
- `Reader.iter_array(array)` yields the elements of an array token.
- `Reader.iter_object(obj)` yields `(key, value)` pairs of an object token.
- `Reader.location()` returns the 1-based `(line, column)` of the current
  position.
- `Value` has these fields: `type` (a `ValueType`), `start` and `end` (offsets
  into the input), and `depth`. `Value.text()` returns the raw text of the
  span:
  - For strings, the text is what lies between the quotes, with escape
    sequences left as written.
  - For numbers, `true`, `false` and `null`, it is the literal itself.
  - For arrays and objects, it is the opening bracket, and `depth` is the
    nesting level that bracket opened.
- `ValueType` has the members `ERROR`, `END`, `ARRAY`, `OBJECT`, `NUMBER`,
  `STRING`, `BOOL` and `NULL`.

On malformed input the reader raises `JSONReadError`, a subclass of
`ValueError`. Its `message` attribute holds the text of the error and its
`offset` attribute holds the position in the input. The messages are:

- `unexpected eof`
- `unclosed string`
- `stray '}'` or `stray ']'`
- `unknown token`
- `unexpected object end`, raised when an object ends after a key that has no
  value
- `max depth reached!`, raised when nesting goes deeper than 1,000,000

## Pretty-printing

`sjreader.printer` re-emits JSON:

- `format_document(data, minify=False)` formats the first value in `data`.
- `format_value(reader, value, minify=False)` formats a value that has already
  been read, together with everything nested inside it.

The output is indented with four spaces. With `minify=True` there are no
newlines or indentation, but a space still follows each `:`. Strings are
printed exactly as they were written.

The same is available as a command:

```
sjreader-print data.json
sjreader-print --minify data.json
```

If the file argument is missing, or the file cannot be opened, the command
prints an `error: ...` line to standard error and exits with status 1. On
malformed input it stops printing, writes `error: LINE:COL: message` to
standard error and exits with status 1.

## Demos

`sjreader.demos` holds small examples built on the reader:

- `array_items(text)` returns the raw text of each element of an array.
- `person_fields(text)` picks `first_name`, `last_name`, `age` and the entries
  of `phone_numbers` out of an object. For any other key it returns a line
  `(discarded 'KEY')`.
- `load_rect(text)` fills a `Rect` dataclass (`x`, `y`, `w`, `h`) from the
  matching keys of an object. Each value is read as a leading integer, and 0
  is used where there is none.

To run the demos on their built-in samples:

```
sjreader-demo                # all three
sjreader-demo array rect     # selected ones: array, object, rect
```

If you give a demo name that does not exist, the command exits with status 2.

## What it does not do

- `sjreader` does not decode string escapes.
- It does not convert numbers to Python values.
- It does not build dicts or lists.
- It does not check documents against the JSON grammar beyond the errors
  listed above.
- It has no encoder for Python objects. The only output it produces is the
  re-formatting done by `sjreader.printer`.