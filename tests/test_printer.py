import json

import pytest

from sjreader.printer import format_document, format_value, main
from sjreader.reader import JSONReadError, Reader

SAMPLES = [
    '{"a": 1, "b": [true, null, false], "c": {"d": "e"}}',
    '[ "cat", "dog", "fox", "owl" ]',
    '[[], {}, [[1, 2], {"x": -3.5e2}]]',
    '"just a string"',
    "42",
]


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("minify", [True, False])
def test_round_trip_through_json(text, minify):
    assert json.loads(format_document(text, minify)) == json.loads(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_pretty_is_idempotent(text):
    once = format_document(text, False)
    assert format_document(once, False) == once


@pytest.mark.parametrize("text", SAMPLES)
def test_minified_has_no_newlines(text):
    assert "\n" not in format_document(text, True)


@pytest.mark.parametrize("text", SAMPLES)
def test_pretty_and_minified_agree(text):
    pretty = format_document(text, False)
    assert format_document(pretty, True) == format_document(text, True)


def test_pretty_indentation_is_four_spaces():
    out = format_document(SAMPLES[0], False)
    for line in out.splitlines():
        indent = len(line) - len(line.lstrip(" "))
        assert indent % 4 == 0


def test_empty_containers():
    assert format_document("[]", False) == "[]"
    assert format_document("{ }", False) == "{}"


def test_minified_object_layout():
    assert format_document('{"a":1,"b":[true,null]}', True) == '{"a": 1,"b": [true,null]}'


def test_trailing_commas_are_dropped():
    text = '{"a": [1, 2,], "b": 3,}'
    assert json.loads(format_document(text, False)) == {"a": [1, 2], "b": 3}


def test_format_value_uses_reader():
    reader = Reader('[1, [2, 3]]')
    value = reader.read()
    out = format_value(reader, value, True)
    assert json.loads(out) == [1, [2, 3]]
    assert reader.depth == 0


def test_truncated_input_raises():
    with pytest.raises(JSONReadError, match="unexpected eof"):
        format_document("[1,", False)


def test_main_prints_file(tmp_path, capsys):
    path = tmp_path / "doc.json"
    path.write_text(SAMPLES[0], encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == format_document(SAMPLES[0], False)


def test_main_minify(tmp_path, capsys):
    path = tmp_path / "doc.json"
    path.write_text(SAMPLES[2], encoding="utf-8")
    assert main(["--minify", str(path)]) == 0
    assert capsys.readouterr().out == format_document(SAMPLES[2], True)


def test_main_without_argument(capsys):
    assert main([]) == 1
    assert "error: expected .json input file argument" in capsys.readouterr().err


def test_main_minify_without_file(capsys):
    assert main(["--minify"]) == 1
    assert "expected .json input file argument" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1
    assert "error: failed to open file" in capsys.readouterr().err


def test_main_reports_error_location(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("[1,\n 2,", encoding="utf-8")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out.startswith("[")
    assert "unexpected eof" in captured.err
    assert "error: 2:4:" in captured.err