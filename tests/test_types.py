import pytest

from config_rules.checks import BuiltinType, parse_array_string, resolve_check
from config_rules.exceptions import ConfigValidationError

GOOD = {
    BuiltinType.OBJECT: [{"a": 1}, {}, '{"a": 1}', '  {"nested": {"b": [1]}} '],
    BuiltinType.ARRAY: [[1, 2], (1,), [], 'a, "b,c", \'d\'', "[1, 2, 3]", "single"],
    BuiltinType.STRING: ["x", ""],
    BuiltinType.NUMBER: [5, 2.5, -3, "3.14", " 10 ", "1e3", 10**400, "+5", ".5", "-1.5e-3", "7."],
    BuiltinType.BOOLEAN: ["yes", "0", True, False, "TRUE", "No", 1, 0, " true "],
}

BAD = {
    BuiltinType.OBJECT: [None, "nope", 5, "[1, 2]", [1, 2]],
    BuiltinType.ARRAY: [5, None, {"a": 1}, 'a"b', '"a" b', b"bytes"],
    BuiltinType.STRING: [5, None, ["x"]],
    BuiltinType.NUMBER: [
        "abc",
        True,
        None,
        float("inf"),
        "nan",
        "",
        [1],
        "1_000",
        "\u0661\u0662\u0663",
        "1e400",
        "0x10",
        "infinity",
    ],
    BuiltinType.BOOLEAN: ["maybe", None, 2, "y"],
}


@pytest.mark.parametrize(
    "marker, value", [(marker, value) for marker, values in GOOD.items() for value in values]
)
def test_type_marker_accepts(marker, value):
    resolve_check(marker)(value)


@pytest.mark.parametrize(
    "marker, value", [(marker, value) for marker, values in BAD.items() for value in values]
)
def test_type_marker_rejects(marker, value):
    with pytest.raises(ConfigValidationError) as exc:
        resolve_check(marker)(value)
    assert exc.value.claim == f"must be of type {marker.value}"


@pytest.mark.parametrize(
    "host, marker",
    [
        (dict, BuiltinType.OBJECT),
        (list, BuiltinType.ARRAY),
        (str, BuiltinType.STRING),
        (float, BuiltinType.NUMBER),
        (bool, BuiltinType.BOOLEAN),
    ],
)
def test_host_types_resolve_to_markers(host, marker):
    for value in GOOD[marker]:
        resolve_check(host)(value)
    for value in BAD[marker]:
        with pytest.raises(ConfigValidationError) as exc:
            resolve_check(host)(value)
        assert exc.value.claim == marker.claim


def test_parse_array_string_handles_quotes_and_commas():
    assert parse_array_string('a, "b,c", \'d\'') == ["a", "b,c", "d"]
    assert parse_array_string("[1, 2, 3]") == ["1", "2", "3"]
    assert parse_array_string('"say \\"hi\\"", x') == ['say "hi"', "x"]
    assert parse_array_string("'it\\'s', 'a\\,b'") == ["it's", "a,b"]
    assert parse_array_string("a,,b") == ["a", "", "b"]


def test_parse_array_string_empty_forms():
    assert parse_array_string("") == []
    assert parse_array_string("[]") == []
    assert parse_array_string("  [  ] ") == []


def test_parse_array_string_rejects_malformed():
    assert parse_array_string('a"b') is None
    assert parse_array_string('"unterminated') is None
    assert parse_array_string('"a" "b"') is None
