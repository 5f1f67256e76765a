from __future__ import annotations

import math

import pytest

from interview.execution import primitives


@pytest.mark.parametrize(
    "kind, text, expected",
    [
        ("bool", "true", True),
        ("bool", "false", False),
        ("char", "A", "A"),
        ("char", "é", "é"),
        ("i8", "-128", -128),
        ("i8", "127", 127),
        ("u8", "+5", 5),
        ("i32", "-0", 0),
        ("f32", "3.4028235e38", 3.4028234663852886e38),
        ("u64", "18446744073709551615", 18446744073709551615),
        ("i128", "-170141183460469231731687303715884105728", -(2**127)),
        ("f64", "3.141592653589793", 3.141592653589793),
        ("f64", "1e3", 1000.0),
        ("f64", "-inf", -math.inf),
    ],
)
def test_parse_accepts(kind, text, expected):
    assert primitives.parse(kind, text) == expected


@pytest.mark.parametrize(
    "kind, text",
    [
        ("bool", "True"),
        ("bool", "yes"),
        ("char", ""),
        ("char", "ab"),
        ("u8", "256"),
        ("u8", "-1"),
        ("i8", "-129"),
        ("u32", " 1"),
        ("u32", "1_000"),
        ("u32", "0x10"),
        ("u32", ""),
        ("f64", " 1.5"),
        ("f64", "1_0.5"),
        ("f64", "one"),
        ("f32", "1e39"),
        ("f32", "-3.5e38"),
        ("u32", "-0"),
        ("u128", "-5"),
    ],
)
def test_parse_rejects(kind, text):
    with pytest.raises(ValueError):
        primitives.parse(kind, text)


def test_parse_reports_a_reason():
    with pytest.raises(ValueError, match="invalid digit found in string"):
        primitives.parse("u32", "not a number")


def test_f32_is_rounded_to_single_precision():
    value = primitives.parse("f32", "0.1")
    assert value != 0.1
    assert abs(value - 0.1) < 1e-8


def test_f32_formats_as_shortest_equivalent_text():
    value = primitives.parse("f32", "2.7182817")
    assert primitives.format_value("f32", value) == "2.7182817"
    assert primitives.parse("f32", primitives.format_value("f32", value)) == value


def test_format_value():
    assert primitives.format_value("bool", True) == "true"
    assert primitives.format_value("f64", 60) == "60.0"
    assert primitives.format_value("i32", -7) == "-7"


@pytest.mark.parametrize(
    "kind, value",
    [
        ("bool", 1),
        ("u8", True),
        ("u8", 256),
        ("i32", "12"),
        ("i32", 1.5),
        ("char", "ab"),
        ("f64", "1.0"),
        ("f32", 1e300),
    ],
)
def test_check_value_rejects_values_that_could_not_be_built(kind, value):
    with pytest.raises(ValueError):
        primitives.check_value(kind, value)


def test_variants_for():
    assert primitives.variants_for("bool") == ["true", "false"]
    assert len(primitives.variants_for("u8")) == 256
    assert primitives.variants_for("i8")[0] == "-128"
    assert primitives.variants_for("u32") == []


def test_f32_overflow_is_out_of_range():
    with pytest.raises(ValueError, match="out of range for f32"):
        primitives.parse("f32", "1e39")
    # Infinity typed as such is not an overflow.
    assert primitives.parse("f32", "inf") == math.inf


def test_unsigned_kinds_reject_a_minus_sign():
    with pytest.raises(ValueError, match="invalid digit found in string"):
        primitives.parse("u64", "-0")
