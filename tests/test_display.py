from __future__ import annotations

import enum

import pytest

from interview.domain.models import (
    BytesShape,
    EnumShape,
    EnumValue,
    MapShape,
    NewtypeShape,
    OptionShape,
    PrimitiveShape,
    SeqShape,
    Some,
    StringShape,
    StructShape,
    TupleShape,
    Variant,
)
from interview.exceptions import ValidationError
from interview.schemas.kinds import RequestKind
from interview.services.driver import display, display_bare

from tests.golden import ALL_CASES, BoxSize
from tests.mock import BeginScope, EndScope, MockTransport, Response


@pytest.mark.parametrize("case", ALL_CASES, ids=lambda c: c.name)
def test_golden_display(case):
    mock = MockTransport()

    display_bare(case.shape, case.value, mock)

    assert mock.responses() == case.responses
    assert mock.scope_names() == case.scope_names
    mock.assert_finished()


def test_display_mirrors_the_build_transcript():
    shape = StructShape("Pair", {"left": PrimitiveShape("u8"), "right": OptionShape(StringShape())})
    mock = MockTransport()

    display_bare(shape, {"left": 1, "right": None}, mock)

    assert mock.log == [
        BeginScope("Pair", 2),
        BeginScope("left", 1),
        Response(RequestKind.DATUM, "u8", "1"),
        EndScope(),
        BeginScope("right", 1),
        BeginScope("option", None),
        Response(RequestKind.QUESTION, "Some value?", "no"),
        EndScope(),
        EndScope(),
        EndScope(),
    ]


def test_bytes():
    mock = MockTransport()
    display_bare(BytesShape(), b"\x00\x10", mock)
    assert mock.responses() == ["yes", "0", "yes", "16", "no"]


def test_enum_member_of_model():
    class Colour(enum.Enum):
        Red = 1
        Green = 2

    shape = EnumShape("Colour", [Variant("Red"), Variant("Green")], model=Colour)
    mock = MockTransport()

    display_bare(shape, Colour.Green, mock)

    assert mock.log == [
        BeginScope("Colour", None),
        Response(RequestKind.DATUM, "variant", "Green"),
        EndScope(),
    ]


@pytest.mark.parametrize(
    "shape, value",
    [
        (PrimitiveShape("u8"), 256),
        (PrimitiveShape("u8"), "1"),
        (PrimitiveShape("bool"), 0),
        (StringShape(), 5),
        (BytesShape(), "text"),
        (TupleShape([PrimitiveShape("u8")]), (1, 2)),
        (SeqShape(PrimitiveShape("u8")), "abc"),
        (MapShape(StringShape(), StringShape()), [("a", "b")]),
        (OptionShape(OptionShape(StringShape())), "unwrapped"),
        (NewtypeShape("BoxSize", PrimitiveShape("u32"), model=BoxSize), 12),
        (EnumShape("E", [Variant("A"), Variant("B")]), EnumValue("C")),
        (EnumShape("E", [Variant("A"), Variant("B")]), "A"),
    ],
)
def test_values_that_do_not_fit_their_shape_are_rejected(shape, value):
    mock = MockTransport()
    with pytest.raises(ValidationError):
        display_bare(shape, value, mock)
    assert mock.level == 0


def test_missing_field_is_rejected_with_scopes_balanced():
    shape = StructShape(
        "Outer",
        {"inner": StructShape("Inner", {"a": PrimitiveShape("u8"), "b": PrimitiveShape("u8")})},
    )
    mock = MockTransport()

    with pytest.raises(ValidationError, match="no field 'b'"):
        display_bare(shape, {"inner": {"a": 1}}, mock)

    assert mock.level == 0


def test_nested_optional_present_value():
    mock = MockTransport()
    display_bare(OptionShape(OptionShape(PrimitiveShape("bool"))), Some(True), mock)
    assert mock.responses() == ["yes", "yes", "true"]


def test_display_escapes_marker_and_compacts_labels():
    shape = StructShape("Note", {"text": StringShape()})
    mock = MockTransport()

    display(shape, {"text": "!important"}, mock)

    assert mock.log == [Response(RequestKind.DATUM, "Note -> text -> string", "!!important")]
