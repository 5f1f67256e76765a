from __future__ import annotations

import pytest

from interview.domain.models import EnumShape, EnumValue, PrimitiveShape, StringShape, StructShape, Variant
from interview.execution.primitives import U8_VARIANTS
from interview.schemas.kinds import ReportKind, RequestKind
from interview.services.compacting import CompactingTransport
from interview.services.driver import build_bare

from tests.mock import BeginScope, EndScope, MockTransport, Report, Response


def test_single_value_scopes_fold_into_the_label():
    shape = StructShape("SimpleStruct", {"my_field": StringShape()})
    mock = MockTransport(["Test"])

    assert build_bare(shape, CompactingTransport(mock)) == {"my_field": "Test"}
    assert mock.log == [Response(RequestKind.DATUM, "SimpleStruct -> my_field -> string", "Test")]


def test_scope_with_unknown_size_is_forwarded_with_compound_name():
    shape = StructShape(
        "SimpleStruct",
        {"my_field": EnumShape("SimpleEnum", [Variant("Test"), Variant("Fish")])},
    )
    mock = MockTransport(["Test"])

    assert build_bare(shape, CompactingTransport(mock)) == {"my_field": EnumValue("Test")}
    assert mock.log == [
        BeginScope("SimpleStruct -> my_field -> SimpleEnum", None),
        Response(RequestKind.DATUM, "variant", "Test", ("Test", "Fish")),
        EndScope(),
    ]


def test_forwarded_scope_stops_the_prefix():
    shape = StructShape("Pair", {"a": PrimitiveShape("u8"), "b": PrimitiveShape("u8")})
    mock = MockTransport(["1", "2"])

    build_bare(shape, CompactingTransport(mock))

    assert mock.log == [
        BeginScope("Pair", 2),
        Response(RequestKind.DATUM, "a -> u8", "1", tuple(U8_VARIANTS)),
        Response(RequestKind.DATUM, "b -> u8", "2", tuple(U8_VARIANTS)),
        EndScope(),
    ]


def test_synthetic_responses_are_dropped_and_reports_are_not_prefixed():
    mock = MockTransport()
    compacting = CompactingTransport(mock, separator=".")
    compacting.begin_scope("Outer", 1)

    compacting.respond(RequestKind.SYNTHETIC, "unit", "()")
    compacting.respond(RequestKind.DATUM, "u8", "4")
    compacting.report(ReportKind.HELP, "hint")
    compacting.end_scope()

    assert mock.log == [
        Response(RequestKind.DATUM, "Outer.u8", "4"),
        Report(ReportKind.HELP, "hint"),
    ]
    assert compacting.frames == []


def test_end_scope_without_begin_is_rejected():
    with pytest.raises(RuntimeError):
        CompactingTransport(MockTransport()).end_scope()
