from __future__ import annotations

import pytest
from pydantic import BaseModel, Field

from interview.domain.models import PrimitiveShape, StringShape, StructShape
from interview.exceptions import BadResponse, Cancel, Restart, Undo
from interview.schemas.kinds import ReportKind
from interview.services.driver import (
    build,
    build_bare_confirm,
    build_with_replay,
    display,
)

from tests.golden import MAP_OF_ENUMS_AND_NEWTYPES, STRUCT_OF_SEQS
from tests.mock import MockTransport


class Point(BaseModel):
    x: int
    y: int


POINT = StructShape("Point", {"x": PrimitiveShape("i32"), "y": PrimitiveShape("i32")}, model=Point)


def test_build_asks_for_confirmation():
    mock = MockTransport(["1", "2", "yes"], interactive=True)
    assert build(POINT, mock) == Point(x=1, y=2)
    mock.assert_finished()


def test_build_without_confirmation(no_confirm):
    mock = MockTransport(["1", "2"])
    assert build(POINT, mock) == Point(x=1, y=2)
    mock.assert_finished()


def test_undo_withdraws_the_previous_answer():
    mock = MockTransport(["1", "!u", "5", "2", "yes"], interactive=True)
    assert build(POINT, mock) == Point(x=5, y=2)
    mock.assert_finished()


def test_undo_counts_answers_across_scopes():
    mock = MockTransport(["1", "2", "!u2", "3", "4", "yes"], interactive=True)
    # "!u2" answers the confirmation question, withdrawing both coordinates.
    assert build(POINT, mock) == Point(x=3, y=4)
    mock.assert_finished()


def test_restart_after_an_answer_replays_the_rest():
    mock = MockTransport(["1", "!r1", "7", "yes"], interactive=True)
    assert build(POINT, mock) == Point(x=1, y=7)
    mock.assert_finished()


def test_rejecting_the_value_starts_over():
    mock = MockTransport(["1", "2", "no", "3", "4", "yes"], interactive=True)
    assert build(POINT, mock) == Point(x=3, y=4)
    mock.assert_finished()


def test_rejected_value_withdraws_the_answer_that_completed_it():
    class Port(BaseModel):
        number: int = Field(ge=1)

    shape = StructShape("Port", {"number": PrimitiveShape("u16")}, model=Port)
    mock = MockTransport(["0", "8080", "yes"], interactive=True)

    assert build(shape, mock) == Port(number=8080)
    assert len(mock.reports(ReportKind.BAD_RESPONSE)) == 1
    assert mock.reports(ReportKind.BAD_RESPONSE)[0].startswith("Could not build Port")
    mock.assert_finished()


def test_bad_answer_is_asked_again_when_interactive():
    mock = MockTransport(["abc", "12", "yes"], interactive=True)
    assert build(PrimitiveShape("u32"), mock) == 12
    mock.assert_finished()


def test_failures_propagate_when_not_interactive():
    with pytest.raises(BadResponse):
        build(PrimitiveShape("u32"), MockTransport(["abc"]))
    with pytest.raises(Undo):
        build(PrimitiveShape("u32"), MockTransport(["!u"]))
    with pytest.raises(Restart):
        build(PrimitiveShape("u32"), MockTransport(["1", "no"]))


def test_cancel_always_propagates():
    mock = MockTransport(["1", "!cancel"], interactive=True)
    with pytest.raises(Cancel):
        build(POINT, mock)
    assert mock.level == 0


def test_build_bare_confirm_rejection_is_a_restart():
    with pytest.raises(Restart) as info:
        build_bare_confirm(PrimitiveShape("u8"), MockTransport(["1", "no"]))
    assert info.value.index == 0


def test_build_with_replay_on_an_undecorated_transport():
    mock = MockTransport(["1", "2"], interactive=True)
    assert build_with_replay(POINT, mock, confirm=False) == Point(x=1, y=2)


@pytest.mark.parametrize("case", [STRUCT_OF_SEQS, MAP_OF_ENUMS_AND_NEWTYPES], ids=lambda c: c.name)
def test_displayed_transcript_builds_the_same_value(case, no_confirm):
    shown = MockTransport()
    display(case.shape, case.value, shown)

    mock = MockTransport(shown.responses())
    assert build(case.shape, mock) == case.value
    mock.assert_finished()


def test_escaped_display_text_builds_back(no_confirm):
    shape = StringShape()
    shown = MockTransport()
    display(shape, "!bang", shown)

    assert shown.responses() == ["!!bang"]
    assert build(shape, MockTransport(shown.responses())) == "!bang"


def test_model_with_a_name_field_builds_interactively():
    class Person(BaseModel):
        name: str
        age: int

    shape = StructShape("Person", {"name": StringShape(), "age": PrimitiveShape("u32")}, model=Person)
    mock = MockTransport(["Anne", "40", "yes"], interactive=True)

    assert build(shape, mock) == Person(name="Anne", age=40)
    mock.assert_finished()
