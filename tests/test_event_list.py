"""Tests for comma list and group aggregation."""

import pytest

from perfspec.events import (
    GroupedEvent, Modifier, ParseError, RawEvent, SymbolicEvent, TracepointEvent,
    parse_event_list,
)


def test_single_specifier():
    assert parse_event_list("cycles") == (SymbolicEvent("cycles"),)


def test_comma_list():
    assert parse_event_list("cycles,instructions:u") == (
        SymbolicEvent("cycles"),
        SymbolicEvent("instructions", (Modifier.USER_SPACE_COUNTING,)),
    )


def test_group_then_raw():
    assert parse_event_list("{cycles,sched:sched_switch},r0500") == (
        GroupedEvent((SymbolicEvent("cycles"), TracepointEvent("sched", "sched_switch"))),
        RawEvent(0x500),
    )


def test_group_spec():
    (group,) = parse_event_list("{cycles,r0500:u}")
    assert group.to_spec() == "{cycles,r0x500:u}"
    assert parse_event_list(group.to_spec()) == (group,)


def test_group_to_dict():
    (group,) = parse_event_list("{cycles,r10}")
    assert group.to_dict() == {
        "type": "group",
        "events": [
            {"type": "symbolic", "name": "cycles", "modifiers": []},
            {"type": "raw", "value": "0x10", "modifiers": []},
        ],
    }


@pytest.mark.parametrize("text,pos", [
    ("", 0),
    ("cycles,", 7),
    (",cycles", 0),
    ("{}", 1),
    ("{cycles,}", 8),
    ("{cycles", 7),
    ("{ab{cd}}", 3),
    ("{ab,cd}x", 7),
])
def test_structural_errors(text, pos):
    with pytest.raises(ParseError) as ei:
        parse_event_list(text)
    assert ei.value.pos == pos
    assert ei.value.source == text


def test_error_offset_is_shifted_to_whole_argument():
    with pytest.raises(ParseError) as ei:
        parse_event_list("cycles,cpu-cycles:Z")
    err = ei.value
    assert err.source == "cycles,cpu-cycles:Z"
    # "cpu-cycles:Z" fails at 12 within the segment, which starts at 7
    assert err.pos == 19
    assert err.snippet().splitlines()[1] == " " * 19 + "^"
