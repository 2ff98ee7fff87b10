# perfspec/events/runtime.py
"""Caller-level aggregation of specifiers.

A `-e` argument may hold several specifiers separated by commas, and a
`{...}` segment schedules its members as one group:

    cycles,instructions         -> SymbolicEvent, SymbolicEvent
    {cycles,instructions},r0500 -> GroupedEvent(...), RawEvent

Each specifier goes through `parse_event`; error offsets are reported
against the whole argument.
"""

from __future__ import annotations
from typing import List, Tuple
from .ast import Event, GroupedEvent
from .parser import ParseError, parse_event


def _char_at(text: str, pos: int):
    return text[pos] if pos < len(text) else None

def _parse_segment(text: str, start: int, end: int) -> Event:
    seg = text[start:end]
    if not seg:
        raise ParseError(text, start, ("an event",), _char_at(text, start))
    try:
        return parse_event(seg)
    except ParseError as e:
        raise e.shifted(text, start) from None

def _parse_group(text: str, start: int, end: int) -> GroupedEvent:
    members: List[Event] = []
    i = start
    while True:
        j = text.find(",", i, end)
        if j == -1:
            members.append(_parse_segment(text, i, end))
            break
        members.append(_parse_segment(text, i, j))
        i = j + 1
    return GroupedEvent(tuple(members))


def parse_event_list(text: str) -> Tuple[Event, ...]:
    """Parse a comma separated list of specifiers and `{...}` groups."""
    events: List[Event] = []
    n = len(text)
    i = 0
    while True:
        if i < n and text[i] == "{":
            close = text.find("}", i + 1)
            if close == -1:
                raise ParseError(text, n, ("`}`",), None)
            nested = text.find("{", i + 1, close)
            if nested != -1:
                raise ParseError(text, nested, ("an event name",), "{")
            events.append(_parse_group(text, i + 1, close))
            i = close + 1
            if i < n and text[i] != ",":
                raise ParseError(text, i, ("`,`", "end of input"), text[i])
        else:
            j = text.find(",", i)
            if j == -1:
                j = n
            events.append(_parse_segment(text, i, j))
            i = j
        if i >= n:
            break
        i += 1  # ','
    return tuple(events)
