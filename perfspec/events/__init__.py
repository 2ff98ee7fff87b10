# perfspec/events/__init__.py
"""Event specifier submodule for perfspec.

This package provides:
- Event descriptor types (symbolic, tracepoint, raw, grouped) and modifiers
- The specifier parser (`parse_event`), a pure function of its input
- Comma list / `{...}` group aggregation on top of it
"""

from .ast import (
    Modifier, SymbolicEvent, TracepointEvent, RawEvent, GroupedEvent, Event,
    MAX_MODIFIERS, format_modifiers,
)
from .parser import (
    ParseError, RawValueOverflowError,
    parse_event, parse_modifier, parse_modifiers, parse_name,
)
from .runtime import parse_event_list
