# perfspec/events/ast.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple, Union

# ---- Event descriptor definitions ----

class Modifier(Enum):
    """Single-character event modifier. The value is the character itself."""
    USER_SPACE_COUNTING = "u"
    KERNEL_COUNTING = "k"
    HYPERVISOR_COUNTING = "h"
    NON_IDLE_COUNTING = "I"
    GUEST_COUNTING = "G"
    HOST_COUNTING = "H"
    PRECISE_LEVEL = "p"
    USE_MAX_PRECISE_LEVEL = "P"
    READ_SAMPLE_VALUE = "S"
    PIN = "D"
    GROUP_WEAK = "W"
    GROUP_EXCLUSIVE = "e"
    BPF_AGGREGATION = "b"


MAX_MODIFIERS = 16
RAW_VALUE_LIMIT = 1 << 64

Modifiers = Tuple[Modifier, ...]


def format_modifiers(mods: Modifiers) -> str:
    """`(u, p)` -> `":up"`; empty -> `""`."""
    if not mods:
        return ""
    return ":" + "".join(m.value for m in mods)


@dataclass(frozen=True)
class SymbolicEvent:
    name: str
    modifiers: Modifiers = ()

    def to_spec(self) -> str:
        return self.name + format_modifiers(self.modifiers)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "symbolic",
            "name": self.name,
            "modifiers": [m.value for m in self.modifiers],
        }

@dataclass(frozen=True)
class TracepointEvent:
    category: str
    name: str
    modifiers: Modifiers = ()

    def to_spec(self) -> str:
        return f"{self.category}:{self.name}" + format_modifiers(self.modifiers)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "tracepoint",
            "category": self.category,
            "name": self.name,
            "modifiers": [m.value for m in self.modifiers],
        }

@dataclass(frozen=True)
class RawEvent:
    value: int  # unsigned 64-bit event code
    modifiers: Modifiers = ()

    def to_spec(self) -> str:
        return f"r{self.value:#x}" + format_modifiers(self.modifiers)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "raw",
            "value": f"{self.value:#x}",
            "modifiers": [m.value for m in self.modifiers],
        }

@dataclass(frozen=True)
class GroupedEvent:
    """Events scheduled together. Built by callers, never by `parse_event`."""
    events: Tuple["Event", ...] = field(default_factory=tuple)

    def to_spec(self) -> str:
        return "{" + ",".join(e.to_spec() for e in self.events) + "}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "group",
            "events": [e.to_dict() for e in self.events],
        }


Event = Union[SymbolicEvent, TracepointEvent, RawEvent, GroupedEvent]
