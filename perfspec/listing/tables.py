# perfspec/listing/tables.py
"""Pre-defined hardware and software events (`perf_event_attr.config` ids from the uapi header)."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

# perf_type_id
PERF_TYPE_HARDWARE = 0
PERF_TYPE_SOFTWARE = 1
PERF_TYPE_TRACEPOINT = 2
PERF_TYPE_HW_CACHE = 3
PERF_TYPE_RAW = 4


@dataclass(frozen=True)
class EventInfo:
    config: int
    symbol: str
    alias: Optional[str] = None


HW_EVENTS: Tuple[EventInfo, ...] = (
    EventInfo(0, "cpu-cycles", "cycles"),
    EventInfo(1, "instructions"),
    EventInfo(2, "cache-references"),
    EventInfo(3, "cache-misses"),
    EventInfo(4, "branch-instructions", "branches"),
    EventInfo(5, "branch-misses"),
    EventInfo(6, "bus-cycles"),
    EventInfo(7, "stalled-cycles-frontend", "idle-cycles-frontend"),
    EventInfo(8, "stalled-cycles-backend", "idle-cycles-backend"),
    EventInfo(9, "ref-cycles"),
)

SW_EVENTS: Tuple[EventInfo, ...] = (
    EventInfo(0, "cpu-clock"),
    EventInfo(1, "task-clock"),
    EventInfo(2, "page-faults", "faults"),
    EventInfo(3, "context-switches", "cs"),
    EventInfo(4, "cpu-migrations", "migrations"),
    EventInfo(5, "minor-faults"),
    EventInfo(6, "major-faults"),
    EventInfo(7, "alignment-faults"),
    EventInfo(8, "emulation-faults"),
    EventInfo(9, "dummy"),
    EventInfo(10, "bpf-output"),
    EventInfo(11, "cgroup-switches"),
)
