# perfspec/listing/__init__.py
"""`perf list` — symbolic event types usable with `-e`.

Sections
--------
- hw / sw     : static tables (`tables.py`)
- cache       : legacy hardware cache combinations (`cache.py`)
- tracepoint  : tracefs scan (`tracepoints.py`)
- pmu, sdt, metric, metricgroup, event_glob : no static data, always empty

Without a section argument every non-empty section is printed under its
heading. A missing tracefs only produces a warning in that mode.
"""

from __future__ import annotations
import json
import sys
from typing import List, Optional, TextIO, Tuple

from .format import ListOptions, ListEntry, format_entries, entry_to_json
from .tables import HW_EVENTS, SW_EVENTS, EventInfo
from .cache import CACHE_EVENTS
from .tracepoints import TracefsError, scan_tracepoints

EVENT_TYPES = (
    "hw", "sw", "cache", "tracepoint", "pmu", "sdt", "metric", "metricgroup", "event_glob",
)

SECTION_TITLES = {
    "hw": "Hardware events",
    "sw": "Software events",
    "cache": "Cache events",
    "tracepoint": "Tracepoint events",
    "pmu": "PMU events",
    "sdt": "SDT events",
    "metric": "Metric events",
    "metricgroup": "Metric group events",
    "event_glob": "Event glob events",
}

HEADER = "List of pre-defined events (to be used in -e or -M):\n"


def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _symbol_entries(events: Tuple[EventInfo, ...], type_desc: str, kind: str) -> List[ListEntry]:
    return [
        ListEntry(name=e.symbol, event_type=type_desc, alias=e.alias,
                  encoding=f"{kind}/config={e.config:#x}/")
        for e in events
    ]


def collect_entries(event_type: str, tracefs: Optional[str] = None) -> List[ListEntry]:
    """Entries of one section, before filtering."""
    if event_type == "hw":
        return _symbol_entries(HW_EVENTS, "Hardware event", "hardware")
    if event_type == "sw":
        return _symbol_entries(SW_EVENTS, "Software event", "software")
    if event_type == "cache":
        return [
            ListEntry(name=c.name, event_type="Hardware cache event", desc=c.desc,
                      encoding=c.encoding, deprecated=c.deprecated)
            for c in CACHE_EVENTS
        ]
    if event_type == "tracepoint":
        return [
            ListEntry(name=t.symbol, event_type="Tracepoint event", encoding=t.encoding)
            for t in scan_tracepoints(tracefs)
        ]
    if event_type in EVENT_TYPES:
        return []
    raise ValueError(f"unknown event type {event_type!r}")


def do_list(opts: ListOptions, event_type: Optional[str] = None,
            tracefs: Optional[str] = None, out: Optional[TextIO] = None) -> None:
    """Write the listing for one section (or all of them) to `out` (default stdout).

    Raises TracefsError only when the tracepoint section was asked for explicitly.
    """
    out = out if out is not None else sys.stdout
    kinds = [event_type] if event_type is not None else list(EVENT_TYPES)

    sections = []
    for kind in kinds:
        try:
            entries = collect_entries(kind, tracefs)
        except TracefsError as e:
            if event_type is not None:
                raise
            _eprint(f"[WARN] skipping tracepoints: {e}")
            continue
        if opts.debug:
            _eprint(f"[DEBUG] section={kind} entries={len(entries)}")
        sections.append((kind, entries))

    if opts.json:
        objs = []
        for _kind, entries in sections:
            objs.extend(o for o in (entry_to_json(opts, e) for e in entries) if o is not None)
        json.dump(objs, out, indent=2)
        out.write("\n")
        return

    out.write(HEADER + "\n")
    first = True
    for kind, entries in sections:
        lines = format_entries(opts, entries)
        if event_type is None:
            if not lines:
                continue
            out.write(("" if first else "\n") + SECTION_TITLES[kind] + ":\n")
            first = False
        for line in lines:
            out.write(line + "\n")
