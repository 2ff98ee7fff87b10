# perfspec/listing/format.py
"""Rendering of `perf list` entries.

Text layout of one entry (columns counted from 0):

      cpu-cycles OR cycles                         [Hardware event]
         [Description wrapped to COLUMNS-8]
          encoding (with --details)

The event type tag starts at column 53 unless the name is longer.
"""

from __future__ import annotations
from dataclasses import dataclass
import os
import textwrap
from typing import Any, Dict, List, Optional

TYPE_COLUMN = 53
DEFAULT_COLUMNS = 80


@dataclass
class ListOptions:
    desc: bool = True
    long_desc: bool = False
    details: bool = False
    deprecated: bool = False
    unit: Optional[str] = None
    json: bool = False
    debug: bool = False


@dataclass(frozen=True)
class ListEntry:
    name: str
    event_type: Optional[str] = None
    alias: Optional[str] = None
    pmu: Optional[str] = None
    desc: Optional[str] = None
    long_desc: Optional[str] = None
    encoding: Optional[str] = None
    deprecated: bool = False


def get_columns() -> int:
    """Terminal width from $COLUMNS, 80 when unset or not a number."""
    try:
        return int(os.environ.get("COLUMNS", DEFAULT_COLUMNS))
    except ValueError:
        return DEFAULT_COLUMNS


def _wrap_block(text: str) -> str:
    width = max(get_columns() - 8, 1)
    lines = textwrap.wrap(text, width)
    return f"\n{'':>8} ".join(lines)


def is_visible(opts: ListOptions, entry: ListEntry) -> bool:
    if entry.deprecated and not opts.deprecated:
        return False
    if opts.unit is not None and entry.pmu is not None and entry.pmu != opts.unit:
        return False
    return True


def _desc_with_unit(entry: ListEntry) -> str:
    desc = entry.desc or ""
    if entry.pmu == "default_core":
        if not desc.endswith("."):
            return f"{desc}. Unit: {entry.pmu}"
        return f"{desc} Unit: {entry.pmu}"
    return desc


def format_entry(opts: ListOptions, entry: ListEntry) -> Optional[str]:
    """Text block for one entry, or None when the options hide it."""
    if not is_visible(opts, entry):
        return None
    buf = "  " + entry.name
    if entry.alias:
        buf += f" OR {entry.alias}"
    if entry.event_type:
        buf = buf.ljust(TYPE_COLUMN)
        buf += f"[{entry.event_type}]"
    if opts.long_desc:
        if entry.long_desc:
            buf += f"\n{'[':>8}{_wrap_block(entry.long_desc)}]"
    elif opts.desc:
        if entry.desc:
            buf += f"\n{'[':>8}{_wrap_block(_desc_with_unit(entry))}]\n"
    if opts.details and entry.encoding:
        buf += f"\n{'':>8} {entry.encoding}"
    return buf


def entry_to_json(opts: ListOptions, entry: ListEntry) -> Optional[Dict[str, Any]]:
    """JSON object for one entry (keys as in `perf list -j`), None when hidden."""
    if not is_visible(opts, entry):
        return None
    out: Dict[str, Any] = {}
    if entry.pmu:
        out["Unit"] = entry.pmu
    out["EventName"] = entry.name
    if entry.alias:
        out["EventAlias"] = entry.alias
    if entry.event_type:
        out["EventType"] = entry.event_type
    if entry.desc:
        out["BriefDescription"] = entry.desc
    if entry.long_desc:
        out["PublicDescription"] = entry.long_desc
    if entry.encoding:
        out["Encoding"] = entry.encoding
    if entry.deprecated:
        out["Deprecated"] = "1"
    return out


def format_entries(opts: ListOptions, entries: List[ListEntry]) -> List[str]:
    """Visible entries rendered as text, sorted."""
    out = [s for s in (format_entry(opts, e) for e in entries) if s is not None]
    out.sort()
    return out
