# perfspec/listing/tracepoints.py
"""Tracepoint discovery from a tracefs `events` directory.

Layout read:

    <root>/<category>/<name>/id     (id file optional)
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

DEFAULT_TRACEFS_ROOTS = (
    "/sys/kernel/tracing/events",
    "/sys/kernel/debug/tracing/events",
)


class TracefsError(OSError):
    """Tracefs events directory missing or unreadable."""


@dataclass(frozen=True)
class TracepointInfo:
    category: str
    name: str
    id: Optional[int] = None

    @property
    def symbol(self) -> str:
        return f"{self.category}:{self.name}"

    @property
    def encoding(self) -> Optional[str]:
        if self.id is None:
            return None
        return f"tracepoint/config={self.id:#x}/"


def find_tracefs(candidates: Sequence[str] = DEFAULT_TRACEFS_ROOTS) -> Path:
    for c in candidates:
        p = Path(c)
        if p.is_dir():
            return p
    raise TracefsError(f"no tracefs events directory found (tried {', '.join(candidates)})")


def _read_id(path: Path) -> Optional[int]:
    if not path.is_file():
        return None
    text = path.read_text(encoding="utf-8").strip()
    try:
        return int(text)
    except ValueError:
        raise TracefsError(f"malformed tracepoint id {text!r} in {path}")


def scan_tracepoints(root: Optional[str] = None) -> List[TracepointInfo]:
    """All tracepoints below `root` (default: first existing tracefs), sorted by symbol."""
    base = Path(root) if root is not None else find_tracefs()
    out: List[TracepointInfo] = []
    try:
        for cat_dir in base.iterdir():
            if not cat_dir.is_dir():
                continue
            for ev_dir in cat_dir.iterdir():
                if not ev_dir.is_dir():
                    continue
                out.append(TracepointInfo(cat_dir.name, ev_dir.name, _read_id(ev_dir / "id")))
    except TracefsError:
        raise
    except OSError as e:
        raise TracefsError(f"cannot read tracefs {base}: {e}") from e
    out.sort(key=lambda t: t.symbol)
    return out
