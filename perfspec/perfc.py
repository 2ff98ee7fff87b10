# perfspec/perfc.py
"""perfc – perfspec CLI

Usage
    $ python -m perfspec.perfc list hw
    $ python -m perfspec.perfc list --json -o events.json
    $ python -m perfspec.perfc stat -e 'cpu-cycles:P' -e '{r0500:u,sched:sched_switch}'
    $ python -m perfspec.perfc version --build-options

Commands
--------
- list    : symbolic event types usable with -e (paged on a terminal)
- stat    : parse event specifiers and print the resulting descriptors
            (nothing is counted)
- version : version string, optionally the build feature report

With -D/--debug (`--debug` for list) diagnostics are written to stderr.
"""

from __future__ import annotations
import argparse
import io
import json
import sys
from typing import List, Optional

# ------------------------------
# Helpers
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _describe(ev, indent: str = "  ") -> List[str]:
    """Human readable lines for one parsed event."""
    from .events import SymbolicEvent, TracepointEvent, RawEvent, GroupedEvent

    mods = ", ".join(m.name for m in getattr(ev, "modifiers", ())) or "-"
    if isinstance(ev, GroupedEvent):
        lines = [f"{indent}{ev.to_spec():<40} group of {len(ev.events)}"]
        for member in ev.events:
            lines.extend(_describe(member, indent + "  "))
        return lines
    if isinstance(ev, RawEvent):
        what = f"raw config={ev.value:#x}"
    elif isinstance(ev, TracepointEvent):
        what = f"tracepoint category={ev.category} name={ev.name}"
    elif isinstance(ev, SymbolicEvent):
        what = f"symbolic name={ev.name}"
    else:
        raise TypeError(f"not an event: {ev!r}")
    return [f"{indent}{ev.to_spec():<40} {what} modifiers={mods}"]


def _should_page(args, stream) -> bool:
    """Page `list` output only when it goes to an interactive stdout."""
    if args.output or args.no_pager:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _page(text: str) -> None:
    from rich.console import Console

    console = Console()
    with console.pager():
        console.print(text, markup=False, highlight=False, soft_wrap=True, end="")

# ------------------------------
# Commands
# ------------------------------

def cmd_list(args) -> int:
    from .listing import do_list
    from .listing.format import ListOptions

    opts = ListOptions(
        desc=args.desc,
        long_desc=args.long_desc,
        details=args.details,
        deprecated=args.deprecated,
        unit=args.unit,
        json=args.json,
        debug=args.debug,
    )
    try:
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                do_list(opts, args.event, tracefs=args.tracefs, out=f)
            if args.debug:
                _eprint(f"[DEBUG] wrote {args.output}")
        elif _should_page(args, sys.stdout):
            buf = io.StringIO()
            do_list(opts, args.event, tracefs=args.tracefs, out=buf)
            _page(buf.getvalue())
        else:
            do_list(opts, args.event, tracefs=args.tracefs)
    except BrokenPipeError:
        return 0
    except Exception as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2
    return 0


def cmd_stat(args) -> int:
    from .events import ParseError, parse_event_list

    events = []
    for spec in args.event:
        try:
            parsed = parse_event_list(spec)
        except ParseError as e:
            _eprint("[SYNTAX ERROR]")
            _eprint(str(e))
            _eprint(e.snippet())
            return 2
        except Exception as e:
            _eprint("[ERROR]", type(e).__name__, str(e))
            return 2
        if args.debug:
            _eprint(f"[DEBUG] {spec!r} -> {len(parsed)} event(s)")
        events.extend(parsed)

    if args.json:
        print(json.dumps([ev.to_dict() for ev in events], indent=2))
        return 0

    print(f"[PARSE OK] events={len(events)}")
    for ev in events:
        for line in _describe(ev):
            print(line)
    return 0


def cmd_version(args) -> int:
    from .version import do_version
    do_version(build_options=args.build_options)
    return 0

# ------------------------------
# Entry point
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    from .listing import EVENT_TYPES

    ap = argparse.ArgumentParser(prog="perfc", description="Performance analysis tools for Linux")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_list = sub.add_parser("list", help="List all symbolic event types")
    p_list.add_argument("event", nargs="?", choices=EVENT_TYPES, help="event type to list")
    p_list.add_argument("-d", "--desc", dest="desc", action="store_true", default=True,
                        help="Print extra event descriptions (default)")
    p_list.add_argument("--no-desc", dest="desc", action="store_false", help="Don't print descriptions")
    p_list.add_argument("-v", "--long-desc", action="store_true", help="Print longer event descriptions")
    p_list.add_argument("--debug", action="store_true", help="Enable debugging output")
    p_list.add_argument("--details", action="store_true",
                        help="Print how named events are resolved internally into perf events")
    p_list.add_argument("--deprecated", action="store_true", help="Print deprecated events")
    p_list.add_argument("--unit", help="Limit PMU events to the given PMU name (e.g. cpu, msr)")
    p_list.add_argument("-j", "--json", action="store_true", help="Output in JSON format")
    p_list.add_argument("-o", "--output", help="Output file name (default: stdout)")
    p_list.add_argument("--tracefs", help="tracefs events directory (default: autodetect)")
    p_list.add_argument("--no-pager", action="store_true", help="Do not page output on a terminal")
    p_list.set_defaults(func=cmd_list)

    p_stat = sub.add_parser("stat", help="Parse event specifiers and show the event descriptors")
    p_stat.add_argument("-e", "--event", action="append", required=True,
                        help="event specifier list (repeatable)")
    p_stat.add_argument("-j", "--json", action="store_true", help="Output in JSON format")
    p_stat.add_argument("-D", "--debug", action="store_true", help="Enable debugging output")
    p_stat.set_defaults(func=cmd_stat)

    p_version = sub.add_parser("version", help="Display the version of perf binary")
    p_version.add_argument("--build-options", action="store_true",
                           help="Print the status of compiled-in libraries")
    p_version.set_defaults(func=cmd_version)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
