# perfspec/lex/__init__.py
"""Character classes of the event specifier language.

Classes
-------
- name start    : Unicode alphanumeric (Alphabetic | Numeric), `_ * ? [ ]`
- name continue : name start plus `. ! -`
- hex digit     : ASCII `0-9 a-f A-F` only
- modifier      : `u k h I G H p P S D W e b`

Alphanumeric follows the Unicode property definition rather than
`str.isalnum()`; the `regex` package gives `\\p{Alphabetic}` and `\\p{N}`.
"""

from __future__ import annotations
from typing import Optional
import regex as re

MODIFIER_CHARS = "ukhIGHpPSDWeb"

_RE_NAME_START = re.compile(r"[\p{Alphabetic}\p{N}_*?\[\]]")
_RE_NAME_CONT = re.compile(r"[\p{Alphabetic}\p{N}_*?\[\].!\-]")
_RE_HEX_RUN = re.compile(r"[0-9A-Fa-f]+")


def is_name_start(ch: Optional[str]) -> bool:
    if ch is None:
        return False
    return bool(_RE_NAME_START.fullmatch(ch))

def is_name_continue(ch: Optional[str]) -> bool:
    if ch is None:
        return False
    return bool(_RE_NAME_CONT.fullmatch(ch))

def is_modifier_char(ch: Optional[str]) -> bool:
    return ch is not None and len(ch) == 1 and ch in MODIFIER_CHARS

def match_hex_run(text: str, pos: int) -> int:
    """Return the end offset of the hex digit run starting at `pos` (== pos if none)."""
    m = _RE_HEX_RUN.match(text, pos)
    if not m:
        return pos
    return m.end()
