# perfspec/events/parser.py
from __future__ import annotations
from typing import Callable, List, Optional, Sequence, Tuple
from .ast import (
    Modifier, Modifiers, SymbolicEvent, TracepointEvent, RawEvent, Event,
    MAX_MODIFIERS, RAW_VALUE_LIMIT,
)
from ..lex import is_name_start, is_name_continue, is_modifier_char, match_hex_run

# Grammar we parse (ordered choice, every alternative must reach end of input):
#   event      := raw / tracepoint / symbolic
#   raw        := "r" "0x"? HEX+ modifiers? EOF
#   tracepoint := name ":" name modifiers? EOF
#   symbolic   := name modifiers? EOF
#   modifiers  := ":" MOD{1,16}
#   name       := NAME_START NAME_CONT+
#
#   MOD        := [ukhIGHpPSDWeb]
#   NAME_START := alphanumeric | [_*?\[\]]
#   NAME_CONT  := NAME_START | [.!\-]
#
# On failure the error reports the furthest offset any alternative reached,
# together with everything that was expected there.


def _join_expected(items: Sequence[str]) -> str:
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return ", ".join(items[:-1]) + " or " + items[-1]

def _caret_snippet(src: str, pos: int) -> str:
    """Specifier text with a caret (^) under offset pos."""
    return f"{src}\n{' ' * pos}^"


class ParseError(SyntaxError):
    """Specifier does not match the grammar.

    Attributes
    ----------
    source : str
        The specifier that was parsed.
    pos : int
        0-based character offset of the failure.
    expected : tuple of str
        What the grammar would have accepted at `pos`.
    unexpected : str or None
        The offending character, None at end of input.
    """
    def __init__(self, source: str, pos: int, expected: Sequence[str] = (),
                 unexpected: Optional[str] = None, message: Optional[str] = None):
        self.source = source
        self.pos = pos
        self.expected = tuple(expected)
        self.unexpected = unexpected
        super().__init__(message if message is not None else self._format())

    def _format(self) -> str:
        lines = [f"Parse error at {self.pos}"]
        if self.unexpected is None:
            lines.append("Unexpected end of input")
        else:
            lines.append(f"Unexpected `{self.unexpected}`")
        if self.expected:
            lines.append("Expected " + _join_expected(self.expected))
        return "\n".join(lines)

    def snippet(self) -> str:
        return _caret_snippet(self.source, self.pos)

    def shifted(self, source: str, offset: int) -> "ParseError":
        """Same failure reported against an enclosing string."""
        return ParseError(source, self.pos + offset, self.expected, self.unexpected)


class RawValueOverflowError(ParseError):
    """Raw event code has more than 64 significant bits."""
    def __init__(self, source: str, pos: int, digits: str):
        self.digits = digits
        super().__init__(
            source, pos, ("a hex value below 2**64",), source[pos] if pos < len(source) else None,
            message=f"Parse error at {pos}\nHex value `{digits}` does not fit in 64 bits",
        )

    def shifted(self, source: str, offset: int) -> "ParseError":
        return RawValueOverflowError(source, self.pos + offset, self.digits)


class _TS:
    def __init__(self, src: str):
        self.s = src
        self.i = 0
        self.n = len(src)
        # furthest failure seen so far: offset and what was expected there
        self._far_pos = -1
        self._far_expected: List[str] = []

    def _peek(self, k: int = 0) -> Optional[str]:
        j = self.i + k
        if j >= self.n:
            return None
        return self.s[j]

    def _starts(self, lit: str) -> bool:
        return self.s.startswith(lit, self.i)

    def _bump(self, n: int = 1) -> None:
        self.i += n

    def _eof(self) -> bool:
        return self.i >= self.n

    # ---- error bookkeeping ----

    def _note(self, pos: int, expected: str) -> None:
        if pos > self._far_pos:
            self._far_pos = pos
            self._far_expected = [expected]
        elif pos == self._far_pos and expected not in self._far_expected:
            self._far_expected.append(expected)

    def _furthest(self) -> ParseError:
        pos = max(self._far_pos, 0)
        unexpected = self.s[pos] if pos < self.n else None
        return ParseError(self.s, pos, self._far_expected, unexpected)

    def _err(self, expected: str) -> ParseError:
        self._note(self.i, expected)
        return self._furthest()

    def _eat(self, lit: str) -> None:
        if not self._starts(lit):
            raise self._err(f"`{lit}`")
        self._bump(len(lit))

    def _expect_eof(self) -> None:
        if not self._eof():
            raise self._err("end of input")

    # ---- tokens ----

    def _modifier(self) -> Modifier:
        ch = self._peek()
        if not is_modifier_char(ch):
            raise self._err("a modifier character")
        self._bump(1)
        return Modifier(ch)

    def _modifiers(self) -> Modifiers:
        self._eat(":")
        mods = [self._modifier()]
        while len(mods) < MAX_MODIFIERS:
            save = self.i
            try:
                mods.append(self._modifier())
            except ParseError:
                self.i = save
                break
        return tuple(mods)

    def _opt_modifiers(self) -> Modifiers:
        save = self.i
        try:
            return self._modifiers()
        except ParseError:
            self.i = save
            return ()

    def _name(self) -> str:
        start = self.i
        if not is_name_start(self._peek()):
            raise self._err("an event name")
        self._bump(1)
        if not is_name_continue(self._peek()):
            raise self._err("a name character")
        while is_name_continue(self._peek()):
            self._bump(1)
        return self.s[start:self.i]

    # ---- event forms ----

    def _raw_event(self) -> RawEvent:
        self._eat("r")
        if self._starts("0x"):
            self._bump(2)
        start = self.i
        end = match_hex_run(self.s, start)
        if end == start:
            raise self._err("a hex digit")
        self.i = end
        digits = self.s[start:end]
        mods = self._opt_modifiers()
        self._expect_eof()
        value = int(digits, 16)
        if value >= RAW_VALUE_LIMIT:
            raise RawValueOverflowError(self.s, start, digits)
        return RawEvent(value, mods)

    def _tracepoint_event(self) -> TracepointEvent:
        category = self._name()
        self._eat(":")
        name = self._name()
        mods = self._opt_modifiers()
        self._expect_eof()
        return TracepointEvent(category, name, mods)

    def _symbolic_event(self) -> SymbolicEvent:
        name = self._name()
        mods = self._opt_modifiers()
        self._expect_eof()
        return SymbolicEvent(name, mods)

    def parse_event(self) -> Event:
        alts: Tuple[Callable[[], Event], ...] = (
            self._raw_event,
            self._tracepoint_event,
            self._symbolic_event,
        )
        for alt in alts:
            self.i = 0
            try:
                return alt()
            except RawValueOverflowError:
                raise
            except ParseError:
                continue
        raise self._furthest()

    def parse_whole(self, rule: Callable[[], object]):
        """Run one token rule against the whole input."""
        try:
            out = rule()
            self._expect_eof()
        except ParseError:
            raise self._furthest() from None
        return out


def parse_event(text: str) -> Event:
    """Parse one `-e` specifier (already trimmed) into an event descriptor.

    Raises
    ------
    ParseError
        No alternative matched the whole input.
    RawValueOverflowError
        A raw event code does not fit in 64 bits.
    """
    return _TS(text).parse_event()

def parse_modifier(text: str) -> Modifier:
    """Parse exactly one modifier character."""
    ts = _TS(text)
    return ts.parse_whole(ts._modifier)

def parse_modifiers(text: str) -> Modifiers:
    """Parse a standalone modifier suffix such as `:uppp`."""
    ts = _TS(text)
    return ts.parse_whole(ts._modifiers)

def parse_name(text: str) -> str:
    """Parse a standalone name token."""
    ts = _TS(text)
    return ts.parse_whole(ts._name)
