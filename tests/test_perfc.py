"""Tests for the perfc command line."""

import argparse
import json
import sys

from perfspec import perfc, version
from perfspec.perfc import main


def test_stat_symbolic(capsys):
    assert main(["stat", "-e", "cpu-cycles:P"]) == 0
    out = capsys.readouterr().out
    assert "[PARSE OK] events=1" in out
    assert "symbolic name=cpu-cycles modifiers=USE_MAX_PRECISE_LEVEL" in out


def test_stat_group_and_repeated_flags(capsys):
    assert main(["stat", "-e", "{r0500:u,sched:sched_switch}", "-e", "instructions"]) == 0
    out = capsys.readouterr().out
    assert "[PARSE OK] events=2" in out
    assert "group of 2" in out
    assert "raw config=0x500 modifiers=USER_SPACE_COUNTING" in out
    assert "tracepoint category=sched name=sched_switch modifiers=-" in out


def test_stat_json(capsys):
    assert main(["stat", "-j", "-e", "r0500,sched:sched_switch:P"]) == 0
    objs = json.loads(capsys.readouterr().out)
    assert objs == [
        {"type": "raw", "value": "0x500", "modifiers": []},
        {"type": "tracepoint", "category": "sched", "name": "sched_switch", "modifiers": ["P"]},
    ]


def test_stat_syntax_error(capsys):
    assert main(["stat", "-e", "cpu-cycles:"]) == 2
    err = capsys.readouterr().err
    assert "[SYNTAX ERROR]" in err
    assert "Parse error at" in err
    assert "^" in err


def test_stat_overflow(capsys):
    assert main(["stat", "-e", "r" + "f" * 17]) == 2
    assert "does not fit in 64 bits" in capsys.readouterr().err


def test_stat_debug(capsys):
    assert main(["stat", "-D", "-e", "cycles,instructions"]) == 0
    assert "[DEBUG] 'cycles,instructions' -> 2 event(s)" in capsys.readouterr().err


def test_list_hw(capsys):
    assert main(["list", "hw"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("List of pre-defined events")
    assert "  cpu-cycles OR cycles" in out


def test_list_output_file(tmp_path, capsys):
    dest = tmp_path / "sw.json"
    assert main(["list", "sw", "--json", "-o", str(dest)]) == 0
    assert capsys.readouterr().out == ""
    names = [o["EventName"] for o in json.loads(dest.read_text())]
    assert "context-switches" in names


def test_list_tracepoints(tmp_path, capsys):
    (tmp_path / "sched" / "sched_switch").mkdir(parents=True)
    (tmp_path / "sched" / "sched_switch" / "id").write_text("7")
    assert main(["list", "tracepoint", "--details", "--tracefs", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "  sched:sched_switch" in out
    assert "tracepoint/config=0x7/" in out


def test_list_missing_tracefs(tmp_path, capsys):
    assert main(["list", "tracepoint", "--tracefs", str(tmp_path / "nope")]) == 2
    assert "[ERROR] TracefsError" in capsys.readouterr().err


def test_version(monkeypatch, capsys):
    monkeypatch.setattr(version, "short_commit", lambda repo=None: "cafe123")
    assert main(["version"]) == 0
    assert capsys.readouterr().out.strip() == f"perf version {version.__version__}.gcafe123"


class _Tty:
    def __init__(self):
        self.text = ""

    def isatty(self):
        return True

    def write(self, s):
        self.text += s
        return len(s)

    def flush(self):
        pass


class _Pipe:
    def isatty(self):
        return False


def _list_args(**kw):
    ns = {"output": None, "no_pager": False}
    ns.update(kw)
    return argparse.Namespace(**ns)


def test_should_page():
    assert perfc._should_page(_list_args(), _Tty())
    assert not perfc._should_page(_list_args(), _Pipe())
    assert not perfc._should_page(_list_args(), object())
    assert not perfc._should_page(_list_args(output="out.txt"), _Tty())
    assert not perfc._should_page(_list_args(no_pager=True), _Tty())


def test_list_not_paged_without_terminal(monkeypatch, capsys):
    paged = []
    monkeypatch.setattr(perfc, "_page", paged.append)
    assert main(["list", "hw"]) == 0
    assert paged == []
    assert "  cpu-cycles OR cycles" in capsys.readouterr().out


def test_list_not_paged_with_output_file(monkeypatch, tmp_path):
    paged = []
    monkeypatch.setattr(perfc, "_page", paged.append)
    monkeypatch.setattr(sys, "stdout", _Tty())
    assert main(["list", "hw", "-o", str(tmp_path / "hw.txt")]) == 0
    assert paged == []
    assert "cpu-cycles" in (tmp_path / "hw.txt").read_text()


def test_list_paged_on_terminal(monkeypatch, capsys):
    paged = []
    monkeypatch.setattr(perfc, "_page", paged.append)
    monkeypatch.setattr(perfc, "_should_page", lambda args, stream: True)
    assert main(["list", "hw"]) == 0
    assert len(paged) == 1
    assert paged[0].startswith("List of pre-defined events")
    assert "  cpu-cycles OR cycles" in paged[0]
    assert capsys.readouterr().out == ""


def test_list_no_pager_flag(monkeypatch, capsys):
    paged = []
    monkeypatch.setattr(perfc, "_page", paged.append)
    tty = _Tty()
    monkeypatch.setattr(sys, "stdout", tty)
    assert main(["list", "hw", "--no-pager"]) == 0
    assert paged == []
    assert "  cpu-cycles OR cycles" in tty.text
