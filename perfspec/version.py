# perfspec/version.py
"""`perf version` — version string and build feature report."""

from __future__ import annotations
from pathlib import Path
import subprocess
from typing import List, Optional, Tuple

from rich.console import Console
from rich.text import Text

from . import __version__

# (feature, config macro, built in)
BUILD_FEATURES: List[Tuple[str, str, bool]] = [
    ("dwarf", "HAVE_DWARF_SUPPORT", False),
    ("dwarf_getlocations", "HAVE_DWARF_GETLOCATIONS_SUPPORT", False),
    ("syscall_table", "HAVE_SYSCALL_TABLE_SUPPORT", False),
    ("libbfd", "HAVE_LIBBFD_SUPPORT", False),
    ("debuginfod", "HAVE_DEBUGINFOD_SUPPORT", False),
    ("libelf", "HAVE_LIBELF_SUPPORT", False),
    ("libnuma", "HAVE_LIBNUMA_SUPPORT", False),
    ("numa_num_possible_cpus", "HAVE_NUMA_NUM_POSSIBLE_NODES", False),
    ("libperl", "HAVE_LIBPERL_SUPPORT", False),
    ("libpython", "HAVE_LIBPYTHON_SUPPORT", False),
    ("libslang", "HAVE_SLANG_SUPPORT", False),
    ("libcrypto", "HAVE_LIBCRYPTO_SUPPORT", False),
    ("libunwind", "HAVE_LIBUNWIND_SUPPORT", False),
    ("libdw-dwarf-unwind", "HAVE_DWARF_SUPPORT", False),
    ("libcapstone", "HAVE_LIBCAPSTONE_SUPPORT", False),
    ("zlib", "HAVE_ZLIB_SUPPORT", False),
    ("lzma", "HAVE_LZMA_SUPPORT", False),
    ("get_cpuid", "HAVE_AUXTRACE_SUPPORT", False),
    ("bpf", "HAVE_LIBBPF_SUPPORT", False),
    ("aio", "HAVE_AIO_SUPPORT", False),
    ("zstd", "HAVE_ZSTD_SUPPORT", False),
    ("libpfm4", "HAVE_LIBPFM", False),
    # tracepoints are listed straight from tracefs
    ("libtraceevent", "HAVE_LIBTRACEEVENT", True),
    ("bpf_skeletons", "HAVE_BPF_SKEL", False),
    ("dwarf-unwind-support", "HAVE_DWARF_UNWIND_SUPPORT", False),
    ("libopencsd", "HAVE_CSTRACE_SUPPORT", False),
]


def short_commit(repo: Optional[Path] = None) -> Optional[str]:
    """Abbreviated HEAD commit of the source checkout, None outside git."""
    repo = repo if repo is not None else Path(__file__).resolve().parent
    try:
        result = subprocess.run(
            ["git", "-C", str(repo), "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def version_string(commit: Optional[str] = None) -> str:
    if commit:
        return f"perf version {__version__}.g{commit}"
    return f"perf version {__version__}"


def feature_line(feature: str, macro: str, enabled: bool) -> Text:
    status = "on" if enabled else "OFF"
    return Text.assemble(
        f"{feature:>22}: [",
        (f"{status:^5}", "green" if enabled else "red"),
        f"] # {macro}",
    )


def do_version(build_options: bool = False, console: Optional[Console] = None) -> None:
    console = console if console is not None else Console(highlight=False)
    console.print(version_string(short_commit()), markup=False)
    if build_options:
        for feature, macro, enabled in BUILD_FEATURES:
            console.print(feature_line(feature, macro, enabled))
