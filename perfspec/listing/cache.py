# perfspec/listing/cache.py
"""Legacy hardware cache events (PERF_TYPE_HW_CACHE).

Names are the cache x op x result combinations the kernel accepts. The
canonical spelling of each combination is listed; every other spelling is
marked deprecated and only shown with `--deprecated`.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

# (cache id, names, supported ops, description)
_HW_CACHE_ID = [
    (0, ["L1-dcache", "l1-d", "l1d", "L1-data"], [0, 1, 2], "Level 1 data cache"),
    (1, ["L1-icache", "l1-i", "l1i", "L1-instruction"], [0, 2], "Level 1 instruction cache"),
    (2, ["LLC", "L2"], [0, 1, 2], "Last level cache"),
    (3, ["dTLB", "d-tlb", "Data-TLB"], [0, 1, 2], "Data TLB"),
    (4, ["iTLB", "i-tlb", "Instruction-TLB"], [0], "Instruction TLB"),
    (5, ["branch", "branches", "bpu", "btb", "bpc"], [0], "Branch prediction unit"),
    (6, ["node"], [0, 1, 2], "Local memory"),
]

_HW_CACHE_OP = [
    (0, ["load", "loads", "read"], "read"),
    (1, ["store", "stores", "write"], "write"),
    (2, ["prefetch", "prefetches", "speculative-read", "speculative-load"], "prefetch"),
]

_HW_CACHE_RESULT = [
    (0, ["refs", "Reference", "ops", "access"], "accesses"),
    (1, ["misses", "miss"], "misses"),
]

# PERF_TYPE_HARDWARE owns these names
_RESERVED = ("branch-misses", "branches")


@dataclass(frozen=True)
class CacheEvent:
    name: str
    config: int
    desc: str
    deprecated: bool

    @property
    def encoding(self) -> str:
        return f"hw_cache/config={self.config:#08x}/"


def _config(cache_id: int, op: int, result: int) -> int:
    return cache_id | (op << 8) | (result << 16)


def build_cache_events() -> Tuple[CacheEvent, ...]:
    out: List[CacheEvent] = []

    def add(name: str, cache_id: int, op: int, result: int, desc: str, deprecated: bool) -> None:
        if name in _RESERVED:
            return
        # L2 means the last level cache on many machines; keep it but hide it
        if name.startswith("L2"):
            desc = desc.replace("Last level cache", "Level 2 (or higher) last level cache")
            deprecated = True
        out.append(CacheEvent(name, _config(cache_id, op, result), desc, deprecated))

    for (cache_id, names, ops, cache_desc) in _HW_CACHE_ID:
        for name in names:
            add(name, cache_id, 0, 0, f"{cache_desc} read accesses.", True)

            for (op, op_names, op_desc) in _HW_CACHE_OP:
                if op not in ops:
                    continue
                for op_name in op_names:
                    deprecated = names[0] != name or op_names[1] != op_name
                    add(f"{name}-{op_name}", cache_id, op, 0,
                        f"{cache_desc} {op_desc} accesses.", deprecated)

                    for (result, result_names, result_desc) in _HW_CACHE_RESULT:
                        for result_name in result_names:
                            deprecated = (names[0] != name or op_names[0] != op_name
                                          or result == 0 or result_names[0] != result_name)
                            add(f"{name}-{op_name}-{result_name}", cache_id, op, result,
                                f"{cache_desc} {op_desc} {result_desc}.", deprecated)

            for (result, result_names, result_desc) in _HW_CACHE_RESULT:
                for result_name in result_names:
                    add(f"{name}-{result_name}", cache_id, 0, result,
                        f"{cache_desc} read {result_desc}.", True)
    return tuple(out)


CACHE_EVENTS = build_cache_events()
