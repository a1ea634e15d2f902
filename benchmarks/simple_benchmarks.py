import os
from timeit import timeit

from fnkit.types.table import Table, set_metadata
from fnkit.values import copy, is_equal


def _with_cycle_safety(enabled: bool, fn):
    """Run ``fn`` with FNKIT_CYCLE_SAFE forced on or off, restoring the old setting."""
    previous = os.environ.get("FNKIT_CYCLE_SAFE")
    os.environ["FNKIT_CYCLE_SAFE"] = "1" if enabled else "0"
    try:
        return fn()
    finally:
        if previous is None:
            del os.environ["FNKIT_CYCLE_SAFE"]
        else:
            os.environ["FNKIT_CYCLE_SAFE"] = previous


def time_guarded(fn, rounds: int) -> float:
    """Time ``fn`` with the visited-set / memo bookkeeping enabled."""
    fn()  # Warmup
    return _with_cycle_safety(True, lambda: timeit(fn, number=rounds))


def time_naive(fn, rounds: int) -> float:
    """Time ``fn`` with plain recursion only (input must be acyclic)."""
    fn()
    return _with_cycle_safety(False, lambda: timeit(fn, number=rounds))


# Workloads

def nested_records(n_records: int = 200, depth: int = 4):
    def record(i: int, level: int):
        if level == 0:
            return {"id": i, "tags": ["a", "b", "c"], "score": i * 0.5}
        return {"id": i, "child": record(i, level - 1), "items": list(range(5))}
    return [record(i, depth) for i in range(n_records)]


def wide_table(n_keys: int = 2000) -> Table:
    shared = Table({"kind": "row"})
    table = Table({f"k{i}": [i, str(i), {"v": i}] for i in range(n_keys)})
    return set_metadata(table, {"__index": shared})


def _print_pair(name: str, fn, rounds: int) -> None:
    tsafe = time_guarded(fn, rounds)
    tnaive = time_naive(fn, rounds)
    print(f"Benchmark: {name}")
    print(f"  cycle-safe: {tsafe:.6f}s  |  naive: {tnaive:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    records = nested_records()
    records_copy = copy(records)
    table = wide_table()
    table_copy = copy(table)

    _print_pair("is_equal nested records", lambda: is_equal(records, records_copy), rounds=50)
    _print_pair("copy nested records", lambda: copy(records), rounds=50)
    _print_pair("is_equal wide table", lambda: is_equal(table, table_copy), rounds=50)
    _print_pair("copy wide table", lambda: copy(table), rounds=50)
