"""Benchmark building a large table, with optional memory stats.

Run with:
    python benchmarks/benchmark_build.py
"""

import gc
import statistics
import time
import tracemalloc

from htmlwriter import escape, new_html
from htmlwriter.profiling import profiled_build

ROWS = [(i, f"name <{i}>", i * 1.5) for i in range(2000)]


def build_table() -> str:
    def row(item, h):
        n, name, score = item
        return h.tr(lambda h: h.td(str(n)).td(escape(name)).td(f"{score:.1f}"))

    return (
        new_html()
        .html(lambda h: h.body(lambda h: h.table(lambda h: h.tbody(lambda h: h.roll_in(ROWS, row)))))
        .build()
    )


def bench(iterations: int = 20) -> list[float]:
    timings = []
    for _ in range(iterations):
        start = time.perf_counter()
        build_table()
        timings.append((time.perf_counter() - start) * 1000)
    return timings


def main() -> None:
    timings = bench()
    print(f"build_table: median {statistics.median(timings):.2f}ms over {len(timings)} runs")

    with profiled_build() as metrics:
        build_table()
    print("profile:", metrics.summary())

    gc.collect()
    tracemalloc.start()
    build_table()
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    print(f"peak memory: {peak / 1024:.1f} KiB")


if __name__ == "__main__":
    main()
