#!/usr/bin/env python3
"""
Performance benchmark for building and rendering htmltag elements.
Builds a table of N rows with escaped text and attributes, then renders it.
"""

from __future__ import annotations

import argparse
import time

from htmltag import Tag


def build_table(rows: int, cols: int) -> Tag:
    table = Tag("table", {"class": "data"})
    for r in range(rows):
        tr = Tag("tr", {"data-row": r})
        for c in range(cols):
            tr.append(Tag("td", {"title": f"cell \"{r}\" & '{c}'"}).set_text_content(f"<{r},{c}> & more"))
        tr.append(Tag("td").append(Tag("img", {"src": f"icon-{r}.png", "alt": ""})))
        table.append(tr)
    return table


def run(rows: int, cols: int, iterations: int) -> None:
    build_times = []
    render_times = []
    size = 0
    for _ in range(iterations):
        start = time.perf_counter()
        table = build_table(rows, cols)
        build_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        size = len(table.render())
        render_times.append(time.perf_counter() - start)

    print(f"Rows: {rows}  Cols: {cols}  Iterations: {iterations}  Output: {size:,} chars")
    print(f"  build   best {min(build_times) * 1000:8.2f} ms  mean {sum(build_times) / iterations * 1000:8.2f} ms")
    print(f"  render  best {min(render_times) * 1000:8.2f} ms  mean {sum(render_times) / iterations * 1000:8.2f} ms")


def main():
    parser = argparse.ArgumentParser(description="Benchmark htmltag element building and rendering")
    parser.add_argument("--rows", type=int, default=1000, help="Number of table rows (default: 1000)")
    parser.add_argument("--cols", type=int, default=10, help="Number of cells per row (default: 10)")
    parser.add_argument("--iterations", type=int, default=5, help="Number of runs (default: 5)")
    args = parser.parse_args()
    run(args.rows, args.cols, args.iterations)


if __name__ == "__main__":
    main()
