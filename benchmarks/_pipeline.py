"""Aggregation and rendering of benchmark timings."""

import polars as pl
from rich.table import Table

import pullchain as pc

from ._registery import BENCHMARKS, CALLS_BY_RUN, Row, collect_raw_timings


def run_pipeline(category: str | None = None) -> pl.DataFrame:
    """Run the registered benchmarks, optionally restricted to one category."""
    benchmarks = (
        pc.values(BENCHMARKS)
        .filter(lambda b: category is None or b.category == category)
        .collect()
    )
    if benchmarks.length() == 0:
        msg = f"No benchmarks registered for category {category!r}"
        raise ValueError(msg)
    return _compute_all_stats(collect_raw_timings(benchmarks)).collect()


def _compute_all_stats(raw_rows: pc.Seq[Row]) -> pl.LazyFrame:
    """Median time per call for each benchmark and size."""
    return (
        pl.LazyFrame(raw_rows.inner(), schema=list(Row._fields), orient="row")
        .group_by("category", "name", "size")
        .agg(
            (pl.col("time") / CALLS_BY_RUN).median().alias("median"),
            pl.len().alias("runs"),
        )
        .sort("category", "name", "size")
    )


def to_table(stats: pl.DataFrame) -> Table:
    """Render stats as a rich table, one row per benchmark and size."""
    table = Table(title="pullchain benchmarks")
    table.add_column("category", style="cyan")
    table.add_column("name", style="magenta")
    table.add_column("size", justify="right")
    table.add_column("runs", justify="right")
    table.add_column("median (µs)", justify="right", style="green")
    pc.values(stats.rows(named=True)).for_each(
        lambda s: table.add_row(
            s["category"],
            s["name"],
            str(s["size"]),
            str(s["runs"]),
            f"{s['median'] * 1e6:.2f}",
        )
    )
    return table
