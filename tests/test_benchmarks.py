"""Tests for the benchmark timing aggregation."""

import pytest

import pullchain as pc
from benchmarks._pipeline import _compute_all_stats, to_table
from benchmarks._registery import (
    CALLS_BY_RUN,
    Benchmark,
    Row,
    Variant,
    collect_raw_timings,
)


def _rows(name: str, size: int, times: list[float]) -> list[Row]:
    return [Row("Cat", name, size, idx, t) for idx, t in enumerate(times)]


def test_stats_are_median_per_call_grouped_by_name_and_size() -> None:
    """Test that raw rows are grouped and reduced to a per-call median."""
    rows = pc.Seq(
        tuple(
            _rows("fast", 10, [1.0, 3.0, 2.0])
            + _rows("fast", 20, [4.0, 4.0])
            + _rows("slow", 10, [9.0])
        )
    )
    stats = _compute_all_stats(rows).collect()
    assert stats.columns == ["category", "name", "size", "median", "runs"]
    assert stats.rows() == [
        ("Cat", "fast", 10, 2.0 / CALLS_BY_RUN, 3),
        ("Cat", "fast", 20, 4.0 / CALLS_BY_RUN, 2),
        ("Cat", "slow", 10, 9.0 / CALLS_BY_RUN, 1),
    ]


def test_to_table_has_one_row_per_stat() -> None:
    """Test that the rendered table carries every aggregated row."""
    rows = pc.Seq(tuple(_rows("a", 1, [1.0]) + _rows("b", 1, [1.0])))
    assert to_table(_compute_all_stats(rows).collect()).row_count == 2


def test_collect_raw_timings_yields_one_row_per_run() -> None:
    """Test that every run of every variant produces a row, in order."""
    calls: list[None] = []

    def _fn() -> None:
        calls.append(None)

    bench = Benchmark(
        "Cat", "noop", pc.Seq((Variant(4, 2, _fn), Variant(8, 3, _fn)))
    )
    rows = collect_raw_timings(pc.Seq((bench,)))
    assert rows.length() == 5
    assert tuple((r.size, r.run_idx) for r in rows) == (
        (4, 0),
        (4, 1),
        (8, 0),
        (8, 1),
        (8, 2),
    )
    assert len(calls) == 5 * CALLS_BY_RUN


@pytest.mark.parametrize("times", [[0.5], [0.5, 0.5, 0.5, 0.5]])
def test_runs_counts_rows(times: list[float]) -> None:
    """Test that the runs column counts the rows of each group."""
    stats = _compute_all_stats(pc.Seq(tuple(_rows("x", 1, times)))).collect()
    assert stats["runs"].to_list() == [len(times)]
