import timeit
from collections.abc import Callable, Iterator
from functools import partial
from typing import Final, NamedTuple, Self

import cytoolz as cz
from rich.console import Console
from rich.progress import BarColumn, Progress, TaskID, TaskProgressColumn, TextColumn

import pullchain as pc

type BenchFn = Callable[[], object]


WARMUP_RUNS: Final = 5
CALLS_BY_RUN: Final = 10
TARGET_BENCH_SEC: Final = 1
MIN_RUNS: Final = 20
SIZES: Final = (256, 1024, 4096)

CONSOLE: Final = Console()


class Variant(NamedTuple):
    """One benchmark function bound to an input of a given size."""

    size: int
    n_runs: int
    fn: BenchFn

    @classmethod
    def calibrate(cls, fn: BenchFn, size: int) -> Self:
        """Time a few warmup calls to pick how many runs fit the time budget."""
        per_call = timeit.timeit(fn, number=WARMUP_RUNS) / WARMUP_RUNS
        budget = TARGET_BENCH_SEC / 2 / max(per_call, 1e-9) / CALLS_BY_RUN
        return cls(size, max(MIN_RUNS, int(budget)), fn)


class Benchmark(NamedTuple):
    category: str
    name: str
    variants: pc.Seq[Variant]

    def total_runs(self) -> int:
        return self.variants.fold(lambda acc, v: acc + v.n_runs, 0)


class Row(NamedTuple):
    """Wall time of `CALLS_BY_RUN` calls, for one run of one variant."""

    category: str
    name: str
    size: int
    run_idx: int
    time: float


BENCHMARKS: list[Benchmark] = []


def bench[P](
    *, gen: Callable[[pc.Iter[int]], P] = lambda size: size.collect()
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Decorator to register benchmarks with multiple data sizes.

    `gen` receives the integers `1..size` as an `Iter` and builds the benchmark input.
    """

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        def _variant(size: int) -> Variant:
            return Variant.calibrate(partial(func, gen(pc.iota().take(size))), size)

        category, _, name = func.__qualname__.rpartition(".")
        BENCHMARKS.append(
            Benchmark(category, name, pc.values(SIZES).map(_variant).collect())
        )
        return func

    return decorator


def collect_raw_timings(benchmarks: pc.Seq[Benchmark]) -> pc.Seq[Row]:
    """Run every variant of every benchmark, one `Row` per run."""
    total = benchmarks.fold(lambda acc, b: acc + b.total_runs(), 0)
    CONSOLE.print(
        f"Found {benchmarks.length()} benchmarks, {total} total runs",
        style="bold white",
    )
    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total)
        rows = cz.itertoolz.concat(
            benchmarks.iter().map(
                lambda b: cz.itertoolz.mapcat(
                    partial(_time_variant, progress, task, b), b.variants
                )
            )
        )
        return pc.Seq.from_(rows)


def _time_variant(
    progress: Progress, task: TaskID, bench: Benchmark, variant: Variant
) -> Iterator[Row]:
    progress.update(
        task, description=f"[cyan]{bench.category}: {bench.name} @ {variant.size}"
    )

    def _run(run_idx: int) -> Row:
        elapsed = timeit.timeit(variant.fn, number=CALLS_BY_RUN)
        progress.advance(task)
        return Row(bench.category, bench.name, variant.size, run_idx, elapsed)

    return pc.iota(-1).take(variant.n_runs).map(_run)
