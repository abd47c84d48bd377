"""Benchmarks for the Maybe and Either containers against hand-written None checks."""

import statistics
import timeit
from collections.abc import Callable
from enum import IntEnum, StrEnum, auto
from functools import wraps
from typing import Annotated, Final, NamedTuple

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table
from rich.text import Text

import pyomonads as pm

app = typer.Typer(help="Maybe/Either benchmarks: containers vs plain Python")


class Runs(IntEnum):
    """Cost category for benchmarks, determining iteration counts."""

    CHEAP = 2_000
    NORMAL = 1_000
    EXPENSIVE = 200


class Implementation(StrEnum):
    """Implementation type for benchmarks."""

    MONAD = auto()
    PLAIN = auto()


class BenchmarkResult(NamedTuple):
    """Result of a single benchmark comparison."""

    category: str
    name: str
    monad_median: float
    plain_median: float
    overhead: float


class BenchmarkMetadata(NamedTuple):
    """Metadata for a benchmark function."""

    category: str
    name: str
    cost: Runs
    implementation: Implementation


TEST_VALUE: Final[int] = 42
NULLABLE_DATA: Final = [x if x % 3 != 0 else None for x in range(100)]
type BenchFn = Callable[[], object]

CONSOLE: Final = Console()
RESULTS: list[BenchmarkResult] = []
BENCHMARK_REGISTRY: dict[BenchFn, BenchmarkMetadata] = {}


def bench(
    category: str,
    name: str,
    implementation: Implementation,
    cost: Runs = Runs.CHEAP,
) -> Callable[[BenchFn], BenchFn]:
    """Decorator to register a benchmark function with its metadata.

    Args:
        category (str): The category of the benchmark (e.g., "Maybe").
        name (str): The name of the benchmark (e.g., "map").
        implementation (Implementation): Container or plain Python.
        cost (Runs): The cost category, defaults to CHEAP.

    Returns:
        Callable: The decorated function.
    """

    def decorator(func: BenchFn) -> BenchFn:
        @wraps(func)
        def wrapper() -> object:
            return func()

        BENCHMARK_REGISTRY[wrapper] = BenchmarkMetadata(
            category=category, name=name, cost=cost, implementation=implementation
        )
        return wrapper

    return decorator


# =============================================================================
# MAYBE
# =============================================================================


@bench("Maybe", "wrap", Implementation.MONAD)
def _monad_wrap() -> object:
    return [pm.maybe(x) for x in NULLABLE_DATA]


@bench("Maybe", "wrap", Implementation.PLAIN)
def _plain_wrap() -> object:
    return [x for x in NULLABLE_DATA]


@bench("Maybe", "map + get_or_else", Implementation.MONAD, Runs.NORMAL)
def _monad_map_default() -> object:
    return [pm.maybe(x).map(lambda v: v * 2).get_or_else(0) for x in NULLABLE_DATA]


@bench("Maybe", "map + get_or_else", Implementation.PLAIN, Runs.NORMAL)
def _plain_map_default() -> object:
    return [x * 2 if x is not None else 0 for x in NULLABLE_DATA]


@bench("Maybe", "flat_map chain", Implementation.MONAD, Runs.NORMAL)
def _monad_flat_map() -> object:
    def _half(v: int) -> pm.Maybe[int]:
        return pm.Maybe.just(v // 2) if v % 2 == 0 else pm.Maybe.nothing()

    return [pm.maybe(x).flat_map(_half).flat_map(_half) for x in NULLABLE_DATA]


@bench("Maybe", "flat_map chain", Implementation.PLAIN, Runs.NORMAL)
def _plain_flat_map() -> object:
    def _half(v: int | None) -> int | None:
        if v is None or v % 2 != 0:
            return None
        return v // 2

    return [_half(_half(x)) for x in NULLABLE_DATA]


# =============================================================================
# EITHER
# =============================================================================


def _parse(x: int | None) -> pm.Either[str, int]:
    return pm.either("missing", None) if x is None else pm.Right(x)


@bench("Either", "map + fold", Implementation.MONAD, Runs.NORMAL)
def _monad_fold() -> object:
    return [
        _parse(x).map(lambda v: v + 1).fold(lambda e: -1, lambda v: v)
        for x in NULLABLE_DATA
    ]


@bench("Either", "map + fold", Implementation.PLAIN, Runs.NORMAL)
def _plain_fold() -> object:
    return [-1 if x is None else x + 1 for x in NULLABLE_DATA]


@bench("Either", "map_left + get_or_else", Implementation.MONAD, Runs.NORMAL)
def _monad_map_left() -> object:
    return [
        _parse(x).map_left(str.upper).get_or_else(TEST_VALUE) for x in NULLABLE_DATA
    ]


@bench("Either", "map_left + get_or_else", Implementation.PLAIN, Runs.NORMAL)
def _plain_map_left() -> object:
    return [TEST_VALUE if x is None else x for x in NULLABLE_DATA]


def bench_one(monad_fn: BenchFn, plain_fn: BenchFn, runs: int | None = None) -> None:
    """Run a single benchmark pair multiple times and store median results.

    Args:
        monad_fn (Callable): The container implementation benchmark function.
        plain_fn (Callable): The plain Python benchmark function.
        runs (int | None): Overrides the registered cost when given.
    """
    meta = BENCHMARK_REGISTRY[monad_fn]
    n_runs = runs if runs is not None else meta.cost.value
    n_calls = max(1, n_runs // 10)

    monad_times = [timeit.timeit(monad_fn, number=n_calls) for _ in range(n_runs)]
    plain_times = [timeit.timeit(plain_fn, number=n_calls) for _ in range(n_runs)]
    monad_median = statistics.median(monad_times)
    plain_median = statistics.median(plain_times)
    RESULTS.append(
        BenchmarkResult(
            category=meta.category,
            name=meta.name,
            monad_median=monad_median,
            plain_median=plain_median,
            overhead=monad_median / plain_median,
        )
    )


def _pair_benchmarks(category: str | None) -> list[tuple[BenchFn, BenchFn]]:
    pairs: dict[tuple[str, str], dict[Implementation, BenchFn]] = {}
    for func, meta in BENCHMARK_REGISTRY.items():
        if category is not None and meta.category.lower() != category.lower():
            continue
        pairs.setdefault((meta.category, meta.name), {})[meta.implementation] = func

    benchmarks: list[tuple[BenchFn, BenchFn]] = []
    for (cat, name), impls in pairs.items():
        if Implementation.MONAD not in impls or Implementation.PLAIN not in impls:
            CONSOLE.print(
                f"[yellow]Warning: Skipping {cat}/{name} - missing implementation[/yellow]"
            )
            continue
        benchmarks.append((impls[Implementation.MONAD], impls[Implementation.PLAIN]))
    return benchmarks


def _run_all_benchmarks(category: str | None, runs: int | None) -> None:
    benchmarks = _pair_benchmarks(category)
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=len(benchmarks))
        for monad_fn, plain_fn in benchmarks:
            meta = BENCHMARK_REGISTRY[monad_fn]
            progress.update(task, description=f"[cyan]{meta.category}: {meta.name}")
            bench_one(monad_fn, plain_fn, runs)
            progress.advance(task)


def _display_results() -> None:
    """Display benchmark results in a formatted table."""
    if not RESULTS:
        CONSOLE.print("[yellow]No benchmarks matched.[/yellow]")
        return
    table = Table(title="Container Benchmark Results (pyomonads vs plain Python)")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("pyomonads (s, median)", justify="right", style="green")
    table.add_column("Plain (s, median)", justify="right", style="yellow")
    table.add_column("Overhead", justify="right")

    for result in RESULTS:
        overhead_style = "green bold" if result.overhead < 2 else "red bold"
        table.add_row(
            result.category,
            result.name,
            f"{result.monad_median:.5f}",
            f"{result.plain_median:.5f}",
            Text(f"{result.overhead:.2f}x", style=overhead_style),
        )

    CONSOLE.print(table)
    CONSOLE.print()
    median_overhead = statistics.median([r.overhead for r in RESULTS])
    CONSOLE.print(
        Text("Median overhead: ", style="bold")
        + Text(f"{median_overhead:.2f}x", style="cyan bold")
    )


@app.command()
def run(
    *,
    category: Annotated[
        str | None, typer.Option("--category", help="Only run Maybe or Either.")
    ] = None,
    runs: Annotated[
        int | None, typer.Option("--runs", min=2, help="Repeats per benchmark.")
    ] = None,
) -> None:
    """Run benchmarks and display results."""
    CONSOLE.print(Text("Running container benchmarks...", style="bold blue"))
    CONSOLE.print()
    _run_all_benchmarks(category, runs)
    _display_results()


@app.command(name="list")
def list_benchmarks() -> None:
    """List registered benchmarks."""
    table = Table(title="Registered benchmarks")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("Implementation")
    table.add_column("Cost", justify="right")
    for meta in BENCHMARK_REGISTRY.values():
        table.add_row(
            meta.category, meta.name, meta.implementation.value, meta.cost.name
        )
    CONSOLE.print(table)


if __name__ == "__main__":
    app()
