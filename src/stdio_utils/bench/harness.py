"""Benchmark orchestration: fixture lifecycle, timing, result checks.

Programs are measured one after another, never concurrently, so timings
stay comparable. Every sample's result is checked against the expected
sum; a mismatch aborts the run instead of recording corrupted statistics.
"""

from __future__ import annotations

import logging
import statistics
import time
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from functools import partial
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from ..errors import BenchmarkError
from ..logging_utils import log_event
from ..process_utils import missing_tools
from .config import BenchSettings
from .fixtures import create_test_data_file, delete_test_data_file
from .runner import OURS, REFERENCE_VARIANTS, Variant, run_ours

logger = logging.getLogger(__name__)


class BenchReport(BaseModel):
    """Timing statistics of one benchmarked program."""

    name: str
    result: int
    samples: list[float]
    lines: int = 0

    @property
    def mean(self) -> float:
        return statistics.fmean(self.samples)

    @property
    def median(self) -> float:
        return statistics.median(self.samples)

    @property
    def min(self) -> float:
        return min(self.samples)

    @property
    def max(self) -> float:
        return max(self.samples)

    @property
    def lines_per_second(self) -> float:
        return self.lines / self.mean if self.mean > 0 else 0.0


class Bencher:
    """Runs routines repeatedly and collects their reports."""

    def __init__(
        self, samples: int = 10, clock: Callable[[], float] = time.perf_counter
    ):
        if samples < 1:
            raise ValueError("samples must be >= 1")
        self.samples = samples
        self.clock = clock
        self.reports: list[BenchReport] = []

    def bench_function(
        self,
        name: str,
        routine: Callable[[], int],
        expected: Optional[int] = None,
        lines: int = 0,
    ) -> BenchReport:
        """Time ``routine`` over all samples, checking each result.

        Raises:
            BenchmarkError: The routine failed or returned a result other
                than ``expected``
        """
        timings: list[float] = []
        results: list[int] = []
        for _ in range(self.samples):
            start = self.clock()
            try:
                actual = routine()
            except BenchmarkError as exc:
                raise BenchmarkError(
                    f"Failed to run benchmark function \"{name}\": {exc}"
                ) from exc
            timings.append(self.clock() - start)

            if expected is not None and actual != expected:
                raise BenchmarkError(
                    f"Got unexpected result {actual} (expected {expected})"
                )
            results.append(actual)

        result = results[-1]
        report = BenchReport(name=name, result=result, samples=timings, lines=lines)
        self.reports.append(report)
        log_event(
            logger,
            logging.INFO,
            "bench_function",
            name=name,
            result=result,
            mean_s=round(report.mean, 6),
        )
        return report


@contextmanager
def fixture_file(settings: BenchSettings) -> Iterator[Path]:
    """Create the fixture file for a run and always remove it afterwards."""
    path = create_test_data_file(
        settings.data_file,
        settings.lines,
        low=settings.low,
        high=settings.high,
        generator=settings.generator,
        seed=settings.seed,
    )
    try:
        yield path
    finally:
        delete_test_data_file(path)


def quick_comparison(
    settings: BenchSettings, variants: Sequence[Variant] = REFERENCE_VARIANTS
) -> list[BenchReport]:
    """Bench our executable against the reference variants.

    The expected sum is computed once with our executable. Variants whose
    tools are not installed are skipped.
    """
    bencher = Bencher(settings.samples)
    with fixture_file(settings) as path:
        try:
            expected = run_ours(path)
        except BenchmarkError as exc:
            raise BenchmarkError(f"Failed to compute expected test result: {exc}") from exc

        bencher.bench_function(
            OURS.name, partial(OURS.routine, path), expected, settings.lines
        )
        for variant in variants:
            missing = missing_tools(variant.tools)
            if missing:
                logger.warning(
                    "Skipping %s: missing %s", variant.name, ", ".join(missing)
                )
                continue
            bencher.bench_function(
                variant.name, partial(variant.routine, path), expected, settings.lines
            )
    return bencher.reports


def exhaustive(settings: BenchSettings) -> list[BenchReport]:
    """Bench only our executable, typically on a very large fixture."""
    bencher = Bencher(settings.samples)
    with fixture_file(settings) as path:
        bencher.bench_function(
            "exhaustive", partial(OURS.routine, path), lines=settings.lines
        )
    return bencher.reports


def format_reports(reports: Sequence[BenchReport]) -> str:
    """Render reports as a plain-text table."""
    header = f"{'name':<14} {'result':>16} {'mean':>10} {'median':>10} {'min':>10} {'max':>10} {'lines/s':>14}"
    rows = [header, "-" * len(header)]
    for report in reports:
        rows.append(
            f"{report.name:<14} {report.result:>16} "
            f"{report.mean * 1000:>8.1f}ms {report.median * 1000:>8.1f}ms "
            f"{report.min * 1000:>8.1f}ms {report.max * 1000:>8.1f}ms "
            f"{report.lines_per_second:>14,.0f}"
        )
    return "\n".join(rows)
