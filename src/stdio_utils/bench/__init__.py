"""Benchmark harness comparing stdio-utils against shell one-liners.

- config: Settings resolved from CLI options and environment
- fixtures: Test data file creation and cleanup
- runner: Summation programs run as separate processes
- harness: Timing, result checks and reporting
"""

from .config import BenchSettings, resolve_bench_settings
from .harness import BenchReport, Bencher, exhaustive, format_reports, quick_comparison

__all__ = [
    "BenchReport",
    "BenchSettings",
    "Bencher",
    "exhaustive",
    "format_reports",
    "quick_comparison",
    "resolve_bench_settings",
]
