"""Bench commands - compare throughput against other summation tools."""

import sys

import click
from pydantic import ValidationError

from ...bench.config import EXHAUSTIVE_LINES, QUICK_LINES, resolve_bench_settings
from ...bench.harness import exhaustive as run_exhaustive
from ...bench.harness import format_reports, quick_comparison
from ...errors import BenchmarkError


def settings_options(func):
    """Options shared by all bench commands; unset values fall back to env."""
    options = [
        click.option("--lines", type=int, default=None, help="Lines in the test data file"),
        click.option("--samples", type=int, default=None, help="Runs per program"),
        click.option(
            "--generator",
            type=click.Choice(["python", "shuf"]),
            default=None,
            help="Test data generator",
        ),
        click.option("--seed", type=int, default=None, help="Seed for the python generator"),
        click.option(
            "--data-dir",
            type=click.Path(file_okay=False, exists=True),
            default=None,
            help="Directory for the temporary test data file",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _resolve(defaults, **options):
    try:
        return resolve_bench_settings(defaults=defaults, **options)
    except ValidationError as e:
        raise click.UsageError(f"Invalid benchmark settings: {e}") from e


def _run(routine, settings):
    try:
        reports = routine(settings)
    except BenchmarkError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(format_reports(reports))


@click.group()
def bench():
    """Benchmark stdio-utils against other summation one-liners.

    Settings can also come from $STDIO_UTILS_BENCH_LINES,
    $STDIO_UTILS_BENCH_SAMPLES, $STDIO_UTILS_BENCH_GENERATOR and
    $STDIO_UTILS_BENCH_DIR.
    """


@bench.command()
@settings_options
def compare(**options):
    """Compare against python, awk and paste|bc on the same input.

    All programs must report the same sum; any mismatch aborts the run.
    Programs whose tools are not installed are skipped.
    """
    settings = _resolve({"lines": QUICK_LINES, "samples": 10}, **options)
    _run(quick_comparison, settings)


@bench.command()
@settings_options
def exhaustive(**options):
    """Bench only stdio-utils on a large input (100M lines by default)."""
    settings = _resolve({"lines": EXHAUSTIVE_LINES, "samples": 10}, **options)
    _run(run_exhaustive, settings)
