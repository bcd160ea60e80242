"""Sum command - print the sum of numbers read one per line."""

import logging
import sys

import click

from ...core.streaming import lines
from ...core.summation import sum as sum_lines
from ...errors import SumError
from ...logging_utils import log_event

logger = logging.getLogger(__name__)


@click.command("sum")
@click.argument("source", required=False, default="-", type=click.File("rb"))
def sum_command(source):
    """Sum numbers read from SOURCE, one per line (default: stdin).

    Lines may carry surrounding whitespace and an optional sign. The sum is
    printed as a single line. Any unreadable or non-numeric line aborts with
    exit status 1 and nothing on stdout.

    Examples:
        seq 1 100 | stdio-utils          # 5050
        stdio-utils sum numbers.txt
    """
    try:
        total = sum_lines(lines(source))
    except SumError as e:
        log_event(logger, logging.DEBUG, "sum_failed", error=type(e).__name__)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(total)
