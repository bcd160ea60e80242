"""stdio-utils CLI main entry point with global options."""

import click

from .. import __version__
from ..logging_utils import configure_logging


@click.group(invoke_without_command=True)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Log more to stderr (-v info, -vv debug; default from $STDIO_UTILS_LOG_LEVEL)",
)
@click.version_option(__version__, prog_name="stdio-utils")
@click.pass_context
def cli(ctx, verbose):
    """stdio-utils - Sum numbers read from stdin, one per line.

    Without a command, reads stdin and prints the sum.
    """
    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        ctx.invoke(sum_command)


# Register commands at module level so tests can import cli with commands attached
from .commands.bench import bench
from .commands.sum import sum_command

cli.add_command(sum_command)
cli.add_command(bench)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
