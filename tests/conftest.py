"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from stdio_utils.cli import cli


@pytest.fixture(autouse=True)
def clean_bench_env(monkeypatch):
    """Keep developer STDIO_UTILS_* settings out of the tests."""
    for name in (
        "STDIO_UTILS_LOG_LEVEL",
        "STDIO_UTILS_BENCH_LINES",
        "STDIO_UTILS_BENCH_SAMPLES",
        "STDIO_UTILS_BENCH_GENERATOR",
        "STDIO_UTILS_BENCH_SEED",
        "STDIO_UTILS_BENCH_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke([], input_data="20\\n22\\n")   # sums stdin
        result = invoke(["sum", "numbers.txt"])
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def numbers_file(tmp_path):
    """Provide a small file of numbers summing to 42."""
    path = tmp_path / "numbers.txt"
    path.write_text("20\n 10 \n+15\n-3\n")
    return path
