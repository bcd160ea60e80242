"""Run summation programs against a test data file.

Every variant reads the file on stdin and must print a single integer.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import IO, Any, Optional, Union

from ..errors import BenchmarkError
from ..logging_utils import log_event
from ..process_utils import Completed, popen_with_validation, run_with_validation
from .fixtures import fopen

logger = logging.getLogger(__name__)

OURS_CLI = [sys.executable, "-m", "stdio_utils.cli.main"]

PYTHON_CODE = "import sys; print(sum(map(int, sys.stdin)))"
AWK_CODE = '{s+=$1} END {printf "%.0f", s}'

Filename = Union[str, os.PathLike]
Stdin = Union[IO[Any], int, None]


def run(
    cmd: str, args: Sequence[str], input: Stdin, empty: Optional[int] = None
) -> int:
    """Run ``cmd`` with ``input`` on stdin and parse its output as integer.

    ``empty`` is returned when the program prints nothing; by default blank
    output is an error.

    Raises:
        BenchmarkError: The program could not start, failed, or printed
            something that is not an integer
    """
    try:
        process = run_with_validation(
            [cmd, *args],
            stdin=input,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        raise BenchmarkError(f"Failed to run benchmark program {cmd}") from exc

    output = Completed(
        returncode=process.returncode, stdout=process.stdout, stderr=process.stderr
    )
    if not output.ok:
        stderr = output.stderr.decode("utf-8", errors="replace").strip()
        log_event(
            logger,
            logging.DEBUG,
            "variant_failed",
            cmd=cmd,
            returncode=output.returncode,
            stderr=stderr,
        )
        raise BenchmarkError(f"Failure: {cmd} returned {output.returncode}")

    text = output.stdout.decode("utf-8", errors="replace").strip()
    if not text and empty is not None:
        return empty
    try:
        return int(text)
    except ValueError as exc:
        raise BenchmarkError(
            f"Failed to parse output of {cmd} as number: \"{text}\""
        ) from exc


def run_ours(test_data_filename: Filename) -> int:
    with fopen(test_data_filename) as input:
        return run(OURS_CLI[0], OURS_CLI[1:], input)


def run_python_variant(test_data_filename: Filename) -> int:
    with fopen(test_data_filename) as input:
        return run(sys.executable, ["-c", PYTHON_CODE], input)


def run_awk_variant(test_data_filename: Filename) -> int:
    with fopen(test_data_filename) as input:
        return run("awk", [AWK_CODE], input)


def run_bc_variant(test_data_filename: Filename) -> int:
    """Join all lines with ``+`` via paste and evaluate the sum with bc.

    An empty file becomes a blank line, for which bc prints nothing.
    """
    with fopen(test_data_filename) as input:
        try:
            paste = popen_with_validation(
                ["paste", "-s", "-d+", "-"],
                stdin=input,
                stdout=subprocess.PIPE,
            )
        except OSError as exc:
            raise BenchmarkError("Failed to invoke program `paste`") from exc

        assert paste.stdout is not None
        try:
            result = run("bc", [], paste.stdout, empty=0)
        finally:
            # Close our handle so paste gets SIGPIPE if bc exited early
            paste.stdout.close()
            paste.wait()

    if paste.returncode != 0:
        raise BenchmarkError(f"Failure: paste returned {paste.returncode}")
    return result


@dataclass(frozen=True)
class Variant:
    """A summation program to benchmark."""

    name: str
    routine: Callable[[Filename], int]
    tools: tuple[str, ...] = ()


OURS = Variant("stdio-utils", run_ours)

REFERENCE_VARIANTS = (
    Variant("python", run_python_variant),
    Variant("awk", run_awk_variant, ("awk",)),
    Variant("paste|bc", run_bc_variant, ("paste", "bc")),
)
