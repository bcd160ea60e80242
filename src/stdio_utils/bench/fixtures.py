"""Test data files for benchmarks: random integers, one per line."""

from __future__ import annotations

import logging
import os
import random
from pathlib import Path
from typing import BinaryIO, Literal, Optional

from ..errors import FixtureError
from ..logging_utils import log_event
from ..process_utils import run_with_validation

logger = logging.getLogger(__name__)

Generator = Literal["python", "shuf"]

_CHUNK_LINES = 64 * 1024


def create_test_data_file(
    filename: str | os.PathLike[str],
    lines: int,
    *,
    low: int = 0,
    high: int = 999,
    generator: Generator = "python",
    seed: Optional[int] = None,
) -> Path:
    """Create ``filename`` holding ``lines`` random integers in [low, high].

    The file is created exclusively: an existing file is never overwritten.

    Args:
        filename: Path of the file to create
        lines: Number of lines to write
        low: Smallest value
        high: Largest value
        generator: "python" (in-process, seedable) or "shuf" (coreutils)
        seed: Seed for the in-process generator

    Returns:
        Path of the created file

    Raises:
        FixtureError: The file exists, cannot be written, or shuf failed
    """
    if lines < 0:
        raise FixtureError(f"Line count must be >= 0, got {lines}")
    if low > high:
        raise FixtureError(f"Invalid range {low}-{high}")

    path = Path(filename)
    if generator not in ("python", "shuf"):
        raise FixtureError(f"Unknown generator \"{generator}\"", str(path))

    with fcreate(path) as test_data_file:
        try:
            if generator == "shuf":
                _fill_with_shuf(test_data_file, lines, low, high)
            else:
                _fill_with_random(test_data_file, lines, low, high, seed)
        except BaseException:
            # Do not leave a partial fixture behind
            test_data_file.close()
            path.unlink(missing_ok=True)
            raise

    log_event(
        logger,
        logging.INFO,
        "fixture_created",
        path=str(path),
        lines=lines,
        generator=generator,
    )
    return path


def delete_test_data_file(filename: str | os.PathLike[str]) -> None:
    """Remove a test data file."""
    try:
        os.remove(filename)
    except OSError as exc:
        raise FixtureError(
            f"Failed to delete test file \"{filename}\"", os.fspath(filename)
        ) from exc
    log_event(logger, logging.INFO, "fixture_deleted", path=os.fspath(filename))


def fcreate(filename: str | os.PathLike[str]) -> BinaryIO:
    """Open a new file for writing, failing if it already exists."""
    try:
        return open(filename, "xb")
    except OSError as exc:
        raise FixtureError(
            f"Failed to create file \"{filename}\"", os.fspath(filename)
        ) from exc


def fopen(filename: str | os.PathLike[str]) -> BinaryIO:
    """Open an existing file for reading."""
    try:
        return open(filename, "rb")
    except OSError as exc:
        raise FixtureError(
            f"Failed to open file \"{filename}\"", os.fspath(filename)
        ) from exc


def _fill_with_random(
    out: BinaryIO, lines: int, low: int, high: int, seed: Optional[int]
) -> None:
    rng = random.Random(seed)
    remaining = lines
    while remaining > 0:
        count = min(remaining, _CHUNK_LINES)
        chunk = "".join(f"{rng.randint(low, high)}\n" for _ in range(count))
        out.write(chunk.encode("ascii"))
        remaining -= count


def _fill_with_shuf(out: BinaryIO, lines: int, low: int, high: int) -> None:
    cmd = "shuf"
    try:
        result = run_with_validation(
            [cmd, "-i", f"{low}-{high}", "-n", str(lines), "-r"],
            stdout=out,
            stderr=None,
            check=False,
        )
    except OSError as exc:
        raise FixtureError(f"Failed to start program `{cmd}`") from exc

    if result.returncode != 0:
        raise FixtureError(
            f"Program \"{cmd}\" returned error code {result.returncode}"
        )
