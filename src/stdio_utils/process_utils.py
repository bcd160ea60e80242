"""Process and subprocess utilities shared by the benchmark harness.

Safe wrappers around subprocess that validate argv before spawning, plus a
small result model for finished processes.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel

CommandArg = str | os.PathLike[str]


class Completed(BaseModel):
    """Result of a subprocess execution."""

    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _normalize_command(cmd: Sequence[CommandArg]) -> list[str]:
    """Validate and normalize subprocess command arguments."""
    if not cmd:
        msg = "Command must include at least one argument"
        raise ValueError(msg)

    normalized: list[str] = []
    for arg in cmd:
        if isinstance(arg, os.PathLike):
            value = os.fspath(arg)
        elif isinstance(arg, str):
            value = arg
        else:
            msg = "Command arguments must be strings or os.PathLike"
            raise TypeError(msg)

        # The program itself must be named; arguments may be empty strings
        if not normalized and not value.strip():
            msg = "Command cannot be empty or whitespace"
            raise ValueError(msg)

        normalized.append(value)

    return normalized


def popen_with_validation(
    cmd: Sequence[CommandArg], **kwargs: Any
) -> subprocess.Popen[Any]:
    """Run subprocess.Popen with validation to satisfy security lint checks."""
    normalized_cmd = _normalize_command(cmd)
    return subprocess.Popen(normalized_cmd, **kwargs)  # noqa: S603


def run_with_validation(
    cmd: Sequence[CommandArg], **kwargs: Any
) -> subprocess.CompletedProcess[Any]:
    """Run subprocess.run with validation to satisfy security lint checks."""
    normalized_cmd = _normalize_command(cmd)
    return subprocess.run(normalized_cmd, **kwargs)  # noqa: S603


def missing_tools(tools: Iterable[str]) -> list[str]:
    """Return the tools from ``tools`` that are not found on PATH."""
    return [tool for tool in tools if shutil.which(tool) is None]
