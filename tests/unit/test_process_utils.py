"""Tests for subprocess validation helpers."""

import subprocess
import sys
from pathlib import Path

import pytest

from stdio_utils.process_utils import (
    Completed,
    _normalize_command,
    missing_tools,
    popen_with_validation,
    run_with_validation,
)


def test_normalize_accepts_paths():
    assert _normalize_command([Path("/bin/echo"), "hi"]) == ["/bin/echo", "hi"]


def test_normalize_rejects_empty_command():
    with pytest.raises(ValueError):
        _normalize_command([])
    with pytest.raises(ValueError):
        _normalize_command(["  ", "arg"])


def test_normalize_allows_empty_arguments():
    assert _normalize_command(["printf", ""]) == ["printf", ""]


def test_normalize_rejects_non_string_arguments():
    with pytest.raises(TypeError):
        _normalize_command(["echo", 42])


def test_run_with_validation():
    result = run_with_validation(
        [sys.executable, "-c", "print(6 * 7)"], capture_output=True, check=False
    )
    assert result.stdout.strip() == b"42"


def test_popen_with_validation():
    proc = popen_with_validation(
        [sys.executable, "-c", "import sys; print(len(sys.stdin.read().split()))"],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
    )
    stdout, _ = proc.communicate(b"1 2 3")
    assert proc.returncode == 0
    assert stdout.strip() == b"3"


def test_missing_tools():
    missing = missing_tools([sys.executable, "definitely-not-a-real-tool-xyz"])
    assert missing == ["definitely-not-a-real-tool-xyz"]


def test_completed_ok():
    assert Completed(returncode=0, stdout=b"", stderr=b"").ok
    assert not Completed(returncode=1, stdout=b"", stderr=b"boom").ok
