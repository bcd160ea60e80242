#!/usr/bin/env python3
"""Run lint, format check and tests; stop at the first failing step.

Usage:
    python scripts/quality_control.py
"""

import sys

from stdio_utils.process_utils import run_with_validation

STEPS = [
    [sys.executable, "-m", "ruff", "format", "--check", "src", "tests", "scripts"],
    [sys.executable, "-m", "ruff", "check", "src", "tests", "scripts"],
    [sys.executable, "-m", "pytest", "-q"],
]


def step(cmd: list[str]) -> None:
    print(f"$ {' '.join(cmd[2:])}", flush=True)
    result = run_with_validation(cmd, check=False)
    if result.returncode != 0:
        # Negative codes mean the step was killed by a signal
        sys.exit(result.returncode if result.returncode > 0 else 1)


def main():
    for cmd in STEPS:
        step(cmd)


if __name__ == "__main__":
    main()
