"""Benchmark settings and their resolution from options and environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, model_validator

ENV_PREFIX = "STDIO_UTILS_BENCH_"

QUICK_LINES = 10_000_000
EXHAUSTIVE_LINES = 100_000_000


class BenchSettings(BaseModel):
    """Settings for one benchmark run."""

    lines: int = Field(default=QUICK_LINES, ge=0)
    samples: int = Field(default=10, ge=1)
    generator: Literal["python", "shuf"] = "python"
    seed: Optional[int] = None
    low: int = 0
    high: int = 999
    data_dir: Path = Path(".")
    filename: str = "test_data.txt"

    @model_validator(mode="after")
    def _check_range(self) -> "BenchSettings":
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must be <= high ({self.high})")
        return self

    @property
    def data_file(self) -> Path:
        return self.data_dir / self.filename


def _from_env(environ: Optional[dict] = None) -> dict[str, str]:
    """Collect STDIO_UTILS_BENCH_* variables as lower-case field names."""
    env = os.environ if environ is None else environ
    fields = BenchSettings.model_fields
    values: dict[str, str] = {}
    for key, value in env.items():
        if not key.startswith(ENV_PREFIX) or value == "":
            continue
        name = key[len(ENV_PREFIX) :].lower()
        if name == "dir":
            name = "data_dir"
        if name in fields:
            values[name] = value
    return values


def resolve_bench_settings(
    environ: Optional[dict] = None,
    defaults: Optional[dict[str, Any]] = None,
    **options: Any,
) -> BenchSettings:
    """Resolve benchmark settings.

    Resolution order:
    1. Explicit options (CLI flags); ``None`` means "not given"
    2. $STDIO_UTILS_BENCH_<FIELD> environment variables
       ($STDIO_UTILS_BENCH_DIR for the data directory)
    3. ``defaults`` (per-command overrides of the field defaults)
    4. Field defaults

    Reads fresh from environment each time.

    Raises:
        pydantic.ValidationError: A resolved value is invalid
    """
    values: dict[str, Any] = dict(defaults or {})
    values.update(_from_env(environ))
    values.update({key: value for key, value in options.items() if value is not None})
    return BenchSettings(**values)
