"""Outcome aggregation and per-file trace output."""

import sys
import threading
from typing import TextIO

from pydantic import BaseModel, ConfigDict

from oas_conformance.schemas.outcome import FileResult, Outcome


class StatsSnapshot(BaseModel):
    """Final counter values of a run."""

    model_config = ConfigDict(frozen=True)

    invalid_file: int = 0
    invalid_format: int = 0
    invalid_version: int = 0
    failure: int = 0
    success: int = 0

    @property
    def total(self) -> int:
        return (
            self.invalid_file
            + self.invalid_format
            + self.invalid_version
            + self.failure
            + self.success
        )

    def __str__(self) -> str:
        fields = ", ".join(f"{outcome.value}={getattr(self, outcome.value)}" for outcome in Outcome)
        return f"Stats({fields})"


class Stats:
    """Increment-only outcome counters shared by all workers of a run."""

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: dict[Outcome, int] = {outcome: 0 for outcome in Outcome}

    def record(self, outcome: Outcome) -> None:
        with self._lock:
            self._counts[outcome] += 1

    def snapshot(self) -> StatsSnapshot:
        with self._lock:
            return StatsSnapshot(**{outcome.value: count for outcome, count in self._counts.items()})


class TraceReporter:
    """Writes one ``<path> <message> <glyph>`` line per processed file."""

    def __init__(self, stream: TextIO | None = None, enabled: bool = True):
        self._stream = stream
        self.enabled = enabled
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so that redirected stdout (e.g. under pytest) is honored.
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, result: FileResult) -> None:
        if not self.enabled:
            return
        line = result.trace_line() + "\n"
        with self._lock:
            self.stream.write(line)
            self.stream.flush()
