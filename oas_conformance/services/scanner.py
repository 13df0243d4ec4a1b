"""Scanner - Fans the classification pipeline out over a corpus."""

import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from oas_conformance.schemas.outcome import Outcome
from oas_conformance.schemas.version import SUPPORTED_VERSIONS, VersionRequirement
from oas_conformance.services.document_source import iter_files
from oas_conformance.services.pipeline import classify_file
from oas_conformance.services.stats import Stats, StatsSnapshot, TraceReporter

logger = logging.getLogger(__name__)


class Scanner:
    """Classifies every YAML/JSON file under a root on a thread pool."""

    def __init__(
        self,
        requirement: VersionRequirement = SUPPORTED_VERSIONS,
        workers: Optional[int] = None,
        reporter: Optional[TraceReporter] = None,
    ):
        """Initialize the scanner.

        Args:
            requirement: Versions accepted for full validation.
            workers: Thread pool size. Defaults to the CPU count.
            reporter: Destination of trace lines. Defaults to stdout.
        """
        self.requirement = requirement
        self.workers = workers or os.cpu_count() or 1
        self.reporter = reporter if reporter is not None else TraceReporter()

    def process_file(self, path: Path, stats: Stats) -> Optional[Outcome]:
        """Classify one file, record its outcome and emit its trace line."""
        result = classify_file(path, self.requirement)
        if result is None:
            return None
        stats.record(result.outcome)
        self.reporter.emit(result)
        return result.outcome

    def run(self, root: str | Path) -> StatsSnapshot:
        """Scan ``root`` to completion and return the final counters.

        Raises:
            SourceRootError: If ``root`` is not a directory.
        """
        files = iter_files(root)
        stats = Stats()
        started = time.monotonic()
        logger.info(f"Scanning {root} with {self.workers} workers (versions {self.requirement})")

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            # Consuming the results re-raises any unexpected worker error.
            for _ in executor.map(lambda path: self.process_file(path, stats), files):
                pass

        snapshot = stats.snapshot()
        logger.info(f"Classified {snapshot.total} documents in {time.monotonic() - started:.1f}s")
        return snapshot
