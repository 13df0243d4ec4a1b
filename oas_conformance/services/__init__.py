"""Corpus scanning services."""

from oas_conformance.services.document_source import iter_files, sniff_format
from oas_conformance.services.pipeline import classify_contents, classify_file
from oas_conformance.services.scanner import Scanner
from oas_conformance.services.stats import Stats, StatsSnapshot, TraceReporter

__all__ = [
    "iter_files",
    "sniff_format",
    "classify_contents",
    "classify_file",
    "Scanner",
    "Stats",
    "StatsSnapshot",
    "TraceReporter",
]
