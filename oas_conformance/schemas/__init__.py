"""Pydantic schemas for document headers, versions, and outcomes."""

from oas_conformance.schemas.header import Header
from oas_conformance.schemas.outcome import (
    FileResult,
    Format,
    Outcome,
)
from oas_conformance.schemas.version import (
    SUPPORTED_VERSIONS,
    SemanticVersion,
    VersionRequirement,
)

__all__ = [
    "Header",
    "FileResult",
    "Format",
    "Outcome",
    "SUPPORTED_VERSIONS",
    "SemanticVersion",
    "VersionRequirement",
]
