"""Exceptions raised by the conformance harness."""


class ConformanceError(Exception):
    """Base class for harness errors."""


class SourceRootError(ConformanceError):
    """The corpus root is missing or is not a directory."""


class VersionParseError(ConformanceError, ValueError):
    """A version string or version requirement could not be parsed."""


class DocumentLoadError(ConformanceError, ValueError):
    """Document text is not valid YAML/JSON or its top level is not a mapping."""
