"""Per-file classification results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Format(str, Enum):
    """Serialization format inferred from a file name."""

    YAML = "yaml"
    JSON = "json"
    IGNORED = "ignored"


class Outcome(str, Enum):
    """Mutually exclusive classification of a processed file."""

    INVALID_FILE = "invalid_file"        # unreadable, or header did not parse
    INVALID_FORMAT = "invalid_format"    # no openapi field
    INVALID_VERSION = "invalid_version"  # openapi version outside the supported range
    FAILURE = "failure"                  # full validation failed
    SUCCESS = "success"


GLYPHS: dict[Outcome, str] = {
    Outcome.INVALID_FILE: "❌",
    Outcome.INVALID_FORMAT: "❌",
    Outcome.INVALID_VERSION: "❌",
    Outcome.FAILURE: "🐞",
    Outcome.SUCCESS: "✅",
}


class FileResult(BaseModel):
    """Outcome of one file together with its trace message."""

    model_config = ConfigDict(frozen=True)

    path: str
    outcome: Outcome
    message: str

    @property
    def glyph(self) -> str:
        return GLYPHS[self.outcome]

    def trace_line(self) -> str:
        """Render as ``<path> <message> <glyph>``."""
        return f"{self.path} {self.message} {self.glyph}"
