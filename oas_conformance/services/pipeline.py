"""Classification pipeline applied to each document.

Stages run in order and stop at the first terminal outcome:
format sniffing, header extraction, version gate, full validation.
Every outcome is returned as a value; none of the stages raise for
document problems.
"""

import logging
from pathlib import Path
from typing import Any

from openapi_spec_validator import OpenAPIV30SpecValidator, OpenAPIV31SpecValidator
from openapi_spec_validator.validation.exceptions import OpenAPIValidationError
from pydantic import ValidationError
from referencing.exceptions import Unresolvable

from oas_conformance.errors import DocumentLoadError, VersionParseError
from oas_conformance.schemas.header import Header
from oas_conformance.schemas.outcome import FileResult, Format, Outcome
from oas_conformance.schemas.version import (
    SUPPORTED_VERSIONS,
    SemanticVersion,
    VersionRequirement,
)
from oas_conformance.services.codec import load_mapping, one_line
from oas_conformance.services.document_source import sniff_format

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 240

SPEC_VALIDATORS = {
    (3, 0): OpenAPIV30SpecValidator,
    (3, 1): OpenAPIV31SpecValidator,
}


def describe_validation_error(exc: ValidationError) -> str:
    """Summarize a pydantic error as ``<n> validation error(s); <loc>: <msg>``."""
    errors = exc.errors(include_url=False)
    if not errors:
        return one_line(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first["loc"]) or "<root>"
    noun = "error" if len(errors) == 1 else "errors"
    return one_line(f"{len(errors)} validation {noun}; {loc}: {first['msg']}")


def read_document(path: Path) -> str:
    """Read the full text of a document (UTF-8, BOM tolerated)."""
    return path.read_text(encoding="utf-8-sig")


def extract_header(contents: str, fmt: Format) -> Header | str:
    """Project a document onto its version fields.

    Returns the Header, or a diagnostic string when the text does not parse
    or the fields have the wrong shape.
    """
    try:
        data = load_mapping(contents, fmt, typed=False)
        return Header.model_validate(data)
    except DocumentLoadError as e:
        return str(e)
    except ValidationError as e:
        return describe_validation_error(e)


def describe_legacy(header: Header) -> str:
    if header.swagger is None:
        return "not openapi (no swagger field)"
    return f"not openapi (swagger {header.swagger})"


def check_version(version: str, requirement: VersionRequirement = SUPPORTED_VERSIONS) -> str | None:
    """Return a rejection message, or None when ``version`` is in range."""
    try:
        parsed = SemanticVersion.parse(version)
    except VersionParseError:
        return f"{version} (not a semantic version)"
    if not requirement.matches(parsed):
        return version
    return None


def _spec_validator_for(version: Any):
    try:
        parsed = SemanticVersion.parse(str(version))
    except VersionParseError:
        return OpenAPIV30SpecValidator
    return SPEC_VALIDATORS.get((parsed.major, parsed.minor), OpenAPIV30SpecValidator)


def describe_spec_errors(errors: list[OpenAPIValidationError]) -> str:
    """Summarize spec errors as ``<n> validation error(s); <loc>: <msg>``."""
    first = errors[0]
    loc = "/".join(str(part) for part in first.absolute_path) or "<root>"
    message = one_line(first.message)
    if len(message) > MAX_MESSAGE_LENGTH:
        message = message[: MAX_MESSAGE_LENGTH - 3] + "..."
    noun = "error" if len(errors) == 1 else "errors"
    return one_line(f"{len(errors)} validation {noun}; {loc}: {message}")


def validate_document(contents: str, fmt: Format) -> dict[str, Any] | str:
    """Fully validate a document with openapi-spec-validator.

    Returns the loaded document, or a diagnostic string.
    """
    try:
        data = load_mapping(contents, fmt)
    except DocumentLoadError as e:
        return str(e)

    validator = _spec_validator_for(data.get("openapi"))(data)
    try:
        errors = sorted(validator.iter_errors(), key=lambda e: [str(part) for part in e.absolute_path])
    except (Unresolvable, OSError) as e:
        return f"unresolvable reference: {one_line(e)}"
    if errors:
        return describe_spec_errors(errors)
    return data


def classify_contents(
    name: str,
    contents: str,
    fmt: Format,
    requirement: VersionRequirement = SUPPORTED_VERSIONS,
) -> FileResult:
    """Run header, version and full validation on already-read text."""
    header = extract_header(contents, fmt)
    if isinstance(header, str):
        return FileResult(path=name, outcome=Outcome.INVALID_FILE, message=header)

    if header.openapi is None:
        return FileResult(path=name, outcome=Outcome.INVALID_FORMAT, message=describe_legacy(header))

    version = header.openapi
    rejection = check_version(version, requirement)
    if rejection is not None:
        return FileResult(path=name, outcome=Outcome.INVALID_VERSION, message=rejection)

    document = validate_document(contents, fmt)
    if isinstance(document, str):
        return FileResult(path=name, outcome=Outcome.FAILURE, message=document)

    return FileResult(path=name, outcome=Outcome.SUCCESS, message=version)


def classify_file(
    path: Path,
    requirement: VersionRequirement = SUPPORTED_VERSIONS,
) -> FileResult | None:
    """Classify one file. Returns None for files that are not YAML/JSON."""
    fmt = sniff_format(path)
    if fmt is Format.IGNORED:
        return None

    name = str(path)
    try:
        contents = read_document(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read {name}: {e}")
        return FileResult(path=name, outcome=Outcome.INVALID_FILE, message=one_line(e))

    return classify_contents(name, contents, fmt, requirement)
