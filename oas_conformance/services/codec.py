"""Codec - Loads YAML and JSON document text into Python objects."""

import json
import re
from typing import Any

import yaml

from oas_conformance.errors import DocumentLoadError
from oas_conformance.schemas.outcome import Format

NULL_TAG = "tag:yaml.org,2002:null"
BOOL_TAG = "tag:yaml.org,2002:bool"
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"

_NULL_PATTERN = re.compile(r"^(?:~|null|Null|NULL|)$")
_BOOL_PATTERN = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")


def _key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, bool):
        return json.dumps(key)
    return str(key)


class DocumentLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 style scalars.

    Timestamps and the YAML 1.1 booleans (``yes``, ``on``, ``off``...) stay
    text; only ``true``/``false`` are booleans. Mapping keys are always text.
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag not in (BOOL_TAG, TIMESTAMP_TAG)]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }

    def construct_mapping(self, node, deep=False):
        mapping = super().construct_mapping(node, deep=deep)
        return {_key_text(key): value for key, value in mapping.items()}


DocumentLoader.add_implicit_resolver(BOOL_TAG, _BOOL_PATTERN, list("tTfF"))


class HeaderLoader(yaml.BaseLoader):
    """Keeps every plain scalar as text except null."""


HeaderLoader.add_implicit_resolver(NULL_TAG, _NULL_PATTERN, ["~", "n", "N", ""])
HeaderLoader.add_constructor(NULL_TAG, lambda loader, node: None)


def one_line(message: object) -> str:
    """Collapse a (possibly multi-line) diagnostic into a single line."""
    return " ".join(str(message).split())


def load_mapping(contents: str, fmt: Format, typed: bool = True) -> dict[str, Any]:
    """Parse document text and return its top-level mapping.

    Args:
        contents: Full text of the document.
        fmt: ``Format.YAML`` or ``Format.JSON``.
        typed: For YAML, resolve plain scalars to ints, floats and booleans.
            When False every scalar except null stays a string, which is all
            a header projection needs.

    Raises:
        DocumentLoadError: On a syntax error or a non-mapping document.
    """
    try:
        if fmt is Format.YAML:
            loader = DocumentLoader if typed else HeaderLoader
            data = yaml.load(contents, Loader=loader)
        elif fmt is Format.JSON:
            data = json.loads(contents)
        else:
            raise DocumentLoadError(f"Unsupported format: {fmt.value}")
    except (yaml.YAMLError, json.JSONDecodeError, RecursionError) as e:
        raise DocumentLoadError(one_line(e)) from e

    if not isinstance(data, dict):
        kind = "null" if data is None else type(data).__name__
        raise DocumentLoadError(f"expected a mapping at the top level, found {kind}")
    return data
