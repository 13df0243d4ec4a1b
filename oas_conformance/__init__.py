"""Conformance harness for corpora of OpenAPI 3.0 documents."""

__version__ = "0.1.0"
