import json
from pathlib import Path

import pytest
import yaml


def make_document(version: str = "3.0.5", **overrides) -> dict:
    """Smallest document that passes OpenAPI 3.0 validation."""
    document = {
        "openapi": version,
        "info": {"title": "Petstore", "version": "1.0.0"},
        "paths": {
            "/pets/{petId}": {
                "get": {
                    "operationId": "getPet",
                    "parameters": [
                        {
                            "name": "petId",
                            "in": "path",
                            "required": True,
                            "schema": {"type": "string"},
                        }
                    ],
                    "responses": {
                        "200": {
                            "description": "A pet",
                            "content": {
                                "application/json": {
                                    "schema": {"$ref": "#/components/schemas/Pet"}
                                }
                            },
                        },
                        "default": {"description": "Unexpected error"},
                    },
                }
            }
        },
        "components": {
            "schemas": {
                "Pet": {
                    "type": "object",
                    "required": ["id"],
                    "properties": {
                        "id": {"type": "integer", "format": "int64"},
                        "tags": {"type": "array", "items": {"type": "string"}},
                    },
                }
            }
        },
    }
    document.update(overrides)
    return document


def write_yaml(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def document():
    return make_document()


@pytest.fixture
def corpus(tmp_path):
    """A small corpus with one file per outcome plus ignored files.

    Returns the root directory and the expected counters.
    """
    root = tmp_path / "APIs"
    write_yaml(root / "petstore.com" / "1.0.0" / "openapi.yaml", make_document())
    write_json(root / "petstore.com" / "2.0.0" / "openapi.json", make_document("3.0.0"))
    (root / "broken.io" / "v1").mkdir(parents=True)
    (root / "broken.io" / "v1" / "openapi.yaml").write_text("openapi: [3.0.0\n", encoding="utf-8")
    write_json(root / "legacy.org" / "swagger.json", {"swagger": "2.0", "info": {}})
    write_yaml(root / "future.dev" / "openapi.yaml", make_document("3.1.0"))
    no_info = make_document()
    del no_info["info"]
    write_json(root / "incomplete.net" / "openapi.json", no_info)
    (root / "README.md").write_text("# not a document\n", encoding="utf-8")
    (root / "petstore.com" / "openapi.YAML").write_text("openapi: 3.0.0\n", encoding="utf-8")
    (root / "petstore.com" / "notes.yml").write_text("openapi: 3.0.0\n", encoding="utf-8")

    expected = {
        "invalid_file": 1,
        "invalid_format": 1,
        "invalid_version": 1,
        "failure": 1,
        "success": 2,
    }
    return root, expected
