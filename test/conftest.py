"""Shared fixtures for the oas-codegen test suite."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import pytest

from oas_codegen.codegen.languages.rust import RustGenerator, create_rust_generator
from oas_codegen.codegen.languages.typescript import (
    TypeScriptGenerator,
    create_typescript_generator,
)


@pytest.fixture
def petstore_document() -> Dict[str, Any]:
    """A small OpenAPI 3 document with records, enums and references."""
    return {
        "openapi": "3.0.3",
        "info": {"title": "Petstore", "version": "1.0.0"},
        "paths": {},
        "components": {
            "schemas": {
                "Pet": {
                    "type": "object",
                    "description": "A pet for sale",
                    "required": ["id", "name"],
                    "properties": {
                        "id": {"type": "integer", "format": "int64", "minimum": 0},
                        "name": {"type": "string", "description": "Display name"},
                        "tag": {"type": "string"},
                        "owner": {"$ref": "#/components/schemas/Owner"},
                        "photoUrls": {"type": "array", "items": {"type": "string"}},
                        "friends": {
                            "type": "array",
                            "items": {"$ref": "#/components/schemas/Pet"},
                        },
                        "status": {"$ref": "#/components/schemas/PetStatus"},
                    },
                },
                "Owner": {
                    "type": "object",
                    "properties": {
                        "firstName": {"type": "string"},
                        "score": {"type": "number", "format": "float"},
                        "verified": {"type": "boolean"},
                    },
                },
                "PetStatus": {
                    "type": "string",
                    "description": "Sale status",
                    "enum": ["available", "pending", "sold-out"],
                },
            }
        },
    }


@pytest.fixture
def petstore_file(tmp_path: Path, petstore_document: Dict[str, Any]) -> Path:
    """The petstore document written to a JSON file."""
    path = tmp_path / "openapi.json"
    path.write_text(json.dumps(petstore_document), encoding="utf-8")
    return path


@pytest.fixture
def rust_generator() -> RustGenerator:
    """Rust generator with default configuration."""
    return create_rust_generator()


@pytest.fixture
def typescript_generator() -> TypeScriptGenerator:
    """TypeScript generator with default configuration."""
    return create_typescript_generator()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
