"""
Project manifest schema and the validator adapter built on it.

This module provides:
- The JSON Schema (Draft 7) describing a project manifest
- SchemaValidator, which checks a normalized document and reports every
  violation as a (path, message) record, in the order jsonschema finds them

Violation messages are rendered in a short, stable form:

    #/runtime: oneOf failed
    #/runtime: expected string, but got number
    #/runtime: expected object, but got number

Union (oneOf/anyOf) failures are followed by the failure of each branch, in
branch order. Keywords without a dedicated rendering fall back to the
jsonschema message.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError

from ..constants import SCHEMA_PATH_PREFIX

logger = logging.getLogger(__name__)

# Property order is the order violations are reported in.
PROJECT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Project manifest",
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "minLength": 1,
            "description": "Name of the project",
        },
        "runtime": {
            "description": "Runtime name, or an object with a name and runtime options",
            "oneOf": [
                {"type": "string", "minLength": 1},
                {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string", "minLength": 1},
                        "options": {"type": "object"},
                    },
                    "required": ["name"],
                },
            ],
        },
        "description": {
            "type": "string",
            "description": "Human-readable project description",
        },
        "main": {
            "type": "string",
            "description": "Path to the program entry point, relative to the manifest",
        },
        "backend": {
            "type": "string",
            "description": "URL of the backend the project targets",
        },
    },
    "required": ["name", "runtime"],
}

_UNION_KEYWORDS = ("oneOf", "anyOf")


@dataclass(frozen=True)
class SchemaViolation:
    """A single schema violation: where it happened and what went wrong."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


def json_type_name(instance: Any) -> str:
    """Return the JSON type name of a decoded value."""
    if instance is None:
        return "null"
    if isinstance(instance, bool):
        return "boolean"
    if isinstance(instance, (int, float)):
        return "number"
    if isinstance(instance, str):
        return "string"
    if isinstance(instance, (list, tuple)):
        return "array"
    if isinstance(instance, dict):
        return "object"
    return type(instance).__name__


def _document_path(error: ValidationError) -> str:
    return SCHEMA_PATH_PREFIX + "/".join(str(part) for part in error.absolute_path)


def _describe(error: ValidationError) -> str:
    if error.validator == "type":
        expected = error.validator_value
        if isinstance(expected, list):
            expected = " or ".join(expected)
        return f"expected {expected}, but got {json_type_name(error.instance)}"
    if error.validator in _UNION_KEYWORDS:
        return f"{error.validator} failed"
    return error.message


def _flatten(error: ValidationError) -> Iterator[SchemaViolation]:
    yield SchemaViolation(_document_path(error), _describe(error))
    if error.validator in _UNION_KEYWORDS:
        for suberror in error.context or []:
            yield from _flatten(suberror)


class SchemaValidator:
    """
    Validates normalized manifest documents against a JSON Schema.

    The document must already be a plain tree of dicts, lists and scalars
    with string keys (see manifest.normalize_document).
    """

    def __init__(self, schema: Optional[Dict[str, Any]] = None):
        """
        Initialize validator.

        Args:
            schema: Schema document (defaults to PROJECT_SCHEMA)

        Raises:
            jsonschema.SchemaError: If the schema itself is invalid
        """
        self.schema = schema if schema is not None else PROJECT_SCHEMA
        Draft7Validator.check_schema(self.schema)
        self._validator = Draft7Validator(self.schema)

    def validate(self, document: Any) -> List[SchemaViolation]:
        """
        Validate a document.

        Args:
            document: Normalized document

        Returns:
            Every violation found, in the order the validator reported them
            (empty if the document is valid)
        """
        violations: List[SchemaViolation] = []
        for error in self._validator.iter_errors(document):
            violations.extend(_flatten(error))

        if violations:
            logger.debug(f"Schema validation found {len(violations)} violation(s)")
        return violations
