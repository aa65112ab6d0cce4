"""
Manifest decoding and validation.

This module turns the raw bytes of a project manifest, written in either
JSON or YAML, into a validated Project. Both syntaxes go through the same
pipeline and decode to identical projects:

1. Parse the bytes with the syntax's own decoder. Syntax errors
   (json.JSONDecodeError, yaml.YAMLError) propagate unchanged.
2. Require an object at the top level.
3. Normalize the tree, rejecting any non-string mapping key at any depth.
4. Require the 'name' and 'runtime' attributes.
5. Validate against the project schema, collecting every violation into a
   single ManifestValidationError.
6. Build the typed Project.

Steps 2-4 fail fast with short fixed messages; step 5 never fails fast.
"""

import json
import logging
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..constants import JSON_EXTENSIONS, YAML_EXTENSIONS
from ..exceptions import ManifestError, ManifestValidationError
from .project import MISSING_NAME_MESSAGE, MISSING_RUNTIME_MESSAGE, Project
from .runtime import RuntimeDescriptor
from .schema import SchemaValidator

logger = logging.getLogger(__name__)

EMPTY_NAME_MESSAGE = "project is missing a non-empty string 'name' attribute"

_default_validator: Optional[SchemaValidator] = None


class ManifestSyntax(str, Enum):
    """Concrete syntaxes a manifest can be written in."""

    JSON = "json"
    YAML = "yaml"

    @property
    def label(self) -> str:
        return self.value.upper()


def _get_default_validator() -> SchemaValidator:
    global _default_validator
    if _default_validator is None:
        _default_validator = SchemaValidator()
    return _default_validator


def _parse(data: Union[str, bytes], syntax: ManifestSyntax) -> Any:
    if syntax is ManifestSyntax.JSON:
        return json.loads(data)
    return yaml.safe_load(data)


def normalize_document(value: Any) -> Any:
    """
    Recursively normalize a decoded tree into plain dicts, lists and scalars.

    Tuples become lists, YAML timestamps become their ISO 8601 text and
    every mapping is rebuilt, so the result is independent of which
    decoder produced it.

    Args:
        value: Decoded value (dict, list, tuple, or scalar)

    Returns:
        Normalized value

    Raises:
        ManifestError: If any mapping, at any depth, has a non-string key

    Example:
        >>> normalize_document({"runtime": {"options": ("a", "b")}})
        {'runtime': {'options': ['a', 'b']}}
    """
    if isinstance(value, dict):
        normalized = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise ManifestError(f"expected only string keys, got '{key}'")
            normalized[key] = normalize_document(item)
        return normalized
    elif isinstance(value, (list, tuple)):
        return [normalize_document(item) for item in value]
    elif isinstance(value, date):
        return value.isoformat()
    else:
        return value


def decode_document(
    raw: Any,
    syntax: ManifestSyntax,
    validator: Optional[SchemaValidator] = None,
) -> Project:
    """
    Validate an already-parsed manifest and build the Project.

    Args:
        raw: Value produced by the syntax's decoder
        syntax: Syntax the value was written in (used in error messages)
        validator: Schema validator (defaults to the project schema)

    Returns:
        Validated Project

    Raises:
        ManifestError: If the document is not an object, has a non-string
            key, or lacks a name or runtime
        ManifestValidationError: If the document violates the schema
    """
    if not isinstance(raw, dict):
        raise ManifestError(f"expected a {syntax.label} object")

    document: Dict[str, Any] = normalize_document(raw)

    if "name" not in document:
        raise ManifestError(MISSING_NAME_MESSAGE)
    name = document["name"]
    if not isinstance(name, str) or not name:
        raise ManifestError(EMPTY_NAME_MESSAGE)
    if "runtime" not in document:
        raise ManifestError(MISSING_RUNTIME_MESSAGE)

    violations = (validator or _get_default_validator()).validate(document)
    if violations:
        raise ManifestValidationError(violations)

    project = Project(
        name=name,
        runtime=RuntimeDescriptor.from_document(document["runtime"]),
        main=document.get("main"),
        backend=document.get("backend"),
        description=document.get("description"),
    )
    project.validate()

    logger.debug(f"Decoded {syntax.label} manifest for project '{project.name}'")
    return project


def decode_project(
    data: Union[str, bytes],
    syntax: ManifestSyntax,
    validator: Optional[SchemaValidator] = None,
) -> Project:
    """
    Decode manifest text written in the given syntax.

    Args:
        data: Raw manifest content
        syntax: ManifestSyntax.JSON or ManifestSyntax.YAML
        validator: Schema validator (defaults to the project schema)

    Returns:
        Validated Project

    Raises:
        json.JSONDecodeError: If JSON content is malformed
        yaml.YAMLError: If YAML content is malformed
        ManifestError: See decode_document()
        ManifestValidationError: See decode_document()
    """
    return decode_document(_parse(data, syntax), syntax, validator=validator)


def syntax_for_path(path: Union[str, Path]) -> ManifestSyntax:
    """
    Pick the syntax of a manifest file from its extension.

    Raises:
        ManifestError: If the extension is neither JSON nor YAML
    """
    suffix = Path(path).suffix.lower()
    if suffix in JSON_EXTENSIONS:
        return ManifestSyntax.JSON
    if suffix in YAML_EXTENSIONS:
        return ManifestSyntax.YAML
    raise ManifestError(f"unsupported manifest file extension '{suffix}': {path}")


def load_project(
    path: Union[str, Path], validator: Optional[SchemaValidator] = None
) -> Project:
    """
    Read and decode a manifest file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ManifestError: If the file can't be decoded into a valid project
    """
    path_obj = Path(path)
    syntax = syntax_for_path(path_obj)
    return decode_project(path_obj.read_bytes(), syntax, validator=validator)


class ManifestParser:
    """
    Manifest parser for loading projects from files, strings or dictionaries.
    """

    def __init__(self, validator: Optional[SchemaValidator] = None):
        """
        Initialize parser.

        Args:
            validator: Optional SchemaValidator instance (uses the shared
                project schema validator if None)
        """
        self.validator = validator

    def load_from_file(self, path: Union[str, Path]) -> Project:
        """
        Load a project from a manifest file.

        Args:
            path: Path to a Project.yaml / Project.json file

        Returns:
            Validated Project
        """
        return load_project(path, validator=self.validator)

    def load_from_string(
        self, content: Union[str, bytes], syntax: ManifestSyntax = ManifestSyntax.YAML
    ) -> Project:
        """Load a project from manifest text."""
        return decode_project(content, syntax, validator=self.validator)

    def load_from_dict(self, data: Any) -> Project:
        """Load a project from an already-decoded document."""
        return decode_document(data, ManifestSyntax.JSON, validator=self.validator)
