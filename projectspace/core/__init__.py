"""
Core manifest components.

This module contains the project model, the runtime descriptor, the schema
validator and the manifest decoder.
"""

from .manifest import (EMPTY_NAME_MESSAGE, ManifestParser, ManifestSyntax,
                       decode_document, decode_project, load_project,
                       normalize_document, syntax_for_path)
from .project import MISSING_NAME_MESSAGE, MISSING_RUNTIME_MESSAGE, Project
from .runtime import RuntimeDescriptor
from .schema import (PROJECT_SCHEMA, SchemaValidator, SchemaViolation,
                     json_type_name)

__all__ = [
    # Classes
    "ManifestParser",
    "ManifestSyntax",
    "Project",
    "RuntimeDescriptor",
    "SchemaValidator",
    "SchemaViolation",
    # Functions
    "decode_document",
    "decode_project",
    "load_project",
    "normalize_document",
    "syntax_for_path",
    "json_type_name",
    # Constants
    "EMPTY_NAME_MESSAGE",
    "MISSING_NAME_MESSAGE",
    "MISSING_RUNTIME_MESSAGE",
    "PROJECT_SCHEMA",
]
