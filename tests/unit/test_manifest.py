"""
Unit tests for manifest decoding and validation.

Tests the decoding pipeline in both syntaxes, including:
- Top-level shape and key checks
- Required attributes
- Aggregated schema errors
- File loading
"""

import json

import pytest
import yaml

from projectspace.core.manifest import (ManifestParser, ManifestSyntax,
                                        decode_project, load_project,
                                        normalize_document, syntax_for_path)
from projectspace.core.schema import SchemaValidator
from projectspace.exceptions import ManifestError, ManifestValidationError

RUNTIME_ERRORS = """3 errors occurred:
\t* #/runtime: oneOf failed
\t* #/runtime: expected string, but got number
\t* #/runtime: expected object, but got number

"""

FIELD_ERRORS = """2 errors occurred:
\t* #/main: expected string, but got object
\t* #/backend: expected string, but got number

"""


def decode_error(data, syntax) -> str:
    with pytest.raises(ManifestError) as exc_info:
        decode_project(data, syntax)
    return str(exc_info.value)


class TestDecodeJSON:
    """Test decoding JSON manifests."""

    def test_wrong_type(self):
        """Test that a scalar document is rejected."""
        assert decode_error('"hello"', ManifestSyntax.JSON) == "expected a JSON object"

    def test_missing_name(self):
        """Test that an empty object lacks a name."""
        assert decode_error("{}", ManifestSyntax.JSON) == "project is missing a 'name' attribute"

    def test_empty_name(self):
        """Test that an empty name is rejected."""
        assert (
            decode_error('{"name": ""}', ManifestSyntax.JSON)
            == "project is missing a non-empty string 'name' attribute"
        )

    def test_non_string_name(self):
        """Test that a non-string name is rejected as missing."""
        assert (
            decode_error('{"name": 7, "runtime": "test"}', ManifestSyntax.JSON)
            == "project is missing a non-empty string 'name' attribute"
        )

    def test_missing_runtime(self):
        """Test that a runtime is required."""
        assert (
            decode_error('{"name": "project"}', ManifestSyntax.JSON)
            == "project is missing a 'runtime' attribute"
        )

    def test_runtime_wrong_type(self):
        """Test that every branch of the runtime union is reported."""
        data = '{"name": "project", "runtime": 4}'
        assert decode_error(data, ManifestSyntax.JSON) == RUNTIME_ERRORS

    def test_multiple_field_errors(self):
        """Test that violations across fields are aggregated in validator order."""
        data = '{"name": "project", "runtime": "test", "backend": 4, "main": {}}'
        assert decode_error(data, ManifestSyntax.JSON) == FIELD_ERRORS

    def test_success(self):
        """Test decoding a minimal manifest."""
        project = decode_project('{"name": "project", "runtime": "test"}', ManifestSyntax.JSON)
        assert project.name == "project"
        assert project.runtime.name == "test"
        assert project.runtime.options is None

    def test_accepts_bytes(self):
        """Test that raw bytes decode like text."""
        project = decode_project(b'{"name": "project", "runtime": "test"}', ManifestSyntax.JSON)
        assert project.name == "project"

    def test_syntax_error_propagates(self):
        """Test that malformed JSON surfaces the parser's own error."""
        with pytest.raises(json.JSONDecodeError):
            decode_project('{"name": ', ManifestSyntax.JSON)


class TestDecodeYAML:
    """Test decoding YAML manifests."""

    def test_wrong_type(self):
        """Test that a scalar document is rejected."""
        assert decode_error('"hello"', ManifestSyntax.YAML) == "expected a YAML object"

    def test_empty_document(self):
        """Test that an empty document is not an object."""
        assert decode_error("", ManifestSyntax.YAML) == "expected a YAML object"

    def test_bad_key(self):
        """Test that a non-string key at the root is rejected."""
        assert decode_error("4: hello", ManifestSyntax.YAML) == "expected only string keys, got '4'"

    def test_nested_bad_key(self):
        """Test that a non-string key is rejected at any depth."""
        data = "hello:\n    6: bad"
        assert decode_error(data, ManifestSyntax.YAML) == "expected only string keys, got '6'"

    def test_bad_key_inside_list(self):
        """Test that mappings inside sequences are checked too."""
        data = "name: project\nruntime: test\nitems:\n  - true: x"
        assert decode_error(data, ManifestSyntax.YAML) == "expected only string keys, got 'True'"

    def test_missing_name(self):
        """Test that an empty mapping lacks a name."""
        assert decode_error("{}", ManifestSyntax.YAML) == "project is missing a 'name' attribute"

    def test_empty_name(self):
        """Test that a null name is rejected."""
        assert (
            decode_error("name:", ManifestSyntax.YAML)
            == "project is missing a non-empty string 'name' attribute"
        )

    def test_missing_runtime(self):
        """Test that a runtime is required."""
        assert (
            decode_error("name: project", ManifestSyntax.YAML)
            == "project is missing a 'runtime' attribute"
        )

    def test_runtime_wrong_type(self):
        """Test that every branch of the runtime union is reported."""
        assert decode_error("name: project\nruntime: 4", ManifestSyntax.YAML) == RUNTIME_ERRORS

    def test_multiple_field_errors(self):
        """Test that violations across fields are aggregated in validator order."""
        data = "name: project\nruntime: test\nbackend: 4\nmain: {}"
        assert decode_error(data, ManifestSyntax.YAML) == FIELD_ERRORS

    def test_success(self):
        """Test decoding a minimal manifest."""
        project = decode_project("name: project\nruntime: test", ManifestSyntax.YAML)
        assert project.name == "project"
        assert project.runtime.name == "test"

    def test_timestamp_values_are_strings(self):
        """Test that YAML timestamps decode as their text."""
        data = "name: project\nruntime: test\nmain: 2020-01-01"
        project = decode_project(data, ManifestSyntax.YAML)
        assert project.main == "2020-01-01"

    def test_timestamp_in_wrong_place(self):
        """Test that a timestamp is reported as a string, not a Python type."""
        data = "name: project\nruntime: test\nmain: {}\nbackend: 2020-01-01T10:00:00"
        assert decode_error(data, ManifestSyntax.YAML) == (
            "1 errors occurred:\n\t* #/main: expected string, but got object\n\n"
        )

    def test_runtime_object_form(self):
        """Test decoding a runtime with options."""
        data = "name: project\nruntime:\n  name: nodejs\n  options:\n    typescript: false\n"
        project = decode_project(data, ManifestSyntax.YAML)
        assert project.runtime.name == "nodejs"
        assert project.runtime.options == {"typescript": False}

    def test_syntax_error_propagates(self):
        """Test that malformed YAML surfaces the parser's own error."""
        with pytest.raises(yaml.YAMLError):
            decode_project("name: [project", ManifestSyntax.YAML)


class TestSyntaxEquivalence:
    """Test that both syntaxes decode to the same project."""

    def test_same_project(self, sample_manifest):
        """Test JSON and YAML renditions of one manifest."""
        from_json = decode_project(json.dumps(sample_manifest), ManifestSyntax.JSON)
        from_yaml = decode_project(yaml.safe_dump(sample_manifest), ManifestSyntax.YAML)

        assert from_json == from_yaml
        assert from_json.main == "src/index.ts"
        assert from_json.backend == "https://backend.example.com"
        assert from_json.description == "A test project"


class TestValidationErrorDetails:
    """Test the structured side of aggregated errors."""

    def test_violations_are_kept(self):
        """Test that callers get violations without parsing the message."""
        with pytest.raises(ManifestValidationError) as exc_info:
            decode_project('{"name": "project", "runtime": 4}', ManifestSyntax.JSON)

        error = exc_info.value
        assert [v.message for v in error.violations] == [
            "oneOf failed",
            "expected string, but got number",
            "expected object, but got number",
        ]
        assert error.error_paths == ["#/runtime"] * 3

    def test_custom_validator_is_used(self):
        """Test that decoding runs the given validator."""
        schema = {"type": "object", "properties": {"name": {"type": "string", "maxLength": 3}}}
        with pytest.raises(ManifestValidationError) as exc_info:
            decode_project(
                '{"name": "project", "runtime": "test"}',
                ManifestSyntax.JSON,
                validator=SchemaValidator(schema),
            )
        assert exc_info.value.error_paths == ["#/name"]


class TestNormalizeDocument:
    """Test document normalization."""

    def test_tuples_become_lists(self):
        """Test that tuples are converted at every depth."""
        assert normalize_document({"a": ({"b": (1, 2)},)}) == {"a": [{"b": [1, 2]}]}

    def test_scalars_unchanged(self):
        """Test that scalars pass through."""
        assert normalize_document("x") == "x"
        assert normalize_document(None) is None


class TestLoadProject:
    """Test loading manifest files."""

    def test_syntax_for_path(self):
        """Test picking a syntax from the extension."""
        assert syntax_for_path("Project.json") is ManifestSyntax.JSON
        assert syntax_for_path("Project.yaml") is ManifestSyntax.YAML
        assert syntax_for_path("Project.YML") is ManifestSyntax.YAML

    def test_syntax_for_unknown_extension(self):
        """Test that unknown extensions are rejected."""
        with pytest.raises(ManifestError, match="unsupported manifest file extension"):
            syntax_for_path("Project.toml")

    @pytest.mark.parametrize("file_name", ["Project.yaml", "Project.json"])
    def test_load_project(self, write_manifest, sample_manifest, file_name):
        """Test loading either syntax from disk."""
        path = write_manifest(sample_manifest, file_name=file_name)
        project = load_project(path)
        assert project.name == "test-project"
        assert project.runtime.options == {"typescript": True}

    def test_load_missing_file(self, tmp_path):
        """Test that a missing manifest is a hard error."""
        with pytest.raises(FileNotFoundError):
            load_project(tmp_path / "Project.yaml")


class TestManifestParser:
    """Test ManifestParser class."""

    def test_load_from_file(self, write_manifest, sample_manifest):
        """Test loading a manifest from file."""
        path = write_manifest(sample_manifest)
        assert ManifestParser().load_from_file(path).name == "test-project"

    def test_load_from_string(self):
        """Test loading manifest text."""
        project = ManifestParser().load_from_string("name: p\nruntime: go")
        assert project.runtime.name == "go"

    def test_load_from_dict(self, sample_manifest):
        """Test loading an already-decoded document."""
        assert ManifestParser().load_from_dict(sample_manifest).name == "test-project"

    def test_load_from_dict_invalid(self):
        """Test that dictionaries go through the same checks."""
        with pytest.raises(ManifestError, match="expected only string keys"):
            ManifestParser().load_from_dict({"name": "p", "runtime": "go", "x": {1: 2}})
