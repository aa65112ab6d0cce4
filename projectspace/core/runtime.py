"""
Runtime descriptor for project manifests.

A runtime is written in a manifest either as a bare name:

    runtime: nodejs

or as an object carrying runtime-specific options:

    runtime:
      name: nodejs
      options:
        typescript: true

In memory a runtime is always the two-field record (name, options). The
compact form is chosen on encode whenever no options are present, and
``options is None`` stays distinct from ``options == {}`` across encodings.
"""

import json
from typing import Any, Dict, Optional, Union

import yaml

from ..exceptions import ManifestError


class RuntimeDescriptor:
    """A runtime name paired with an open-ended options mapping."""

    __slots__ = ("_name", "_options")

    def __init__(self, name: str, options: Optional[Dict[str, Any]] = None):
        self._name = name
        self._options = dict(options) if options is not None else None

    @property
    def name(self) -> str:
        return self._name

    @property
    def options(self) -> Optional[Dict[str, Any]]:
        """A copy of the options (None if the runtime has none)."""
        return dict(self._options) if self._options is not None else None

    def to_document(self) -> Union[str, Dict[str, Any]]:
        """Return the plain value this runtime encodes to."""
        if self._options is None:
            return self._name
        return {"name": self._name, "options": dict(self._options)}

    @classmethod
    def from_document(cls, value: Any) -> "RuntimeDescriptor":
        """
        Build a runtime from either accepted shape.

        Args:
            value: A runtime name, or a mapping with a 'name' and optional
                'options' mapping

        Returns:
            RuntimeDescriptor instance

        Raises:
            ManifestError: If the value has neither shape
        """
        if isinstance(value, str):
            return cls(value)

        if isinstance(value, dict):
            name = value.get("name")
            if not isinstance(name, str) or not name:
                raise ManifestError("runtime is missing a non-empty string 'name' attribute")
            options = value.get("options")
            if options is not None and not isinstance(options, dict):
                raise ManifestError("runtime 'options' must be an object")
            return cls(name, options)

        raise ManifestError("runtime must be a string or an object")

    def to_json(self) -> str:
        return json.dumps(self.to_document())

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "RuntimeDescriptor":
        return cls.from_document(json.loads(data))

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_document(), default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, data: Union[str, bytes]) -> "RuntimeDescriptor":
        return cls.from_document(yaml.safe_load(data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuntimeDescriptor):
            return NotImplemented
        return self._name == other._name and self._options == other._options

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"RuntimeDescriptor(name={self._name!r}, options={self._options!r})"
