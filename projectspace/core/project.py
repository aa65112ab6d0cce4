"""
Typed project model.

Projects are normally produced by the manifest decoder; ``validate()`` repeats
the required-attribute checks for values assembled in code.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..exceptions import ManifestError
from .runtime import RuntimeDescriptor

MISSING_NAME_MESSAGE = "project is missing a 'name' attribute"
MISSING_RUNTIME_MESSAGE = "project is missing a 'runtime' attribute"


@dataclass
class Project:
    """A project manifest: name, runtime and optional build metadata."""

    name: str = ""
    runtime: Optional[RuntimeDescriptor] = None
    main: Optional[str] = None
    backend: Optional[str] = None
    description: Optional[str] = None

    def validate(self) -> None:
        """
        Check the attributes every project must carry.

        Raises:
            ManifestError: If the name or the runtime is missing
        """
        if not self.name:
            raise ManifestError(MISSING_NAME_MESSAGE)
        if self.runtime is None or not self.runtime.name:
            raise ManifestError(MISSING_RUNTIME_MESSAGE)

    def to_document(self) -> Dict[str, Any]:
        """Return the manifest document this project encodes to."""
        document: Dict[str, Any] = {"name": self.name}
        if self.runtime is not None:
            document["runtime"] = self.runtime.to_document()
        for key in ("main", "backend", "description"):
            value = getattr(self, key)
            if value is not None:
                document[key] = value
        return document
