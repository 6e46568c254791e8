"""Resource - concrete subject instance tagged with its subject type."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Resource:
    """Resource instance with an explicit subject type and attribute values.

    The subject type is supplied by the caller; it is never derived from a
    Python class name.
    """

    subject_type: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @classmethod
    def of(cls, subject_type: str, **attributes: Any) -> "Resource":
        """Shorthand: Resource.of("Post", id=1, authorId=2)."""
        return cls(subject_type=subject_type, attributes=attributes)

    def get(self, path: str) -> Any:
        """Attribute value by name or dotted path; None when missing."""
        value: Any = self.attributes
        for part in path.split("."):
            if not isinstance(value, Mapping) or part not in value:
                return None
            value = value[part]
        return value
