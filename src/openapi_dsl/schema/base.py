"""Schema Node: a JSON-Schema fragment plus its optionality flag.

Every schema helper produces a SchemaNode. The flag only drives the
``required`` list of an enclosing object (or parameter); it is never part
of the emitted schema.
"""

import copy
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator


class SchemaNode(BaseModel):
    """Immutable JSON-Schema fragment tagged with ``is_optional``."""

    model_config = ConfigDict(frozen=True)

    fragment: dict[str, Any]
    is_optional: bool = False

    @field_validator("fragment", mode="after")
    @classmethod
    def _own_fragment(cls, value: dict[str, Any]) -> dict[str, Any]:
        # Nodes never share structure with caller dictionaries.
        return {k: _plain(v) for k, v in value.items()}

    def to_schema(self) -> dict[str, Any]:
        """Return the emitted JSON-Schema fragment (a fresh copy)."""
        return copy.deepcopy(self.fragment)

    def merge(self, extra: Mapping[str, Any] | None) -> "SchemaNode":
        """Return a new node with ``extra`` shallow-merged over the fragment."""
        if not extra:
            return self
        return SchemaNode(
            fragment={**self.fragment, **extra},
            is_optional=self.is_optional,
        )


def emit(value: SchemaNode | Mapping[str, Any]) -> dict[str, Any]:
    """Emit a schema value: nodes are unwrapped, plain mappings are copied."""
    if isinstance(value, SchemaNode):
        return value.to_schema()
    return _plain(dict(value))


def is_optional(value: SchemaNode | Mapping[str, Any]) -> bool:
    """Resolved optionality of a schema value; plain mappings are required."""
    return isinstance(value, SchemaNode) and value.is_optional


def _plain(value: Any) -> Any:
    """Deep copy of ``value`` with every nested SchemaNode emitted."""
    if isinstance(value, SchemaNode):
        return value.to_schema()
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return copy.deepcopy(value)
