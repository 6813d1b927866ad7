"""Schema constructors.

Leaf constructors (``string``, ``integer``, ``choice``...) build nodes with
no children; ``array`` and ``object_`` embed child nodes and, for objects,
derive the ``required`` list from each child's optionality flag.

Every constructor is a :class:`SchemaConstructor`: call it for the required
form, or use ``.optional(...)`` / ``.required(...)``::

    user = object_({
        "id": integer(),
        "nickname": string.optional("Display name"),
    })
"""

import functools
import re
from typing import Any, Callable, Mapping

from openapi_dsl.exceptions import EmptyChoiceError, SchemaTypeError
from openapi_dsl.schema.base import SchemaNode, emit, is_optional
from openapi_dsl.schema.modifiers import optional as make_optional
from openapi_dsl.schema.modifiers import required as make_required

COMPONENT_SCHEMAS = "#/components/schemas/"


class SchemaConstructor:
    """A schema builder paired with its ``optional`` and ``required`` variants."""

    def __init__(self, build: Callable[..., SchemaNode]):
        self._build = build
        functools.update_wrapper(self, build)

    def __call__(self, *args: Any, **kwargs: Any) -> SchemaNode:
        return self._build(*args, **kwargs)

    def optional(self, *args: Any, **kwargs: Any) -> SchemaNode:
        return make_optional(self._build(*args, **kwargs))

    def required(self, *args: Any, **kwargs: Any) -> SchemaNode:
        return make_required(self._build(*args, **kwargs))

    def __repr__(self) -> str:
        return f"<schema constructor {self.__name__}>"


def schema_constructor(build: Callable[..., SchemaNode]) -> SchemaConstructor:
    return SchemaConstructor(build)


def _node(base: dict[str, Any], extra: Mapping[str, Any] | None) -> SchemaNode:
    # Only unset generated fields are dropped; extra is merged as given.
    fields = {k: v for k, v in base.items() if v is not None}
    return SchemaNode(fragment={**fields, **(extra or {})})


def _leaf(kind: str, fmt: str | None = None, name: str | None = None) -> SchemaConstructor:
    def build(description: str | None = None, extra: Mapping[str, Any] | None = None) -> SchemaNode:
        return _node({"type": kind, "format": fmt, "description": description}, extra)

    build.__name__ = build.__qualname__ = name or kind
    build.__doc__ = f"Schema for a {fmt or kind} value."
    return SchemaConstructor(build)


boolean = _leaf("boolean")
integer = _leaf("integer")
number = _leaf("number")
string = _leaf("string")
date = _leaf("string", "date", name="date")
date_time = _leaf("string", "date-time", name="date_time")
binary = _leaf("string", "binary", name="binary")
email = _leaf("string", "email", name="email")
uuid = _leaf("string", "uuid", name="uuid")
uri = _leaf("string", "uri", name="uri")


def _json_type(value: Any) -> str | None:
    # bool is checked first: it is a subclass of int.
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


@schema_constructor
def pattern(
    regex: "str | re.Pattern[str]",
    description: str | None = None,
    extra: Mapping[str, Any] | None = None,
) -> SchemaNode:
    """String schema constrained by a regular expression's source text."""
    source = regex.pattern if isinstance(regex, re.Pattern) else regex
    if not isinstance(source, str):
        raise SchemaTypeError(
            f"pattern() expects a str or compiled pattern, got {type(regex).__name__}"
        )
    return _node({"type": "string", "description": description, "pattern": source}, extra)


@schema_constructor
def constant(
    value: Any,
    description: str | None = None,
    extra: Mapping[str, Any] | None = None,
) -> SchemaNode:
    """Schema accepting exactly one value."""
    return _node({"type": _json_type(value), "description": description, "enum": [value]}, extra)


@schema_constructor
def choice(values: Mapping[Any, str], extra: Mapping[str, Any] | None = None) -> SchemaNode:
    """Enumeration whose description lists every value with its meaning.

    ``values`` maps each allowed value to a human-readable description; the
    mapping's order is kept for both ``enum`` and the description lines.
    """
    if not values:
        raise EmptyChoiceError()
    keys = list(values)
    types = {_json_type(k) for k in keys}
    description = "\n".join(f"* `{key}` - {desc}" for key, desc in values.items())
    return _node(
        {
            "type": types.pop() if len(types) == 1 else None,
            "description": description,
            "enum": keys,
        },
        extra,
    )


@schema_constructor
def ref(target: str) -> SchemaNode:
    """``$ref`` to a component schema; the pointer is emitted, never resolved."""
    if target.startswith("#") or "/" in target:
        return SchemaNode(fragment={"$ref": target})
    return SchemaNode(fragment={"$ref": COMPONENT_SCHEMAS + target})


@schema_constructor
def array(
    items: SchemaNode | Mapping[str, Any],
    description: str | None = None,
    extra: Mapping[str, Any] | None = None,
) -> SchemaNode:
    """Array of ``items``. The optionality of ``items`` has no effect."""
    return _node({"type": "array", "description": description, "items": emit(items)}, extra)


@schema_constructor
def object_(
    properties: Mapping[str, SchemaNode | Mapping[str, Any]],
    description: str | None = None,
    extra: Mapping[str, Any] | None = None,
) -> SchemaNode:
    """Closed object schema.

    Properties are emitted in declaration order. Each property whose node is
    not optional is listed in ``required``; the key is omitted when the list
    would be empty. ``required`` is derived before ``extra`` is merged, so an
    explicit ``extra["required"]`` replaces it.
    """
    emitted: dict[str, Any] = {}
    required_names: list[str] = []
    for name, child in properties.items():
        if not isinstance(name, str):
            raise SchemaTypeError(
                f"Property names must be strings, got {name!r}",
                details={"property": repr(name)},
            )
        emitted[name] = emit(child)
        if not is_optional(child):
            required_names.append(name)

    return _node(
        {
            "type": "object",
            "additionalProperties": False,
            "required": required_names or None,
            "properties": emitted,
            "description": description,
        },
        extra,
    )


obj = object_


def nullable(node: SchemaNode) -> SchemaNode:
    """Copy of ``node`` that also accepts ``null``; optionality is kept."""
    if not isinstance(node, SchemaNode):
        raise SchemaTypeError(f"Expected a SchemaNode, got {type(node).__name__}")
    return node.merge({"nullable": True})
