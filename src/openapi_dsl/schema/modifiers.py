"""Optionality modifiers.

Both return a copy of the node with the flag set; the input is untouched,
so one base node can be embedded as required in one object and optional
in another.
"""

from openapi_dsl.exceptions import SchemaTypeError
from openapi_dsl.schema.base import SchemaNode


def optional(node: SchemaNode) -> SchemaNode:
    """Mark a node optional: it will not appear in its parent's ``required``."""
    return _with_flag(node, True)


def required(node: SchemaNode) -> SchemaNode:
    """Mark a node required: it will appear in its parent's ``required``."""
    return _with_flag(node, False)


def _with_flag(node: SchemaNode, flag: bool) -> SchemaNode:
    if not isinstance(node, SchemaNode):
        raise SchemaTypeError(
            f"Expected a SchemaNode, got {type(node).__name__}",
            details={"value": repr(node)},
        )
    return node.model_copy(update={"is_optional": flag}, deep=True)
