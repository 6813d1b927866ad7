"""Parameter Object helpers.

``required`` follows the schema node's optionality flag, the same way an
object's ``required`` list does. Path parameters are always required.
"""

from typing import Any, Mapping

from openapi_dsl.schema.base import SchemaNode, emit, is_optional

LOCATIONS = ("path", "query", "header", "cookie")


def parameter(
    name: str,
    location: str,
    schema: SchemaNode | Mapping[str, Any],
    description: str | None = None,
    extra: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    if location not in LOCATIONS:
        raise ValueError(f"Unknown parameter location '{location}', expected one of {LOCATIONS}")
    result: dict[str, Any] = {
        "name": name,
        "in": location,
        "required": location == "path" or not is_optional(schema),
    }
    if description is not None:
        result["description"] = description
    result["schema"] = emit(schema)
    result.update(extra or {})
    return result


def path_param(name: str, schema: SchemaNode | Mapping[str, Any], **kwargs: Any) -> dict[str, Any]:
    return parameter(name, "path", schema, **kwargs)


def query_param(name: str, schema: SchemaNode | Mapping[str, Any], **kwargs: Any) -> dict[str, Any]:
    return parameter(name, "query", schema, **kwargs)


def header_param(name: str, schema: SchemaNode | Mapping[str, Any], **kwargs: Any) -> dict[str, Any]:
    return parameter(name, "header", schema, **kwargs)
