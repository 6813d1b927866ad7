"""Response and request body helpers.

Headers, links, examples and encoding are opaque: they are forwarded
verbatim and omitted entirely when not supplied.
"""

import copy
from typing import Any, Mapping

from openapi_dsl.schema.base import SchemaNode, emit, is_optional

DEFAULT_MEDIA_TYPE = "application/json"


def _media(
    schema: SchemaNode | Mapping[str, Any] | None,
    examples: Mapping[str, Any] | None,
    encoding: Mapping[str, Any] | None,
) -> dict[str, Any]:
    media: dict[str, Any] = {}
    if schema is not None:
        media["schema"] = emit(schema)
    if examples is not None:
        media["examples"] = copy.deepcopy(dict(examples))
    if encoding is not None:
        media["encoding"] = copy.deepcopy(dict(encoding))
    return media


def response(
    description: str | None = None,
    schema: SchemaNode | Mapping[str, Any] | None = None,
    type: str = DEFAULT_MEDIA_TYPE,
    headers: Mapping[str, Any] | None = None,
    links: Mapping[str, Any] | None = None,
    examples: Mapping[str, Any] | None = None,
    encoding: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a Response Object with a single ``content[type]`` entry."""
    result: dict[str, Any] = {}
    if description is not None:
        result["description"] = description
    if headers is not None:
        result["headers"] = copy.deepcopy(dict(headers))
    if links is not None:
        result["links"] = copy.deepcopy(dict(links))
    result["content"] = {type: _media(schema, examples, encoding)}
    return result


def json(**props: Any) -> dict[str, Any]:
    """``response(...)`` with the media type fixed to ``application/json``."""
    if "type" in props:
        raise TypeError("json() does not accept 'type'; use response() instead")
    return response(type=DEFAULT_MEDIA_TYPE, **props)


def request_body(
    schema: SchemaNode | Mapping[str, Any],
    type: str = DEFAULT_MEDIA_TYPE,
    description: str | None = None,
    required: bool | None = None,
    examples: Mapping[str, Any] | None = None,
    encoding: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a Request Body Object.

    Unless ``required`` is given, it follows the schema node's optionality:
    ``request_body(obj.optional(...))`` yields ``required: false``.
    """
    if required is None:
        required = not is_optional(schema)
    result: dict[str, Any] = {}
    if description is not None:
        result["description"] = description
    result["required"] = required
    result["content"] = {type: _media(schema, examples, encoding)}
    return result


def json_body(schema: SchemaNode | Mapping[str, Any], **props: Any) -> dict[str, Any]:
    """``request_body(...)`` with the media type fixed to ``application/json``."""
    if "type" in props:
        raise TypeError("json_body() does not accept 'type'; use request_body() instead")
    return request_body(schema, type=DEFAULT_MEDIA_TYPE, **props)
