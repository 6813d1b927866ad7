"""Top-level document scaffolding and rendering.

``document()`` wraps a ``paths`` map (and optional components) in the
OpenAPI root object; ``render()`` turns any document into YAML or JSON text.
Neither validates the result against the OpenAPI specification.
"""

import copy
import json
import logging
from typing import Any, Mapping

import yaml

from openapi_dsl.exceptions import RenderError
from openapi_dsl.schema.base import emit

logger = logging.getLogger(__name__)

DEFAULT_OPENAPI_VERSION = "3.0.3"
DEFAULT_FORMAT = "yaml"
FORMATS = ("yaml", "json")


def document(
    title: str,
    version: str,
    paths: Mapping[str, Any] | None = None,
    components: Mapping[str, Any] | None = None,
    openapi: str = DEFAULT_OPENAPI_VERSION,
    description: str | None = None,
    servers: list[dict[str, Any]] | None = None,
    extra: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Assemble the OpenAPI root object.

    Schema nodes under ``components["schemas"]`` are emitted as plain
    JSON Schema; every other component section is forwarded verbatim.
    """
    info: dict[str, Any] = {"title": title, "version": version}
    if description is not None:
        info["description"] = description

    doc: dict[str, Any] = {"openapi": openapi, "info": info}
    if servers is not None:
        doc["servers"] = copy.deepcopy(servers)
    doc["paths"] = copy.deepcopy(dict(paths or {}))
    if components is not None:
        doc["components"] = _components(components)
    doc.update(copy.deepcopy(dict(extra or {})))
    return doc


def _components(components: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for section, entries in components.items():
        if section == "schemas":
            result[section] = {name: emit(schema) for name, schema in entries.items()}
        else:
            result[section] = copy.deepcopy(entries)
    return result


def render(doc: Mapping[str, Any], fmt: str = DEFAULT_FORMAT) -> str:
    """Serialize a document as YAML or JSON, preserving key order."""
    logger.debug("Rendering document as %s", fmt)
    if fmt == "yaml":
        return yaml.safe_dump(dict(doc), sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(doc, indent=2, ensure_ascii=False) + "\n"
    raise RenderError(fmt)
