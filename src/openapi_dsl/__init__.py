"""Declarative builder for OpenAPI v3 documents.

    from openapi_dsl import array, json, operation, paths, string

    api_paths = paths({
        "listUsers": operation("get", "/users", {200: json(schema=array(string()))}),
    })
"""

from openapi_dsl.documents import document, render
from openapi_dsl.exceptions import (
    DuplicateOperationError,
    EmptyChoiceError,
    OpenApiDslError,
    RenderError,
    SchemaTypeError,
    TargetLoadError,
)
from openapi_dsl.parameters import header_param, parameter, path_param, query_param
from openapi_dsl.operations import Operation, operation, paths
from openapi_dsl.responses import json, json_body, request_body, response
from openapi_dsl.schema import *  # noqa: F401,F403
from openapi_dsl.schema import __all__ as _schema_all

__version__ = "0.1.0"

__all__ = _schema_all + [
    "DuplicateOperationError",
    "EmptyChoiceError",
    "OpenApiDslError",
    "Operation",
    "RenderError",
    "SchemaTypeError",
    "TargetLoadError",
    "document",
    "header_param",
    "json",
    "json_body",
    "operation",
    "parameter",
    "path_param",
    "paths",
    "query_param",
    "render",
    "request_body",
    "response",
]
