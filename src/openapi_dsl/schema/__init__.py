"""JSON-Schema nodes, constructors and optionality modifiers."""

from openapi_dsl.schema.base import SchemaNode
from openapi_dsl.schema.constructors import (
    SchemaConstructor,
    array,
    binary,
    boolean,
    choice,
    constant,
    date,
    date_time,
    email,
    integer,
    nullable,
    number,
    obj,
    object_,
    pattern,
    ref,
    string,
    uri,
    uuid,
)
from openapi_dsl.schema.modifiers import optional, required

__all__ = [
    "SchemaNode",
    "SchemaConstructor",
    "array",
    "binary",
    "boolean",
    "choice",
    "constant",
    "date",
    "date_time",
    "email",
    "integer",
    "nullable",
    "number",
    "obj",
    "object_",
    "optional",
    "pattern",
    "ref",
    "required",
    "string",
    "uri",
    "uuid",
]
