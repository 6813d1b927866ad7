"""Operation and paths assembly.

``operation()`` binds an HTTP method and URL template to a set of responses;
``paths()`` folds named operations into the OpenAPI ``paths`` map, one entry
per URL template with one key per method.
"""

import copy
import logging
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from openapi_dsl.exceptions import DuplicateOperationError, SchemaTypeError

logger = logging.getLogger(__name__)


class Operation(BaseModel):
    """One HTTP method bound to a URL template."""

    model_config = ConfigDict(frozen=True)

    method: str  # get / post / put / delete / patch ...
    path: str  # /users/{id}
    responses: dict[str, dict[str, Any]]  # {status_code: Response Object}
    operation_id: str | None = None
    summary: str | None = None
    tags: list[str] | None = None
    parameters: list[dict[str, Any]] | None = None
    request_body: dict[str, Any] | None = None
    extra: dict[str, Any] = {}  # forwarded verbatim into the Operation Object

    @field_validator("responses", mode="before")
    @classmethod
    def _stringify_status_codes(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {str(code): copy.deepcopy(resp) for code, resp in value.items()}
        return value

    def to_dict(self, default_id: str | None = None) -> dict[str, Any]:
        """Emit the Operation Object. ``method`` and ``path`` are not part of it."""
        result: dict[str, Any] = {}
        operation_id = self.operation_id or default_id
        if operation_id is not None:
            result["operationId"] = operation_id
        if self.summary is not None:
            result["summary"] = self.summary
        if self.tags is not None:
            result["tags"] = list(self.tags)
        if self.parameters is not None:
            result["parameters"] = copy.deepcopy(self.parameters)
        if self.request_body is not None:
            result["requestBody"] = copy.deepcopy(self.request_body)
        result["responses"] = copy.deepcopy(self.responses)
        result.update(copy.deepcopy(self.extra))
        return result


def operation(
    method: str,
    path: str,
    responses: Mapping[int | str, Mapping[str, Any]],
    operation_id: str | None = None,
    *,
    summary: str | None = None,
    tags: list[str] | None = None,
    parameters: list[dict[str, Any]] | None = None,
    request_body: dict[str, Any] | None = None,
    extra: Mapping[str, Any] | None = None,
) -> Operation:
    """Build an Operation. Status-code keys are normalized to strings."""
    return Operation(
        method=method,
        path=path,
        responses=responses,
        operation_id=operation_id,
        summary=summary,
        tags=tags,
        parameters=parameters,
        request_body=request_body,
        extra=dict(extra or {}),
    )


def paths(ops: Mapping[str, Operation]) -> dict[str, dict[str, Any]]:
    """Group operations by URL template into an OpenAPI ``paths`` map.

    ``ops`` maps a binding name (e.g. ``"getUser"``) to an Operation; the
    binding name becomes the ``operationId`` unless one was set explicitly.
    Paths keep first-seen order and method keys are lower-cased.

    Raises:
        DuplicateOperationError: two operations share a path and method.
    """
    result: dict[str, dict[str, Any]] = {}
    owners: dict[tuple[str, str], str] = {}

    for name, op in ops.items():
        if not isinstance(op, Operation):
            raise SchemaTypeError(
                f"'{name}' is not an Operation (got {type(op).__name__})",
                details={"binding": name},
            )
        method = op.method.lower()
        key = (op.path, method)
        if key in owners:
            raise DuplicateOperationError(op.path, method, owners[key], name)
        owners[key] = name

        result.setdefault(op.path, {})[method] = op.to_dict(default_id=name)
        logger.debug("Added %s %s as %s", method.upper(), op.path, name)

    logger.debug("Assembled %d operations under %d paths", len(owners), len(result))
    return result
