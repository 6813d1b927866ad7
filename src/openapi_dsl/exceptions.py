"""Exceptions raised while assembling OpenAPI documents."""

from typing import Any


class OpenApiDslError(Exception):
    """Base exception for openapi-dsl."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)


class SchemaTypeError(OpenApiDslError, TypeError):
    """Raised when a helper receives a value of the wrong kind."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(code="SCHEMA_TYPE", message=message, details=details)


class EmptyChoiceError(OpenApiDslError, ValueError):
    """Raised when choice() is given no allowed values."""

    def __init__(self):
        super().__init__(
            code="EMPTY_CHOICE",
            message="choice() requires at least one allowed value",
        )


class DuplicateOperationError(OpenApiDslError):
    """Raised when two operations resolve to the same path and method."""

    def __init__(self, path: str, method: str, first: str, second: str):
        super().__init__(
            code="DUPLICATE_OPERATION",
            message=(
                f"{method.upper()} {path} is declared twice: "
                f"'{first}' and '{second}'"
            ),
            details={"path": path, "method": method, "bindings": [first, second]},
        )
        self.path = path
        self.method = method


class RenderError(OpenApiDslError):
    """Raised when a document cannot be rendered in the requested format."""

    def __init__(self, fmt: str):
        super().__init__(
            code="RENDER_FORMAT",
            message=f"Unsupported output format: {fmt}",
            details={"format": fmt},
        )


class TargetLoadError(OpenApiDslError):
    """Raised when a builder target (module:attribute) cannot be resolved."""

    def __init__(self, target: str, reason: str):
        super().__init__(
            code="TARGET_LOAD",
            message=f"Cannot load '{target}': {reason}",
            details={"target": target},
        )
