"""Resolve ``module:attribute`` builder targets to OpenAPI documents."""

import importlib
import importlib.util
import logging
from pathlib import Path
from types import ModuleType
from typing import Any

from openapi_dsl.exceptions import OpenApiDslError, TargetLoadError

logger = logging.getLogger(__name__)


def load_document(target: str) -> dict[str, Any]:
    """Load the document named by ``target``.

    ``target`` is ``package.module:attr`` or ``path/to/file.py:attr``. The
    attribute is either a document mapping or a zero-argument callable
    returning one.
    """
    module_ref, sep, attr = target.rpartition(":")
    if not sep or not module_ref or not attr:
        raise TargetLoadError(target, "expected the form 'module:attribute'")

    module = _import(module_ref, target)
    if not hasattr(module, attr):
        raise TargetLoadError(target, f"module has no attribute '{attr}'")

    value = getattr(module, attr)
    if callable(value):
        logger.debug("Calling builder %s", target)
        try:
            value = value()
        except OpenApiDslError:
            raise
        except Exception as e:
            raise TargetLoadError(target, f"builder failed: {e!r}") from e
    if not isinstance(value, dict):
        raise TargetLoadError(target, f"expected a mapping, got {type(value).__name__}")
    return value


def _import(module_ref: str, target: str) -> ModuleType:
    if module_ref.endswith(".py"):
        file_path = Path(module_ref)
        if not file_path.exists():
            raise TargetLoadError(target, f"file not found: {file_path}")
        spec = importlib.util.spec_from_file_location(file_path.stem, file_path)
        if spec is None or spec.loader is None:
            raise TargetLoadError(target, f"cannot import {file_path}")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except OpenApiDslError:
            raise
        except Exception as e:
            raise TargetLoadError(target, f"error while executing {file_path}: {e!r}") from e
        return module

    try:
        return importlib.import_module(module_ref)
    except ImportError as e:
        raise TargetLoadError(target, str(e)) from e
    except OpenApiDslError:
        raise
    except Exception as e:
        raise TargetLoadError(target, f"error while importing {module_ref}: {e!r}") from e
