"""LoadService — resolve a schema target and build or describe it.

Targets are ``module:attribute`` strings naming a pydantic model class,
a dataclass type, or a SchemaAdapter instance.
"""

from __future__ import annotations

import dataclasses
import importlib
import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from envshape.adapters.base import SchemaAdapter, resolve_schema
from envshape.loader import build_config, derive_mapping, describe_fields
from envshape.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class SchemaNotFoundError(LookupError):
    """A ``module:attribute`` target could not be imported."""


def import_target(target: str) -> Any:
    """Import the object named by ``module:attribute`` (dotted attributes allowed)."""
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        msg = f"Expected 'module:attribute', got {target!r}"
        raise SchemaNotFoundError(msg)
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import module {module_name!r}: {exc}"
        raise SchemaNotFoundError(msg) from exc
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            msg = f"Module {module_name!r} has no attribute {attr_path!r}"
            raise SchemaNotFoundError(msg) from exc
    return obj


def _dump(config: Any) -> dict[str, Any]:
    """Serialize a validated configuration; secret types stay masked."""
    if isinstance(config, BaseModel):
        return config.model_dump(mode="json")
    if dataclasses.is_dataclass(config) and not isinstance(config, type):
        return TypeAdapter(type(config)).dump_python(config, mode="json")
    return {"value": str(config)}


def _validation_error(op: str, exc: ValidationError) -> ServiceResult:
    errors = [
        {
            "loc": ".".join(str(part) for part in err["loc"]),
            "type": err["type"],
            "msg": err["msg"],
        }
        for err in exc.errors(include_url=False, include_input=False)
    ]
    return ServiceResult.failure(
        op,
        ErrorCode.VALIDATION_FAILED,
        f"{exc.error_count()} validation error(s) for {exc.title}",
        errors=errors,
    )


class LoadService:
    """Build or describe configuration for a schema target.

    Args:
        env: Environment snapshot; defaults to ``os.environ``.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self.env = os.environ if env is None else env

    def _resolve(
        self,
        op: str,
        target: str,
        mapping: Mapping[str, str],
        prefix: str | None,
    ) -> tuple[SchemaAdapter[Any], dict[str, str]] | ServiceResult:
        """Return ``(adapter, mapping)`` or a failed result."""
        try:
            adapter = resolve_schema(import_target(target))
        except SchemaNotFoundError as exc:
            return ServiceResult.failure(op, ErrorCode.SCHEMA_NOT_FOUND, str(exc))
        except TypeError as exc:
            return ServiceResult.failure(op, ErrorCode.UNSUPPORTED_SCHEMA, str(exc))
        merged = derive_mapping(adapter, prefix) if prefix is not None else {}
        merged.update(mapping)
        return adapter, merged

    def check(
        self,
        target: str,
        mapping: Mapping[str, str],
        *,
        prefix: str | None = None,
    ) -> ServiceResult:
        """Build the configuration and report the validated values."""
        op = "check"
        resolved = self._resolve(op, target, mapping, prefix)
        if isinstance(resolved, ServiceResult):
            return resolved
        adapter, merged = resolved

        try:
            config = build_config(adapter, merged, self.env)
        except ValidationError as exc:
            logger.debug("Validation failed for %s", target)
            return _validation_error(op, exc)

        warnings = [
            f"Field not mapped to an environment variable: {name}"
            for name in adapter.fields()
            if not merged.get(name)
        ]
        return ServiceResult.success(op, {"schema": target, "config": _dump(config)}, warnings)

    def fields(
        self,
        target: str,
        mapping: Mapping[str, str],
        *,
        prefix: str | None = None,
    ) -> ServiceResult:
        """Describe how each declared field is sourced."""
        op = "fields"
        resolved = self._resolve(op, target, mapping, prefix)
        if isinstance(resolved, ServiceResult):
            return resolved
        adapter, merged = resolved

        items = [
            {
                "name": report.name,
                "env_var": report.env_var,
                "kind": str(report.kind),
                "present": report.present,
            }
            for report in describe_fields(adapter, merged, self.env)
        ]
        return ServiceResult.success(op, {"schema": target, "items": items})
