"""Build a validated configuration object from environment variables.

:func:`build_config` reads the mapped variables, coerces each raw string
according to its field's primitive kind, and hands the candidate object
to the schema's own parse.  Validation errors propagate unmodified.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar, overload

from pydantic import BaseModel

from envshape.adapters.base import SchemaAdapter, resolve_schema
from envshape.domain.coerce import coerce
from envshape.domain.introspect import classify
from envshape.domain.nodes import PrimitiveKind

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
T = TypeVar("T")


@dataclass(frozen=True)
class FieldReport:
    """How one field is sourced from the environment (values excluded)."""

    name: str
    env_var: str | None
    kind: PrimitiveKind
    present: bool


def _warn_unknown_keys(fields: Mapping[str, Any], mapping: Mapping[str, str]) -> None:
    unknown = sorted(key for key in mapping if key not in fields)
    if unknown:
        logger.warning(
            "Mapping names unknown fields, ignoring: %s",
            ", ".join(unknown),
            extra={"unknown": unknown},
        )


def build_candidate(
    adapter: SchemaAdapter[Any],
    mapping: Mapping[str, str],
    env: Mapping[str, str],
) -> dict[str, Any]:
    """Assemble the pre-validation candidate object.

    Fields without a mapping entry, or whose variable is unset, are left
    out entirely so the schema's own defaults apply.
    """
    fields = adapter.fields()
    _warn_unknown_keys(fields, mapping)

    candidate: dict[str, Any] = {}
    for name in fields:
        env_var = mapping.get(name)
        if not env_var:
            continue

        raw = env.get(env_var)
        node = fields.get(name)
        if node is None:
            continue

        value = coerce(node, raw)
        logger.debug(
            "Sourcing field %s from %s",
            name,
            env_var,
            extra={
                "field": name,
                "env_var": env_var,
                "kind": str(classify(node)),
                "set": raw is not None,
            },
        )
        if value is not None:
            candidate[name] = value
    return candidate


@overload
def build_config(
    schema: type[ModelT],
    mapping: Mapping[str, str],
    env: Mapping[str, str] | None = None,
) -> ModelT: ...


@overload
def build_config(
    schema: SchemaAdapter[T],
    mapping: Mapping[str, str],
    env: Mapping[str, str] | None = None,
) -> T: ...


@overload
def build_config(
    schema: type[T],
    mapping: Mapping[str, str],
    env: Mapping[str, str] | None = None,
) -> T: ...


def build_config(
    schema: Any,
    mapping: Mapping[str, str],
    env: Mapping[str, str] | None = None,
) -> Any:
    """Build and validate a configuration object from the environment.

    Args:
        schema: A pydantic model class, a dataclass type, or a
            :class:`~envshape.adapters.SchemaAdapter`.
        mapping: Partial ``field name -> environment variable`` mapping.
            Unmapped fields rely on the schema's defaults.
        env: Environment snapshot; defaults to ``os.environ``.

    Returns:
        The validated configuration, defaults applied.

    Raises:
        pydantic.ValidationError: The candidate failed validation.
        TypeError: *schema* is not a supported schema.
    """
    adapter = resolve_schema(schema)
    candidate = build_candidate(adapter, mapping, os.environ if env is None else env)
    return adapter.parse(candidate)


def derive_mapping(schema: Any, prefix: str = "") -> dict[str, str]:
    """Map every field to ``PREFIX + FIELD_NAME`` in upper case."""
    adapter = resolve_schema(schema)
    return {name: f"{prefix}{name}".upper() for name in adapter.fields()}


def describe_fields(
    schema: Any,
    mapping: Mapping[str, str],
    env: Mapping[str, str] | None = None,
) -> list[FieldReport]:
    """Report the variable, kind, and presence of each declared field."""
    adapter = resolve_schema(schema)
    source = os.environ if env is None else env
    reports: list[FieldReport] = []
    for name, node in adapter.fields().items():
        env_var = mapping.get(name) or None
        reports.append(
            FieldReport(
                name=name,
                env_var=env_var,
                kind=classify(node),
                present=env_var is not None and env_var in source,
            )
        )
    return reports
