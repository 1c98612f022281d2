"""Field nodes — the tagged form of a single field's schema.

Adapters translate a validation library's native field description into
these variants.  Wrapper variants point at the node they wrap; a missing
sub-node is represented by ``None`` and never raises during introspection.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class PrimitiveKind(StrEnum):
    """Primitive kinds that drive string coercion."""

    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    OTHER = "other"


@dataclass(frozen=True)
class Primitive:
    """Innermost primitive declaration (``int``, ``bool``, ``str``, ...)."""

    kind: PrimitiveKind


@dataclass(frozen=True)
class Optional:
    """Field that may be omitted entirely."""

    inner: FieldNode | None


@dataclass(frozen=True)
class Nullable:
    """Field that accepts ``None`` in addition to its inner type."""

    inner: FieldNode | None


@dataclass(frozen=True)
class Defaulted:
    """Field with a default value or default factory."""

    inner: FieldNode | None


@dataclass(frozen=True)
class Fallback:
    """Field that substitutes a fallback value when validation fails."""

    inner: FieldNode | None


@dataclass(frozen=True)
class ReadOnly:
    """Field that cannot be reassigned after validation."""

    inner: FieldNode | None


@dataclass(frozen=True)
class Transformed:
    """Field whose value passes through validator functions.

    The wrapped node lives under ``schema`` rather than ``inner``.
    """

    schema: FieldNode | None


@dataclass(frozen=True)
class Piped:
    """Pipeline stage; coercion targets the output stage ``out``."""

    out: FieldNode | None


@dataclass(frozen=True)
class Opaque:
    """Anything without a recognizable primitive (containers, enums, ...)."""

    source: Any = None


FieldNode = (
    Primitive
    | Optional
    | Nullable
    | Defaulted
    | Fallback
    | ReadOnly
    | Transformed
    | Piped
    | Opaque
)

NUMBER = Primitive(PrimitiveKind.NUMBER)
BOOLEAN = Primitive(PrimitiveKind.BOOLEAN)
STRING = Primitive(PrimitiveKind.STRING)
