"""Translate Python type annotations into field nodes.

Shared by the pydantic and dataclass adapters.  Constraint metadata
(``annotated_types.Gt``, ``MinLen``, ...) refines a primitive and is
ignored; functional validators become ``Transformed`` layers.
"""

from __future__ import annotations

import types
from collections.abc import Iterable
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import AfterValidator, BeforeValidator, Json, PlainValidator, WrapValidator

from envshape.domain import nodes

_VALIDATOR_MARKERS = (AfterValidator, BeforeValidator, PlainValidator, WrapValidator)


def _primitive_for(tp: Any) -> nodes.FieldNode:
    if not isinstance(tp, type):
        return nodes.Opaque(tp)
    # bool subclasses int, so it must be checked first.
    if issubclass(tp, bool):
        return nodes.BOOLEAN
    if issubclass(tp, (int, float)):
        return nodes.NUMBER
    if issubclass(tp, str):
        return nodes.STRING
    return nodes.Opaque(tp)


def apply_metadata(
    node: nodes.FieldNode,
    metadata: Iterable[Any],
    source: Any = None,
) -> nodes.FieldNode:
    """Wrap *node* according to ``Annotated`` metadata items."""
    items = list(metadata)
    if any(isinstance(item, Json) for item in items):
        return nodes.Opaque(source)
    if any(isinstance(item, _VALIDATOR_MARKERS) for item in items):
        return nodes.Transformed(schema=node)
    return node


def node_for_annotation(tp: Any) -> nodes.FieldNode:
    """Return the field node for annotation *tp*."""
    origin = get_origin(tp)

    if origin is Annotated:
        base, *metadata = get_args(tp)
        return apply_metadata(node_for_annotation(base), metadata, source=tp)

    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(members) != 1:
            return nodes.Opaque(tp)
        inner = node_for_annotation(members[0])
        if len(members) < len(get_args(tp)):
            return nodes.Nullable(inner)
        return inner

    if origin is not None:
        return nodes.Opaque(tp)

    return _primitive_for(tp)


def wrap_field(
    node: nodes.FieldNode,
    *,
    required: bool,
    default_is_none: bool = False,
    frozen: bool = False,
) -> nodes.FieldNode:
    """Apply field-level modifiers: read-only, then optional or default."""
    if frozen:
        node = nodes.ReadOnly(node)
    if not required:
        node = nodes.Optional(node) if default_is_none else nodes.Defaulted(node)
    return node
