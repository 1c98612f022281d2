"""Schema introspection — unwrap modifier layers and classify primitives.

Both functions are total: an unexpected node shape degrades to returning
the current node (``unwrap``) or ``PrimitiveKind.OTHER`` (``classify``).
"""

from __future__ import annotations

from typing import Any

from envshape.domain import nodes
from envshape.domain.nodes import PrimitiveKind

_INNER_WRAPPERS = (
    nodes.Optional,
    nodes.Nullable,
    nodes.Defaulted,
    nodes.Fallback,
    nodes.ReadOnly,
)


def unwrap(node: Any) -> Any:
    """Strip wrapper layers until a primitive or opaque node is reached.

    A wrapper whose sub-node is missing is returned as is.
    """
    if isinstance(node, _INNER_WRAPPERS):
        return unwrap(node.inner) if node.inner is not None else node
    if isinstance(node, nodes.Transformed):
        return unwrap(node.schema) if node.schema is not None else node
    if isinstance(node, nodes.Piped):
        return unwrap(node.out) if node.out is not None else node
    return node


def classify(node: Any) -> PrimitiveKind:
    """Return the primitive kind behind *node*, or ``OTHER``."""
    inner = unwrap(node)
    if isinstance(inner, nodes.Primitive) and isinstance(inner.kind, PrimitiveKind):
        return inner.kind
    return PrimitiveKind.OTHER
