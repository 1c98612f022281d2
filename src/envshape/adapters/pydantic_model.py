"""Adapter for pydantic ``BaseModel`` subclasses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from envshape.adapters.annotations import apply_metadata, node_for_annotation, wrap_field
from envshape.domain.nodes import FieldNode

ModelT = TypeVar("ModelT", bound=BaseModel)


def node_for_field(info: FieldInfo) -> FieldNode:
    """Translate one pydantic ``FieldInfo`` into a field node."""
    base = node_for_annotation(info.annotation)
    node = apply_metadata(base, info.metadata, source=info.annotation)
    required = info.is_required()
    return wrap_field(
        node,
        required=required,
        default_is_none=not required and info.default_factory is None and info.default is None,
        frozen=bool(info.frozen),
    )


class PydanticModelSchema(Generic[ModelT]):
    """Expose a pydantic model's fields as field nodes.

    ``parse`` is ``model_validate``.  The candidate is keyed by field name,
    so aliased fields are matched by name as well.  A ``pydantic.ValidationError``
    propagates to the caller as raised.
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    def fields(self) -> Mapping[str, FieldNode]:
        return {name: node_for_field(info) for name, info in self.model.model_fields.items()}

    def parse(self, candidate: Mapping[str, Any]) -> ModelT:
        return self.model.model_validate(dict(candidate), by_name=True)

    def __repr__(self) -> str:
        return f"PydanticModelSchema({self.model.__name__})"
