"""SchemaAdapter protocol and schema resolution."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

from envshape.domain.nodes import FieldNode

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class SchemaAdapter(Protocol[T_co]):
    """Field introspection plus candidate parsing for one schema.

    ``parse`` raises the validation library's structured error
    (``pydantic.ValidationError`` for the bundled adapters) unmodified.
    """

    def fields(self) -> Mapping[str, FieldNode]:
        """Ordered mapping of field name to field node."""
        ...

    def parse(self, candidate: Mapping[str, Any]) -> T_co:
        """Validate *candidate* and return the typed configuration."""
        ...


def resolve_schema(schema: Any) -> SchemaAdapter[Any]:
    """Return the adapter for *schema*.

    Accepts a pydantic model class, a dataclass type, or an object that
    already implements :class:`SchemaAdapter`.

    Raises:
        TypeError: If *schema* is none of the above.
    """
    from envshape.adapters.dataclass import DataclassSchema
    from envshape.adapters.pydantic_model import PydanticModelSchema

    if isinstance(schema, type):
        if issubclass(schema, BaseModel):
            return PydanticModelSchema(schema)
        if dataclasses.is_dataclass(schema):
            return DataclassSchema(schema)
    elif isinstance(schema, SchemaAdapter):
        return schema

    msg = (
        f"Unsupported schema {schema!r}: "
        "expected a pydantic model class, a dataclass type, or a SchemaAdapter"
    )
    raise TypeError(msg)
