"""Schema adapters — validation-library schemas in field-node form.

An adapter exposes the ordered field nodes of a schema and the schema's
own parse operation.  :func:`resolve_schema` picks the adapter for a
pydantic model class or a dataclass type.
"""

from envshape.adapters.base import SchemaAdapter, resolve_schema
from envshape.adapters.dataclass import DataclassSchema
from envshape.adapters.pydantic_model import PydanticModelSchema

__all__ = [
    "DataclassSchema",
    "PydanticModelSchema",
    "SchemaAdapter",
    "resolve_schema",
]
