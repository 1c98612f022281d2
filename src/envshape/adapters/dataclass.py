"""Adapter for standard-library (and pydantic) dataclasses.

Annotations are resolved with ``get_type_hints`` so modules using
``from __future__ import annotations`` work.  Validation goes through
``pydantic.TypeAdapter``.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from functools import cached_property
from typing import Any, Generic, TypeVar, get_type_hints

from pydantic import TypeAdapter

from envshape.adapters.annotations import node_for_annotation, wrap_field
from envshape.domain.nodes import FieldNode

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DataclassSchema(Generic[T]):
    """Expose a dataclass type's ``init`` fields as field nodes."""

    def __init__(self, cls: type[T]) -> None:
        if not dataclasses.is_dataclass(cls):
            msg = f"{cls!r} is not a dataclass"
            raise TypeError(msg)
        self.cls = cls

    @cached_property
    def _adapter(self) -> TypeAdapter[T]:
        return TypeAdapter(self.cls)

    def _hints(self) -> dict[str, Any]:
        # Unresolvable forward references leave every field on its raw
        # ``f.type``; string annotations then translate to Opaque.
        try:
            return get_type_hints(self.cls, include_extras=True)
        except (NameError, TypeError):
            logger.debug("Could not resolve annotations of %s", self.cls.__qualname__)
            return {}

    def fields(self) -> Mapping[str, FieldNode]:
        hints = self._hints()
        result: dict[str, FieldNode] = {}
        for f in dataclasses.fields(self.cls):
            if not f.init:
                continue
            has_default = f.default is not dataclasses.MISSING
            has_factory = f.default_factory is not dataclasses.MISSING
            result[f.name] = wrap_field(
                node_for_annotation(hints.get(f.name, f.type)),
                required=not (has_default or has_factory),
                default_is_none=has_default and f.default is None,
            )
        return result

    def parse(self, candidate: Mapping[str, Any]) -> T:
        return self._adapter.validate_python(dict(candidate))

    def __repr__(self) -> str:
        return f"DataclassSchema({self.cls.__name__})"
