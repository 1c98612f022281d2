"""Tests for the pydantic model adapter and annotation translation."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum, IntEnum
from typing import Annotated, Literal, Optional

import pytest
from pydantic import AfterValidator, BaseModel, Field, Json, PositiveInt, ValidationError

from envshape.adapters.annotations import node_for_annotation
from envshape.adapters.pydantic_model import PydanticModelSchema
from envshape.domain import nodes
from envshape.domain.introspect import classify
from envshape.domain.nodes import PrimitiveKind
from tests.schemas import AppConfig, ServiceConfig, WrappedConfig


class Color(Enum):
    RED = "red"


class Level(IntEnum):
    LOW = 1


class TestNodeForAnnotation:
    @pytest.mark.parametrize(
        ("tp", "expected"),
        [
            (int, nodes.NUMBER),
            (float, nodes.NUMBER),
            (bool, nodes.BOOLEAN),
            (str, nodes.STRING),
            (Level, nodes.NUMBER),
        ],
    )
    def test_primitives(self, tp: type, expected: nodes.Primitive) -> None:
        assert node_for_annotation(tp) == expected

    def test_bool_not_number(self) -> None:
        assert classify(node_for_annotation(bool)) is PrimitiveKind.BOOLEAN

    @pytest.mark.parametrize("tp", [int | None, Optional[int]])  # noqa: UP045
    def test_nullable(self, tp: object) -> None:
        assert node_for_annotation(tp) == nodes.Nullable(nodes.NUMBER)

    @pytest.mark.parametrize(
        "tp",
        [int | str, list[int], dict[str, int], Literal["a", "b"], Decimal, Color, object],
    )
    def test_opaque(self, tp: object) -> None:
        node = node_for_annotation(tp)
        assert isinstance(node, nodes.Opaque)
        assert classify(node) is PrimitiveKind.OTHER

    def test_constraints_ignored(self) -> None:
        assert node_for_annotation(Annotated[int, Field(gt=0)]) == nodes.NUMBER

    def test_validator_wraps_transformed(self) -> None:
        node = node_for_annotation(Annotated[str, AfterValidator(str.lower)])
        assert node == nodes.Transformed(schema=nodes.STRING)

    def test_json_marker_is_opaque(self) -> None:
        assert isinstance(node_for_annotation(Json[int]), nodes.Opaque)

    def test_annotated_inside_union(self) -> None:
        node = node_for_annotation(Annotated[int, Field(gt=0)] | None)
        assert node == nodes.Nullable(nodes.NUMBER)


class TestPydanticModelSchema:
    def test_fields_in_declaration_order(self) -> None:
        fields = PydanticModelSchema(ServiceConfig).fields()
        assert list(fields) == ["port", "host", "debug", "api_key", "timeout"]

    def test_field_nodes(self) -> None:
        fields = PydanticModelSchema(AppConfig).fields()
        assert fields["port"] == nodes.NUMBER
        assert fields["host"] == nodes.Defaulted(nodes.STRING)
        assert fields["debug"] == nodes.Defaulted(nodes.BOOLEAN)

    def test_none_default_is_optional(self) -> None:
        fields = PydanticModelSchema(ServiceConfig).fields()
        assert fields["timeout"] == nodes.Optional(nodes.Nullable(nodes.NUMBER))

    def test_wrapped_fields(self) -> None:
        fields = PydanticModelSchema(WrappedConfig).fields()
        assert fields["retries"] == nodes.Defaulted(nodes.Transformed(schema=nodes.NUMBER))
        assert fields["ratio"] == nodes.Defaulted(nodes.ReadOnly(nodes.NUMBER))
        assert fields["verbose"] == nodes.Optional(nodes.Nullable(nodes.BOOLEAN))
        assert isinstance(fields["tags"], nodes.Defaulted)
        assert classify(fields["tags"]) is PrimitiveKind.OTHER
        assert classify(fields["token"]) is PrimitiveKind.OTHER

    def test_parse_returns_model(self) -> None:
        config = PydanticModelSchema(AppConfig).parse({"port": 80})
        assert isinstance(config, AppConfig)
        assert config.port == 80
        assert config.host == "localhost"

    def test_parse_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            PydanticModelSchema(AppConfig).parse({"port": -1})

    def test_constrained_alias_field(self) -> None:
        class Limits(BaseModel):
            workers: PositiveInt = 4

        fields = PydanticModelSchema(Limits).fields()
        assert classify(fields["workers"]) is PrimitiveKind.NUMBER
