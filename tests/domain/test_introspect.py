"""Tests for unwrap/classify over field nodes."""

from __future__ import annotations

import pytest

from envshape.domain import nodes
from envshape.domain.introspect import classify, unwrap
from envshape.domain.nodes import PrimitiveKind


class TestUnwrap:
    def test_primitive_returned_as_is(self) -> None:
        assert unwrap(nodes.NUMBER) is nodes.NUMBER

    def test_opaque_returned_as_is(self) -> None:
        opaque = nodes.Opaque(dict)
        assert unwrap(opaque) is opaque

    @pytest.mark.parametrize(
        "wrapper",
        [nodes.Optional, nodes.Nullable, nodes.Defaulted, nodes.Fallback, nodes.ReadOnly],
    )
    def test_inner_wrappers(self, wrapper: type) -> None:
        assert unwrap(wrapper(nodes.BOOLEAN)) is nodes.BOOLEAN

    def test_transformed_uses_schema(self) -> None:
        assert unwrap(nodes.Transformed(schema=nodes.STRING)) is nodes.STRING

    def test_piped_uses_output_stage(self) -> None:
        assert unwrap(nodes.Piped(out=nodes.NUMBER)) is nodes.NUMBER

    def test_deeply_nested(self) -> None:
        piped = nodes.Transformed(nodes.Piped(nodes.NUMBER))
        node = nodes.Defaulted(nodes.ReadOnly(nodes.Optional(nodes.Nullable(piped))))
        assert unwrap(node) is nodes.NUMBER

    @pytest.mark.parametrize(
        "node",
        [
            nodes.Optional(None),
            nodes.Defaulted(None),
            nodes.Transformed(schema=None),
            nodes.Piped(out=None),
        ],
    )
    def test_missing_inner_returns_wrapper(self, node: nodes.FieldNode) -> None:
        assert unwrap(node) is node

    def test_missing_inner_stops_at_that_layer(self) -> None:
        broken = nodes.Nullable(None)
        assert unwrap(nodes.Defaulted(broken)) is broken

    @pytest.mark.parametrize("value", [None, "string", 42, {"_def": {}}])
    def test_unrecognized_values_unchanged(self, value: object) -> None:
        assert unwrap(value) is value

    def test_idempotent(self) -> None:
        node = nodes.Optional(nodes.Defaulted(nodes.STRING))
        assert unwrap(unwrap(node)) is unwrap(node)


class TestClassify:
    def test_primitive_kinds(self) -> None:
        assert classify(nodes.NUMBER) is PrimitiveKind.NUMBER
        assert classify(nodes.BOOLEAN) is PrimitiveKind.BOOLEAN
        assert classify(nodes.STRING) is PrimitiveKind.STRING

    def test_wrapped_primitive(self) -> None:
        assert classify(nodes.Defaulted(nodes.Nullable(nodes.BOOLEAN))) is PrimitiveKind.BOOLEAN

    def test_opaque_is_other(self) -> None:
        assert classify(nodes.Opaque(list)) is PrimitiveKind.OTHER

    def test_broken_wrapper_is_other(self) -> None:
        assert classify(nodes.Optional(None)) is PrimitiveKind.OTHER

    def test_non_node_is_other(self) -> None:
        assert classify(None) is PrimitiveKind.OTHER
        assert classify(object()) is PrimitiveKind.OTHER

    def test_kind_string_values(self) -> None:
        assert str(PrimitiveKind.NUMBER) == "number"
        assert str(PrimitiveKind.OTHER) == "other"
