"""envshape — typed, validated configuration from environment variables."""

from envshape.adapters import DataclassSchema, PydanticModelSchema, SchemaAdapter
from envshape.domain.coerce import coerce
from envshape.domain.introspect import classify, unwrap
from envshape.domain.nodes import PrimitiveKind
from envshape.loader import FieldReport, build_config, derive_mapping, describe_fields

__version__ = "0.1.0"

build = build_config

__all__ = [
    "DataclassSchema",
    "FieldReport",
    "PrimitiveKind",
    "PydanticModelSchema",
    "SchemaAdapter",
    "__version__",
    "build",
    "build_config",
    "classify",
    "coerce",
    "derive_mapping",
    "describe_fields",
    "unwrap",
]
