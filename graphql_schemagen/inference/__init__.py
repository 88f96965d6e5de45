"""
Inference module for GraphQL schema generation.

Provides value type inference, nested type discovery, collection field
analysis and SDL rendering.
"""

from graphql_schemagen.inference.naming import (
    capitalize_first,
    nested_type_name,
    pluralize,
    to_snake_case,
    type_name_for_collection,
)
from graphql_schemagen.inference.nested_types import (
    FieldSchema,
    NestedTypeRegistry,
)
from graphql_schemagen.inference.type_inferrer import (
    GraphQLScalar,
    ValueTypeInferrer,
)
from graphql_schemagen.inference.collection_analyzer import (
    CollectionFieldAnalyzer,
    FieldStats,
)
from graphql_schemagen.inference.sdl_renderer import TypeDefinitionRenderer
from graphql_schemagen.inference.schema_assembler import SchemaAssembler

__all__ = [  # ruff: noqa: RUF022
    # Naming
    "capitalize_first",
    "nested_type_name",
    "pluralize",
    "to_snake_case",
    "type_name_for_collection",
    # Type Inference
    "FieldSchema",
    "NestedTypeRegistry",
    "GraphQLScalar",
    "ValueTypeInferrer",
    # Collection Analysis
    "CollectionFieldAnalyzer",
    "FieldStats",
    # Rendering
    "TypeDefinitionRenderer",
    "SchemaAssembler",
]
