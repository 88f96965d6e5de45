"""
Value type inference for GraphQL schema generation.

Maps a single sampled value to a GraphQL type string: a scalar, a list
shape, or the name of a nested object type registered as a side effect.
"""

import re
from datetime import date
from enum import Enum
from typing import Any, Mapping

from graphql_schemagen.inference.naming import nested_type_name
from graphql_schemagen.inference.nested_types import NestedTypeRegistry

OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


class GraphQLScalar(str, Enum):
    """Built-in GraphQL scalar types."""
    STRING = "String"
    INT = "Int"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    ID = "ID"


def list_of(element_type: str) -> str:
    return f"[{element_type}]"


def non_null(type_name: str) -> str:
    return f"{type_name}!"


def is_object_id(value: str) -> bool:
    """True for 24-character hexadecimal strings (stringified ObjectIds)."""
    return OBJECT_ID_PATTERN.fullmatch(value) is not None


class ValueTypeInferrer:
    """
    Infers GraphQL types for sampled values.

    Object values and arrays of objects are materialized as named nested
    types in the shared registry. Inference never raises: anything it does
    not recognize becomes ``String``.
    """

    def __init__(self, registry: NestedTypeRegistry):
        self.registry = registry

    def infer(self, value: Any, field_name: str, owner_type_name: str) -> str:
        """
        Infer the GraphQL type of one value.

        Args:
            value: Sampled value
            field_name: Field the value was found under
            owner_type_name: Type that owns the field, prefix for nested names

        Returns:
            GraphQL type string
        """
        if value is None:
            return GraphQLScalar.STRING.value
        if isinstance(value, str):
            return GraphQLScalar.ID.value if is_object_id(value) else GraphQLScalar.STRING.value
        # bool is a subclass of int
        if isinstance(value, bool):
            return GraphQLScalar.BOOLEAN.value
        if isinstance(value, int):
            return GraphQLScalar.INT.value
        if isinstance(value, float):
            return GraphQLScalar.INT.value if value.is_integer() else GraphQLScalar.FLOAT.value
        if isinstance(value, date):
            return GraphQLScalar.STRING.value
        if isinstance(value, list):
            return self._infer_list(value, field_name, owner_type_name)
        if isinstance(value, Mapping):
            return self._register_nested(value, field_name, owner_type_name)
        return GraphQLScalar.STRING.value

    def _infer_list(self, value: list, field_name: str, owner_type_name: str) -> str:
        # Only the first element decides the list shape
        if not value:
            return list_of(GraphQLScalar.STRING.value)

        first = value[0]
        if isinstance(first, Mapping):
            nested = self._register_nested(first, field_name, owner_type_name)
            return list_of(non_null(nested))

        return list_of(self.infer(first, field_name, owner_type_name))

    def _register_nested(self, sample: Mapping, field_name: str, owner_type_name: str) -> str:
        type_name = nested_type_name(owner_type_name, field_name)
        self.registry.register_if_absent(type_name, sample, self.infer)
        return type_name
