"""
Generate GraphQL schema definitions from sampled MongoDB documents.
"""

from graphql_schemagen.converter import convert_mongo_schema_to_graphql, convert_schema
from graphql_schemagen.inference.schema_assembler import SchemaAssembler

__version__ = "0.1.0"

__all__ = [
    "SchemaAssembler",
    "convert_mongo_schema_to_graphql",
    "convert_schema",
]
