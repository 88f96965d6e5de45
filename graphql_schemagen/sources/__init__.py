"""
Document source abstraction.

Provides adapters for MongoDB and in-memory document collections.
"""

from graphql_schemagen.sources.adapter import DocumentSource, DocumentSourceError
from graphql_schemagen.sources.memory import InMemoryDocumentSource
from graphql_schemagen.sources.mongo import MongoDocumentSource, normalize_bson

__all__ = [
    "DocumentSource",
    "DocumentSourceError",
    "InMemoryDocumentSource",
    "MongoDocumentSource",
    "normalize_bson",
]
