"""
Conversion entry points.

Run one schema generation against a document source or directly against a
MongoDB database.
"""

import logging
from typing import Optional, Sequence

from graphql_schemagen.common.logging_config import PerformanceTracker, run_scope
from graphql_schemagen.config.settings import get_settings
from graphql_schemagen.inference.schema_assembler import SchemaAssembler
from graphql_schemagen.sources.adapter import DocumentSource
from graphql_schemagen.sources.mongo import MongoDocumentSource

logger = logging.getLogger(__name__)


def convert_schema(
    source: DocumentSource,
    collection_names: Optional[Sequence[str]] = None,
    sample_size: Optional[int] = None,
) -> str:
    """
    Generate a GraphQL schema from a document source.

    Args:
        source: Document source to sample
        collection_names: Collections to convert; all collections when None
        sample_size: Documents sampled per collection (settings default)

    Returns:
        SDL document text
    """
    with run_scope():
        if collection_names is None:
            collection_names = source.list_collections()
            logger.info(f"No collections requested, converting all {len(collection_names)}")

        with PerformanceTracker(
            "convert_schema", logger, collections=len(collection_names)
        ):
            return SchemaAssembler(source, sample_size=sample_size).assemble(collection_names)


def convert_mongo_schema_to_graphql(
    connection_string: str,
    database_name: str,
    collection_names: Optional[Sequence[str]] = None,
    sample_size: Optional[int] = None,
) -> str:
    """
    Generate a GraphQL schema from a MongoDB database.

    The client is closed whether or not the conversion succeeds; driver
    errors propagate unchanged.

    Args:
        connection_string: MongoDB connection URI
        database_name: Database to read
        collection_names: Collections to convert; all collections when None
        sample_size: Documents sampled per collection (settings default)

    Returns:
        SDL document text
    """
    settings = get_settings()
    with MongoDocumentSource(
        connection_string,
        database_name,
        server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
    ) as source:
        return convert_schema(source, collection_names, sample_size)
