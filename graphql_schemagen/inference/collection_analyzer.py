"""
Collection field analysis.

Samples a collection, records which types each top-level field takes and
how many sampled documents contain it, then resolves every field to a
GraphQL type and nullability.
"""

import logging
from typing import Any, Dict, List

from graphql_schemagen.inference.naming import type_name_for_collection
from graphql_schemagen.inference.nested_types import (
    ID_FIELD,
    VERSION_FIELD,
    FieldMap,
    FieldSchema,
)
from graphql_schemagen.inference.type_inferrer import (
    GraphQLScalar,
    ValueTypeInferrer,
    non_null,
)
from graphql_schemagen.sources.adapter import DocumentSource

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 100


class FieldStats:
    """Observations for a single top-level field."""

    def __init__(self, name: str):
        self.name = name
        # dict keys keep first-seen order
        self.types: Dict[str, None] = {}
        self.presence_count = 0

    def add_observation(self, inferred_type: str) -> None:
        """Record one document containing this field (null values included)."""
        self.presence_count += 1
        self.types[inferred_type] = None

    def observed_types(self) -> List[str]:
        return list(self.types)

    def resolve_type(self) -> str:
        """The single observed type, or ``String`` when samples disagree."""
        if len(self.types) == 1:
            return next(iter(self.types))
        return GraphQLScalar.STRING.value

    def is_required(self, total_docs: int) -> bool:
        """Required only when present in every sampled document."""
        return self.presence_count == total_docs


def apply_nullability(graphql_type: str, required: bool) -> str:
    """
    Append ``!`` to required types.

    Types that already carry ``!`` and list shapes are left as they are.
    """
    if "!" in graphql_type or "[" in graphql_type:
        return graphql_type
    return non_null(graphql_type) if required else graphql_type


class CollectionFieldAnalyzer:
    """
    Resolves the field map of one collection from a document sample.

    Nested object types found while inferring values land in the registry
    owned by ``inferrer``.
    """

    def __init__(self, source: DocumentSource, inferrer: ValueTypeInferrer):
        """
        Initialize analyzer.

        Args:
            source: Document source to sample from
            inferrer: Value type inferrer shared by the conversion run
        """
        self.source = source
        self.inferrer = inferrer

    def analyze(self, collection_name: str, sample_size: int = DEFAULT_SAMPLE_SIZE) -> FieldMap:
        """
        Analyze a collection.

        Args:
            collection_name: Collection to analyze
            sample_size: Maximum number of documents to sample

        Returns:
            Field name -> FieldSchema in first-seen order; empty when the
            collection returned no documents
        """
        if sample_size < 1:
            raise ValueError(f"sample_size must be positive, got {sample_size}")

        documents = self.source.sample(collection_name, sample_size)
        if not documents:
            logger.warning(f"Collection {collection_name} returned no documents")
            return {}

        type_name = type_name_for_collection(collection_name)
        field_stats = self.collect_field_stats(documents, type_name)
        schema = self.resolve_fields(field_stats, len(documents))

        logger.info(
            f"Analyzed {len(documents)} documents from {collection_name}: "
            f"{len(schema)} fields")
        return schema

    def collect_field_stats(
        self,
        documents: List[Dict[str, Any]],
        type_name: str,
    ) -> Dict[str, FieldStats]:
        """
        Record presence and inferred types of every top-level field.

        Args:
            documents: Sampled documents
            type_name: Owner type name for nested type discovery

        Returns:
            Field name -> FieldStats in first-seen order
        """
        field_stats: Dict[str, FieldStats] = {}

        for doc in documents:
            for field_name, value in doc.items():
                if field_name == VERSION_FIELD:
                    continue

                if field_name not in field_stats:
                    field_stats[field_name] = FieldStats(field_name)

                inferred = self.inferrer.infer(value, field_name, type_name)
                field_stats[field_name].add_observation(inferred)

        return field_stats

    def resolve_fields(self, field_stats: Dict[str, FieldStats], total_docs: int) -> FieldMap:
        """
        Turn field observations into GraphQL field types.

        Args:
            field_stats: Observations from collect_field_stats
            total_docs: Number of sampled documents

        Returns:
            Field name -> FieldSchema
        """
        schema: FieldMap = {}

        for field_name, stats in field_stats.items():
            if field_name == ID_FIELD:
                schema["id"] = FieldSchema(type=non_null(GraphQLScalar.ID.value), required=True)
                continue

            required = stats.is_required(total_docs)
            if len(stats.types) > 1:
                logger.debug(
                    f"Field {field_name} has conflicting types "
                    f"{stats.observed_types()}, using String")
            graphql_type = stats.resolve_type()

            schema[field_name] = FieldSchema(
                type=apply_nullability(graphql_type, required),
                required=required,
            )

        return schema
