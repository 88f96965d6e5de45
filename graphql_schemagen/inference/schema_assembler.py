"""Assembles a complete GraphQL schema from sampled collections."""

import logging
from typing import List, Optional, Sequence

from graphql_schemagen.common.logging_config import PerformanceTracker
from graphql_schemagen.config.settings import get_settings
from graphql_schemagen.inference.collection_analyzer import CollectionFieldAnalyzer
from graphql_schemagen.inference.naming import (
    pluralize,
    to_snake_case,
    type_name_for_collection,
)
from graphql_schemagen.inference.nested_types import NestedTypeRegistry
from graphql_schemagen.inference.sdl_renderer import TypeDefinitionRenderer
from graphql_schemagen.inference.type_inferrer import ValueTypeInferrer
from graphql_schemagen.sources.adapter import DocumentSource

logger = logging.getLogger(__name__)

QUERY_TYPE_NAME = "Query"


class SchemaAssembler:
    """
    Builds the SDL document for a set of collections.

    One instance is one conversion run: it owns the nested type registry,
    which only grows while collections are analyzed and is read once when
    the document is assembled. Use a new instance for every run.
    """

    def __init__(self, source: DocumentSource, sample_size: Optional[int] = None):
        settings = get_settings()

        self.source = source
        self.sample_size = sample_size if sample_size is not None else settings.schema_sample_size
        self.registry = NestedTypeRegistry()
        self.inferrer = ValueTypeInferrer(self.registry)
        self.analyzer = CollectionFieldAnalyzer(source, self.inferrer)
        self.renderer = TypeDefinitionRenderer()

    def generate_type_definition(self, collection_name: str) -> str:
        """Analyze one collection and render its object type."""
        with PerformanceTracker(
            "analyze_collection", logger, collection=collection_name
        ):
            schema = self.analyzer.analyze(collection_name, self.sample_size)
        return self.renderer.render_type(type_name_for_collection(collection_name), schema)

    def build_query_type(self, collection_names: Sequence[str]) -> str:
        """Render the root Query type with a list and a by-id accessor per collection."""
        lines: List[str] = []
        for collection_name in collection_names:
            type_name = type_name_for_collection(collection_name)
            singular_name = to_snake_case(type_name)
            plural_name = pluralize(singular_name)
            lines.append(f"{plural_name}: [{type_name}!]!")
            lines.append(f"{singular_name}(id: ID!): {type_name}")
        return self.renderer.render_block(QUERY_TYPE_NAME, lines)

    def assemble(self, collection_names: Sequence[str]) -> str:
        """
        Generate the full schema document.

        Args:
            collection_names: Collections to convert, in output order

        Returns:
            Collection types, then nested types in discovery order, then the
            Query type, separated by blank lines
        """
        blocks = [self.generate_type_definition(name) for name in collection_names]

        # Registry is complete only after every collection was analyzed
        for type_name, fields in self.registry.items():
            blocks.append(self.renderer.render_type(type_name, fields))

        blocks.append(self.build_query_type(collection_names))

        logger.info(
            f"Assembled schema for {len(collection_names)} collections "
            f"with {len(self.registry)} nested types")
        return "\n\n".join(blocks)
