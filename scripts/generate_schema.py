#!/usr/bin/env python3
"""
GraphQL schema generation script.

Samples the configured MongoDB collections and writes the generated SDL.

Usage:
    python scripts/generate_schema.py [collection ...]

Connection parameters come from settings (MONGO_URI, MONGO_DATABASE, ...).
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graphql_schemagen.common.logging_config import setup_logging  # noqa: E402
from graphql_schemagen.config.settings import get_settings  # noqa: E402
from graphql_schemagen.converter import convert_mongo_schema_to_graphql  # noqa: E402

logger = logging.getLogger(__name__)


def generate_schema(collection_names=None):
    """Generate the schema and write it to the configured output path."""
    settings = get_settings()
    setup_logging(settings.log_level, json_format=settings.log_json)

    collection_names = collection_names or settings.collection_names or None
    output_path = Path(settings.output_path)

    print(f"Generating schema from database '{settings.mongo_database}'...")
    try:
        schema = convert_mongo_schema_to_graphql(
            settings.mongo_uri,
            settings.mongo_database,
            collection_names,
            settings.schema_sample_size,
        )
        output_path.write_text(schema, encoding="utf-8")
    except Exception as e:
        logger.exception(f"Schema generation failed for database '{settings.mongo_database}'")
        print(f"✗ Schema generation failed: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"✓ Schema saved to: {output_path}")
    print("\nSchema preview:")
    print(schema)


if __name__ == "__main__":
    generate_schema(sys.argv[1:])
