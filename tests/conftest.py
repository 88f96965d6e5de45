# Test configuration

import pytest
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture
def test_settings():
    """Override settings for testing"""
    from graphql_schemagen.config.settings import Settings
    return Settings(
        mongo_uri="mongodb://localhost:27017",
        mongo_database="schemagen_test",
        schema_sample_size=50,
    )


@pytest.fixture
def registry():
    from graphql_schemagen.inference.nested_types import NestedTypeRegistry
    return NestedTypeRegistry()


@pytest.fixture
def inferrer(registry):
    from graphql_schemagen.inference.type_inferrer import ValueTypeInferrer
    return ValueTypeInferrer(registry)


@pytest.fixture
def make_source():
    """Build an in-memory source that keeps document order."""
    from graphql_schemagen.sources.memory import InMemoryDocumentSource

    def _make(collections):
        return InMemoryDocumentSource(collections, randomize=False)

    return _make
