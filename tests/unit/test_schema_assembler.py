"""
Unit tests for schema assembly.
"""

from unittest.mock import Mock, patch

import pytest

from graphql_schemagen.config.settings import Settings
from graphql_schemagen.converter import convert_schema
from graphql_schemagen.inference.schema_assembler import SchemaAssembler
from graphql_schemagen.sources.adapter import DocumentSource


OID = "507f191e810c19729de860ea"


class TestSchemaAssembler:
    """Tests for SchemaAssembler."""

    def test_posts_end_to_end(self, make_source):
        source = make_source({"posts": [
            {"_id": OID, "title": "A", "views": 3, "tags": ["x", "y"]},
        ]})

        schema = SchemaAssembler(source).assemble(["posts"])

        assert schema == (
            "type Post {\n"
            "  id: ID!\n"
            "  title: String!\n"
            "  views: Int!\n"
            "  tags: [String]\n"
            "}\n"
            "\n"
            "type Query {\n"
            "  posts: [Post!]!\n"
            "  post(id: ID!): Post\n"
            "}"
        )

    def test_empty_collection(self, make_source):
        schema = SchemaAssembler(make_source({"empty": []})).assemble(["empty"])

        assert schema == (
            "type Empty {\n\n}\n"
            "\n"
            "type Query {\n"
            "  empties: [Empty!]!\n"
            "  empty(id: ID!): Empty\n"
            "}"
        )

    def test_block_order(self, make_source):
        source = make_source({
            "users": [{"_id": OID, "address": {"geo": {"lat": 1.5}}}],
            "orders": [{"_id": OID, "items": [{"sku": "A1", "qty": 2}]}],
        })

        schema = SchemaAssembler(source).assemble(["users", "orders"])
        names = [line.split()[1] for line in schema.splitlines() if line.startswith("type ")]

        assert names == ["User", "Order", "UserAddressGeo", "UserAddress", "OrderItems", "Query"]

    def test_nested_type_rendered_once(self, make_source):
        source = make_source({"users": [
            {"address": {"city": "NYC"}},
            {"address": {"city": "LA", "zip": "90001"}},
        ]})

        schema = SchemaAssembler(source).assemble(["users"])

        assert schema.count("type UserAddress {") == 1
        assert "zip" not in schema

    def test_query_naming(self, make_source):
        source = make_source({})
        query = SchemaAssembler(source).build_query_type(
            ["blogPosts", "boxes", "categories", "status"])

        assert query == (
            "type Query {\n"
            "  blog_posts: [BlogPost!]!\n"
            "  blog_post(id: ID!): BlogPost\n"
            "  boxes: [Boxe!]!\n"
            "  boxe(id: ID!): Boxe\n"
            "  categories: [Categorie!]!\n"
            "  categorie(id: ID!): Categorie\n"
            "  status: [Statu!]!\n"
            "  statu(id: ID!): Statu\n"
            "}"
        )

    def test_no_collections(self, make_source):
        assert SchemaAssembler(make_source({})).assemble([]) == "type Query {\n\n}"

    def test_sample_size_from_settings(self):
        source = Mock(spec=DocumentSource)
        source.sample.return_value = []
        settings = Settings(_env_file=None, schema_sample_size=42)

        with patch("graphql_schemagen.inference.schema_assembler.get_settings",
                   return_value=settings):
            SchemaAssembler(source).assemble(["users"])

        source.sample.assert_called_once_with("users", 42)

    def test_zero_sample_size_rejected(self, make_source):
        source = make_source({"users": [{"name": "Ann"}]})

        assembler = SchemaAssembler(source, sample_size=0)

        assert assembler.sample_size == 0
        with pytest.raises(ValueError):
            assembler.assemble(["users"])

    def test_zero_sample_size_rejected_by_convert_schema(self, make_source):
        source = make_source({"users": [{"name": "Ann"}]})

        with pytest.raises(ValueError):
            convert_schema(source, ["users"], sample_size=0)

    def test_explicit_sample_size(self):
        source = Mock(spec=DocumentSource)
        source.sample.return_value = []

        SchemaAssembler(source, sample_size=5).assemble(["users"])

        source.sample.assert_called_once_with("users", 5)

    def test_runs_are_isolated(self, make_source):
        source = make_source({"users": [{"address": {"city": "NYC"}}]})

        first = SchemaAssembler(source)
        first.assemble(["users"])
        second = SchemaAssembler(source)

        assert len(first.registry) == 1
        assert len(second.registry) == 0

    def test_source_failure_aborts(self):
        source = Mock(spec=DocumentSource)
        source.sample.side_effect = [[{"name": "a"}], ConnectionError("down")]

        with pytest.raises(ConnectionError):
            SchemaAssembler(source).assemble(["users", "posts"])
