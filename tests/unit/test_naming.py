"""
Unit tests for type and query field naming rules.
"""

import pytest

from graphql_schemagen.inference.naming import (
    capitalize_first,
    nested_type_name,
    pluralize,
    to_snake_case,
    type_name_for_collection,
)


class TestTypeNameForCollection:
    """Naive singularization strips a single trailing 's'."""

    @pytest.mark.parametrize("collection, expected", [
        ("Users", "User"),
        ("users", "User"),
        ("cats", "Cat"),
        ("posts", "Post"),
        ("categories", "Categorie"),
        ("companies", "Companie"),
        ("glasses", "Glasse"),
        ("people", "People"),
        ("empty", "Empty"),
        ("blogPosts", "BlogPost"),
    ])
    def test_naming(self, collection, expected):
        assert type_name_for_collection(collection) == expected

    def test_first_character_is_never_stripped(self):
        assert type_name_for_collection("s") == "S"
        assert type_name_for_collection("ss") == "S"

    def test_empty_name(self):
        assert type_name_for_collection("") == ""


class TestSnakeCase:

    @pytest.mark.parametrize("type_name, expected", [
        ("User", "user"),
        ("BlogPost", "blog_post"),
        ("UserHTTPLog", "user_h_t_t_p_log"),
        ("post", "post"),
        ("Categorie", "categorie"),
    ])
    def test_to_snake_case(self, type_name, expected):
        assert to_snake_case(type_name) == expected


class TestPluralize:
    """Every branch of the plural rule table."""

    @pytest.mark.parametrize("word, expected", [
        ("box", "boxes"),
        ("glass", "glasses"),
        ("dish", "dishes"),
        ("match", "matches"),
        ("city", "cities"),
        ("y", "ies"),
        ("day", "days"),
        ("key", "keys"),
        ("boy", "boys"),
        ("post", "posts"),
        ("categorie", "categories"),
        ("blog_post", "blog_posts"),
        ("", "s"),
    ])
    def test_pluralize(self, word, expected):
        assert pluralize(word) == expected

    def test_round_trip_through_naive_singularization(self):
        # "statuses" -> Statuse -> statuse -> statuses
        singular = to_snake_case(type_name_for_collection("statuses"))
        assert pluralize(singular) == "statuses"
        assert pluralize("statu") == "status"
        assert pluralize("status") == "statuses"


class TestCapitalization:

    def test_capitalize_first(self):
        assert capitalize_first("address") == "Address"
        assert capitalize_first("homeAddress") == "HomeAddress"
        assert capitalize_first("") == ""

    def test_nested_type_name(self):
        assert nested_type_name("User", "address") == "UserAddress"
        assert nested_type_name("UserAddress", "geo") == "UserAddressGeo"
