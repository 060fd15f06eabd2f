"""
Tests for the schema registry
"""

import pytest
from graphql import GraphQLList, GraphQLNonNull, get_named_type

from profilegraph.graphql.errors import SchemaSyntaxError
from profilegraph.graphql.resolvers import build_profile_resolvers
from profilegraph.graphql.schema import (
    PROFILE_SDL,
    build_schema,
    check_resolvers,
    root_field_names,
    validate_schema,
)


class TestBuildSchema:
    """Tests for build_schema."""

    def test_profile_types(self, schema):
        profile = schema.get_type("Profile")
        assert set(profile.fields) == {"id", "name", "age", "homeTown"}
        for name in ("id", "name", "homeTown"):
            field_type = profile.fields[name].type
            assert isinstance(field_type, GraphQLNonNull)
            assert field_type.of_type.name == "String"
        assert profile.fields["age"].type.of_type.name == "Int"

    def test_profile_input_has_no_id(self, schema):
        profile_input = schema.get_type("ProfileInput")
        assert set(profile_input.fields) == {"name", "age", "homeTown"}

    def test_root_fields(self, schema):
        assert set(schema.query_type.fields) == {"getProfiles", "getProfile"}
        assert set(schema.mutation_type.fields) == {"createProfile", "updateProfile"}

        get_profiles = schema.query_type.fields["getProfiles"].type
        assert isinstance(get_profiles, GraphQLList)
        assert get_named_type(get_profiles).name == "Profile"

        update_args = schema.mutation_type.fields["updateProfile"].args
        assert set(update_args) == {"id", "profile"}
        assert isinstance(update_args["profile"].type, GraphQLNonNull)

    def test_syntax_error(self):
        with pytest.raises(SchemaSyntaxError, match="Invalid schema syntax"):
            build_schema("type Query {")

    def test_unknown_type_reference(self):
        with pytest.raises(SchemaSyntaxError, match="Missing"):
            build_schema("type Query { profile: Missing }")

    def test_missing_query_root(self):
        with pytest.raises(SchemaSyntaxError, match="Query root type"):
            build_schema("type Profile { id: String! }")

    def test_rebuilding_gives_equivalent_schema(self):
        first = build_schema(PROFILE_SDL)
        second = build_schema(PROFILE_SDL)
        assert first is not second
        assert set(first.type_map) == set(second.type_map)


class TestValidateSchema:
    def test_profile_schema_passes(self, schema):
        validate_schema(schema)


class TestCheckResolvers:
    def test_profile_resolvers_match(self, schema):
        check_resolvers(schema, build_profile_resolvers())

    def test_unknown_resolver_rejected(self, schema):
        with pytest.raises(SchemaSyntaxError, match="deleteProfile"):
            check_resolvers(schema, [*build_profile_resolvers(), "deleteProfile"])

    def test_missing_resolver_is_tolerated(self, schema):
        check_resolvers(schema, ["getProfile"])

    def test_root_field_names(self, schema):
        assert root_field_names(schema) == {
            "getProfiles",
            "getProfile",
            "createProfile",
            "updateProfile",
        }
