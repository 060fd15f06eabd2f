"""
Schema registry: the profile type system, built once from SDL at startup
"""

from collections.abc import Iterable

from graphql import (
    GraphQLError,
    GraphQLSchema,
    get_introspection_query,
    graphql_sync,
)
from graphql import build_schema as gql_build_schema
from graphql import validate_schema as gql_validate_schema

from ..logging import get_logger
from .errors import SchemaSyntaxError

logger = get_logger(__name__)

PROFILE_SDL = """
type Profile {
  id: String!
  name: String!
  age: Int!
  homeTown: String!
}

input ProfileInput {
  name: String!
  age: Int!
  homeTown: String!
}

type Query {
  getProfiles: [Profile]
  getProfile(id: String!): Profile
}

type Mutation {
  createProfile(profile: ProfileInput!): Profile
  updateProfile(id: String!, profile: ProfileInput!): Profile
}
"""


def build_schema(text: str) -> GraphQLSchema:
    """Parse schema definition language into an executable type system.

    Raises:
        SchemaSyntaxError: If the text is not valid SDL, references unknown
            types, or declares no ``Query`` root type
    """
    try:
        schema = gql_build_schema(text)
    except GraphQLError as e:
        raise SchemaSyntaxError(f"Invalid schema syntax: {e.message}") from e
    except TypeError as e:
        # graphql-core reports semantic SDL errors (unknown types, duplicates) as TypeError
        raise SchemaSyntaxError(f"Invalid schema definition: {e}") from e

    if schema.query_type is None:
        raise SchemaSyntaxError("Schema does not define a Query root type")

    errors = gql_validate_schema(schema)
    if errors:
        raise SchemaSyntaxError(
            f"GraphQL schema validation failed: {'; '.join(str(e) for e in errors)}"
        )

    return schema


def validate_schema(schema: GraphQLSchema) -> None:
    """Validate the schema at startup by running the introspection query.

    This catches unresolved types early so the server fails fast rather
    than returning errors for every request.

    Raises:
        SchemaSyntaxError: If introspection fails
    """
    result = graphql_sync(schema, get_introspection_query())
    if result.errors:
        error_messages = [str(e) for e in result.errors]
        logger.error("GraphQL schema validation failed", errors=error_messages)
        raise SchemaSyntaxError(f"GraphQL introspection failed: {'; '.join(error_messages)}")

    logger.info("GraphQL schema validation successful")


def root_field_names(schema: GraphQLSchema) -> set[str]:
    """Names of every field declared on the Query and Mutation root types."""
    names: set[str] = set()
    for root_type in (schema.query_type, schema.mutation_type):
        if root_type is not None:
            names.update(root_type.fields)
    return names


def check_resolvers(schema: GraphQLSchema, resolver_names: Iterable[str]) -> None:
    """Ensure every registered resolver corresponds to a declared root field.

    Raises:
        SchemaSyntaxError: If a resolver targets a field the schema lacks
    """
    unknown = sorted(set(resolver_names) - root_field_names(schema))
    if unknown:
        raise SchemaSyntaxError(f"Resolvers registered for undeclared root fields: {unknown}")

    missing = sorted(root_field_names(schema) - set(resolver_names))
    if missing:
        logger.warning("Root fields without resolvers", fields=missing)


def create_schema() -> GraphQLSchema:
    """Build and validate the profile schema."""
    schema = build_schema(PROFILE_SDL)
    validate_schema(schema)
    return schema
