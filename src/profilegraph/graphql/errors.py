"""
Error taxonomy for schema construction, request handling and field resolution
"""

from graphql import GraphQLError


class ProfileGraphError(Exception):
    """Base class for errors raised by the GraphQL layer."""

    pass


class SchemaSyntaxError(ProfileGraphError):
    """The schema text could not be turned into a usable schema.

    Raised at construction time only; the process cannot serve requests.
    """

    pass


class RequestError(ProfileGraphError):
    """The request was rejected before execution started.

    Carries the structured GraphQL errors to report in the response envelope.
    """

    def __init__(self, errors: list[GraphQLError]):
        super().__init__("; ".join(error.message for error in errors))
        self.errors = errors


class QuerySyntaxError(RequestError):
    """The query text is not a syntactically valid GraphQL document."""

    pass


class QueryValidationError(RequestError):
    """The query document does not conform to the schema."""

    pass


class FieldResolutionError(ProfileGraphError):
    """A resolver failed in an expected, user-facing way."""

    pass


class ProfileNotFoundError(FieldResolutionError):
    def __init__(self, profile_id: str):
        super().__init__(f"Profile not found: {profile_id}")
        self.profile_id = profile_id
