"""Request dependencies shared by API endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request
from graphql import GraphQLSchema

from ..graphql.resolvers import ResolverContext, ResolverSet
from ..ids import IdGenerator
from ..store import DocumentStore


@dataclass(frozen=True)
class GraphQLService:
    """Collaborators constructed once at startup and shared by all requests."""

    schema: GraphQLSchema
    resolvers: ResolverSet
    store: DocumentStore
    id_generator: IdGenerator

    def resolver_context(self) -> ResolverContext:
        return ResolverContext(store=self.store, id_generator=self.id_generator)


def get_graphql_service(request: Request) -> GraphQLService:
    return request.app.state.graphql
