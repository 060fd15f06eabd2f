"""
Main FastAPI application for the profile GraphQL service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..graphql.resolvers import ResolverSet, build_profile_resolvers
from ..graphql.schema import check_resolvers, create_schema
from ..ids import IdGenerator, UUIDGenerator
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import DocumentStore, create_document_store
from .deps import GraphQLService

logger = get_logger(__name__)


def create_app(
    app_settings: Settings | None = None,
    store: DocumentStore | None = None,
    id_generator: IdGenerator | None = None,
    resolvers: ResolverSet | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The schema, store and resolver set are built here once and shared
    read-only by every request.
    """
    app_settings = app_settings or settings

    logger.info("Building GraphQL schema...")
    schema = create_schema()
    resolvers = resolvers if resolvers is not None else build_profile_resolvers()
    check_resolvers(schema, resolvers)

    service = GraphQLService(
        schema=schema,
        resolvers=resolvers,
        store=store if store is not None else create_document_store(app_settings),
        id_generator=id_generator or UUIDGenerator(),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting profile GraphQL API...", store=type(service.store).__name__)
        if not await service.store.health_check():
            logger.warning("Document store is not reachable at startup")

        yield

        logger.info("Shutting down profile GraphQL API...")
        await service.store.close()

    app = FastAPI(
        title="Profile GraphQL API",
        description="GraphQL endpoint for profile documents",
        version=__version__,
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.graphql = service

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        healthy = await service.store.health_check()
        return {"status": "healthy" if healthy else "degraded", "version": __version__}

    from .endpoints import graphql

    app.include_router(graphql.router, tags=["GraphQL"])
    logger.info("GraphQL endpoint initialized successfully", endpoint="/")

    return app


def create_default_app() -> FastAPI:
    """Application factory used by uvicorn."""
    # Production always logs JSON, whatever the debug flag says.
    configure_logging(
        debug=settings.debug and not settings.is_production, log_level=settings.log_level
    )
    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "profilegraph.api.app:create_default_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
