"""
Main FastAPI application for the SocialMedia API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..database.connection import SocialMediaStore, close_store, connect_store, ping_store
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


class StoreUnavailableError(RuntimeError):
    """The document store did not answer at startup."""


def build_lifespan(config: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the store connection on startup and close it on shutdown."""
        if getattr(app.state, "store", None) is not None:
            # Store supplied by the caller; its lifecycle is theirs
            yield
            return

        logger.info("Starting SocialMedia API...")
        store = connect_store(config=config)
        ok, error = await ping_store(store)
        if not ok:
            close_store(store)
            logger.error("Document store unavailable", error=error)
            raise StoreUnavailableError(error)

        app.state.store = store
        logger.info("Connected to document store", database=config.database_name)

        try:
            yield
        finally:
            logger.info("Shutting down SocialMedia API...")
            close_store(store)
            app.state.store = None

    return lifespan


def create_app(store: SocialMediaStore | None = None, config: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Pre-built document store. When omitted, one is connected from
            the configured URL during startup.
        config: Settings override, defaults to the environment settings.
    """
    config = config or settings

    app = FastAPI(
        title="SocialMedia API",
        description="GraphQL API for users, posts and comments",
        version=__version__,
        lifespan=build_lifespan(config),
        debug=config.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail fast on unresolved type references
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(graphiql=config.graphiql), prefix="")
    logger.info("GraphQL endpoint initialized", endpoint="/graphql")

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "socialmedia.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
