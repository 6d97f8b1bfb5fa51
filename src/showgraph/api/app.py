"""
Main FastAPI application for ShowGraph
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..upstream.client import TVMazeClient

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the upstream client unless one was injected."""
    config: Settings = app.state.settings
    logger.info("Starting ShowGraph API...")

    owns_client = app.state.upstream is None
    if owns_client:
        app.state.upstream = TVMazeClient(config.upstream_base_url, timeout=config.upstream_timeout)
    logger.info(
        "Upstream client ready",
        base_url=app.state.upstream.base_url,
        timeout=config.upstream_timeout,
        schedule_date=config.schedule_date,
    )

    yield

    logger.info("Shutting down ShowGraph API...")
    if owns_client:
        await app.state.upstream.aclose()
        app.state.upstream = None


def create_app(config: Settings | None = None, upstream: TVMazeClient | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Settings to run with; defaults to the environment-loaded ``settings``
        upstream: Upstream client to use; when omitted one is created from
            ``config`` at startup and closed at shutdown
    """
    config = config or settings
    configure_logging(config.log_level, json_logs=config.log_json)

    app = FastAPI(
        title="ShowGraph API",
        description="GraphQL facade over the TVmaze schedule API",
        version=__version__,
        lifespan=lifespan,
        debug=config.debug,
    )
    app.state.settings = config
    app.state.upstream = upstream

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    # A broken schema must stop startup rather than 404 at request time
    validate_schema()
    app.include_router(create_graphql_router(config))
    logger.info("GraphQL endpoint initialized", endpoint="/graphql", graphiql=config.graphiql)

    return app
