"""
Main FastAPI application for projectdesk
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..database import Database
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


def create_app(config: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Settings to use (defaults to the process-wide settings)
        database: An existing Database handle to adopt; one is built from
            ``config`` at startup when omitted. An adopted handle is not
            disposed on shutdown.
    """
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting projectdesk API...", environment=config.environment)

        db = database or Database.from_settings(config)
        app.state.db = db

        if config.create_tables_on_startup:
            await db.create_tables()
            logger.info("Database tables ensured")

        ok, error = await db.check_connection()
        if ok:
            logger.info("Database connection validation successful")
        else:
            logger.error("Database connection validation failed", error=error)

        yield

        logger.info("Shutting down projectdesk API...")
        if database is None:
            await db.dispose()

    app = FastAPI(
        title="projectdesk API",
        description="GraphQL API for clients and their projects",
        version=__version__,
        lifespan=lifespan,
        debug=config.debug,
    )

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check(request: Request):  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        ok, error = await request.app.state.db.check_connection()
        return {
            "status": "healthy" if ok else "degraded",
            "version": __version__,
            "database": "connected" if ok else error,
        }

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()
    app.include_router(create_graphql_router(graphiql=config.graphiql), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


def get_app() -> FastAPI:
    """Factory used by uvicorn (``projectdesk.api.app:get_app --factory``)."""
    configure_logging(debug=settings.debug, log_level=settings.log_level)
    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        get_app(),
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
