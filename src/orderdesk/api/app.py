"""
Main FastAPI application for orderdesk
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..seed_data import seed_store
from ..store import OrderStore

logger = get_logger(__name__)


def create_app(
    store: OrderStore | None = None, app_settings: Settings | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Order store to serve; a new one is created when omitted.
        app_settings: Settings override, defaults to the global settings.
    """
    app_settings = app_settings or settings
    store = store if store is not None else OrderStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting orderdesk API...", environment=app_settings.environment)
        if app_settings.seed_orders:
            seed_store(store)
        logger.info("Order store ready", total=store.count())

        yield

        logger.info("Shutting down orderdesk API...")

    app = FastAPI(
        title="orderdesk API",
        description="In-memory order store exposed over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.store = store

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
        return {"status": "healthy", "version": __version__, "orders": store.count()}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        # Fail fast: the server must not start with a broken schema
        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(store, graphiql=app_settings.graphiql)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


def build_default_app() -> FastAPI:
    """Application factory used by ``uvicorn --factory`` and the CLI.

    Settings are re-read from the environment so CLI overrides apply.
    """
    app_settings = Settings()
    configure_logging(debug=app_settings.debug, level=app_settings.log_level)
    return create_app(app_settings=app_settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "orderdesk.api.app:build_default_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
