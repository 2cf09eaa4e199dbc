"""
Main FastAPI application for the Mapgraph API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..broadcast import create_broadcast
from ..config import settings
from ..database import init_database
from ..database.connection import check_database_connection, dispose_database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Mapgraph API...", environment=settings.environment)
    init_database()
    logger.info("Database initialized")

    yield

    # Shutdown
    logger.info("Shutting down Mapgraph API...")
    await app.state.broadcast.close()
    if settings.broadcast_backend == "redis":
        from ..redis_pool import close_redis_pool

        await close_redis_pool()
    await dispose_database()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Mapgraph API",
        description="GraphQL API for maps, places, routes and live traffic/weather updates",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # One broadcast per application; subscriptions and mutations share it
    app.state.broadcast = create_broadcast(settings)
    logger.info("Broadcast configured", backend=settings.broadcast_backend)

    app.add_middleware(LoggingContextMiddleware)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.get("/health/ready")
    async def readiness_check():  # pyright: ignore [reportUnusedFunction]
        """Readiness check: the database (and Redis, when used) must answer."""
        database_ok, database_error = await check_database_connection()
        checks = {"database": "ok" if database_ok else database_error}
        ready = database_ok

        if settings.broadcast_backend == "redis":
            from ..redis_pool import check_redis_health

            redis_ok = await check_redis_health()
            checks["redis"] = "ok" if redis_ok else "unavailable"
            ready = ready and redis_ok

        if not ready:
            logger.warning("Readiness check failed", **checks)
        return JSONResponse(
            status_code=200 if ready else 503,
            content={"status": "ready" if ready else "unavailable", "checks": checks},
        )

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        # Validate schema at startup to catch unresolved types early
        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(app.state.broadcast)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Re-raise to fail fast - server should not start with broken GraphQL
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mapgraph.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
