"""FastAPI entrypoint for the book stock manager."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from bookstock.config import Settings, get_settings
from bookstock.db.connection import close_pool, create_pool, ensure_schema_exists
from bookstock.routers import books
from bookstock.routers.errors import register_exception_handlers
from bookstock.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Starting app in %s mode, API version %s", settings.app_env, settings.app_version)
    pool = await create_pool(settings)
    if settings.db_auto_migrate:
        await ensure_schema_exists(pool)
    app.state.pool = pool
    try:
        yield
    finally:
        logger.info("Received shutdown signal, gracefully shutting down...")
        await close_pool(pool)
        app.state.pool = None


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicit Settings instance."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Book Stock Manager",
        version=settings.app_version,
        description="CRUD service for a book inventory.",
        lifespan=lifespan,
        docs_url="/docs" if settings.api_docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.api_docs_enabled else None,
    )
    app.state.settings = settings
    app.state.pool = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/", tags=["health"])
    async def root():
        return {
            "api_name": "book stock manager",
            "version": settings.app_version,
            "env": settings.app_env,
        }

    @app.get("/health", tags=["health"])
    async def healthcheck():
        """Basic health check."""
        return {"status": "ok", "env": settings.app_env}

    @app.get("/health/db", tags=["health"])
    async def db_healthcheck(request: Request):
        """Database connectivity health check."""
        pool = request.app.state.pool
        if pool is None:
            return {"status": "error", "error": "database pool is not initialized", "type": "RuntimeError"}
        try:
            async with pool.acquire() as conn:
                version = await conn.fetchval("SELECT version()")
                book_count = await conn.fetchval("SELECT COUNT(*) FROM book")
        except Exception as e:
            return {"status": "error", "error": str(e), "type": type(e).__name__}
        return {
            "status": "connected",
            "database": {
                "version": version.split(",")[0] if version else "unknown",
                "books": book_count,
            },
        }

    app.include_router(books.router, prefix=f"{settings.api_prefix}/books", tags=["books"])
    return app


app = create_app()
