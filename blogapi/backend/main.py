"""
FastAPI Application Entry Point.

Builds the blog API application. The blog store is created here and
attached to ``app.state``; handlers reach it only through the
dependencies in core/dependencies.py.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from blogapi.backend.api import health
from blogapi.backend.api import router as api_router
from blogapi.backend.core.config import get_app_config, get_blogs_file_path
from blogapi.backend.core.exception_handlers import register_exception_handlers
from blogapi.backend.core.logging import get_logger
from blogapi.backend.core.middleware import RequestContextMiddleware
from blogapi.backend.repositories.blog import BlogStore

logger = get_logger(__name__)

_app: FastAPI | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    app_config = get_app_config()
    logger.info(
        "Application starting",
        extra={
            "app_name": app_config.application.name,
            "env": app_config.application.environment,
            "blogs_file": str(app.state.blog_store.path),
            "blog_count": len(app.state.blog_store.list_all()),
        },
    )
    yield
    logger.info("Application shutting down")


def create_blog_store() -> BlogStore:
    """Create a store for the configured blogs file and load it."""
    storage = get_app_config().storage
    store = BlogStore(get_blogs_file_path(), indent=storage.indent)
    store.load()
    return store


def create_app(store: BlogStore | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Store to serve. If None, one is created from storage.yaml
            and loaded from disk.
    """
    app_settings = get_app_config().application

    app = FastAPI(
        title=app_settings.name,
        description=app_settings.description,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.state.blog_store = store if store is not None else create_blog_store()

    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix="/api")

    return app


def get_app() -> FastAPI:
    """
    Get the application instance (lazy initialization).

    This function creates the app on first call and caches it.
    Use this instead of importing `app` directly to avoid
    import-time configuration errors.
    """
    global _app
    if _app is None:
        _app = create_app()
    return _app


# For uvicorn: `uvicorn blogapi.backend.main:app`
def __getattr__(name: str) -> FastAPI:
    """Support lazy access to `app` for uvicorn compatibility."""
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
