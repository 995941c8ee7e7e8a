from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from shorturl.api import admin, shortener
from shorturl.core.config import Settings, settings as default_settings
from shorturl.core.errors import ShortenerError
from shorturl.core.logging_config import configure_logging
from shorturl.db.store import URLStore
from shorturl.schemas.url import ServiceInfo
from shorturl.services.shortener import URLService

logger = logging.getLogger(__name__)

ENDPOINTS = {
    "POST /shorten": "Create a short URL",
    "GET /:shortCode": "Redirect to original URL",
    "GET /api/urls": "Get all URLs",
    "GET /api/stats/:shortCode": "Get URL statistics",
    "DELETE /api/urls/:shortCode": "Delete a URL",
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI):

    @app.exception_handler(ShortenerError)
    async def shortener_error_handler(request: Request, exc: ShortenerError):
        if exc.status_code >= 500:
            logger.error(f"Internal error on {request.method} {request.url.path}: {exc}", exc_info=exc)
            return _error(exc.status_code, "Internal server error")
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected body on {request.url.path}: {exc.errors()}")
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error: {exc}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(settings: Optional[Settings] = None, store: Optional[URLStore] = None) -> FastAPI:
    """Build the application around an explicitly constructed store.

    The store is opened on startup (unless the caller already opened it) and
    closed on shutdown.
    """
    settings = settings or default_settings
    store = store or URLStore(settings.DATABASE_URL)
    url_service = URLService(
        store,
        base_url=settings.BASE_URL,
        code_length=settings.SHORT_CODE_LENGTH,
        max_retries=settings.SHORT_CODE_MAX_RETRIES,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not store.is_open:
            store.open()
        logger.info(f"Application '{settings.PROJECT_NAME}' running at {settings.BASE_URL}")
        yield
        logger.info("Shutting down gracefully...")
        store.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="URL Shortener Service",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.url_service = url_service

    register_exception_handlers(app)
    endpoints = dict(ENDPOINTS)

    @app.get("/", response_model=ServiceInfo, tags=["health"])
    def service_info():
        return ServiceInfo(message="URL Shortener API", version=settings.VERSION, endpoints=endpoints)

    @app.get("/health", tags=["health"])
    def health_check():
        return {"status": "healthy", "service": "url-shortener", "urls": store.count()}

    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")
        # Assets resolve under /static, not the site root
        endpoints["GET /static/:path"] = f"Static files from {settings.STATIC_DIR}"
        logger.info(f"Serving static files from {static_dir.resolve()}")

    app.include_router(admin.router)
    app.include_router(shortener.router)
    return app


configure_logging(default_settings.LOG_LEVEL)
app = create_app()
