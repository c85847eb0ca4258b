"""
FastAPI Application Factory.
Builds a standalone app serving one list adapter's webhook routes.

Embedding applications that already own a FastAPI app can skip this and call
prepare() on their own router instead.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from integrase.adapters.base_list_adapter import BaseListAdapter
from integrase.config.logging_config import NO_CORRELATION_ID, correlation_id_var
from integrase.presentation.api.integrase import announce_routes, prepare

logger = logging.getLogger(__name__)

RUN_HINT = """Integrase prepared. Serve the app with any ASGI server, for example:

    uvicorn.run(app, host="0.0.0.0", port=5001)

Don't like these logs? Disable startup_logs"""


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


def create_fastapi_app(adapter: BaseListAdapter) -> FastAPI:
    """
    Application factory for creating the integrase FastAPI app.

    Routes are mounted immediately, so a bad list config raises
    ConfigurationError here, before anything is served. The directory
    announcement runs in the lifespan startup phase.
    """
    router = APIRouter()
    config = prepare(adapter, router)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup waits for the announcement (bounded by the client timeout)
        await announce_routes(config)
        if config.startup_logs:
            logger.info(RUN_HINT)
        yield
        if config.startup_logs:
            logger.info("Integrase shutting down")

    app = FastAPI(
        title="Integrase",
        description="Metro Reviews webhook endpoints for a bot list",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(CorrelationIdMiddleware)

    # HTTP exception handler - unknown routes, unsupported methods
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"[HTTP ERROR {exc.status_code}] {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": f"Internal server error: {str(exc)}"},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Integrase server is running.", "list_id": config.list_id}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(router)

    return app
