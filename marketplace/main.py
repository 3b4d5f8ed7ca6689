"""
Marketplace Service - FastAPI Application
Registration, login, role selection and profile completion
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from typing import Optional
import logging
import time

from marketplace.routes import auth, users, roles, health
from marketplace.utils.config import AppConfig, get_app_config
from marketplace.utils.exceptions import MarketplaceError, InternalError
from marketplace.utils.logger import setup_logging, get_request_logger
from marketplace.utils.store import MarketplaceStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    config: AppConfig = app.state.config
    logger.info(f"{config.service_name} starting up...")
    config.log_config()

    yield

    logger.info(f"{config.service_name} shutting down, in-memory state discarded: {app.state.store.stats()}")


def _validation_message(exc: RequestValidationError) -> str:
    """First validation error as a single readable line"""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"
    location = ".".join(
        part for part in first.get("loc", ())
        if isinstance(part, str) and part != "body"
    )
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as {success: false, message}"""

    @app.exception_handler(MarketplaceError)
    async def marketplace_error_handler(request: Request, exc: MarketplaceError):
        logger.info(f"{exc.code} on {request.method} {request.url.path}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.info(f"Invalid request to {request.url.path}: {message}")
        return JSONResponse(status_code=400, content={"success": False, "message": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.detail},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        error = InternalError()
        return JSONResponse(status_code=error.status_code, content=error.to_dict())


def create_app(
    store: Optional[MarketplaceStore] = None,
    config: Optional[AppConfig] = None
) -> FastAPI:
    """
    Build the marketplace application

    Args:
        store: State container; a fresh empty store when omitted
        config: Configuration; environment-derived when omitted

    Returns:
        FastAPI application with its own store on ``app.state``
    """
    config = config or get_app_config()
    setup_logging(
        config_path=config.log_config_path,
        log_level=config.log_level,
        log_format=config.log_format
    )

    app = FastAPI(
        title="Marketplace Service",
        description="Registration, login and profile completion for the services marketplace",
        version=config.service_version,
        lifespan=lifespan,
        docs_url=config.docs_url,
        debug=config.debug
    )
    app.state.config = config
    app.state.store = store if store is not None else MarketplaceStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.get_cors_origins(),
        allow_credentials=config.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    request_logger = get_request_logger()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            # unhandled errors surface here before the outer 500 handler renders them
            request_logger.log_request(
                request.method,
                request.url.path,
                status_code,
                time.perf_counter() - started,
                user_id=getattr(request.state, "account_id", None),
                ip_address=request.client.host if request.client else None
            )

    register_exception_handlers(app)

    app.include_router(roles.router, prefix=config.api_prefix, tags=["Roles"])
    app.include_router(auth.router, prefix=config.api_prefix, tags=["Authentication"])
    app.include_router(users.router, prefix=config.api_prefix, tags=["Profile"])
    app.include_router(health.router, prefix=config.api_prefix, tags=["Health"])

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": config.service_name,
            "version": config.service_version,
            "status": "running",
            "docs": config.docs_url
        }

    return app


app = create_app()


def run():
    """Run the service with uvicorn"""
    import uvicorn

    config = get_app_config()
    uvicorn.run(
        "marketplace.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug
    )


if __name__ == "__main__":
    run()
