"""FastAPI application entry point."""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobly.config import Settings, settings as default_settings
from jobly.database import create_db_engine, create_session_factory
from jobly.exceptions import JoblyError
from jobly.logging_config import configure_logging
from jobly.routers import companies, jobs

logger = logging.getLogger(__name__)


def _error_response(message, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the API application.

    The database engine, routers, middleware and error handlers are created
    here rather than at import time, so each app runs against the database
    its own settings name.

    Args:
        settings: Application settings (defaults to the global settings)

    Returns:
        Configured FastAPI application
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Jobly API",
        description="Companies and the jobs they offer",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.db_engine = create_db_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.db_engine)

    # CORS middleware to allow the frontend to call the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    @app.exception_handler(JoblyError)
    async def handle_jobly_error(request: Request, exc: JoblyError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _error_response(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        messages = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        return _error_response(messages, 400)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    # Mount routers
    app.include_router(companies.router, prefix="/api")
    app.include_router(jobs.router, prefix="/api")

    return app


app = create_app()
