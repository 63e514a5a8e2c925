# 📄 File: user_service/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts up the User Service, connects to the database,
# makes sure the users table exists and gets everything ready to handle requests.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with logging setup, database and session
# initialization, router registration and domain-error to HTTP response mapping.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - user_service.shared.config.settings
# - user_service.shared.infrastructure.database (connection and sessions)
# - user_service.api.v1.router
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Container entry point (`user-service` script)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_service.api.middleware.logging import RequestLoggingMiddleware
from user_service.api.v1.router import api_v1_router
# Registers the users table on the shared metadata before the schema is created
from user_service.modules.user_management.infrastructure.database import models  # noqa: F401
from user_service.shared.config.settings import get_settings
from user_service.shared.core.exceptions import UserServiceException, is_client_error, is_server_error
from user_service.shared.infrastructure.database.connection import close_database, initialize_database
from user_service.shared.infrastructure.database.session import initialize_sessions
from user_service.shared.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Connects to the store and verifies the schema on startup; disposes the
    connection pool on shutdown.
    """
    settings = get_settings()
    startup_logger = setup_logging()
    startup_logger.info(f"Booting {settings.APP_NAME} {settings.APP_VERSION}...")

    await initialize_database()
    initialize_sessions()
    startup_logger.info("User Service online and ready to serve")

    try:
        yield
    finally:
        logger.info("User Service shutting down...")
        await close_database()
        logger.info("User Service shutdown complete")


def create_application() -> FastAPI:
    """
    Application factory function.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(api_v1_router, prefix="/api/v1")

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(UserServiceException)
    async def user_service_exception_handler(
        request: Request,
        exc: UserServiceException
    ) -> JSONResponse:
        """Map domain errors to their HTTP status with a message body."""
        error = exc.to_dict()["error"]
        if is_server_error(exc):
            logger.error(f"Request failed ({exc.error_code}): {exc.message}", extra={"error": error})
        elif is_client_error(exc):
            logger.info(f"Request rejected ({exc.error_code}): {exc.message}", extra={"error": error})

        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """Bodies that do not decode into a user record are bad requests."""
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
            for error in exc.errors()
        )
        logger.info(f"Request body rejected: {problems}")

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": problems},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Run the service with uvicorn.

    Used by the `user-service` console script and `python -m user_service.main`.
    """
    settings = get_settings()
    uvicorn.run(
        "user_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
