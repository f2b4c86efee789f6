"""
Consolidated middleware and error handlers for the Dinner Match API
"""

import time
import logging
from datetime import datetime, timezone
from uuid import uuid4

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import DinnerMatchError

logger = logging.getLogger("dinnermatch.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def error_response(status_code: int, error: dict) -> JSONResponse:
    """Uniform error envelope shared by every handler"""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": jsonable_encoder(error),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "Request completed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "status_code": response.status_code,
                    "process_time": f"{process_time:.4f}s",
                },
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed path parameters or bodies are InvalidArgument (400)"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return error_response(
        status.HTTP_400_BAD_REQUEST,
        {
            "code": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": exc.errors(),
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return error_response(
        exc.status_code,
        {"code": f"HTTP_{exc.status_code}", "message": exc.detail},
    )


async def service_exception_handler(request: Request, exc: DinnerMatchError):
    """Validation, not found, conflict and invalid state errors from services"""
    logger.warning(f"{type(exc).__name__} on {request.url}: {exc}")

    return error_response(exc.http_status, exc.to_dict())


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Storage failures are reported as internal errors"""
    logger.exception(f"Database error on {request.url}: {exc}")

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"code": "DATABASE_ERROR", "message": "Database error"},
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"code": "INTERNAL_SERVER_ERROR", "message": "An unexpected error occurred"},
    )
