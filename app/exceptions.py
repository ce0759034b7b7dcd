# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized error taxonomy for the API. Services raise these; the handlers
# registered in main.py turn them into {"error": ..., "code": ...} bodies.
#
#   ValidationError           400  malformed or missing input
#   AuthError                 401  bad credentials
#   NotFoundError             404  missing row
#   ConflictError             409  occupied slot / duplicate unique value
#   ReferentialConflictError  400  delete blocked by dependent rows
#   StoreError                500  unclassified store failure
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class SalonException(Exception):
    """
    Base exception for the Salon API.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "SALON_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "error": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


class ValidationError(SalonException):
    """Raised when request input is missing or malformed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
            details=details,
        )


class AuthError(SalonException):
    """
    Raised when credentials don't match.

    The default message is shared by "unknown user" and "wrong password"
    so callers can't probe which usernames exist.
    """

    def __init__(self, message: str = "Usuário ou senha inválidos"):
        super().__init__(
            message=message,
            code="AUTH_ERROR",
            status_code=401,
        )


class NotFoundError(SalonException):
    """Raised when a row with the given id doesn't exist."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=404,
            details=details,
        )


class ConflictError(SalonException):
    """Raised when a write collides with a unique constraint."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="CONFLICT",
            status_code=409,
            details=details,
        )


class ReferentialConflictError(SalonException):
    """Raised when a delete is blocked by rows that still reference the target."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="REFERENTIAL_CONFLICT",
            status_code=400,
            details=details,
        )


class StoreError(SalonException):
    """Raised when the record store fails in a way we can't classify."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="STORE_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def salon_exception_handler(
    request: Request,
    exc: SalonException
) -> JSONResponse:
    """Convert SalonException to its JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle FastAPI request validation errors.

    Bodies that aren't JSON objects, or fields of the wrong shape, are
    reported as 400 like every other input problem.
    """
    return JSONResponse(
        status_code=400,
        content={
            "error": "Dados inválidos na requisição",
            "code": "VALIDATION_ERROR",
            "details": {"errors": jsonable_encoder(exc.errors())},
        }
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Log unexpected exceptions and return a generic 500 body."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Erro no servidor",
            "code": "INTERNAL_ERROR",
        }
    )
