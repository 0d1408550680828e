"""
Error Handlers - RFP Evaluation Scoring Engine
rfp_scoring/routers/errors.py

Maps request validation failures and registry exceptions to the standard
ErrorResponse body.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from rfp_scoring.core.exceptions import (
    DuplicateEntityException,
    EntityNotFoundException,
    ScoringException,
)


class ErrorResponse(BaseModel):
    """
    Standard error response model.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = Field(default=None, description="Additional error details")
    timestamp: datetime = Field(..., description="Error occurrence timestamp")


def _error(status_code: int, error_code: str, message: str, details: Optional[dict] = None) -> JSONResponse:
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return _error(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "VALIDATION_ERROR",
            "Request validation failed",
        )
    err = errors[0]
    error_type = err.get("type", "")
    loc = err.get("loc", [])
    if "json_invalid" in error_type:
        return _error(
            status.HTTP_400_BAD_REQUEST,
            "INVALID_REQUEST",
            "Malformed JSON request body",
        )
    field = ".".join(str(l) for l in loc if l != "body")
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        err.get("msg", f"Invalid value for field '{field}'"),
        {"field": field, "type": error_type} if field else None,
    )


async def scoring_exception_handler(request: Request, exc: ScoringException):
    if isinstance(exc, EntityNotFoundException):
        return _error(
            status.HTTP_404_NOT_FOUND,
            "NOT_FOUND",
            str(exc),
            {"entity_type": exc.entity_type, "entity_id": exc.entity_id},
        )
    if isinstance(exc, DuplicateEntityException):
        return _error(
            status.HTTP_400_BAD_REQUEST,
            "DUPLICATE_ID",
            str(exc),
            {"entity_type": exc.entity_type, "entity_id": exc.entity_id},
        )
    return _error(status.HTTP_400_BAD_REQUEST, "SCORING_ERROR", str(exc))
