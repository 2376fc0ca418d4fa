"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from board.domain.error import ForbiddenError, NotFoundError, ValidationError


async def _validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": exc.errors},
    )


async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.info("Resource not found", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def _forbidden_handler(request: Request, exc: ForbiddenError) -> JSONResponse:
    logfire.warn("Forbidden request", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"detail": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register handlers for the domain errors routes let propagate.

    Any other exception, including ``FieldNotFetchedError``, is left to the
    framework and becomes a 500.
    """
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(ForbiddenError, _forbidden_handler)
