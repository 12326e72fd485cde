#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class ClientNotFoundException(ServiceException):
    """Raised when a client is not found."""
    pass


class ProgramNotFoundException(ServiceException):
    """Raised when a CRBI program is not found."""
    pass


class InvalidClientProfileException(ServiceException):
    """Raised when a stored client profile cannot be scored."""
    pass


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    if isinstance(exc, (ClientNotFoundException, ProgramNotFoundException)):
        status_code = 404
    elif isinstance(exc, InvalidClientProfileException):
        status_code = 422

    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.warning(f"Service error in {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.

    Args:
        request: The FastAPI request.
        exc: The HTTP exception.

    Returns:
        JSONResponse with error details.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Args:
        request: The FastAPI request.
        exc: The exception.

    Returns:
        JSONResponse with error details.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
