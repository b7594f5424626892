#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from typing import List, Optional
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    status_code = 500


class TemplateNotFoundException(ServiceException):
    """Raised when a contract template is not found."""
    status_code = 404


class ContractNotFoundException(ServiceException):
    """Raised when a contract is not found."""
    status_code = 404


class EmployeeNotFoundException(ServiceException):
    """Raised when an employee is not found."""
    status_code = 404


class AppNotFoundException(ServiceException):
    """Raised when a provisioning application is not found."""
    status_code = 404


class TemplateConflictException(ServiceException):
    """Raised when creating a template whose id already exists."""
    status_code = 409


class InvalidTemplateException(ServiceException):
    """Raised when a template fails strict placeholder validation."""
    status_code = 400

    def __init__(self, message: str, missing: Optional[List[str]] = None):
        super().__init__(message)
        self.missing = list(missing or [])


class MissingVariablesException(ServiceException):
    """Raised when strict rendering leaves placeholders unresolved."""
    status_code = 400

    def __init__(self, message: str, missing: Optional[List[str]] = None):
        super().__init__(message)
        self.missing = list(missing or [])


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
    if exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.warning(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    content = {
        "success": False,
        "error": str(exc),
        "type": exc.__class__.__name__
    }
    missing = getattr(exc, 'missing', None)
    if missing:
        content["missing"] = missing

    return JSONResponse(status_code=exc.status_code, content=content)


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
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
