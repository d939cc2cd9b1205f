"""
Custom exception hierarchy for the stemcell hub.

Provides structured error handling with proper HTTP status codes and error codes.
"""

from typing import Optional
from fastapi import Request
from fastapi.responses import JSONResponse


class HubException(Exception):
    """Base exception for all hub errors"""
    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FileSystemException(HubException):
    """Filesystem operation errors"""
    status_code = 500
    error_code = "FILESYSTEM_ERROR"


class FileNotFoundException(FileSystemException):
    """Path does not exist"""
    status_code = 404
    error_code = "FILE_NOT_FOUND"


class ConfigException(HubException):
    """Configuration loading errors"""
    status_code = 500
    error_code = "CONFIG_ERROR"


class ConfigReadException(ConfigException):
    """Config file could not be read"""
    error_code = "CONFIG_READ_ERROR"


class ConfigParseException(ConfigException):
    """Config file could not be parsed"""
    error_code = "CONFIG_PARSE_ERROR"


class ManifestException(HubException):
    """Manifest content errors"""
    status_code = 422
    error_code = "MANIFEST_ERROR"


class NotFoundException(HubException):
    """Requested record not found"""
    status_code = 404
    error_code = "NOT_FOUND"


class AuthorizationException(HubException):
    """Missing or wrong API key"""
    status_code = 401
    error_code = "UNAUTHORIZED"


# Global exception handler
async def hub_exception_handler(
    request: Request,
    exc: HubException
) -> JSONResponse:
    """
    Global exception handler for HubException and its subclasses.

    Returns a JSON response with error code, message, and details.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error_code,
            "message": exc.message,
            "details": exc.details,
        }
    )
