from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR, HTTP_502_BAD_GATEWAY
from app.errors.exceptions import FeedbackError, ProviderError

def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )

def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred."},
    )

def feedback_error_handler(request: Request, exc: FeedbackError):
    """
    Handle pipeline errors that escape a route.

    The feedback route never lets these through (it answers with the uniform
    result body), but the interview routes share the provider client and may.

    Args:
        request: FastAPI request instance
        exc: The pipeline error

    Returns:
        JSONResponse with 502 for provider failures, 500 otherwise
    """
    status_code = HTTP_502_BAD_GATEWAY if isinstance(exc, ProviderError) else HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": exc.message},
    )
