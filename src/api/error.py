"""Error translation for the Reporting API

Domain faults escaping a route are turned into a JSON body of the form
``{"statusCode": int, "message": str}``:

- EntityNotFoundException -> 404 with the exception message
- any other exception     -> 400 with a fixed generic message

Request validation (422) and unknown routes keep FastAPI's own handling.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from src.app.exceptions import EntityNotFoundException

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"statusCode": status_code, "message": message},
    )


class ExceptionMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except EntityNotFoundException as e:
            logger.warning(f"{request.method} {request.url.path}: {e.message}")
            return error_response(status.HTTP_404_NOT_FOUND, e.message)
        except Exception:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            return error_response(status.HTTP_400_BAD_REQUEST, UNEXPECTED_ERROR_MESSAGE)
