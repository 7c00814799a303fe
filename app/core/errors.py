"""
Application exceptions and the handlers that render them.

Every failure leaves the API as a JSON body of the form {"error": "<message>"}
with a status code matching the error category.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import ConnectionFailure, PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class DatabaseConfigurationError(RuntimeError):
    """Raised at startup when no MongoDB connection string is configured"""


class DatabaseConnectionError(RuntimeError):
    """Raised at startup when the MongoDB server cannot be reached"""


class InvalidJobIdError(ValueError):
    """Raised when a path id is not a valid ObjectId"""

    def __init__(self, job_id: str):
        self.job_id = job_id
        super().__init__(f"Invalid job id: {job_id!r}")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        # Drop the leading "body"/"query" marker from the location
        location = [str(part) for part in error.get("loc", ())[1:]]
        if location:
            messages.append(f"{'.'.join(location)}: {error.get('msg')}")
        else:
            messages.append(str(error.get("msg")))
    return "; ".join(messages) or "Invalid request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Malformed JSON is a 400; a well-formed body with bad field types is a 422.
    """
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        logger.info(f"Malformed JSON body on {request.method} {request.url.path}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Malformed JSON body")

    message = _format_validation_errors(exc)
    logger.info(f"Validation failed on {request.method} {request.url.path}: {message}")
    return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, message)


async def invalid_job_id_handler(request: Request, exc: InvalidJobIdError) -> JSONResponse:
    logger.info(f"Rejected malformed job id {exc.job_id!r}")
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def database_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")

    if isinstance(exc, ConnectionFailure):
        return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, "Database unavailable")

    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all error handlers to the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(InvalidJobIdError, invalid_job_id_handler)
    app.add_exception_handler(PyMongoError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
