"""
API error types and the handlers that turn them into the JSON error envelope.
"""
import logging
from typing import Dict, Optional, Union

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

Details = Optional[Union[str, Dict[str, str]]]


class APIError(Exception):
    status_code: int = 500
    error: str = "An internal server error occurred"

    def __init__(self, error: Optional[str] = None, details: Details = None):
        if error is not None:
            self.error = error
        self.details = details
        super().__init__(self.error)

    def to_dict(self) -> dict:
        return {"error": self.error, "details": self.details}


class InputValidationError(APIError):
    status_code = 400
    error = "Invalid request body"


class NotFoundError(APIError):
    status_code = 404
    error = "Food item not found"

    @classmethod
    def food(cls, food_id: int):
        return cls(details=f"No food item with id {food_id}")


class StorageError(APIError):
    """Unexpected failure from the database. Details never reach the client."""
    status_code = 500

    def to_dict(self) -> dict:
        return {"error": self.error, "details": None}


# which part of the request failed decides the error title
_LOCATION_ERRORS = {
    "path": "Invalid ID parameter",
    "query": "Invalid query parameters",
    "body": "Invalid request body",
}


def validation_details(errors) -> Dict[str, str]:
    """Map pydantic/FastAPI error entries to {field: message}, first message wins."""
    details: Dict[str, str] = {}
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())
               if part not in ("body", "query", "path")]
        field = ".".join(loc) or "__root__"
        details.setdefault(field, err.get("msg", "Invalid value"))
    return details


def from_request_validation(exc: RequestValidationError) -> InputValidationError:
    errors = exc.errors()
    locations = {err["loc"][0] for err in errors if err.get("loc")}
    error = _LOCATION_ERRORS["body"]
    for location in ("path", "query"):
        if location in locations:
            error = _LOCATION_ERRORS[location]
            break
    return InputValidationError(error, validation_details(errors))


async def api_error_handler(request: Request, exc: APIError):
    if isinstance(exc, StorageError):
        logger.error(
            f"Storage error on {request.method} {request.url.path}: {exc.__cause__!r}")
    elif exc.status_code >= 500:
        logger.error(f"Error on {request.method} {request.url.path}: {exc!r}")
    else:
        logger.info(
            f"{request.method} {request.url.path} -> {exc.status_code} {exc.error}")
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return await api_error_handler(request, from_request_validation(exc))


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=StorageError().to_dict())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
