"""
Error rendering for the HTTP layer.

Every error leaves the service as ``{"message": "..."}``. Validation failures
from FastAPI/Pydantic are reported as 400 with a message naming the first
offending field. Anything unhandled becomes a logged 500.
"""
import logging
from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from jobboard.utils import messages

logger = logging.getLogger(__name__)

# Error types that mean "the client did not send a usable value"
_REQUIRED_ERROR_TYPES = frozenset({"missing", "blank"})

_DEFAULT_DETAILS = {
    status.HTTP_404_NOT_FOUND: messages.RESOURCE_NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: messages.METHOD_NOT_ALLOWED,
}


def validation_message(errors) -> str:
    """Build the client message for the first error reported by Pydantic."""
    if not errors:
        return messages.INVALID_BODY
    err = errors[0]
    if err.get("type") == "json_invalid":
        return messages.INVALID_BODY
    raw_loc = tuple(err.get("loc", ()))
    loc = [str(part) for part in raw_loc if part not in ("body", "path", "query")]
    if not loc:
        return messages.INVALID_BODY
    # Every route has a single path parameter: the resource id
    field = "id" if raw_loc[0] == "path" else loc[-1]
    if err.get("type") in _REQUIRED_ERROR_TYPES or ("input" in err and err["input"] is None):
        return messages.required(field)
    return messages.invalid(field)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    # Starlette's own 404/405 carry the English reason phrase as detail
    if exc.status_code in _DEFAULT_DETAILS and detail in (None, "Not Found", "Method Not Allowed"):
        detail = _DEFAULT_DETAILS[exc.status_code]
    return JSONResponse(
        {"message": detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = validation_message(exc.errors())
    logger.info("request_rejected path=%s message=%s", request.url.path, message)
    return JSONResponse({"message": message}, status_code=status.HTTP_400_BAD_REQUEST)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("unhandled_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        {"message": messages.INTERNAL_ERROR},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
