from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from projecthub.constants import ErrorMessages
from projecthub.enums import ErrorCode
from projecthub.utils.logger import get_logger

logger = get_logger(__name__)


class BaseAPIException(HTTPException):
    """
    Base exception for all API errors.
    Enforces a consistent, frontend-friendly response structure.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: ErrorCode,
        details: dict | None = None,
    ):
        super().__init__(status_code=status_code, detail=message)
        self.message = message
        self.error_code = error_code
        self.details = details


def _error_body(request: Request, message: str, error_code: ErrorCode, details=None) -> dict:
    return {
        "success": False,
        "message": message,
        "error_code": error_code,
        "path": request.url.path,
        "details": details,
    }


# --------------------------------------------------
# GLOBAL EXCEPTION HANDLERS
# --------------------------------------------------

async def base_api_exception_handler(request: Request, exc: BaseAPIException):
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.message, exc.error_code, exc.details),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{field}: {first.get('msg')}" if field else "Invalid request"
    return JSONResponse(
        status_code=400,
        content=_error_body(
            request,
            message,
            ErrorCode.BAD_REQUEST,
            {"errors": [{"loc": list(e.get("loc", ())), "msg": e.get("msg")} for e in errors]},
        ),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=_error_body(request, "Server error", ErrorCode.INTERNAL_SERVER_ERROR),
    )


# --------------------------------------------------
# CENTRAL ERROR FACTORY (ONLY PLACE TO RAISE ERRORS)
# --------------------------------------------------

def raise_api_error(
    status_code: int,
    message: str,
    error_code: ErrorCode,
    details: dict | None = None,
):
    raise BaseAPIException(
        status_code=status_code,
        message=message,
        error_code=error_code,
        details=details,
    )


# --------------------------------------------------
# GENERIC HTTP HELPERS
# --------------------------------------------------

def raise_bad_request(message: str, error_code: ErrorCode = ErrorCode.BAD_REQUEST):
    raise_api_error(400, message, error_code)


def raise_unauthorized(
    message: str = ErrorMessages.INVALID_CREDENTIALS,
):
    raise_api_error(401, message, ErrorCode.UNAUTHORIZED)


def raise_forbidden(
    message: str = ErrorMessages.ACCESS_DENIED,
):
    raise_api_error(403, message, ErrorCode.FORBIDDEN)


def raise_not_found(
    message: str,
    error_code: ErrorCode = ErrorCode.NOT_FOUND,
):
    raise_api_error(404, message, error_code)


def raise_internal_error(
    message: str = "Internal server error",
):
    raise_api_error(
        500,
        message,
        ErrorCode.INTERNAL_SERVER_ERROR,
    )


# --------------------------------------------------
# DOMAIN-SPECIFIC HELPERS
# --------------------------------------------------

def raise_project_not_found():
    raise_not_found(
        ErrorMessages.PROJECT_NOT_FOUND,
        ErrorCode.PROJECT_NOT_FOUND,
    )


def raise_task_not_found():
    raise_not_found(
        ErrorMessages.TASK_NOT_FOUND,
        ErrorCode.TASK_NOT_FOUND,
    )


def raise_invite_not_found():
    raise_not_found(
        ErrorMessages.INVITE_NOT_FOUND,
        ErrorCode.INVITE_NOT_FOUND,
    )


def raise_invalid_transition(message: str):
    raise_bad_request(message, ErrorCode.INVALID_TRANSITION)


def raise_file_type_not_allowed():
    raise_bad_request(
        ErrorMessages.FILE_TYPE_NOT_ALLOWED,
        ErrorCode.FILE_TYPE_NOT_ALLOWED,
    )
