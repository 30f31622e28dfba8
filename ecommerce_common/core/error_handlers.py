# 전역 예외 핸들러
# - 도메인 예외 → HTTP 상태 코드 매핑은 이 파일 한 곳에서만 합니다
# - 모든 에러 응답은 {timestamp, status, error, message, path} 형태
# - 검증 실패는 message 대신 errors(필드 → 메시지)를 담습니다

import logging
from http import HTTPStatus
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .clock import utc_now
from .exceptions import DuplicateResourceError, ResourceError, ResourceNotFoundError
from ..schemas.error_schema import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation Failed"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

RESOURCE_ERROR_STATUS = {
    ResourceNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateResourceError: status.HTTP_409_CONFLICT,
}

# 라우터의 responses= 인자에 그대로 넘기는 OpenAPI 설명
ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": ValidationErrorResponse, "description": "Invalid input data"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    409: {"model": ErrorResponse, "description": "Unique key already in use"},
}


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def error_body(status_code: int, message: str, path: str, error: Optional[str] = None) -> dict:
    body = ErrorResponse(
        timestamp=utc_now(),
        status=status_code,
        error=error or _reason(status_code),
        message=message,
        path=path,
    )
    return jsonable_encoder(body)


def validation_errors(exc: RequestValidationError) -> Dict[str, str]:
    """pydantic 에러 목록을 {필드: 메시지}로 평탄화합니다.

    loc의 마지막 요소가 필드 이름입니다 (예: ("body", "firstName")).
    validator에서 ValueError로 던진 메시지는 "Value error, " 접두사 없이 그대로 씁니다.
    같은 필드에 에러가 여러 개면 첫 번째만 남깁니다.
    """
    errors: Dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        field = str(loc[-1]) if loc else "request"
        ctx = err.get("ctx") or {}
        if err.get("type") == "value_error" and "error" in ctx:
            message = str(ctx["error"])
        else:
            message = err.get("msg", "Invalid value")
        errors.setdefault(field, message)
    return errors


async def resource_error_handler(request: Request, exc: ResourceError) -> JSONResponse:
    status_code = RESOURCE_ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.info(f"[ErrorHandler] {request.method} {request.url.path} -> {status_code}: {exc.message}")
    return JSONResponse(status_code=status_code, content=error_body(status_code, exc.message, request.url.path))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = validation_errors(exc)
    logger.info(f"[ErrorHandler] {request.method} {request.url.path} -> 400: {errors}")
    body = ValidationErrorResponse(
        timestamp=utc_now(),
        status=status.HTTP_400_BAD_REQUEST,
        error=VALIDATION_FAILED,
        errors=errors,
        path=request.url.path,
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=jsonable_encoder(body))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else _reason(exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message, request.url.path),
        headers=getattr(exc, "headers", None),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # 원인은 로그에만 남기고 클라이언트에는 일반 메시지만 돌려줍니다
    logger.error(f"[ErrorHandler] Unhandled error on {request.method} {request.url.path}: {exc!r}", exc_info=exc)
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=status_code, content=error_body(status_code, UNEXPECTED_ERROR_MESSAGE, request.url.path))


async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    # 저장소 장애는 라우팅 안쪽(ExceptionMiddleware)에서 응답하므로 CORS 헤더가 붙습니다
    logger.error(f"[ErrorHandler] Store error on {request.method} {request.url.path}: {exc!r}", exc_info=exc)
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=status_code, content=error_body(status_code, UNEXPECTED_ERROR_MESSAGE, request.url.path))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResourceError, resource_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
    # Exception 핸들러는 ServerErrorMiddleware에서 실행되어 CORS 헤더가 붙지 않습니다
    app.add_exception_handler(Exception, unexpected_error_handler)
