"""全局异常处理器注册"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_management.core.database import utc_now
from user_management.core.error_codes import ErrorCode
from user_management.core.exceptions import ApiError
from user_management.modules.user.validation import violations_from_errors
from user_management.schemas.response import ErrorResponse


def error_response(
    request: Request,
    status_code: int,
    code: ErrorCode,
    message: str,
    violations: dict[str, str] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """构建统一错误响应（不泄露内部状态）"""
    body = ErrorResponse(
        timestamp=utc_now(),
        path=request.url.path,
        status=status_code,
        code=code,
        message=message,
        validation_errors=violations,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
        headers=headers,
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """业务异常处理"""
    logger.warning(
        "Business error: {} | code={} path={}",
        exc.message,
        exc.code,
        request.url.path,
    )
    return error_response(
        request, exc.status_code, exc.code, exc.message, exc.violations
    )


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """请求验证异常处理（路径/查询参数、请求体格式）"""
    violations = violations_from_errors(exc.errors())
    logger.warning("Request validation failed: {} path={}", violations, request.url.path)
    return error_response(
        request, 400, ErrorCode.VALIDATION_FAILED, "Validation failed", violations
    )


async def http_error_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """HTTP 异常处理"""
    if exc.status_code == 404:
        code = ErrorCode.NOT_FOUND
    elif exc.status_code < 500:
        code = ErrorCode.BAD_REQUEST
    else:
        code = ErrorCode.INTERNAL_ERROR

    return error_response(
        request,
        exc.status_code,
        code,
        str(exc.detail),
        headers=dict(exc.headers) if exc.headers else None,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """未捕获异常处理"""
    logger.exception(
        "Unhandled exception {method} {path}", method=request.method, path=request.url.path
    )
    return error_response(
        request, 500, ErrorCode.INTERNAL_ERROR, "Internal server error"
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """注册全局异常处理器"""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
