"""业务异常定义"""

from user_management.core.error_codes import ErrorCode


class ApiError(Exception):
    """业务异常基类"""

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        status_code: int = 400,
        violations: dict[str, str] | None = None,
    ) -> None:
        self.code = code
        self.message = message or code.name.replace("_", " ").capitalize()
        self.status_code = status_code
        self.violations = violations
        super().__init__(self.message)


class NotFoundError(ApiError):
    """资源不存在"""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.NOT_FOUND,
        message: str = "Resource not found",
    ) -> None:
        super().__init__(code, message, status_code=404)


class ValidationError(ApiError):
    """字段验证失败，携带完整的字段违规映射"""

    def __init__(
        self,
        violations: dict[str, str],
        code: ErrorCode = ErrorCode.VALIDATION_FAILED,
        message: str = "Validation failed",
    ) -> None:
        super().__init__(code, message, status_code=400, violations=violations)


class ConflictError(ApiError):
    """资源冲突"""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.CONFLICT,
        message: str = "Resource conflict",
    ) -> None:
        super().__init__(code, message, status_code=409)


class BadRequestError(ApiError):
    """其他被拒绝的业务规则"""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.BAD_REQUEST,
        message: str = "Bad request",
    ) -> None:
        super().__init__(code, message, status_code=400)
