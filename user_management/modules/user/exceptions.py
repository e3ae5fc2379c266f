"""用户模块 - 异常"""

from uuid import UUID

from user_management.core.error_codes import ErrorCode
from user_management.core.exceptions import ConflictError, NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """用户不存在"""

    def __init__(self, user_id: UUID) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message=f"User not found with id : {user_id}",
        )
        self.user_id = user_id


class DuplicateEmailError(ConflictError):
    """邮箱已存在"""

    def __init__(self, email: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_EMAIL,
            message=f"Email already exists: {email}",
        )
        self.email = email


class UserValidationError(ValidationError):
    """用户请求字段验证失败"""

    def __init__(self, violations: dict[str, str]) -> None:
        super().__init__(violations, code=ErrorCode.VALIDATION_FAILED)
