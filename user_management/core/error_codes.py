"""错误码定义"""

from enum import StrEnum


class ErrorCode(StrEnum):
    """稳定的机器可读错误码（对外契约，勿随意修改）"""

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    BAD_REQUEST = "BAD_REQUEST"
    INTERNAL_ERROR = "INTERNAL_ERROR"
