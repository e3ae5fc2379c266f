"""用户模块 - 请求验证

将 pydantic 的错误列表转换为 字段 -> 消息 的完整违规映射，
所有违规字段一次性返回，而不是只报告第一个。
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .exceptions import UserValidationError
from .models import UserRole
from .schemas import UserCreate, UserUpdate

# 字段 -> (缺失/为空时的消息, 不满足约束时的消息)
FIELD_MESSAGES: dict[str, tuple[str, str]] = {
    "id": ("User ID is required", "User ID must be valid"),
    "username": (
        "User name is required",
        "User name must be between 2 and 50 characters",
    ),
    "email": ("Email is required", "Email must be valid"),
    "phoneNumber": ("Phone number is required", "Phone number must be valid"),
    "role": (
        "Role is required",
        f"Role must be one of: {', '.join(role.value for role in UserRole)}",
    ),
}

CREATE_REQUIRED = frozenset({"username", "email", "phoneNumber", "role"})
UPDATE_REQUIRED = frozenset({"id"})

_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def _field_name(loc: tuple[Any, ...]) -> str:
    if len(loc) > 1 and loc[0] in _LOCATIONS:
        loc = loc[1:]
    if not loc:
        return "request"
    return ".".join(
        to_camel(part) if isinstance(part, str) and "_" in part else str(part)
        for part in loc
    )


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def violations_from_errors(
    errors: Iterable[Mapping[str, Any]],
    required: frozenset[str] = frozenset(),
) -> dict[str, str]:
    """pydantic 错误列表 -> 违规映射（每个字段保留第一条消息）"""
    violations: dict[str, str] = {}
    for error in errors:
        if error.get("type") == "json_invalid":
            # loc 中的数字是字符偏移而不是字段
            field = "body"
        else:
            field = _field_name(tuple(error.get("loc", ())))
        if field in violations:
            continue

        messages = FIELD_MESSAGES.get(field)
        if messages is None:
            violations[field] = str(error.get("msg", "Invalid value"))
            continue

        missing = error.get("type") == "missing" or (
            field in required and _is_blank(error.get("input"))
        )
        violations[field] = messages[0] if missing else messages[1]
    return violations


def validate_create(payload: Mapping[str, Any] | UserCreate) -> UserCreate:
    """验证创建请求，失败时抛出 UserValidationError"""
    if isinstance(payload, UserCreate):
        return payload
    try:
        return UserCreate.model_validate(payload)
    except PydanticValidationError as exc:
        raise UserValidationError(
            violations_from_errors(exc.errors(), CREATE_REQUIRED)
        ) from exc


def validate_update(payload: Mapping[str, Any] | UserUpdate) -> UserUpdate:
    """验证更新请求：id 必填，其余字段若提供则按创建规则校验"""
    if isinstance(payload, UserUpdate):
        return payload
    try:
        return UserUpdate.model_validate(payload)
    except PydanticValidationError as exc:
        raise UserValidationError(
            violations_from_errors(exc.errors(), UPDATE_REQUIRED)
        ) from exc
