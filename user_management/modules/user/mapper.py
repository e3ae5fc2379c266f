"""用户模块 - 请求/实体/响应转换（纯函数，无副作用）"""

from collections.abc import Sequence

from .models import User
from .schemas import UserCreate, UserResponse, UserUpdate


def to_entity(user_in: UserCreate) -> User:
    """创建请求 -> 新实体（id 与时间戳由 Service/存储层填充）"""
    return User(
        username=user_in.username,
        email=user_in.email,
        phone_number=user_in.phone_number,
        role=user_in.role,
    )


def _present(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def apply_update(user_in: UserUpdate, user: User) -> User:
    """逐字段合并：仅覆盖请求中提供的非空字段"""
    if _present(user_in.username):
        user.username = user_in.username
    if _present(user_in.email):
        user.email = user_in.email
    if _present(user_in.phone_number):
        user.phone_number = user_in.phone_number
    if _present(user_in.role):
        user.role = user_in.role
    return user


def to_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user)


def to_responses(users: Sequence[User]) -> list[UserResponse]:
    return [to_response(u) for u in users]
