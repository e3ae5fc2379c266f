"""用户模块 - Schema"""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field

from user_management.schemas.response import BaseSchema

from .models import UserRole

# E.164 风格手机号
PHONE_PATTERN = r"^\+?[1-9]\d{1,14}$"


class UserCreate(BaseSchema):
    username: str = Field(min_length=2, max_length=50)
    email: EmailStr
    phone_number: str = Field(pattern=PHONE_PATTERN)
    role: UserRole


class UserUpdate(BaseSchema):
    """部分更新：None 表示保持原值"""

    id: UUID
    username: str | None = Field(default=None, min_length=2, max_length=50)
    email: EmailStr | None = None
    phone_number: str | None = Field(default=None, pattern=PHONE_PATTERN)
    role: UserRole | None = None


class UserResponse(BaseSchema):
    """用户响应模型"""

    id: UUID
    username: str
    email: str
    phone_number: str
    role: UserRole
    created_at: datetime
    updated_at: datetime | None = None
