"""统一响应模型"""

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class BaseSchema(BaseModel):
    """
    所有 Schema 的基类

    特性：
    - from_attributes: 支持 ORM 模型转换
    - alias_generator: 对外 JSON 使用 camelCase，同时接受字段名
    - str_strip_whitespace: 自动去除字符串首尾空白
    - datetime 序列化为 ISO8601 格式（Z 后缀）
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_default=True,
    )

    @field_serializer("*", mode="wrap")
    def serialize_datetime(self, value, handler):
        """datetime 序列化为 ISO8601 格式（Z 后缀）"""
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
        return handler(value)


class ApiResponse(BaseModel, Generic[T]):
    """单个对象响应"""

    code: int = 0
    message: str = "success"
    data: T


class PagedResponse(BaseSchema, Generic[T]):
    """分页列表响应（page 从 0 开始）"""

    content: list[T]
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    is_last: bool


class ErrorResponse(BaseSchema):
    """错误响应"""

    timestamp: datetime
    path: str
    status: int
    code: str
    message: str
    validation_errors: dict[str, str] | None = None
