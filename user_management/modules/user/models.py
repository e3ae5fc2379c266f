"""用户模块 - ORM 模型"""

from enum import StrEnum

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from user_management.core.database import Base


class UserRole(StrEnum):
    """用户角色（封闭枚举，以文本存储）"""

    ADMIN = "ADMIN"
    MODERATOR = "MODERATOR"
    USER = "USER"


class User(Base):
    """
    用户模型

    继承自 Base，自动获得：
    - id: UUIDv7 主键
    - created_at, updated_at: 时间戳

    email 全局唯一（唯一索引为最终保障）；username 不要求唯一。
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    phone_number: Mapped[str] = mapped_column(String(20))
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, native_enum=False, length=20),
    )

    def __repr__(self) -> str:
        return f"User(id={self.id!s}, email={self.email!r})"
