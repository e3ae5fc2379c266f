"""用户模块 - 数据访问层"""

from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import delete, exists, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .models import User

# 可排序字段（对外名称 -> 模型属性）
SORTABLE_FIELDS = {
    "id": "id",
    "username": "username",
    "email": "email",
    "phone_number": "phone_number",
    "phoneNumber": "phone_number",
    "role": "role",
    "created_at": "created_at",
    "createdAt": "created_at",
    "updated_at": "updated_at",
    "updatedAt": "updated_at",
}


class EmailAlreadyStoredError(Exception):
    """存储层唯一约束冲突（email）"""

    def __init__(self, email: str) -> None:
        super().__init__(f"email already stored: {email}")
        self.email = email


class UserRepository(ABC):
    """用户持久化端口"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> User | None:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """插入或更新；email 冲突时抛出 EmailAlreadyStoredError"""

    @abstractmethod
    async def delete_by_id(self, user_id: UUID) -> None:
        """按 ID 删除；不存在时静默成功"""

    @abstractmethod
    async def find_all_paged(
        self,
        page: int,
        page_size: int,
        sort_field: str = "id",
        descending: bool = False,
    ) -> tuple[list[User], int]:
        """分页查询（page 从 0 开始），返回 (当前页, 总数)"""


class SqlAlchemyUserRepository(UserRepository):
    """
    基于 SQLAlchemy AsyncSession 的实现

    注意：事务由 get_db() 依赖自动管理，Repository 只用 flush/refresh
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, user_id: UUID) -> User | None:
        return await self.db.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        return await self.db.scalar(select(User).where(User.email == email))

    async def exists_by_email(self, email: str) -> bool:
        return bool(await self.db.scalar(select(exists().where(User.email == email))))

    async def save(self, user: User) -> User:
        self.db.add(user)
        try:
            await self.db.flush()
        except IntegrityError as exc:
            raise EmailAlreadyStoredError(user.email) from exc
        await self.db.refresh(user)
        return user

    async def delete_by_id(self, user_id: UUID) -> None:
        await self.db.execute(delete(User).where(User.id == user_id))
        await self.db.flush()

    async def find_all_paged(
        self,
        page: int,
        page_size: int,
        sort_field: str = "id",
        descending: bool = False,
    ) -> tuple[list[User], int]:
        total = await self.db.scalar(select(func.count(User.id))) or 0

        column = getattr(User, SORTABLE_FIELDS[sort_field])
        order = column.desc() if descending else column.asc()
        stmt = (
            select(User)
            .order_by(order, User.id.asc())
            .offset(page * page_size)
            .limit(page_size)
        )
        result = await self.db.execute(stmt)
        items = list(result.scalars().all())

        return items, total
