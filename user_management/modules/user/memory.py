"""用户模块 - 内存存储（测试与本地运行）"""

import asyncio
from uuid import UUID

from uuid_utils.compat import uuid7

from .models import User
from .repository import SORTABLE_FIELDS, EmailAlreadyStoredError, UserRepository


def _clone(user: User) -> User:
    """复制实体，避免调用方修改直接影响已存储数据"""
    return User(
        id=user.id,
        username=user.username,
        email=user.email,
        phone_number=user.phone_number,
        role=user.role,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


class InMemoryUserRepository(UserRepository):
    """内存实现，与数据库实现一样强制 email 唯一"""

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}
        self._lock = asyncio.Lock()

    async def get_by_id(self, user_id: UUID) -> User | None:
        user = self._users.get(user_id)
        return _clone(user) if user else None

    async def get_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return _clone(user)
        return None

    async def exists_by_email(self, email: str) -> bool:
        return any(user.email == email for user in self._users.values())

    async def save(self, user: User) -> User:
        async with self._lock:
            if user.id is None:
                user.id = uuid7()
            for stored in self._users.values():
                if stored.email == user.email and stored.id != user.id:
                    raise EmailAlreadyStoredError(user.email)
            self._users[user.id] = _clone(user)
        return _clone(user)

    async def delete_by_id(self, user_id: UUID) -> None:
        self._users.pop(user_id, None)

    async def find_all_paged(
        self,
        page: int,
        page_size: int,
        sort_field: str = "id",
        descending: bool = False,
    ) -> tuple[list[User], int]:
        attr = SORTABLE_FIELDS[sort_field]
        # 先按 id 排序，稳定排序保证相同值按 id 升序
        users = sorted(self._users.values(), key=lambda u: u.id)
        users.sort(key=lambda u: (getattr(u, attr) is None, getattr(u, attr)), reverse=descending)

        start = page * page_size
        items = [_clone(u) for u in users[start : start + page_size]]
        return items, len(users)

    def __len__(self) -> int:
        return len(self._users)
