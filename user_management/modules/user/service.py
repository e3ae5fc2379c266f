"""用户模块 - 业务逻辑层"""

import math
from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from loguru import logger

from user_management.core.database import utc_now
from user_management.core.exceptions import BadRequestError
from user_management.schemas.response import PagedResponse

from . import mapper
from .exceptions import DuplicateEmailError, UserNotFoundError
from .repository import SORTABLE_FIELDS, EmailAlreadyStoredError, UserRepository
from .schemas import UserCreate, UserResponse, UserUpdate


class UserService:
    """
    用户业务逻辑层

    注意：
    - 不持有可变共享状态，可并发调用
    - 事务由 get_db() 依赖自动管理，Service 层不调用 commit
    - email 唯一性：预检查 + 存储层唯一约束兜底
    """

    def __init__(
        self,
        repository: UserRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.repository = repository
        self.clock = clock

    async def create(self, user_in: UserCreate) -> UserResponse:
        """创建用户"""
        logger.info("Starting user creation process for email: {}", user_in.email)

        if await self.repository.exists_by_email(user_in.email):
            logger.warning("User creation failed - email already exists: {}", user_in.email)
            raise DuplicateEmailError(user_in.email)

        user = mapper.to_entity(user_in)
        now = self.clock()
        user.created_at = now
        user.updated_at = now

        try:
            saved = await self.repository.save(user)
        except EmailAlreadyStoredError as exc:
            logger.warning("User creation rejected by storage - email already exists: {}", exc.email)
            raise DuplicateEmailError(user_in.email) from exc

        logger.info("User created - id: {}, username: {}", saved.id, saved.username)
        return mapper.to_response(saved)

    async def get(self, user_id: UUID) -> UserResponse:
        """获取单个用户"""
        logger.info("Fetching user by id: {}", user_id)
        user = await self.repository.get_by_id(user_id)
        if not user:
            logger.warning("User not found with id: {}", user_id)
            raise UserNotFoundError(user_id)
        return mapper.to_response(user)

    async def list(
        self,
        page: int = 0,
        page_size: int = 10,
        sort_field: str = "id",
        sort_direction: str = "asc",
    ) -> PagedResponse[UserResponse]:
        """分页查询用户列表（page 从 0 开始；仅 "desc"（忽略大小写）为降序）"""
        if page < 0:
            raise BadRequestError(message="Page index must not be less than zero")
        if page_size < 1:
            raise BadRequestError(message="Page size must not be less than one")
        if sort_field not in SORTABLE_FIELDS:
            raise BadRequestError(message=f"Unsupported sort field: {sort_field}")

        descending = sort_direction.lower() == "desc"
        logger.info(
            "Fetching users - page: {}, size: {}, sort: {} {}",
            page,
            page_size,
            sort_field,
            "DESC" if descending else "ASC",
        )

        users, total = await self.repository.find_all_paged(
            page, page_size, sort_field, descending
        )
        total_pages = math.ceil(total / page_size)
        logger.info(
            "Retrieved {} users on page {} of {} (total elements: {})",
            len(users),
            page,
            total_pages,
            total,
        )

        return PagedResponse[UserResponse](
            content=mapper.to_responses(users),
            page_number=page,
            page_size=page_size,
            total_elements=total,
            total_pages=total_pages,
            is_last=page + 1 >= total_pages,
        )

    async def update(self, user_in: UserUpdate) -> UserResponse:
        """部分更新用户：仅覆盖提供的字段，updated_at 总是刷新"""
        logger.info("Starting user update process for id: {}", user_in.id)

        user = await self.repository.get_by_id(user_in.id)
        if not user:
            logger.warning("Attempted to update non-existent user with id: {}", user_in.id)
            raise UserNotFoundError(user_in.id)

        if user_in.email and user_in.email != user.email:
            if await self.repository.exists_by_email(user_in.email):
                logger.warning("User update failed - email already exists: {}", user_in.email)
                raise DuplicateEmailError(user_in.email)

        mapper.apply_update(user_in, user)
        user.updated_at = self.clock()

        try:
            updated = await self.repository.save(user)
        except EmailAlreadyStoredError as exc:
            logger.warning("User update rejected by storage - email already exists: {}", exc.email)
            raise DuplicateEmailError(exc.email) from exc

        logger.info("User updated - id: {}, username: {}", updated.id, updated.username)
        return mapper.to_response(updated)

    async def delete(self, user_id: UUID) -> None:
        """删除用户（不做存在性检查，删除不存在的 ID 静默成功）"""
        logger.info("Starting user delete process for id: {}", user_id)
        await self.repository.delete_by_id(user_id)
        logger.info("User deleted - id: {}", user_id)
