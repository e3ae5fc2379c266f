"""用户模块 - 依赖注入"""

from typing import Annotated, Any

from fastapi import Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_management.core.database import get_db

from .repository import SqlAlchemyUserRepository, UserRepository
from .schemas import UserCreate, UserUpdate
from .service import UserService
from .validation import validate_create, validate_update


def get_user_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    return SqlAlchemyUserRepository(db)


def get_user_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
) -> UserService:
    return UserService(repository)


def parse_create_request(payload: Annotated[dict[str, Any], Body()]) -> UserCreate:
    return validate_create(payload)


def parse_update_request(payload: Annotated[dict[str, Any], Body()]) -> UserUpdate:
    return validate_update(payload)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
CreateUserBody = Annotated[UserCreate, Depends(parse_create_request)]
UpdateUserBody = Annotated[UserUpdate, Depends(parse_update_request)]
