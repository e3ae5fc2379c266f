"""用户模块 - 路由"""

from uuid import UUID

from fastapi import APIRouter, Query, Request, Response, status

from user_management.schemas.response import PagedResponse

from .dependencies import CreateUserBody, UpdateUserBody, UserServiceDep
from .schemas import UserResponse

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_in: CreateUserBody, service: UserServiceDep):
    """创建用户"""
    return await service.create(user_in)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UUID, service: UserServiceDep):
    """获取单个用户"""
    return await service.get(user_id)


@router.get("", response_model=PagedResponse[UserResponse])
async def list_users(
    request: Request,
    service: UserServiceDep,
    page: int = Query(default=0, ge=0, description="页码（从 0 开始）"),
    size: int | None = Query(default=None, ge=1, description="每页数量（不设上限）"),
    sort_by: str = Query(default="id", alias="sortBy"),
    sort_direction: str = Query(default="asc", alias="sortDirection"),
):
    """获取用户列表"""
    return await service.list(
        page=page,
        page_size=size or request.app.state.settings.default_page_size,
        sort_field=sort_by,
        sort_direction=sort_direction,
    )


@router.put("", response_model=UserResponse)
async def update_user(user_in: UpdateUserBody, service: UserServiceDep):
    """更新用户（id 在请求体中）"""
    return await service.update(user_in)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: UUID, service: UserServiceDep) -> Response:
    """删除用户"""
    await service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
