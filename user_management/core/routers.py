"""路由配置"""

from fastapi import FastAPI

from user_management.config import Settings
from user_management.modules.user.router import router as user_router


def setup_routers(app: FastAPI, settings: Settings) -> None:
    """注册路由"""
    app.include_router(user_router, prefix=f"{settings.api_prefix}/users", tags=["users"])
