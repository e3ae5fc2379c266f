"""
用户管理服务 - 应用入口

特点：
- create_app 工厂模式，便于测试和多实例
- setup_xxx 函数分离注册逻辑
- 三层架构：Router → Service → Repository
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from user_management import __version__
from user_management.config import Settings, get_settings
from user_management.core.database import (
    close_database,
    create_engine,
    create_session_factory,
    init_database,
)
from user_management.core.exception_handlers import setup_exception_handlers
from user_management.core.logging import setup_logging
from user_management.core.middlewares import setup_middlewares
from user_management.core.routers import setup_routers
from user_management.schemas.response import ApiResponse


def create_app(settings: Settings | None = None) -> FastAPI:
    """应用工厂函数"""
    settings = settings or get_settings()
    setup_logging(
        settings.log_level,
        json_format=settings.log_json,
        sql_echo=settings.debug,
    )

    engine = create_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # 启动时初始化
        await init_database(
            engine, create_tables=settings.debug or settings.db.create_tables
        )
        yield
        # 关闭时清理
        await close_database(engine)

    application = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
    )
    application.state.settings = settings
    application.state.engine = engine
    application.state.session_factory = create_session_factory(engine)

    # 注册组件（顺序重要）
    setup_middlewares(application, settings)
    setup_routers(application, settings)
    setup_exception_handlers(application)

    @application.get("/health", response_model=ApiResponse[dict[str, str]])
    async def health_check() -> ApiResponse[dict[str, str]]:
        return ApiResponse(data={"status": "ok"})

    return application


def run() -> None:
    """命令行入口：uvicorn 启动服务"""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
