"""中间件配置"""

import time
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from user_management.config import Settings
from user_management.core.exception_handlers import unhandled_error_handler


class LoggingMiddleware(BaseHTTPMiddleware):
    """请求日志中间件（Loguru），所有响应都带 X-Request-ID / X-Process-Time"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid4().hex[:8]
        start_time = time.perf_counter()

        with logger.contextualize(request_id=request_id):
            logger.info("{} {}", request.method, request.url.path)
            try:
                response = await call_next(request)
            except Exception as exc:
                # 未捕获异常在此转换为 500，保证响应头齐全
                response = await unhandled_error_handler(request, exc)
            duration = time.perf_counter() - start_time
            logger.info("Completed {} in {:.3f}s", response.status_code, duration)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{duration:.3f}"
        return response


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """注册中间件（注册顺序与执行顺序相反）"""
    # CORS（最内层）
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # GZip 压缩
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # 请求日志（最外层，最先执行）
    app.add_middleware(LoggingMiddleware)
