"""日志配置 - Loguru 统一输出（含请求 ID）"""

import logging
import sys
from typing import Any, Literal

from loguru import logger

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# 文本格式：request_id 由 LoggingMiddleware 通过 logger.contextualize 注入
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[request_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# 请求上下文之外的占位值
NO_REQUEST_ID = "-"

# 第三方库 logger -> 级别
QUIET_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "aiosqlite": logging.WARNING,
}


class InterceptHandler(logging.Handler):
    """把标准库日志记录转交给 Loguru（保留原始调用位置）"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=_caller_depth(), exception=record.exc_info).log(
            level, record.getMessage()
        )


def _caller_depth() -> int:
    frame, depth = logging.currentframe(), 2
    while frame and frame.f_code.co_filename == logging.__file__:
        frame = frame.f_back
        depth += 1
    return depth


def setup_logging(
    level: LogLevel = "INFO",
    *,
    json_format: bool = False,
    sql_echo: bool = False,
    sink: Any = sys.stderr,
) -> None:
    """
    配置日志

    Args:
        level: 日志级别
        json_format: 输出 JSON（request_id 位于 record.extra）
        sql_echo: 记录 SQLAlchemy 执行的 SQL（只经由 Loguru 输出一次）
        sink: 输出目标，默认 stderr
    """
    logger.remove()
    logger.configure(extra={"request_id": NO_REQUEST_ID})
    if json_format:
        logger.add(sink, level=level, serialize=True)
    else:
        logger.add(sink, level=level, format=LOG_FORMAT)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    levels = dict(QUIET_LOGGERS)
    levels["sqlalchemy.engine"] = logging.INFO if sql_echo else logging.WARNING
    for name, logger_level in levels.items():
        logging.getLogger(name).setLevel(logger_level)
