"""Schema 模块"""

from .response import ApiResponse, BaseSchema, ErrorResponse, PagedResponse

__all__ = [
    "ApiResponse",
    "BaseSchema",
    "ErrorResponse",
    "PagedResponse",
]
