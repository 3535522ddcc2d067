"""响应格式化基础设施组件导出"""

from .response_formatter import (
    respond_with_json,
    respond_with_error,
    error_body,
    success_response,
)

__all__ = [
    "respond_with_json",
    "respond_with_error",
    "error_body",
    "success_response",
]
