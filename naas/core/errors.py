"""
核心层错误分类：NOT_FOUND / ALREADY_EXISTS / BAD_REQUEST / INTERNAL_ERROR。
存储与服务层只抛出带 code 的异常，不感知 HTTP；状态码映射仅在 API 层完成。
"""
from __future__ import annotations

CODE_NOT_FOUND = "NOT_FOUND"
CODE_ALREADY_EXISTS = "ALREADY_EXISTS"
CODE_BAD_REQUEST = "BAD_REQUEST"
CODE_INTERNAL = "INTERNAL_ERROR"


class NaasError(Exception):
    """统一错误基类：code, message, details（与平台统一错误响应格式对齐）。"""

    code = CODE_INTERNAL

    def __init__(self, message: str, details: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "details": self.details}


class NotFoundError(NaasError, LookupError):
    """查询、更新、删除的目标不存在。"""

    code = CODE_NOT_FOUND


class AlreadyExistsError(NaasError, ValueError):
    """创建时主键冲突；调用方不应盲目重试。"""

    code = CODE_ALREADY_EXISTS


class InvalidInputError(NaasError, ValueError):
    """名称未通过校验。"""

    code = CODE_BAD_REQUEST


class InternalError(NaasError):
    """非预期失败，如 ID 生成器异常。"""

    code = CODE_INTERNAL
