"""
领域模型：租户、命名空间。不可变值对象，存储层直接返回存储值，调用方无法就地修改存储状态。
JSON 字段采用 camelCase（id, name, tenantId, createdAt, updatedAt）。
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Dict, Optional


def now_ts() -> int:
    """Unix 秒级时间戳。"""
    return int(time.time())


@dataclass(frozen=True)
class Tenant:
    id: str = ""
    name: str = ""
    created_at: Optional[int] = None
    updated_at: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class Namespace:
    """命名空间：自然键为 (tenant_id, name)；id 为创建时生成的代理 ID，仅作字段，不用于查找。"""

    name: str = ""
    tenant_id: str = ""
    id: str = ""
    created_at: Optional[int] = None
    updated_at: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "tenantId": self.tenant_id,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
