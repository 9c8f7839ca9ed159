# NaaS 服务配置：仅环境变量，构造 Settings() 时读取
from __future__ import annotations

import os
from typing import List

# 与原 gin CORS 配置一致
CORS_ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
CORS_ALLOW_HEADERS = "Origin, Content-Type, Accept, Authorization, X-Request-ID"


class Settings:
    """统一配置入口。"""

    def __init__(self) -> None:
        self.HOST: str = os.environ.get("NAAS_HOST", "0.0.0.0").strip()
        self.PORT: int = int(os.environ.get("NAAS_PORT", "8082"))
        self.LOG_LEVEL: str = os.environ.get("NAAS_LOG_LEVEL", "INFO").strip().upper()
        # uuid | hex16
        self.ID_STRATEGY: str = os.environ.get("NAAS_ID_STRATEGY", "uuid").strip().lower()
        # "*" 或逗号分隔的来源列表
        self.CORS_ALLOW_ORIGINS: List[str] = _split_csv(os.environ.get("NAAS_CORS_ALLOW_ORIGINS", "*"))

    def cors_origin_for(self, origin: str) -> str:
        """返回应写入 Access-Control-Allow-Origin 的值；不允许时返回空串。"""
        if "*" in self.CORS_ALLOW_ORIGINS:
            return "*"
        if origin and origin in self.CORS_ALLOW_ORIGINS:
            return origin
        return ""


def _split_csv(raw: str) -> List[str]:
    return [p.strip() for p in (raw or "").split(",") if p.strip()]
