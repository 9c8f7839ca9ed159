# NaaS HTTP 层：Flask 应用工厂与环境变量配置
from .app import create_app
from .config import Settings

__all__ = ["create_app", "Settings"]
