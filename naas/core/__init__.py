"""
NaaS 核心层：ID 生成、名称校验、租户与命名空间存储、服务编排。
全部状态仅在进程内存中；存储实例显式构造并注入服务层。
"""
from .errors import AlreadyExistsError, InternalError, InvalidInputError, NaasError, NotFoundError
from .ids import IdGenerator, SequentialIdGenerator, UuidIdGenerator, create_id_generator
from .models import Namespace, Tenant
from .namespace import NamespaceStore
from .service import NamespaceService, TenantService, build_services
from .tenant import TenantStore
from .validation import is_valid_name, validate_name

__all__ = [
    "NaasError",
    "NotFoundError",
    "AlreadyExistsError",
    "InvalidInputError",
    "InternalError",
    "IdGenerator",
    "UuidIdGenerator",
    "SequentialIdGenerator",
    "create_id_generator",
    "Tenant",
    "Namespace",
    "TenantStore",
    "NamespaceStore",
    "TenantService",
    "NamespaceService",
    "build_services",
    "validate_name",
    "is_valid_name",
]
