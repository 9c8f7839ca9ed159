"""
服务层：校验名称 -> 调用存储 -> 向上传递类型化错误。
服务自身无状态，仅持有存储引用；存储实例由 build_services 显式构造后注入，不使用模块级单例。
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .errors import NotFoundError
from .ids import IdGenerator
from .models import Namespace, Tenant
from .namespace import NamespaceStore
from .tenant import TenantStore
from .validation import validate_name

logger = logging.getLogger("naas.service")


class TenantService:
    def __init__(self, store: TenantStore) -> None:
        self._store = store

    def create_tenant(self, name: str) -> Tenant:
        """创建租户，ID 由存储分配。"""
        validate_name(name)
        tenant = self._store.create(Tenant(name=name))
        logger.info("创建租户 id=%s name=%s", tenant.id, tenant.name)
        return tenant

    def get_tenant(self, tenant_id: str) -> Tenant:
        return self._store.get(tenant_id)

    def update_tenant(self, tenant_id: str, name: str) -> Tenant:
        validate_name(name)
        tenant = self._store.update(Tenant(id=tenant_id, name=name))
        logger.info("更新租户 id=%s name=%s", tenant.id, tenant.name)
        return tenant

    def delete_tenant(self, tenant_id: str) -> None:
        """删除租户；其命名空间不级联删除。"""
        self._store.delete(tenant_id)
        logger.info("删除租户 id=%s", tenant_id)

    def list_tenants(self) -> List[Tenant]:
        return self._store.list()


class NamespaceService:
    def __init__(self, store: NamespaceStore, tenant_store: TenantStore) -> None:
        self._store = store
        self._tenant_store = tenant_store

    def _require_tenant(self, tenant_id: str) -> None:
        # 与后续写入不在同一事务内：检查通过后租户仍可能被删除
        try:
            self._tenant_store.get(tenant_id)
        except NotFoundError as e:
            raise NotFoundError("租户不存在，无法创建命名空间", details=e.details) from e

    def create_namespace(self, tenant_id: str, name: str) -> Namespace:
        validate_name(name)
        self._require_tenant(tenant_id)
        ns = self._store.create(tenant_id, Namespace(name=name, tenant_id=tenant_id))
        logger.info("创建命名空间 tenantId=%s name=%s id=%s", tenant_id, name, ns.id)
        return ns

    def get_namespace(self, tenant_id: str, name: str) -> Namespace:
        return self._store.get(tenant_id, name)

    def list_namespaces(self, tenant_id: str) -> List[Namespace]:
        return self._store.get_all(tenant_id)

    def update_namespace(self, tenant_id: str, name: str) -> Namespace:
        """名称即键，更新仅刷新 updated_at；不支持改名。"""
        validate_name(name)
        ns = self._store.update(Namespace(name=name, tenant_id=tenant_id))
        logger.info("更新命名空间 tenantId=%s name=%s", tenant_id, name)
        return ns

    def delete_namespace(self, tenant_id: str, name: str) -> None:
        self._store.delete(tenant_id, name)
        logger.info("删除命名空间 tenantId=%s name=%s", tenant_id, name)


def build_services(id_generator: Optional[IdGenerator] = None) -> Tuple[TenantService, NamespaceService]:
    """启动时构造两个存储与两个服务；同一 id_generator 供两个存储共用。"""
    tenant_store = TenantStore(id_generator)
    namespace_store = NamespaceStore(id_generator)
    return TenantService(tenant_store), NamespaceService(namespace_store, tenant_store)
