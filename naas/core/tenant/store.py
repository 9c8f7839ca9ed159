"""
租户注册表：tenant_id -> Tenant（id/name/created_at/updated_at）。
仅内存存储；读操作持共享锁、写操作持独占锁，不存在可观测的半完成写入。
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Optional

from ..errors import AlreadyExistsError, NotFoundError
from ..ids import IdGenerator, UuidIdGenerator, generate_id
from ..models import Tenant, now_ts
from ..rwlock import ReadWriteLock

logger = logging.getLogger("naas.store.tenant")


class TenantStore:
    """租户存储。tenant.id 为空时由 ID 生成器分配，否则使用调用方给定的 ID。"""

    def __init__(self, id_generator: Optional[IdGenerator] = None) -> None:
        self._lock = ReadWriteLock()
        self._tenants: Dict[str, Tenant] = {}
        self._id_generator = id_generator or UuidIdGenerator()

    def create(self, tenant: Tenant) -> Tenant:
        """创建租户；ID 已存在时抛 AlreadyExistsError，原记录保持不变。"""
        # ID 在临界区外生成
        tenant_id = tenant.id or generate_id(self._id_generator)
        ts = now_ts()
        stored = replace(
            tenant,
            id=tenant_id,
            created_at=tenant.created_at if tenant.created_at is not None else ts,
            updated_at=tenant.updated_at if tenant.updated_at is not None else ts,
        )
        with self._lock.write_lock():
            if tenant_id in self._tenants:
                raise AlreadyExistsError("租户已存在", details=f"id={tenant_id}")
            self._tenants[tenant_id] = stored
        logger.debug("tenant stored id=%s name=%s", tenant_id, stored.name)
        return stored

    def get(self, tenant_id: str) -> Tenant:
        with self._lock.read_lock():
            tenant = self._tenants.get(tenant_id)
        if tenant is None:
            raise NotFoundError("租户不存在", details=f"id={tenant_id}")
        return tenant

    def update(self, tenant: Tenant) -> Tenant:
        """整体替换；保留原 created_at，刷新 updated_at。"""
        ts = now_ts()
        with self._lock.write_lock():
            existing = self._tenants.get(tenant.id)
            if existing is None:
                raise NotFoundError("租户不存在", details=f"id={tenant.id}")
            stored = replace(tenant, created_at=existing.created_at, updated_at=ts)
            self._tenants[tenant.id] = stored
        logger.debug("tenant replaced id=%s", tenant.id)
        return stored

    def delete(self, tenant_id: str) -> None:
        """删除租户（仅租户记录，不级联删除其命名空间）。"""
        with self._lock.write_lock():
            if tenant_id not in self._tenants:
                raise NotFoundError("租户不存在", details=f"id={tenant_id}")
            del self._tenants[tenant_id]
        logger.debug("tenant deleted id=%s", tenant_id)

    def list(self) -> List[Tenant]:
        """读锁下取快照，顺序不保证。"""
        with self._lock.read_lock():
            return list(self._tenants.values())
