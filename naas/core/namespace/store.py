"""
命名空间存储：tenant_id -> { name -> Namespace } 两级映射。
两级共用一把读写锁；分区按需创建，任何操作都观察不到半创建的分区。
同名命名空间可存在于不同租户，同一租户内名称唯一。
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Optional

from ..errors import AlreadyExistsError, NotFoundError
from ..ids import IdGenerator, UuidIdGenerator, generate_id
from ..models import Namespace, now_ts
from ..rwlock import ReadWriteLock

logger = logging.getLogger("naas.store.namespace")


def _key_details(tenant_id: str, name: str) -> str:
    return f"tenantId={tenant_id} name={name}"


class NamespaceStore:
    """以 (tenant_id, name) 为自然键；代理 id 在创建时生成，仅作记录字段。"""

    def __init__(self, id_generator: Optional[IdGenerator] = None) -> None:
        self._lock = ReadWriteLock()
        self._namespaces: Dict[str, Dict[str, Namespace]] = {}
        self._id_generator = id_generator or UuidIdGenerator()

    def create(self, tenant_id: str, namespace: Namespace) -> Namespace:
        """在租户分区下创建；(tenant_id, name) 已占用时抛 AlreadyExistsError。不校验租户是否存在。"""
        ns_id = namespace.id or generate_id(self._id_generator)
        ts = now_ts()
        stored = replace(
            namespace,
            id=ns_id,
            tenant_id=tenant_id,
            created_at=namespace.created_at if namespace.created_at is not None else ts,
            updated_at=namespace.updated_at if namespace.updated_at is not None else ts,
        )
        with self._lock.write_lock():
            partition = self._namespaces.setdefault(tenant_id, {})
            if stored.name in partition:
                raise AlreadyExistsError("命名空间已存在", details=_key_details(tenant_id, stored.name))
            partition[stored.name] = stored
        logger.debug("namespace stored %s id=%s", _key_details(tenant_id, stored.name), ns_id)
        return stored

    def get(self, tenant_id: str, name: str) -> Namespace:
        with self._lock.read_lock():
            ns = self._namespaces.get(tenant_id, {}).get(name)
        if ns is None:
            raise NotFoundError("命名空间不存在", details=_key_details(tenant_id, name))
        return ns

    def get_all(self, tenant_id: str) -> List[Namespace]:
        """租户分区内全部命名空间，顺序不保证；租户从未建过分区时抛 NotFoundError。"""
        with self._lock.read_lock():
            partition = self._namespaces.get(tenant_id)
            if partition is None:
                raise NotFoundError("该租户下没有命名空间", details=f"tenantId={tenant_id}")
            return list(partition.values())

    def update(self, namespace: Namespace) -> Namespace:
        """按 (tenant_id, name) 整体替换；保留 id 与 created_at。"""
        ts = now_ts()
        with self._lock.write_lock():
            partition = self._namespaces.get(namespace.tenant_id, {})
            existing = partition.get(namespace.name)
            if existing is None:
                raise NotFoundError("命名空间不存在", details=_key_details(namespace.tenant_id, namespace.name))
            stored = replace(namespace, id=existing.id, created_at=existing.created_at, updated_at=ts)
            partition[namespace.name] = stored
        logger.debug("namespace replaced %s", _key_details(namespace.tenant_id, namespace.name))
        return stored

    def delete(self, tenant_id: str, name: str) -> None:
        """删除命名空间；分区保留，清空后 get_all 返回空列表。"""
        with self._lock.write_lock():
            partition = self._namespaces.get(tenant_id)
            if partition is None or name not in partition:
                raise NotFoundError("命名空间不存在", details=_key_details(tenant_id, name))
            del partition[name]
        logger.debug("namespace deleted %s", _key_details(tenant_id, name))
