"""
NaaS 单元测试公共 fixture：路径、确定性 ID 生成器、存储、服务与 Flask 应用。
"""
from __future__ import annotations

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from naas.core.ids import SequentialIdGenerator
from naas.core.namespace import NamespaceStore
from naas.core.service import NamespaceService, TenantService
from naas.core.tenant import TenantStore


@pytest.fixture
def id_generator():
    return SequentialIdGenerator(prefix="id-")


@pytest.fixture
def tenant_store(id_generator):
    return TenantStore(id_generator)


@pytest.fixture
def namespace_store(id_generator):
    return NamespaceStore(id_generator)


@pytest.fixture
def tenant_service(tenant_store):
    return TenantService(tenant_store)


@pytest.fixture
def namespace_service(namespace_store, tenant_store):
    return NamespaceService(namespace_store, tenant_store)


@pytest.fixture
def naas_app(tenant_service, namespace_service, monkeypatch):
    """注入内存服务的 NaaS 应用；CORS 使用默认 *。"""
    from naas.api.app import create_app
    from naas.api.config import Settings
    monkeypatch.delenv("NAAS_CORS_ALLOW_ORIGINS", raising=False)
    app = create_app(tenant_service, namespace_service, Settings())
    app.config["TESTING"] = True
    return app


@pytest.fixture
def naas_client(naas_app):
    with naas_app.test_client() as c:
        yield c
