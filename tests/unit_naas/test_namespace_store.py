"""
命名空间存储单元测试：租户隔离、租户内唯一、分区语义、并发写入。
"""
from __future__ import annotations

import threading

import pytest

from naas.core.errors import AlreadyExistsError, NotFoundError
from naas.core.models import Namespace


def test_create_and_get(namespace_store):
    ns = namespace_store.create("t1", Namespace(name="alpha"))
    assert ns.tenant_id == "t1"
    assert ns.name == "alpha"
    assert ns.id == "id-1"
    assert namespace_store.get("t1", "alpha") == ns


def test_create_uses_partition_tenant_id(namespace_store):
    ns = namespace_store.create("t1", Namespace(name="alpha", tenant_id="other"))
    assert ns.tenant_id == "t1"
    with pytest.raises(NotFoundError):
        namespace_store.get("other", "alpha")


def test_tenant_isolation(namespace_store):
    a = namespace_store.create("t1", Namespace(name="alpha"))
    b = namespace_store.create("t2", Namespace(name="alpha"))
    assert namespace_store.get("t1", "alpha") == a
    assert namespace_store.get("t2", "alpha") == b
    assert a != b
    assert a.id != b.id


def test_duplicate_name_in_same_tenant(namespace_store):
    first = namespace_store.create("t1", Namespace(name="alpha"))
    with pytest.raises(AlreadyExistsError, match="已存在"):
        namespace_store.create("t1", Namespace(name="alpha"))
    assert namespace_store.get("t1", "alpha") == first


def test_get_all(namespace_store):
    for name in ("ns1", "ns2", "ns3"):
        namespace_store.create("t1", Namespace(name=name))
    namespace_store.create("t2", Namespace(name="ns4"))
    assert sorted(ns.name for ns in namespace_store.get_all("t1")) == ["ns1", "ns2", "ns3"]
    assert [ns.name for ns in namespace_store.get_all("t2")] == ["ns4"]


def test_get_all_unknown_tenant(namespace_store):
    with pytest.raises(NotFoundError):
        namespace_store.get_all("nobody")


def test_get_all_after_emptying_partition(namespace_store):
    namespace_store.create("t1", Namespace(name="alpha"))
    namespace_store.delete("t1", "alpha")
    assert namespace_store.get_all("t1") == []


def test_not_found(namespace_store):
    namespace_store.create("t1", Namespace(name="alpha"))
    with pytest.raises(NotFoundError):
        namespace_store.get("t1", "beta")
    with pytest.raises(NotFoundError):
        namespace_store.get("t9", "alpha")
    with pytest.raises(NotFoundError):
        namespace_store.update(Namespace(name="beta", tenant_id="t1"))
    with pytest.raises(NotFoundError):
        namespace_store.update(Namespace(name="alpha", tenant_id="t9"))
    with pytest.raises(NotFoundError):
        namespace_store.delete("t1", "beta")
    with pytest.raises(NotFoundError):
        namespace_store.delete("t9", "alpha")


def test_update_keeps_id_and_created_at(namespace_store):
    ns = namespace_store.create("t1", Namespace(name="alpha", created_at=100, updated_at=100))
    updated = namespace_store.update(Namespace(name="alpha", tenant_id="t1"))
    assert updated.id == ns.id
    assert updated.created_at == 100
    assert updated.updated_at >= 100
    assert namespace_store.get("t1", "alpha") == updated


def test_concurrent_creates_across_tenants(namespace_store):
    tenants = ["t1", "t2", "t3", "t4"]
    per_tenant = 25
    errors = []

    def worker(tenant_id):
        for i in range(per_tenant):
            try:
                namespace_store.create(tenant_id, Namespace(name=f"ns{i}"))
            except Exception as e:  # noqa: BLE001
                errors.append(e)

    threads = [threading.Thread(target=worker, args=(t,)) for t in tenants]
    for th in threads:
        th.start()
    for th in threads:
        th.join()
    assert errors == []
    for t in tenants:
        assert len(namespace_store.get_all(t)) == per_tenant


def test_concurrent_creates_same_tenant_distinct_names(namespace_store):
    n = 200
    errors = []
    start = threading.Barrier(n)

    def worker(i):
        start.wait()
        try:
            namespace_store.create("t1", Namespace(name=f"ns{i}"))
        except Exception as e:  # noqa: BLE001
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()
    assert errors == []
    assert sorted(ns.name for ns in namespace_store.get_all("t1")) == sorted(f"ns{i}" for i in range(n))


def test_concurrent_duplicate_creates_single_winner(namespace_store):
    n = 32
    results = []
    lock = threading.Lock()
    start = threading.Barrier(n)

    def worker():
        start.wait()
        try:
            namespace_store.create("t1", Namespace(name="contended"))
            outcome = "ok"
        except AlreadyExistsError:
            outcome = "dup"
        with lock:
            results.append(outcome)

    threads = [threading.Thread(target=worker) for _ in range(n)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()
    assert results.count("ok") == 1
    assert results.count("dup") == n - 1
    assert [ns.name for ns in namespace_store.get_all("t1")] == ["contended"]
