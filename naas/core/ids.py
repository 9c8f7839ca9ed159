"""
ID 生成能力：仅提供 next_id()，由构造方注入存储，测试中可替换为确定性实现。
"""
from __future__ import annotations

import itertools
import threading
import uuid
from typing import Callable

from .errors import InternalError

STRATEGY_UUID = "uuid"
STRATEGY_HEX16 = "hex16"


class IdGenerator:
    """ID 生成器接口。"""

    def next_id(self) -> str:
        raise NotImplementedError("子类实现")


class UuidIdGenerator(IdGenerator):
    """标准 UUID4 字符串（默认）。"""

    def next_id(self) -> str:
        return str(uuid.uuid4())


class Hex16IdGenerator(IdGenerator):
    """16 位十六进制短 ID，与各细胞资源 ID 格式一致。"""

    def next_id(self) -> str:
        return str(uuid.uuid4()).replace("-", "")[:16]


class SequentialIdGenerator(IdGenerator):
    """前缀 + 自增序号，线程安全；用于测试与本地调试。"""

    def __init__(self, prefix: str = "id-", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            n = next(self._counter)
        return f"{self._prefix}{n}"


class CallableIdGenerator(IdGenerator):
    """把任意无参函数包装为生成器，如 lambda: "fixed-id"。"""

    def __init__(self, func: Callable[[], str]) -> None:
        self._func = func

    def next_id(self) -> str:
        return self._func()


def create_id_generator(strategy: str = STRATEGY_UUID) -> IdGenerator:
    """按配置策略创建生成器；未知策略直接报错，避免静默回退。"""
    strategy = (strategy or STRATEGY_UUID).strip().lower()
    if strategy == STRATEGY_UUID:
        return UuidIdGenerator()
    if strategy == STRATEGY_HEX16:
        return Hex16IdGenerator()
    raise ValueError(f"未知的 ID 生成策略: {strategy}")


def generate_id(generator: IdGenerator) -> str:
    """调用生成器并校验结果；失败统一转为 InternalError。须在临界区之外调用。"""
    try:
        value = generator.next_id()
    except Exception as e:
        raise InternalError("ID 生成失败", details=str(e)) from e
    if not isinstance(value, str) or not value.strip():
        raise InternalError("ID 生成失败", details="生成器返回空 ID")
    return value
