"""
名称校验：字母开头，其后仅字母或数字；拒绝空串与字面量 true/false。
纯函数，无副作用；每次创建、更新前调用。
"""
from __future__ import annotations

from typing import Any

from .errors import InvalidInputError

# 形似布尔值的保留字，区分大小写
RESERVED_NAMES = frozenset({"true", "false"})


def validate_name(name: Any) -> str:
    """校验通过返回原值，否则抛出 InvalidInputError。"""
    if name is None:
        raise InvalidInputError("名称不能为空")
    if not isinstance(name, str):
        raise InvalidInputError("名称必须为字符串", details=f"type={type(name).__name__}")
    if not name.strip():
        raise InvalidInputError("名称不能为空")
    if not name[0].isalpha():
        raise InvalidInputError("名称必须以字母开头", details=f"name={name}")
    for ch in name[1:]:
        if not (ch.isalpha() or ch.isdecimal()):
            raise InvalidInputError("名称只能包含字母和数字", details=f"name={name}")
    if name in RESERVED_NAMES:
        raise InvalidInputError("名称不能为 true 或 false", details=f"name={name}")
    return name


def is_valid_name(name: Any) -> bool:
    try:
        validate_name(name)
    except InvalidInputError:
        return False
    return True
