"""
菜单名称路径解析

名称使用点号分隔层级, 例如 "menu.root.baz" 是 "menu.root" 的子菜单。
这里只有纯函数, 不持有任何状态。
"""
from typing import List, Optional

from .exceptions import MalformedNameError

SEPARATOR = '.'


def segments(name: str) -> List[str]:
    """将名称拆分为路径段"""
    if not isinstance(name, str):
        raise MalformedNameError(name, "name must be a string")
    if not name:
        raise MalformedNameError(name, "name is empty")
    parts = name.split(SEPARATOR)
    if not all(parts):
        raise MalformedNameError(name)
    return parts


def validate_name(name: str) -> str:
    """校验名称, 合法时原样返回"""
    segments(name)
    return name


def parent_name(name: str) -> Optional[str]:
    """父菜单名称, 顶层菜单返回 None"""
    parts = segments(name)
    if len(parts) == 1:
        return None
    return SEPARATOR.join(parts[:-1])


def leaf_name(name: str) -> str:
    """名称的最后一段"""
    return segments(name)[-1]


def depth(name: str) -> int:
    """路径段数量, 仅用于诊断"""
    return len(segments(name))


def is_descendant(name: str, ancestor: str) -> bool:
    """name 是否为 ancestor 的后代 (不含自身)"""
    return name.startswith(ancestor + SEPARATOR)
