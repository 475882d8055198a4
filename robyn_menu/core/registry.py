import itertools
import logging
import threading
from dataclasses import replace
from typing import Dict, List, Optional

from .menu import MenuItem
from .path import validate_name

logger = logging.getLogger(__name__)


class ItemRegistry:
    """菜单项注册表

    名称到菜单项的扁平映射, 是菜单数据的唯一来源。每个名称在首次注册时
    分配一个递增序号, 用于同权重菜单的排序; 重新注册同名菜单会替换配置
    但保留原序号。返回的菜单项对象是共享引用, 外部修改在下一次读取时可见。
    """

    def __init__(self):
        self._items: Dict[str, MenuItem] = {}
        self._sequence: Dict[str, int] = {}
        self._counter = itertools.count()
        self.lock = threading.RLock()

    def set(self, name: str, item: MenuItem) -> MenuItem:
        """注册或替换菜单项"""
        validate_name(name)
        with self.lock:
            # 同一对象已注册在其他名称下时保存副本, 一个对象只对应一个名称
            if item.name not in (None, name) and self._items.get(item.name) is item:
                item = replace(item)
            item.name = name
            if name in self._items:
                logger.debug("Replacing menu item %s", name)
            else:
                self._sequence[name] = next(self._counter)
                logger.debug("Registered menu item %s", name)
            self._items[name] = item
        return item

    def get(self, name: str) -> Optional[MenuItem]:
        """按名称查找, 不存在时返回 None"""
        with self.lock:
            return self._items.get(name)

    def remove(self, name: str) -> Optional[MenuItem]:
        """删除菜单项, 子菜单保留"""
        with self.lock:
            item = self._items.pop(name, None)
            self._sequence.pop(name, None)
        if item is not None:
            logger.debug("Removed menu item %s", name)
        return item

    def all(self) -> Dict[str, MenuItem]:
        with self.lock:
            return dict(self._items)

    def names(self) -> List[str]:
        """按注册顺序返回全部名称"""
        with self.lock:
            return sorted(self._items, key=self._sequence.__getitem__)

    def sequence(self, name: str) -> Optional[int]:
        with self.lock:
            return self._sequence.get(name)

    def __contains__(self, name: str) -> bool:
        with self.lock:
            return name in self._items

    def __len__(self) -> int:
        with self.lock:
            return len(self._items)
