import logging
from typing import Callable, Dict, Iterator, List, Optional

from . import visibility
from .menu import MenuItem
from .ordering import order
from .path import SEPARATOR, is_descendant, parent_name, validate_name
from .registry import ItemRegistry

logger = logging.getLogger(__name__)


class TreeNode:
    """菜单树节点

    definition 为注册的菜单项; 名称从未注册过的中间节点 definition 为 None。
    visible 在可见性计算之前为 None。
    """

    def __init__(self, name: Optional[str], definition: Optional[MenuItem] = None,
                 sequence: Optional[int] = None):
        self.name = name
        self.definition = definition
        self.sequence = sequence
        self.parent: Optional['TreeNode'] = None
        self.children: List['TreeNode'] = []
        self.visible: Optional[bool] = None

    def __repr__(self):
        return f"TreeNode({self.name!r}, children={len(self.children)}, visible={self.visible})"

    def _field(self, attr, default=None):
        if self.definition is None:
            return default
        return getattr(self.definition, attr)

    @property
    def key(self) -> Optional[str]:
        """名称的最后一段"""
        if self.name is None:
            return None
        return self.name.rsplit(SEPARATOR, 1)[-1]

    @property
    def text(self):
        return self._field('text')

    @property
    def href(self):
        return self._field('href')

    @property
    def target(self):
        return self._field('target', '_self')

    @property
    def click(self):
        return self._field('click')

    @property
    def state(self):
        return self._field('state')

    @property
    def weight(self) -> int:
        if self.definition is None:
            return 0
        return self.definition.sort_weight()

    @property
    def is_divider(self) -> bool:
        return bool(self._field('is_divider', False))

    @property
    def is_collapsed(self) -> bool:
        return bool(self._field('is_collapsed', False))

    @property
    def icon_class(self):
        return self._field('icon_class')

    def has_children(self) -> bool:
        return bool(self.children)

    def has_visible_children(self) -> bool:
        return visibility.has_visible_children(self)

    def is_visible(self) -> bool:
        return visibility.is_visible(self)

    def walk(self) -> Iterator['TreeNode']:
        """先序遍历"""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, name: str) -> Optional['TreeNode']:
        for node in self.walk():
            if node.name == name:
                return node
        return None

    def to_dict(self, translate: Optional[Callable[[str], str]] = None) -> dict:
        """转换为字典，用于JSON序列化"""
        data = (self.definition or MenuItem()).to_dict()
        data['name'] = self.name
        if translate and data['text'] is not None:
            data['text'] = translate(data['text'])
        data['visible'] = self.visible
        data['children'] = [child.to_dict(translate) for child in self.children]
        return data


class TreeBuilder:
    """从注册表按需构建菜单树, 结果不做缓存"""

    def __init__(self, registry: ItemRegistry):
        self.registry = registry

    def build_subtree(self, root_name: Optional[str] = None) -> TreeNode:
        """构建以 root_name 为根的子树, root_name 为 None 时返回整个菜单森林"""
        if root_name is not None:
            validate_name(root_name)

        with self.registry.lock:
            items = self.registry.all()
            sequences = {name: self.registry.sequence(name) for name in items}

        root = TreeNode(root_name, items.get(root_name), sequences.get(root_name))
        nodes: Dict[Optional[str], TreeNode] = {root_name: root}

        for name in items:
            if root_name is None or is_descendant(name, root_name):
                self._attach(name, nodes, items, sequences)

        self._finish(root)
        logger.debug("Built menu tree %r with %d nodes", root_name, len(nodes))
        return root

    def _attach(self, name, nodes, items, sequences) -> TreeNode:
        node = nodes.get(name)
        if node is not None:
            return node
        node = TreeNode(name, items.get(name), sequences.get(name))
        nodes[name] = node
        # 父节点未注册时补一个空节点
        parent = nodes.get(parent_name(name)) or self._attach(parent_name(name), nodes, items, sequences)
        node.parent = parent
        parent.children.append(node)
        return node

    def _finish(self, node: TreeNode):
        for child in node.children:
            self._finish(child)
        if node.sequence is None and node.children:
            node.sequence = min(child.sequence for child in node.children)
        node.children = order(node.children)
