import logging
from dataclasses import replace
from typing import Any, Dict, Mapping, Optional, Union

from .menu import MenuItem, coerce_item
from .options import MenuOptions
from .path import validate_name
from .registry import ItemRegistry
from .tree import TreeBuilder, TreeNode
from .visibility import annotate, default_visibility, prune

logger = logging.getLogger(__name__)

MenuItemConfig = Union[MenuItem, Mapping[str, Any]]

_UNSET = object()


class MenuProvider:
    """菜单配置器

    应用启动时使用, 链式注册菜单项和图标配置, 最后调用 build() 得到 MenuManager::

        manager = (
            MenuProvider()
            .icon_base_class('fa')
            .menu_item('foo.home', {'text': 'Home', 'href': '/home'})
            .menu_item('foo.logout', MenuItem(text='Logout', weight=10))
            .build()
        )
    """

    def __init__(self, options: Optional[MenuOptions] = None):
        self.options = options or MenuOptions()
        self._menu_items: Dict[str, MenuItem] = {}

    def menu_item(self, name: str, config: Optional[MenuItemConfig] = None):
        """不传 config 时返回菜单项, 否则注册菜单项并返回自身"""
        if config is None:
            return self._menu_items.get(name)
        validate_name(name)
        self._menu_items[name] = coerce_item(config)
        return self

    def icon_base_class(self, value=_UNSET):
        if value is _UNSET:
            return self.options.icon_base_class
        self.options.icon_base_class = value
        return self

    def default_icon_class_prefix(self, value=_UNSET):
        if value is _UNSET:
            return self.options.default_icon_class_prefix
        self.options.default_icon_class_prefix = value
        return self

    def build(self) -> 'MenuManager':
        """生成菜单管理器

        每个菜单项复制一份交给管理器, 之后在配置器上的注册或修改不会影响已生成的管理器。
        """
        manager = MenuManager(options=self.options.copy())
        for name, item in self._menu_items.items():
            manager.menu_item(name, replace(item))
        logger.debug("Built menu manager with %d items", len(self._menu_items))
        return manager


class MenuManager:
    """菜单管理器"""

    def __init__(self, options: Optional[MenuOptions] = None, registry: Optional[ItemRegistry] = None):
        self.options = options or MenuOptions()
        self.registry = registry or ItemRegistry()
        self.builder = TreeBuilder(self.registry)

    def menu_item(self, name: str, config: Optional[MenuItemConfig] = None):
        """不传 config 时返回菜单项 (不存在返回 None), 否则注册菜单项并返回自身"""
        if config is None:
            return self.registry.get(name)
        validate_name(name)
        item = coerce_item(config)
        # 未配置可见性时写入默认规则, 显式的 True/False/函数优先
        if item.is_visible is None:
            item.is_visible = default_visibility
        self.registry.set(name, item)
        return self

    def register_menu(self, menu_item: MenuItem):
        """注册菜单项, 名称取自 menu_item.name"""
        return self.menu_item(menu_item.name, menu_item)

    def remove_menu_item(self, name: str) -> Optional[MenuItem]:
        return self.registry.remove(name)

    def menu_items(self) -> Dict[str, MenuItem]:
        return self.registry.all()

    def menu_item_tree(self, root_name: Optional[str] = None) -> TreeNode:
        """获取菜单树, 只保留可见的子菜单并按权重排序

        根节点总是返回, 即使它本身不可见; 渲染时需要检查 tree.visible。
        """
        with self.registry.lock:
            tree = self.builder.build_subtree(root_name)
            annotate(tree)
        self._log_misconfigured(tree)
        return prune(tree)

    def is_visible(self, name: str) -> bool:
        """按当前注册状态计算单个菜单项是否可见"""
        with self.registry.lock:
            return annotate(self.builder.build_subtree(name))

    def icon_base_class(self, value=_UNSET):
        if value is _UNSET:
            return self.options.icon_base_class
        self.options.icon_base_class = value
        return self

    def default_icon_class_prefix(self, value=_UNSET):
        if value is _UNSET:
            return self.options.default_icon_class_prefix
        self.options.default_icon_class_prefix = value
        return self

    def _log_misconfigured(self, tree: TreeNode):
        for node in tree.walk():
            if node.children and node.definition is not None and node.definition.has_action():
                logger.debug("Menu item %s has children and an action; the action may be ignored", node.name)
