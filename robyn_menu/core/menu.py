from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .exceptions import MenuError

# 可见性规则: 布尔常量, 或接收树节点并返回布尔值的函数
Visibility = Union[bool, Callable[[Any], bool]]

# 兼容前端风格的驼峰配置键
_CAMEL_CASE_KEYS = {
    'isVisible': 'is_visible',
    'isDivider': 'is_divider',
    'isCollapsed': 'is_collapsed',
    'iconClass': 'icon_class',
}


@dataclass
class MenuItem:
    """菜单项配置"""
    name: Optional[str] = None                    # 点号分隔的菜单名称, 注册时写入
    text: Optional[str] = None                    # 显示文本
    href: Optional[str] = None                    # 链接地址
    target: str = '_self'                         # 链接打开方式
    click: Optional[Callable[[], Any]] = None     # 无参数点击回调
    state: Optional[str] = None                   # 路由状态名称
    weight: Optional[int] = 0                     # 排序值, 越小越靠前
    is_visible: Optional[Visibility] = None       # 可见性规则, None 表示使用默认规则
    is_divider: bool = False                      # 分隔线
    is_collapsed: bool = False                    # 子菜单是否折叠
    icon_class: Optional[str] = None              # 图标类名

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> 'MenuItem':
        """从字典配置创建菜单项"""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in config.items():
            key = _CAMEL_CASE_KEYS.get(key, key)
            if key not in known:
                raise MenuError(f"Unknown menu item option: {key!r}")
            kwargs[key] = value
        return cls(**kwargs)

    def has_action(self) -> bool:
        """是否配置了 href、click 或 state"""
        return self.href is not None or self.click is not None or self.state is not None

    def sort_weight(self) -> int:
        return self.weight or 0

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典，用于JSON序列化"""
        return {
            'name': self.name,
            'text': self.text,
            'href': self.href,
            'target': self.target,
            'state': self.state,
            'has_click': self.click is not None,
            'weight': self.sort_weight(),
            'is_divider': self.is_divider,
            'is_collapsed': self.is_collapsed,
            'icon_class': self.icon_class,
        }


def coerce_item(config: Union[MenuItem, Mapping[str, Any]]) -> MenuItem:
    """接受 MenuItem 或字典配置"""
    if isinstance(config, MenuItem):
        return config
    if isinstance(config, Mapping):
        return MenuItem.from_dict(config)
    raise MenuError(f"Menu item config must be a MenuItem or a mapping, got {type(config).__name__}")
