from dataclasses import dataclass, asdict, replace


@dataclass
class MenuOptions:
    """菜单全局配置"""
    icon_base_class: str = 'glyphicon'           # 图标库基础类名
    default_icon_class_prefix: str = 'glyphicon'  # 默认图标类名前缀 (如侧边栏的折叠箭头)

    def copy(self) -> 'MenuOptions':
        return replace(self)

    def to_dict(self) -> dict:
        """转换为字典，用于JSON序列化"""
        return asdict(self)
