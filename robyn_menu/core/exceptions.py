class MenuError(Exception):
    """菜单相关错误基类"""


class MalformedNameError(MenuError, ValueError):
    """菜单名称格式错误 (空字符串、首尾或连续的点号)"""

    def __init__(self, name, reason: str = "empty segment"):
        self.name = name
        self.reason = reason
        super().__init__(f"Malformed menu item name {name!r}: {reason}")
