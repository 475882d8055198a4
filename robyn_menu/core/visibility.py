"""
菜单可见性计算

可见性规则有三种:

- 布尔值: 直接返回
- 函数: 以树节点为参数调用, 节点上可以读取菜单项字段和 has_visible_children()
- 未设置: 使用默认规则, 有可见子菜单、或配置了 state/href/click、或为分隔线时可见

每次查询都会重新构建树并自底向上计算, 不跨查询缓存结果。
"""


def default_visibility(node) -> bool:
    """默认可见性规则"""
    return (
        node.has_visible_children()
        or node.state is not None
        or node.href is not None
        or node.click is not None
        or node.is_divider
    )


def _rule(node):
    if node.definition is None:
        return None
    return node.definition.is_visible


def is_visible(node) -> bool:
    """计算节点是否可见"""
    rule = _rule(node)
    if rule is None:
        return default_visibility(node)
    if callable(rule):
        return bool(rule(node))
    return bool(rule)


def has_visible_children(node) -> bool:
    """是否至少有一个可见的直接子节点, 已计算过的子节点直接使用结果"""
    for child in node.children:
        visible = child.visible if child.visible is not None else is_visible(child)
        if visible:
            return True
    return False


def annotate(node) -> bool:
    """深度优先计算整棵树的可见性, 子节点先于父节点, 结果写入 node.visible"""
    for child in node.children:
        annotate(child)
    node.visible = is_visible(node)
    return node.visible


def prune(node):
    """移除不可见的子节点"""
    node.children = [child for child in node.children if child.visible]
    for child in node.children:
        prune(child)
    return node
