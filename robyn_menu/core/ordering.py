from typing import Iterable, List


def sort_key(node):
    """排序键: 权重优先, 同权重按注册顺序"""
    return (node.weight, node.sequence)


def order(nodes: Iterable) -> List:
    """对同级菜单排序, 权重小的在前"""
    return sorted(nodes, key=sort_key)
