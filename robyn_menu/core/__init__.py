from .menu import MenuItem
from .manager import MenuProvider, MenuManager
from .options import MenuOptions
from .tree import TreeNode, TreeBuilder
from .registry import ItemRegistry
from .exceptions import MenuError, MalformedNameError

__all__ = [
    'MenuItem',
    'MenuProvider',
    'MenuManager',
    'MenuOptions',
    'TreeNode',
    'TreeBuilder',
    'ItemRegistry',
    'MenuError',
    'MalformedNameError'
]
