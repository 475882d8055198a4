"""
Shared pytest fixtures for robyn-menu tests.
"""

import os
import sys
import pytest

# Add project root to path for imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from robyn_menu.core import MenuItem, MenuManager, MenuProvider


@pytest.fixture
def manager():
    """An empty MenuManager."""
    return MenuManager()


@pytest.fixture
def provider():
    """An empty MenuProvider."""
    return MenuProvider()


@pytest.fixture
def nested_manager():
    """The nested menu from the documentation: menu.root with foo, bar and baz.{qux,quux}."""
    return (
        MenuProvider()
        .menu_item('menu.root', MenuItem(text='Root'))
        .menu_item('menu.root.foo', MenuItem(text='Foo', href='/some/path'))
        .menu_item('menu.root.bar', MenuItem(text='Bar', href='/some/path'))
        .menu_item('menu.root.baz', MenuItem(text='Baz'))
        .menu_item('menu.root.baz.qux', MenuItem(text='Qux', href='/some/path'))
        .menu_item('menu.root.baz.quux', MenuItem(text='Quux', href='/some/path'))
        .build()
    )
