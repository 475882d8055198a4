"""
Unit tests for the ItemRegistry and MenuItem configuration.
"""

import pytest

from robyn_menu.core import ItemRegistry, MenuItem, MenuError, MalformedNameError
from robyn_menu.core.menu import coerce_item


class TestItemRegistry:
    """Tests for insert, replace and lookup."""

    @pytest.fixture
    def registry(self):
        return ItemRegistry()

    @pytest.mark.unit
    def test_set_and_get(self, registry):
        item = MenuItem(text='Home', href='/home')
        registry.set('m.home', item)
        assert registry.get('m.home') is item
        assert item.name == 'm.home'

    @pytest.mark.unit
    def test_get_missing_returns_none(self, registry):
        assert registry.get('m.missing') is None
        assert 'm.missing' not in registry

    @pytest.mark.unit
    def test_replace_keeps_sequence(self, registry):
        registry.set('m.a', MenuItem(text='A'))
        registry.set('m.b', MenuItem(text='B'))
        first = registry.sequence('m.a')
        registry.set('m.a', MenuItem(text='A2'))
        assert registry.sequence('m.a') == first
        assert registry.get('m.a').text == 'A2'
        assert len(registry) == 2

    @pytest.mark.unit
    def test_sequence_increases(self, registry):
        registry.set('m.a', MenuItem())
        registry.set('m.b', MenuItem())
        assert registry.sequence('m.a') < registry.sequence('m.b')

    @pytest.mark.unit
    def test_malformed_name_does_not_mutate(self, registry):
        registry.set('m.a', MenuItem())
        item = MenuItem(text='bad')
        with pytest.raises(MalformedNameError):
            registry.set('m..b', item)
        assert len(registry) == 1
        assert item.name is None

    @pytest.mark.unit
    def test_all_is_a_copy_sharing_items(self, registry):
        registry.set('m.a', MenuItem(text='A'))
        mapping = registry.all()
        mapping['m.b'] = MenuItem()
        assert 'm.b' not in registry
        mapping['m.a'].text = 'Changed'
        assert registry.get('m.a').text == 'Changed'

    @pytest.mark.unit
    def test_names_in_registration_order(self, registry):
        registry.set('m.z', MenuItem())
        registry.set('m.a', MenuItem())
        registry.set('m.z', MenuItem())
        assert registry.names() == ['m.z', 'm.a']

    @pytest.mark.unit
    def test_item_reused_under_two_names(self, registry):
        """Registering one object under a second name stores a copy for that name."""
        divider = MenuItem(is_divider=True)
        registry.set('nav.sep1', divider)
        stored = registry.set('nav.sep2', divider)
        assert registry.get('nav.sep1') is divider
        assert registry.get('nav.sep1').name == 'nav.sep1'
        assert stored is not divider
        assert registry.get('nav.sep2').name == 'nav.sep2'
        assert registry.get('nav.sep2').is_divider is True

    @pytest.mark.unit
    def test_reregistering_same_object_keeps_identity(self, registry):
        item = MenuItem(text='A')
        registry.set('m.a', item)
        assert registry.set('m.a', item) is item
        assert registry.get('m.a') is item

    @pytest.mark.unit
    def test_remove(self, registry):
        registry.set('m.a', MenuItem(text='A'))
        removed = registry.remove('m.a')
        assert removed.text == 'A'
        assert registry.get('m.a') is None
        assert registry.sequence('m.a') is None
        assert registry.remove('m.a') is None


class TestMenuItem:
    """Tests for MenuItem defaults and conversions."""

    @pytest.mark.unit
    def test_defaults(self):
        item = MenuItem()
        assert item.target == '_self'
        assert item.weight == 0
        assert item.is_visible is None
        assert item.is_divider is False
        assert item.is_collapsed is False
        assert not item.has_action()

    @pytest.mark.unit
    def test_none_weight_sorts_as_zero(self):
        assert MenuItem(weight=None).sort_weight() == 0

    @pytest.mark.unit
    @pytest.mark.parametrize('kwargs', [
        {'href': '/x'},
        {'click': lambda: None},
        {'state': 'home'},
        {'href': ''},
    ])
    def test_has_action(self, kwargs):
        assert MenuItem(**kwargs).has_action()

    @pytest.mark.unit
    def test_from_dict_accepts_camel_case(self):
        item = MenuItem.from_dict({'text': 'Root', 'isCollapsed': True, 'iconClass': 'fa-home', 'isVisible': False})
        assert item.text == 'Root'
        assert item.is_collapsed is True
        assert item.icon_class == 'fa-home'
        assert item.is_visible is False

    @pytest.mark.unit
    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(MenuError):
            MenuItem.from_dict({'text': 'Root', 'colour': 'red'})

    @pytest.mark.unit
    def test_coerce_item(self):
        item = MenuItem(text='A')
        assert coerce_item(item) is item
        assert coerce_item({'text': 'B'}).text == 'B'
        with pytest.raises(MenuError):
            coerce_item('not a config')

    @pytest.mark.unit
    def test_to_dict_reports_click_as_flag(self):
        data = MenuItem(text='Logout', click=lambda: None).to_dict()
        assert data['has_click'] is True
        assert 'click' not in data
        assert data['target'] == '_self'
