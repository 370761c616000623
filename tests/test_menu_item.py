import pytest

from hyprinstall.lib.models.catalog import CATALOG, Category
from hyprinstall.tui.menu_item import MenuItem, MenuItemGroup


def test_catalog_default_is_focused() -> None:
	group = MenuItemGroup.from_options(CATALOG[Category.TERMINAL], allow_skip=True)

	assert [item.value for item in group.items] == ['kitty', 'foot', 'alacritty', 'ghostty', None]
	assert group.items[0].text == 'kitty (default)'
	assert group.focus_item == group.items[0]
	assert group.items[-1].get_id() == 'skip'


def test_preset_overrides_default_focus() -> None:
	group = MenuItemGroup.from_options(CATALOG[Category.AUR_HELPER], preset='paru')

	assert group.get_focused_index() == 1
	assert [item.value for item in group.selected_items] == ['paru']
	assert group.items[0].text == 'yay (recommended)'


def test_multi_preset() -> None:
	group = MenuItemGroup.from_options(CATALOG[Category.WALLPAPER_UTILS], preset=['swww', 'hyprpaper'])

	assert [item.value for item in group.selected_items] == ['hyprpaper', 'swww']
	assert group.focus_item is not None
	assert group.focus_item.value == 'swww'


def test_yes_no() -> None:
	assert MenuItemGroup.yes_no(True).get_focused_index() == 0
	assert MenuItemGroup.yes_no(False).get_focused_index() == 1


def test_find_by_id() -> None:
	group = MenuItemGroup.from_options(CATALOG[Category.SHELL])

	assert group.find_by_id('zsh').value == 'zsh'

	with pytest.raises(ValueError):
		group.find_by_id('tcsh')


def test_empty_group_is_rejected() -> None:
	with pytest.raises(ValueError):
		MenuItemGroup([])

	with pytest.raises(ValueError):
		MenuItemGroup([MenuItem.yes()], focus_item=MenuItem('other', value=1, key='other'))
