from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Self, override

from ..lib.models.catalog import Option


@dataclass
class MenuItem:
	text: str
	value: Any | None = None
	key: str | None = None

	_id: str = ''

	def __post_init__(self) -> None:
		if self.key is not None:
			self._id = self.key
		else:
			self._id = str(id(self))

	@override
	def __hash__(self) -> int:
		return hash(self._id)

	def get_id(self) -> str:
		return self._id

	def get_value(self) -> Any:
		assert self.value is not None
		return self.value

	@classmethod
	def yes(cls) -> Self:
		return cls('Yes', value=True, key='yes')

	@classmethod
	def no(cls) -> Self:
		return cls('No', value=False, key='no')

	@classmethod
	def skip(cls) -> Self:
		return cls('SKIP', value=None, key='skip')


class MenuItemGroup:
	def __init__(
		self,
		menu_items: list[MenuItem],
		focus_item: MenuItem | None = None,
	) -> None:
		if len(menu_items) < 1:
			raise ValueError('Menu must have at least one item')

		self._menu_items: list[MenuItem] = menu_items
		self.focus_item: MenuItem | None = focus_item or menu_items[0]
		self.selected_items: list[MenuItem] = []

		if self.focus_item not in self.items:
			raise ValueError(f'Selected item not in menu: {self.focus_item}')

	@property
	def items(self) -> list[MenuItem]:
		return self._menu_items

	@classmethod
	def yes_no(cls, preset: bool = True) -> Self:
		group = cls([MenuItem.yes(), MenuItem.no()])
		group.set_focus_by_value(preset)
		return group

	@classmethod
	def from_options(
		cls,
		options: Sequence[Option],
		preset: str | list[str] | None = None,
		allow_skip: bool = False,
	) -> Self:
		"""
		Builds a group from catalog options; the catalog default is
		focused unless a preset value is given.
		"""
		items = [MenuItem(option.text, value=option.value, key=option.value) for option in options]

		if allow_skip:
			items.append(MenuItem.skip())

		group = cls(items)

		if default := next((o for o in options if o.default), None):
			group.set_focus_by_value(default.value)

		group.set_selected_by_value(preset)
		return group

	def find_by_id(self, item_id: str) -> MenuItem:
		for item in self._menu_items:
			if item.get_id() == item_id:
				return item

		raise ValueError(f'No item found for id: {item_id}')

	def set_focus_by_value(self, value: Any) -> None:
		for item in self._menu_items:
			if item.value == value:
				self.focus_item = item
				break

	def set_selected_by_value(self, values: Any | list[Any] | None) -> None:
		if values is None:
			return

		if not isinstance(values, list):
			values = [values]

		for item in self._menu_items:
			if item.value in values:
				self.selected_items.append(item)

		if values:
			self.set_focus_by_value(values[0])

	def get_focused_index(self) -> int | None:
		if self.focus_item is None:
			return None
		return self._menu_items.index(self.focus_item)
