from collections.abc import Sequence

from ..lib.models.catalog import Option
from .components import InputScreen, OptionListScreen, SelectListScreen, tui
from .menu_item import MenuItemGroup
from .result import Result


class Selection[ValueT]:
	def __init__(
		self,
		group: MenuItemGroup,
		header: str | None = None,
		allow_skip: bool = True,
		multi: bool = False,
	):
		self._header = header
		self._group: MenuItemGroup = group
		self._allow_skip = allow_skip
		self._multi = multi

	def show(self) -> Result[ValueT]:
		if self._multi:
			return tui.show(
				SelectListScreen[ValueT](
					self._group,
					header=self._header,
					allow_skip=self._allow_skip,
				)
			)

		return tui.show(
			OptionListScreen[ValueT](
				self._group,
				header=self._header,
				allow_skip=self._allow_skip,
			)
		)


class Confirmation:
	def __init__(
		self,
		header: str,
		allow_skip: bool = True,
		preset: bool = False,
	):
		self._header = header
		self._allow_skip = allow_skip
		self._group = MenuItemGroup.yes_no(preset)

	def show(self) -> Result[bool]:
		return tui.show(
			OptionListScreen[bool](
				self._group,
				header=self._header,
				allow_skip=self._allow_skip,
			)
		)


class Input:
	def __init__(
		self,
		header: str,
		placeholder: str | None = None,
		default_value: str | None = None,
		allow_skip: bool = True,
	):
		self._header = header
		self._placeholder = placeholder
		self._default_value = default_value
		self._allow_skip = allow_skip

	def show(self) -> Result[str]:
		return tui.show(
			InputScreen(
				header=self._header,
				placeholder=self._placeholder,
				default_value=self._default_value,
				allow_skip=self._allow_skip,
			)
		)


class TuiPrompter:
	"""
	Answers the wizard's questions through full screen textual prompts.
	"""

	def select(
		self,
		header: str,
		options: Sequence[Option],
		preset: str | None = None,
	) -> Result[str]:
		group = MenuItemGroup.from_options(options, preset=preset, allow_skip=True)
		return Selection[str](group, header=header).show()

	def multi_select(
		self,
		header: str,
		options: Sequence[Option],
		preset: list[str] | None = None,
	) -> Result[str]:
		group = MenuItemGroup.from_options(options, preset=preset)
		return Selection[str](group, header=header, multi=True).show()

	def confirm(self, header: str, default: bool = True) -> Result[bool]:
		return Confirmation(header, preset=default).show()

	def text(self, header: str, default: str | None = None) -> Result[str]:
		return Input(header, default_value=default).show()
