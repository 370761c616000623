from __future__ import annotations

from typing import Any, ClassVar, TypeVar, override

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Input, OptionList, SelectionList, Static
from textual.widgets.option_list import Option
from textual.widgets.selection_list import Selection

from ..lib.output import debug
from .menu_item import MenuItemGroup
from .result import Result, ResultType

ValueT = TypeVar('ValueT')


class BaseScreen(Screen[Result[ValueT]]):
	BINDINGS: ClassVar = [
		Binding('escape', 'cancel_operation', 'Skip', show=True),
		Binding('ctrl+c', 'interrupt', 'Interrupt', show=False, priority=True),
	]

	def __init__(self, allow_skip: bool = True):
		super().__init__()
		self._allow_skip = allow_skip

	def action_cancel_operation(self) -> None:
		if self._allow_skip:
			_ = self.dismiss(Result(ResultType.Skip, None))

	def action_interrupt(self) -> None:
		# an interrupted prompt always falls back to its default
		_ = self.dismiss(Result(ResultType.Skip, None))

	def _compose_header(self) -> ComposeResult:
		if tui.global_header:
			yield Static(tui.global_header, classes='app-header')


class OptionListScreen(BaseScreen[ValueT]):
	BINDINGS: ClassVar = [
		Binding('j', 'cursor_down', 'Down', show=False),
		Binding('k', 'cursor_up', 'Up', show=False),
	]

	CSS = """
	OptionListScreen {
		align: center middle;
	}

	.dialog {
		width: 70;
		height: auto;
		background: transparent;
	}

	.header {
		text-align: center;
		margin-bottom: 1;
	}

	OptionList {
		height: auto;
		max-height: 20;
		background: transparent;
	}
	"""

	def __init__(
		self,
		group: MenuItemGroup,
		header: str | None = None,
		allow_skip: bool = True,
	):
		super().__init__(allow_skip)
		self._group = group
		self._header = header

	@override
	def compose(self) -> ComposeResult:
		yield from self._compose_header()

		with Center():
			with Vertical(classes='dialog'):
				if self._header:
					yield Static(self._header, classes='header')

				yield OptionList(
					*[Option(item.text, id=item.get_id()) for item in self._group.items],
					id='option_list',
				)

		yield Footer()

	def on_mount(self) -> None:
		option_list = self.query_one(OptionList)
		option_list.highlighted = self._group.get_focused_index()
		option_list.focus()

	def action_cursor_down(self) -> None:
		self.query_one(OptionList).action_cursor_down()

	def action_cursor_up(self) -> None:
		self.query_one(OptionList).action_cursor_up()

	def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
		assert event.option.id is not None
		item = self._group.find_by_id(event.option.id)

		if item.value is None:
			_ = self.dismiss(Result(ResultType.Skip, None))
		else:
			_ = self.dismiss(Result(ResultType.Selection, item.value))


class SelectListScreen(BaseScreen[ValueT]):
	BINDINGS: ClassVar = [
		Binding('enter', 'confirm_selection', 'Confirm', show=True, priority=True),
	]

	CSS = """
	SelectListScreen {
		align: center middle;
	}

	.dialog {
		width: 70;
		height: auto;
		background: transparent;
	}

	.header {
		text-align: center;
		margin-bottom: 1;
	}

	SelectionList {
		height: auto;
		max-height: 20;
		background: transparent;
	}
	"""

	def __init__(
		self,
		group: MenuItemGroup,
		header: str | None = None,
		allow_skip: bool = True,
	):
		super().__init__(allow_skip)
		self._group = group
		self._header = header

	@override
	def compose(self) -> ComposeResult:
		yield from self._compose_header()

		selections = [
			Selection(item.text, item.get_id(), item in self._group.selected_items)
			for item in self._group.items
		]

		with Center():
			with Vertical(classes='dialog'):
				if self._header:
					yield Static(self._header, classes='header')

				yield SelectionList[str](*selections, id='select_list')

		yield Footer()

	def on_mount(self) -> None:
		self.query_one(SelectionList).focus()

	def action_confirm_selection(self) -> None:
		selected_ids = self.query_one(SelectionList).selected
		# keep the order the items were presented in
		values = [item.value for item in self._group.items if item.get_id() in selected_ids]
		_ = self.dismiss(Result(ResultType.Selection, values))


class InputScreen(BaseScreen[str]):
	CSS = """
	InputScreen {
		align: center middle;
	}

	.input-dialog {
		width: 60;
		height: auto;
		background: transparent;
	}

	.input-header {
		text-align: center;
		text-style: bold;
	}

	Input {
		margin: 1 2;
		border: solid $accent;
		background: transparent;
	}
	"""

	def __init__(
		self,
		header: str,
		placeholder: str | None = None,
		default_value: str | None = None,
		allow_skip: bool = True,
	):
		super().__init__(allow_skip)
		self._header = header
		self._placeholder = placeholder or ''
		self._default_value = default_value or ''

	@override
	def compose(self) -> ComposeResult:
		yield from self._compose_header()

		with Center():
			with Vertical(classes='input-dialog'):
				yield Static(self._header, classes='input-header')
				yield Input(
					placeholder=self._placeholder,
					value=self._default_value,
					id='main_input',
				)

		yield Footer()

	def on_mount(self) -> None:
		self.query_one('#main_input', Input).focus()

	def on_input_submitted(self, event: Input.Submitted) -> None:
		_ = self.dismiss(Result(ResultType.Selection, event.value))


class TApp(App[Any]):
	CSS = """
	.app-header {
		dock: top;
		height: auto;
		width: 100%;
		content-align: center middle;
		background: $primary;
		color: white;
		text-style: bold;
	}
	"""

	def __init__(self, screen: Screen[Any]) -> None:
		super().__init__(ansi_color=True)
		self._screen = screen

	def on_mount(self) -> None:
		self.push_screen(self._screen, callback=self._on_result)

	def _on_result(self, result: Any) -> None:
		self.exit(result)


class _Tui:
	def __init__(self) -> None:
		self.global_header: str | None = None

	def show(self, screen: Screen[Result[ValueT]]) -> Result[ValueT]:
		"""
		Runs a single prompt screen to completion. Closing the
		application without answering counts as a skip.
		"""
		result = TApp(screen).run()

		if result is None:
			debug('Prompt closed without an answer')
			return Result(ResultType.Skip, None)

		return result  # type: ignore[no-any-return]


tui = _Tui()
