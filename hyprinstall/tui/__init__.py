from .components import tui
from .menu_item import MenuItem, MenuItemGroup
from .prompts import Confirmation, Input, Selection, TuiPrompter
from .result import Result, ResultType

__all__ = [
	'Confirmation',
	'Input',
	'MenuItem',
	'MenuItemGroup',
	'Result',
	'ResultType',
	'Selection',
	'TuiPrompter',
	'tui',
]
