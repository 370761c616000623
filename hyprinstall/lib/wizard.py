from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

from ..tui.result import Result
from .aur import find_installed_helper
from .models.catalog import BOOLEAN_DEFAULTS, CATALOG, Category, Option
from .models.install_config import InstallConfig
from .output import debug, info


class Prompter(Protocol):
	def select(self, header: str, options: Sequence[Option], preset: str | None = None) -> Result[str]: ...

	def multi_select(self, header: str, options: Sequence[Option], preset: list[str] | None = None) -> Result[str]: ...

	def confirm(self, header: str, default: bool = True) -> Result[bool]: ...

	def text(self, header: str, default: str | None = None) -> Result[str]: ...


class PromptKind(Enum):
	Select = auto()
	MultiSelect = auto()
	Confirm = auto()


@dataclass(frozen=True)
class Prompt:
	category: Category
	header: str
	kind: PromptKind = PromptKind.Select


@dataclass(frozen=True)
class PromptStep:
	title: str
	prompts: list[Prompt] = field(default_factory=list)
	description: str | None = None


STEPS: list[PromptStep] = [
	PromptStep('AUR Helper', [Prompt(Category.AUR_HELPER, 'Select an AUR helper to install:')]),
	PromptStep('Display Manager', [Prompt(Category.GREETER, 'Select a display manager:')]),
	PromptStep('GPU Driver Selection', [Prompt(Category.GPU_DRIVER, 'Select your GPU driver:')]),
	PromptStep('Hyprland Installation', [Prompt(Category.HYPRLAND_VERSION, 'Select Hyprland package:')]),
	PromptStep(
		'XDG User Directories',
		[Prompt(Category.XDG_USER_DIRS, 'Install xdg-user-dirs?', PromptKind.Confirm)],
		description='Creates standard directories like Documents, Downloads, Pictures, etc.',
	),
	PromptStep(
		'UWSM (Universal Wayland Session Manager)',
		[Prompt(Category.UWSM, 'Install UWSM?', PromptKind.Confirm)],
	),
	PromptStep(
		'Terminal & Shell Selection',
		[
			Prompt(Category.TERMINAL, 'Select a terminal emulator:'),
			Prompt(Category.SHELL, 'Select a shell:'),
		],
	),
	PromptStep('Notification Daemon', [Prompt(Category.NOTIFICATION_DAEMON, 'Select a notification daemon:')]),
	PromptStep('Audio System', [Prompt(Category.AUDIO, 'Select audio system:')]),
	PromptStep(
		'XDG Desktop Portal',
		[Prompt(Category.XDG_PORTAL, 'Install XDG Desktop Portal (xdg-desktop-portal-hyprland)?', PromptKind.Confirm)],
	),
	PromptStep('Authentication Agent', [Prompt(Category.AUTH_AGENT, 'Select authentication agent:')]),
	PromptStep(
		'Qt5/6 Support',
		[Prompt(Category.QT_SUPPORT, 'Install Qt5/Qt6 Wayland support?', PromptKind.Confirm)],
	),
	PromptStep('Status Bar', [Prompt(Category.STATUS_BAR, 'Select a status bar:')]),
	PromptStep(
		'Wallpaper Utility (Multiple Selection)',
		[
			Prompt(
				Category.WALLPAPER_UTILS,
				'Select wallpaper utilities (Space to select, Enter to confirm):',
				PromptKind.MultiSelect,
			)
		],
	),
	PromptStep('Application Launcher', [Prompt(Category.APP_LAUNCHER, 'Select an application launcher:')]),
	PromptStep('Color Picker', [Prompt(Category.COLOR_PICKER, 'Select a color picker:')]),
	PromptStep('Clipboard Manager', [Prompt(Category.CLIPBOARD_MANAGER, 'Select a clipboard manager:')]),
	PromptStep(
		'File Manager',
		[
			Prompt(Category.GUI_FILE_MANAGER, 'Select GUI file manager:'),
			Prompt(Category.TUI_FILE_MANAGER, 'Select TUI file manager:'),
		],
	),
]


class Wizard:
	"""
	Walks through ``STEPS`` in order and records every answer on
	``config``. A prompt that is skipped or interrupted leaves its
	category in the skipped state and the wizard moves on.
	"""

	def __init__(
		self,
		prompter: Prompter,
		config: InstallConfig,
		preset: InstallConfig | None = None,
		steps: list[PromptStep] = STEPS,
	):
		self._prompter = prompter
		self._config = config
		self._preset = preset
		self._steps = steps

	@property
	def config(self) -> InstallConfig:
		return self._config

	def run(self) -> InstallConfig:
		for index, step in enumerate(self._steps, start=1):
			info(f'═══ Step {index}: {step.title} ═══')

			if step.description:
				info(step.description)

			for prompt in step.prompts:
				self._ask(prompt)

		return self._config

	def _preset_value(self, category: Category) -> str | bool | list[str] | None:
		if self._preset is None:
			return None
		return self._preset.get(category)

	def _keep_installed_helper(self) -> bool:
		if (installed := find_installed_helper()) is None:
			return False

		info(f'AUR helper already installed: {installed}', fg='green')
		result = self._safe_prompt(lambda: self._prompter.confirm(f'Keep using {installed}?', default=True))

		if result.has_data() and result.value() is True:
			self._config.aur_helper = installed
			return True

		return False

	def _safe_prompt[T](self, call: Callable[[], Result[T]]) -> Result[T]:
		try:
			return call()
		except (KeyboardInterrupt, EOFError):
			debug('Prompt interrupted, falling back to the default')
			return Result.skip()

	def _ask(self, prompt: Prompt) -> None:
		category = prompt.category

		if category == Category.AUR_HELPER and self._keep_installed_helper():
			return

		preset = self._preset_value(category)

		match prompt.kind:
			case PromptKind.Select:
				options = CATALOG[category]
				result = self._safe_prompt(
					lambda: self._prompter.select(prompt.header, options, preset if isinstance(preset, str) else None)
				)
			case PromptKind.MultiSelect:
				options = CATALOG[category]
				result = self._safe_prompt(
					lambda: self._prompter.multi_select(prompt.header, options, preset if isinstance(preset, list) else None)
				)
			case PromptKind.Confirm:
				default = preset if isinstance(preset, bool) else BOOLEAN_DEFAULTS[category]
				result = self._safe_prompt(lambda: self._prompter.confirm(prompt.header, default=default))

		if not result.has_data():
			self._config.reset(category)
			debug(f'{category.value}: skipped')
			return

		if prompt.kind == PromptKind.MultiSelect:
			self._config.set(category, list(result.values()))
		else:
			self._config.set(category, result.value())

		debug(f'{category.value}: {self._config.get(category)}')
