from dataclasses import dataclass, field, fields
from typing import Any

from .catalog import BOOLEAN_DEFAULTS, Category


@dataclass
class InstallConfig:
	dry_run: bool = False
	aur_helper: str | None = None
	greeter: str | None = None
	gpu_driver: str | None = None
	hyprland_version: str | None = None
	uwsm: bool = False
	xdg_user_dirs: bool = False
	terminal: str | None = None
	shell: str | None = None
	notification_daemon: str | None = None
	audio: str | None = None
	xdg_portal: bool = False
	auth_agent: str | None = None
	qt_support: bool = False
	status_bar: str | None = None
	wallpaper_utils: list[str] = field(default_factory=list)
	app_launcher: str | None = None
	color_picker: str | None = None
	clipboard_manager: str | None = None
	gui_file_manager: str | None = None
	tui_file_manager: str | None = None

	def get(self, category: Category) -> str | bool | list[str] | None:
		value: str | bool | list[str] | None = getattr(self, category.value)
		return value

	def set(self, category: Category, value: str | bool | list[str] | None) -> None:
		setattr(self, category.value, value)

	def reset(self, category: Category) -> None:
		"""
		Puts a category back into its skipped state
		"""
		if category in BOOLEAN_DEFAULTS:
			self.set(category, False)
		elif category == Category.WALLPAPER_UTILS:
			self.set(category, [])
		else:
			self.set(category, None)

	def json(self) -> dict[str, Any]:
		config: dict[str, Any] = {}

		for f in fields(self):
			value = getattr(self, f.name)
			config[f.name] = list(value) if isinstance(value, list) else value

		return config

	@staticmethod
	def parse_arg(args: dict[str, Any]) -> 'InstallConfig':
		config = InstallConfig()
		known = {f.name for f in fields(InstallConfig)}

		for key, value in args.items():
			if key not in known:
				continue

			if key == Category.WALLPAPER_UTILS.value:
				if not isinstance(value, list):
					raise ValueError(f'{key} must be a list of strings')
				value = [str(v) for v in value]
			elif key == 'dry_run' or key in BOOLEAN_DEFAULTS:
				if not isinstance(value, bool):
					raise ValueError(f'{key} must be true or false')
			elif value is not None:
				value = str(value)

			setattr(config, key, value)

		return config
