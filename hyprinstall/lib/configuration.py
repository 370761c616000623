import json
import stat
from pathlib import Path
from typing import TYPE_CHECKING

from .models.catalog import BOOLEAN_DEFAULTS, Category
from .models.install_config import InstallConfig
from .output import FormattedOutput, debug, logger, warn

if TYPE_CHECKING:
	from .wizard import Prompter


class ConfigurationOutput:
	def __init__(self, config: InstallConfig):
		"""
		Configuration output handler to present the chosen selections
		on the console and to save them to a configuration file

		:param config: the answers collected by the wizard
		:type config: InstallConfig
		"""

		self._config = config
		self._default_save_path = logger.directory
		self._user_config_file = Path('user_configuration.json')

	@property
	def user_configuration_file(self) -> Path:
		return self._user_config_file

	def user_config_to_json(self) -> str:
		return json.dumps(self._config.json(), indent=4, sort_keys=True)

	def summary_rows(self) -> list[tuple[str, str]]:
		rows: list[tuple[str, str]] = []

		for category in Category:
			value = self._config.get(category)

			if category in BOOLEAN_DEFAULTS:
				text = 'Yes' if value else 'No'
			elif isinstance(value, list):
				text = ', '.join(value) if value else 'None'
			else:
				text = str(value) if value else 'None'

			rows.append((category.display_name(), text))

		return rows

	def summary(self) -> str:
		output = '═══ Installation Summary ═══\n\n'

		if self._config.dry_run:
			output += 'MODE: DRY RUN (No changes will be made)\n\n'

		output += FormattedOutput.as_key_value(self.summary_rows())
		return output

	def show(self) -> None:
		print(self.summary())

	def write_debug(self) -> None:
		debug(' -- Chosen configuration --')
		debug(self.user_config_to_json())

	def confirm_config(self, prompter: 'Prompter') -> bool:
		header = 'Continue with dry run?' if self._config.dry_run else 'Proceed with installation?'

		try:
			result = prompter.confirm(header, default=True)
		except (KeyboardInterrupt, EOFError):
			return False

		return result.has_data() and result.value() is True

	def _is_valid_path(self, dest_path: Path) -> bool:
		dest_path_ok = dest_path.exists() and dest_path.is_dir()
		if not dest_path_ok:
			warn(
				f'Destination directory {dest_path.resolve()} does not exist or is not a directory.',
				'Configuration file can not be saved',
			)
		return dest_path_ok

	def save(self, dest_path: Path | None = None) -> Path | None:
		save_path = dest_path or self._default_save_path

		if not self._is_valid_path(save_path):
			return None

		target = save_path / self._user_config_file

		try:
			target.write_text(self.user_config_to_json())
			target.chmod(stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP)
		except OSError as err:
			warn(f'Could not save configuration to {target}: {err}')
			return None

		debug(f'Saved configuration to {target}')
		return target
