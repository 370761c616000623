import os
from pathlib import Path
from typing import TYPE_CHECKING

from ..exceptions import ConfigPathError
from ..output import debug

if TYPE_CHECKING:
	from ..wizard import Prompter


def running_as_root() -> bool:
	return os.geteuid() == 0


def get_username(prompter: 'Prompter | None' = None) -> str | None:
	"""
	Resolves the non-privileged account that launched the wizard.
	``SUDO_USER`` wins, then ``USER`` unless that is root, and as
	a last resort the user is asked to type it in.
	"""
	if sudo_user := os.environ.get('SUDO_USER'):
		return sudo_user

	if (user := os.environ.get('USER')) and user != 'root':
		return user

	if prompter is None:
		return None

	result = prompter.text('Enter your username (for config file location):')

	if result.has_data() and (username := result.value().strip()):
		return username

	return None


def get_config_root(username: str | None, config_dir: Path | None = None) -> Path:
	if config_dir is not None:
		return config_dir

	if xdg_config := os.environ.get('XDG_CONFIG_HOME'):
		return Path(xdg_config)

	if not username:
		raise ConfigPathError('Could not determine the user to locate the config directory for')

	return Path('/home') / username / '.config'


def get_hyprland_config_path(username: str | None, config_dir: Path | None = None) -> Path:
	path = get_config_root(username, config_dir) / 'hypr' / 'hyprland.conf'
	debug(f'Resolved hyprland config path: {path}')
	return path
