import shutil
from enum import Enum, auto
from pathlib import Path
from typing import TYPE_CHECKING

from .autostart import MARKER_END, MARKER_START, generate_autostart_lines, render_block
from .exceptions import ConfigPathError, RequirementError, SysCallError
from .general import SysCommand
from .models.install_config import InstallConfig
from .output import FormattedOutput, debug, error, info, warn
from .utils.util import get_hyprland_config_path, get_username, running_as_root

if TYPE_CHECKING:
	from .wizard import Prompter

SIDECAR_NAME = 'hyprland-autostart.conf'
BACKUP_SUFFIX = '.backup'
# bytes that are not valid UTF-8 survive a read and write unchanged
FILE_ENCODING = {'encoding': 'utf-8', 'errors': 'surrogateescape'}
SOURCE_HINT = f'source = ~/.config/hypr/{SIDECAR_NAME}'


class PatchState(Enum):
	NoFile = auto()
	ExistingNoMarker = auto()
	ExistingWithMarker = auto()


def splice_block(content: str, lines: list[str]) -> str:
	"""
	Places the generated block into ``content``.

	The region from the first start marker through the first end marker
	following it is replaced, everything around it is kept as is. A start
	marker without a closing marker is swapped for a complete block, and
	content without any marker gets the block appended.
	"""
	block = render_block(lines)
	start = content.find(MARKER_START)

	if start == -1:
		return f'{content}\n\n{block}\n'

	end = content.find(MARKER_END, start + len(MARKER_START))

	if end == -1:
		return content[:start] + block + content[start + len(MARKER_START):]

	return content[:start] + block + content[end + len(MARKER_END):]


def sidecar_content(lines: list[str]) -> str:
	header = [
		'# Auto-generated autostart configuration',
		'# Generated by hyprinstall',
		f'# Include this in your main hyprland.conf with: {SOURCE_HINT}',
	]
	return '\n'.join(header) + '\n\n' + render_block(lines) + '\n'


class HyprlandConfigPatcher:
	def __init__(self, config_path: Path, username: str | None = None, dry_run: bool = False):
		self._config_path = config_path
		self._username = username
		self._dry_run = dry_run

	@property
	def config_path(self) -> Path:
		return self._config_path

	@property
	def sidecar_path(self) -> Path:
		return self._config_path.parent / SIDECAR_NAME

	def detect_state(self) -> PatchState:
		if not self._config_path.exists():
			return PatchState.NoFile

		if MARKER_START in self._config_path.read_text(**FILE_ENCODING):
			return PatchState.ExistingWithMarker

		return PatchState.ExistingNoMarker

	def apply(self, lines: list[str]) -> Path | None:
		"""
		Writes ``lines`` into the hyprland configuration and returns the
		path that was written, or None when nothing was changed.
		"""
		if not lines:
			info('No exec-once statements to add')
			return None

		if self._dry_run:
			self.preview(lines)
			return None

		parent = self._config_path.parent

		if not parent.exists():
			try:
				parent.mkdir(parents=True)
			except OSError as err:
				error(f'Failed to create config directory: {err}')
				return None

		try:
			state = self.detect_state()
		except (OSError, UnicodeError) as err:
			error(f'Failed to read config file: {err}')
			return None

		debug(f'hyprland.conf state: {state.name}')

		if state == PatchState.NoFile:
			return self._write_sidecar(lines)

		return self._patch_existing(lines)

	def preview(self, lines: list[str]) -> None:
		if not lines:
			info('No exec-once statements would be added')
			return

		output = f'The following would be added to {self._config_path}:\n\n'
		output += render_block(lines) + '\n'
		info(output)

	def _backup(self, path: Path) -> Path | None:
		backup_path = path.with_name(path.name + BACKUP_SUFFIX)

		try:
			shutil.copy2(path, backup_path)
		except OSError as err:
			warn(f'Failed to create backup: {err}')
			return None

		info(f'Backed up existing config to: {backup_path}')
		return backup_path

	def _write_sidecar(self, lines: list[str]) -> Path | None:
		sidecar = self.sidecar_path

		info(f'No existing hyprland.conf found at: {self._config_path}')
		info('Hyprland will create a default config on first run.')

		if sidecar.exists():
			self._backup(sidecar)

		try:
			sidecar.write_text(sidecar_content(lines), **FILE_ENCODING)
		except OSError as err:
			error(f'Failed to create autostart config: {err}')
			return None

		info(f'Created autostart config at: {sidecar}')
		info('To use these settings, add this line to your hyprland.conf:', f'\n   {SOURCE_HINT}')

		self._restore_ownership(sidecar, recursive=False)
		return sidecar

	def _patch_existing(self, lines: list[str]) -> Path | None:
		self._backup(self._config_path)

		try:
			content = self._config_path.read_text(**FILE_ENCODING)
		except (OSError, UnicodeError) as err:
			error(f'Failed to read config file: {err}')
			return None

		try:
			self._config_path.write_text(splice_block(content, lines), **FILE_ENCODING)
		except (OSError, UnicodeError) as err:
			error(f'Failed to write config file: {err}')
			return None

		info(f'Successfully updated hyprland.conf at: {self._config_path}')
		info('Added exec-once statements:\n' + FormattedOutput.as_list([line for line in lines if line], bullet=''))

		self._restore_ownership(self._config_path.parent, recursive=True)
		return self._config_path

	def _restore_ownership(self, path: Path, recursive: bool) -> None:
		if not running_as_root() or not self._username:
			return

		options = ['-R'] if recursive else []
		owner = f'{self._username}:{self._username}'

		try:
			SysCommand(['chown', *options, owner, str(path)])
		except (SysCallError, RequirementError) as err:
			warn(f'Failed to hand {path} back to {self._username}: {err}')
			return

		info(f'Fixed file ownership for user: {self._username}')


def update_hyprland_config(
	config: InstallConfig,
	prompter: 'Prompter | None' = None,
	config_dir: Path | None = None,
) -> Path | None:
	info('Updating hyprland.conf...')

	username = get_username(prompter)

	try:
		config_path = get_hyprland_config_path(username, config_dir)
	except ConfigPathError as err:
		error(f'Could not determine config path: {err}')
		return None

	patcher = HyprlandConfigPatcher(config_path, username=username, dry_run=config.dry_run)
	return patcher.apply(generate_autostart_lines(config))


def show_config_preview(config: InstallConfig, config_dir: Path | None = None) -> None:
	info('Hyprland.conf preview (dry run)')

	if config_dir is not None:
		config_path = config_dir / 'hypr' / 'hyprland.conf'
	else:
		config_path = Path('~/.config/hypr/hyprland.conf')

	patcher = HyprlandConfigPatcher(config_path, dry_run=True)
	patcher.preview(generate_autostart_lines(config))
