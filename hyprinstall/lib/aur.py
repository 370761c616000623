import shutil
from pathlib import Path

from .exceptions import RequirementError, SysCallError
from .general import SysCommand, binary_exists
from .models.catalog import KNOWN_AUR_HELPERS
from .output import FormattedOutput, info, warn
from .pacman import INSTALL_ARGS, Pacman
from .utils.util import running_as_root

AUR_BASE_URL = 'https://aur.archlinux.org'
BUILD_DEPENDENCIES = ['base-devel', 'git']


def find_installed_helper() -> str | None:
	for helper in KNOWN_AUR_HELPERS:
		if binary_exists(helper):
			return helper
	return None


def build_directory(helper: str) -> Path:
	return Path('/tmp') / f'{helper}-install'


def _run_as(username: str | None) -> str | None:
	# only switch accounts when we actually hold root
	if username and username != 'root' and running_as_root():
		return username
	return None


def bootstrap_aur_helper(helper: str, username: str | None) -> bool:
	"""
	Builds and installs ``helper`` from its AUR build recipe.

	makepkg refuses to run as root, so the clone and the build both
	happen as ``username``. On a failed build the checkout is left in
	place so the user can finish by hand.
	"""
	info(f'Installing AUR helper: {helper}')

	if binary_exists(helper):
		info(f'{helper} is already installed', fg='green')
		return True

	if not username:
		warn(f'Could not determine username. Please install {helper} manually.')
		return False

	if username == 'root':
		warn(f'Cannot build AUR packages as root. Please install {helper} manually as a regular user.')
		return False

	info('Installing build dependencies...')
	try:
		Pacman.run([*INSTALL_ARGS, *BUILD_DEPENDENCIES])
	except (SysCallError, RequirementError) as err:
		warn(f'Could not install build dependencies: {err}')

	temp_dir = build_directory(helper)
	repo_url = f'{AUR_BASE_URL}/{helper}.git'

	if temp_dir.is_dir():
		shutil.rmtree(temp_dir, ignore_errors=True)
	elif temp_dir.exists():
		temp_dir.unlink()

	info(f'Cloning {helper} repository...')
	try:
		SysCommand(['git', 'clone', repo_url, str(temp_dir)], peek_output=True, run_as=_run_as(username))
	except (SysCallError, RequirementError) as err:
		warn(f'Failed to clone {helper} repository: {err}')
		return False

	info(f'Building and installing {helper}...')
	try:
		SysCommand(
			['makepkg', '-si', '--noconfirm'],
			peek_output=True,
			run_as=_run_as(username),
			working_directory=temp_dir,
		)
	except (SysCallError, RequirementError) as err:
		warn(f'Failed to build/install {helper}: {err}')
		warn('You can manually complete the installation:\n' + FormattedOutput.as_list([f'cd {temp_dir}', 'makepkg -si'], bullet=''))
		return False

	info(f'{helper} installed successfully!', fg='green')
	shutil.rmtree(temp_dir, ignore_errors=True)
	return True


def install_aur_packages(packages: list[str], username: str | None = None) -> bool:
	"""
	Installs ``packages`` with the first AUR helper found on the system.
	Without a helper nothing is installed and the packages are listed
	for manual installation instead.
	"""
	if not packages:
		return True

	helper = find_installed_helper()

	if helper is None:
		warn(
			f'No AUR helper found ({"/".join(KNOWN_AUR_HELPERS)}). Manual installation required for:\n'
			+ FormattedOutput.as_list(packages)
		)
		return False

	info('Installing AUR packages...')

	try:
		SysCommand([helper, *INSTALL_ARGS, *packages], peek_output=True, run_as=_run_as(username))
	except (SysCallError, RequirementError) as err:
		warn(f'Some AUR packages may have failed to install: {err}')
		return False

	info('AUR packages installed successfully', fg='green')
	return True
