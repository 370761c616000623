from typing import TYPE_CHECKING

from .aur import bootstrap_aur_helper, install_aur_packages
from .exceptions import RequirementError, ServiceException, SysCallError
from .general import SysCommand
from .models.install_config import InstallConfig
from .models.plan import InstallPlan
from .output import FormattedOutput, info, warn
from .pacman import Pacman
from .planner import plan_installation
from .services import enable_service
from .utils.util import get_username, running_as_root

if TYPE_CHECKING:
	from .wizard import Prompter


class Installer:
	"""
	Carries out an ``InstallPlan``.

	In dry run mode every step is only described; no process is
	started and nothing on disk is touched.
	"""

	def __init__(
		self,
		config: InstallConfig,
		plan: InstallPlan | None = None,
		prompter: 'Prompter | None' = None,
	):
		self._config = config
		self._plan = plan if plan is not None else plan_installation(config)
		self._prompter = prompter
		self._username: str | None = None
		self._username_resolved = False

	@property
	def plan(self) -> InstallPlan:
		return self._plan

	@property
	def dry_run(self) -> bool:
		return self._config.dry_run

	def _get_username(self) -> str | None:
		if not self._username_resolved:
			self._username = get_username(self._prompter)
			self._username_resolved = True
		return self._username

	def run(self) -> None:
		if self.dry_run:
			info('DRY RUN: Showing what would be installed...')
		else:
			info('Starting installation...')

		self.install_aur_helper()
		self.install_packages()
		self.install_aur_packages()
		self.enable_services()
		self.init_xdg_user_dirs()

		self._print_next_steps()

	def install_aur_helper(self) -> None:
		if not (helper := self._config.aur_helper):
			return

		if self.dry_run:
			info(f'Would install AUR helper: {helper}')
			return

		bootstrap_aur_helper(helper, self._get_username())

	def install_packages(self) -> None:
		if not self._plan.packages:
			return

		if self.dry_run:
			info('Would install from official repositories:\n' + FormattedOutput.as_list(self._plan.packages))
			return

		Pacman.install(self._plan.packages)

	def install_aur_packages(self) -> None:
		if not self._plan.aur_packages:
			return

		if self.dry_run:
			info('Would install from AUR:\n' + FormattedOutput.as_list(self._plan.aur_packages))
			return

		username = self._get_username() if running_as_root() else None
		install_aur_packages(self._plan.aur_packages, username)

	def enable_services(self) -> None:
		if not self._plan.services:
			return

		if self.dry_run:
			info('Would enable services:\n' + FormattedOutput.as_list(self._plan.services))
			return

		for service in self._plan.services:
			try:
				enable_service(service)
			except ServiceException as err:
				warn(f'Failed to enable service: {service}: {err}')

	def init_xdg_user_dirs(self) -> None:
		if not self._config.xdg_user_dirs:
			return

		if self.dry_run:
			info('Would initialize XDG user directories (Documents, Downloads, Pictures, etc.)')
			return

		if not (username := self._get_username()):
			warn('Could not determine username, skipping XDG user directories')
			return

		info('Initializing XDG user directories...')

		try:
			SysCommand(['xdg-user-dirs-update'], run_as=username if running_as_root() else None)
		except (SysCallError, RequirementError) as err:
			warn(f'Failed to create XDG user directories: {err}')
			return

		info('XDG user directories created', fg='green')

	def _print_next_steps(self) -> None:
		if self.dry_run:
			info('DRY RUN complete! No changes were made to your system.')
			info('To perform actual installation:\n   Run the installer again and answer \'No\' to dry run mode')
			return

		steps = [
			'1. Review your hyprland.conf at ~/.config/hypr/hyprland.conf',
			'2. Adjust any exec-once paths or parameters as needed',
			'3. Configure wallpaper paths and other personal preferences',
			'4. Reboot your system',
			'5. Select Hyprland from your display manager',
		]

		info('Installation complete!', fg='green')
		info('Next steps:\n' + FormattedOutput.as_list(steps, bullet=''))
		info('Documentation: https://wiki.hyprland.org/')
