import os

from hyprinstall.lib.args import get_config_handler
from hyprinstall.lib.configuration import ConfigurationOutput
from hyprinstall.lib.hyprconf import show_config_preview, update_hyprland_config
from hyprinstall.lib.installer import Installer
from hyprinstall.lib.models.install_config import InstallConfig
from hyprinstall.lib.output import debug, error, info, warn
from hyprinstall.lib.utils.util import running_as_root
from hyprinstall.lib.wizard import Prompter, Wizard
from hyprinstall.tui import TuiPrompter, tui

BANNER = """
╔═════════════════════════════════════════════╗
║        Arch Linux Hyprland Installer        ║
╚═════════════════════════════════════════════╝
"""


def _confirm(prompter: Prompter, header: str, default: bool) -> bool:
	try:
		result = prompter.confirm(header, default=default)
	except (KeyboardInterrupt, EOFError):
		return False

	return result.has_data() and result.value() is True


def ask_dry_run(prompter: Prompter, config: InstallConfig) -> None:
	if not config.dry_run:
		config.dry_run = _confirm(
			prompter,
			'Run in DRY RUN mode? (No actual installation or file changes)',
			default=False,
		)

	if config.dry_run:
		info('DRY RUN MODE ENABLED - No changes will be made to your system', fg='cyan')
	elif not running_as_root():
		warn('This installer should be run as root or with sudo privileges.')
		warn('Some package installations may fail without proper permissions.')


def ask_user_questions(prompter: Prompter, config: InstallConfig, preset: InstallConfig | None = None) -> None:
	"""
	First, we'll ask the user for a bunch of user input.
	Not until we're satisfied with what we want to install
	will we continue with the actual installation steps.
	"""
	Wizard(prompter, config, preset=preset).run()


def start_hyprland() -> None:
	info('Starting Hyprland...')

	try:
		os.execvp('Hyprland', ['Hyprland'])
	except OSError as err:
		error(f'Could not start Hyprland: {err}')


def guided(prompter: Prompter | None = None) -> None:
	handler = get_config_handler()
	args = handler.args
	prompter = prompter or TuiPrompter()

	print(BANNER)
	tui.global_header = 'Arch Linux Hyprland Installer'

	config = InstallConfig(dry_run=args.dry_run)

	ask_dry_run(prompter, config)
	ask_user_questions(prompter, config, preset=handler.preset)

	output = ConfigurationOutput(config)
	output.show()
	output.write_debug()

	if not output.confirm_config(prompter):
		debug('Installation aborted')
		info('Installation cancelled.', fg='red')
		return

	if not config.dry_run:
		output.save()

	Installer(config, prompter=prompter).run()

	if config.dry_run:
		show_config_preview(config, config_dir=args.config_dir)
		return

	if _confirm(prompter, 'Would you like to update your hyprland.conf with exec-once statements?', default=True):
		update_hyprland_config(config, prompter, config_dir=args.config_dir)

	if _confirm(prompter, 'Would you like to start Hyprland now?', default=False):
		start_hyprland()
	else:
		info('Installation complete. Start Hyprland later by running: Hyprland', fg='green')


def main() -> None:
	guided()
