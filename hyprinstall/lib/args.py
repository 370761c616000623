import argparse
import json
from argparse import ArgumentParser
from functools import cache
from importlib.metadata import version
from pathlib import Path
from typing import Any

from pydantic.dataclasses import dataclass as p_dataclass

from .models.install_config import InstallConfig
from .output import error, logger, warn


@p_dataclass
class Arguments:
	dry_run: bool = False
	config: Path | None = None
	config_dir: Path | None = None
	debug: bool = False


class ConfigHandler:
	def __init__(self) -> None:
		self._parser: ArgumentParser = self._define_arguments()
		self._args: Arguments = self._parse_args()

		try:
			self._preset = self._parse_config()
		except ValueError as err:
			warn(str(err))
			exit(1)

	@property
	def args(self) -> Arguments:
		return self._args

	@property
	def preset(self) -> InstallConfig | None:
		"""
		Selections loaded with --config, used as the
		preselected answers of the wizard prompts
		"""
		return self._preset

	def print_help(self) -> None:
		self._parser.print_help()

	def _get_version(self) -> str:
		try:
			return version('hyprinstall')
		except Exception:
			return 'hyprinstall version not found'

	def _define_arguments(self) -> ArgumentParser:
		parser = ArgumentParser(formatter_class=argparse.ArgumentDefaultsHelpFormatter)
		parser.add_argument(
			'-v',
			'--version',
			action='version',
			default=False,
			version='%(prog)s ' + self._get_version(),
		)
		parser.add_argument(
			'--dry-run',
			'--dry_run',
			action='store_true',
			default=False,
			help='Preview every installation step and config change without touching the system',
		)
		parser.add_argument(
			'--config',
			type=Path,
			nargs='?',
			default=None,
			help='JSON file with previously saved selections, used as the preselected answers',
		)
		parser.add_argument(
			'--config-dir',
			type=Path,
			nargs='?',
			default=None,
			help='Alternate configuration root containing hypr/hyprland.conf',
		)
		parser.add_argument(
			'--debug',
			action='store_true',
			default=False,
			help='Adds debug info into the log',
		)

		return parser

	def _parse_args(self) -> Arguments:
		argparse_args = vars(self._parser.parse_args())
		argparse_args.pop('version', None)
		args: Arguments = Arguments(**argparse_args)

		if args.debug:
			warn(f'Debug output is written to {logger.path}')

		return args

	def _parse_config(self) -> InstallConfig | None:
		if self._args.config is None:
			return None

		config_data = self._read_file(self._args.config)

		try:
			data: dict[str, Any] = json.loads(config_data)
		except json.JSONDecodeError as err:
			raise ValueError(f'Invalid configuration file {self._args.config}: {err}')

		return InstallConfig.parse_arg(data)

	def _read_file(self, path: Path) -> str:
		if not path.exists():
			error(f'Could not find file {path}')
			exit(1)

		return path.read_text()


@cache
def get_config_handler() -> ConfigHandler:
	return ConfigHandler()
