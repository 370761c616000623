from __future__ import annotations

import os
import shlex
import stat
import subprocess
import time
from pathlib import Path
from shutil import which
from typing import override

from .exceptions import RequirementError, SysCallError
from .output import debug, logger


def locate_binary(name: str) -> str:
	if path := which(name):
		return path
	raise RequirementError(f'Binary {name} does not exist.')


def binary_exists(name: str) -> bool:
	return which(name) is not None


class SysCommand:
	"""
	Runs a command to completion and records its exit code.

	With ``peek_output`` the child inherits the terminal so package
	managers can draw their progress bars, otherwise stdout and stderr
	are captured into ``trace_log``. A non-zero exit raises ``SysCallError``.
	"""

	def __init__(
		self,
		cmd: str | list[str],
		peek_output: bool = False,
		run_as: str | None = None,
		working_directory: Path | str | None = None,
		environment_vars: dict[str, str] | None = None,
	):
		if isinstance(cmd, str):
			cmd = shlex.split(cmd)

		if run_as:
			cmd = ['sudo', '-u', run_as, *cmd]

		if cmd and not cmd[0].startswith(('/', './')):
			cmd[0] = locate_binary(cmd[0])

		self.cmd = cmd
		self.peek_output = peek_output
		self.working_directory = working_directory
		self.environment_vars = environment_vars

		self.exit_code: int | None = None
		self._trace_log = b''

		self._execute()

	@override
	def __repr__(self) -> str:
		return self.decode()

	def _execute(self) -> None:
		_log_cmd(self.cmd)

		env = None
		if self.environment_vars:
			env = {**os.environ, **self.environment_vars}

		result = subprocess.run(
			self.cmd,
			cwd=self.working_directory,
			env=env,
			stdout=None if self.peek_output else subprocess.PIPE,
			stderr=None if self.peek_output else subprocess.STDOUT,
		)

		self.exit_code = result.returncode
		self._trace_log = result.stdout or b''

		if self.exit_code != 0:
			raise SysCallError(
				f'{self.cmd} exited with abnormal exit code [{self.exit_code}]: {self.decode()[-500:]}',
				self.exit_code,
			)

	def decode(self, encoding: str = 'utf-8', errors: str = 'backslashreplace', strip: bool = True) -> str:
		val = self._trace_log.decode(encoding, errors=errors)

		if strip:
			return val.strip()
		return val

	@property
	def trace_log(self) -> bytes:
		return self._trace_log


def _log_cmd(cmd: list[str]) -> None:
	debug(f'Executing: {shlex.join(cmd)}')

	history_logfile = logger.cmd_history

	change_perm = False
	if history_logfile.exists() is False:
		change_perm = True

	try:
		with history_logfile.open('a') as cmd_log:
			cmd_log.write(f'{time.time()} {cmd}\n')

		if change_perm:
			history_logfile.chmod(stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP)
	except (PermissionError, FileNotFoundError):
		# If history_logfile does not exist, ignore the error
		pass
