import time
from pathlib import Path

from .exceptions import RequirementError, SysCallError
from .general import SysCommand
from .output import error, info, warn

PACMAN_DB_LOCK = Path('/var/lib/pacman/db.lck')
INSTALL_ARGS = ['-S', '--needed', '--noconfirm']


class Pacman:
	@staticmethod
	def run(args: list[str], default_cmd: str = 'pacman', peek_output: bool = True) -> SysCommand:
		"""
		A centralized function to call `pacman` from.
		It also protects us from colliding with other running pacman sessions.
		The grace period is set to 10 minutes before giving up if another pacman instance is running.
		"""
		if PACMAN_DB_LOCK.exists():
			warn('Pacman is already running, waiting maximum 10 minutes for it to terminate.')

		started = time.time()
		while PACMAN_DB_LOCK.exists():
			time.sleep(0.25)

			if time.time() - started > (60 * 10):
				error('Pre-existing pacman lock never exited. Please clean up any existing pacman sessions.')
				raise RequirementError(f'{PACMAN_DB_LOCK} is still held by another process')

		return SysCommand([default_cmd, *args], peek_output=peek_output)

	@staticmethod
	def install(packages: list[str]) -> bool:
		if not packages:
			return True

		info('Installing packages from official repositories...')

		try:
			Pacman.run([*INSTALL_ARGS, *packages])
		except (SysCallError, RequirementError) as err:
			warn(f'Some packages may have failed to install: {err}')
			return False

		info('Packages installed successfully', fg='green')
		return True
