import logging
import os
import sys
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path


class FormattedOutput:
	@classmethod
	def as_key_value(cls, rows: list[tuple[str, str]], separator: str = ':') -> str:
		"""
		Formats a list of (label, value) pairs into aligned lines,
		the value column starts at the same offset for every row.
		"""
		if not rows:
			return ''

		width = max(len(label) for label, _ in rows) + len(separator) + 1
		output = ''

		for label, value in rows:
			output += f'{label}{separator}'.ljust(width) + f' {value}\n'

		return output

	@classmethod
	def as_list(cls, entries: list[str], bullet: str = '-', indent: int = 3) -> str:
		return ''.join(f'{" " * indent}{bullet} {entry}\n' for entry in entries)


class Journald:
	@staticmethod
	def log(message: str, level: int = logging.DEBUG) -> None:
		try:
			import systemd.journal  # type: ignore[import-not-found]
		except ModuleNotFoundError:
			return None

		log_adapter = logging.getLogger('hyprinstall')
		log_fmt = logging.Formatter('[%(levelname)s]: %(message)s')
		log_ch = systemd.journal.JournalHandler()
		log_ch.setFormatter(log_fmt)
		log_adapter.addHandler(log_ch)
		log_adapter.setLevel(logging.DEBUG)

		log_adapter.log(level, message)


class Logger:
	def __init__(self, path: Path = Path('/var/log/hyprinstall')) -> None:
		self._path = path

	@property
	def path(self) -> Path:
		return self._path / 'install.log'

	@property
	def directory(self) -> Path:
		return self._path

	@property
	def cmd_history(self) -> Path:
		return self._path / 'cmd_history.txt'

	def _check_permissions(self) -> None:
		log_file = self.path

		try:
			self._path.mkdir(exist_ok=True, parents=True)
			log_file.touch(exist_ok=True)

			with log_file.open('a') as f:
				f.write('')
		except PermissionError:
			# Fallback to creating the log file in the current folder
			self._path = Path('./').absolute()

			warn(f'Not enough permission to place log file at {log_file}, creating it in {self.path} instead')

	def log(self, level: int, content: str) -> None:
		self._check_permissions()

		with self.path.open('a') as f:
			ts = _timestamp()
			level_name = logging.getLevelName(level)
			f.write(f'[{ts}] - {level_name} - {content}\n')


logger = Logger()


def _supports_color() -> bool:
	"""
	Return True if the running system's terminal supports color,
	and False otherwise.
	"""
	supported_platform = sys.platform != 'win32' or 'ANSICON' in os.environ

	is_a_tty = hasattr(sys.stdout, 'isatty') and sys.stdout.isatty()
	return supported_platform and is_a_tty


class Font(Enum):
	bold = '1'
	italic = '3'
	underscore = '4'


_COLORS = {
	'black': '0',
	'red': '1',
	'green': '2',
	'yellow': '3',
	'blue': '4',
	'magenta': '5',
	'cyan': '6',
	'white': '7',
}


def _stylize_output(
	text: str,
	fg: str,
	bg: str | None,
	font: list[Font] = [],
) -> str:
	"""
	Wraps text in ANSI escape codes for the given foreground,
	background and font styles.
	"""
	code_list = [f'3{_COLORS[fg]}']

	if bg:
		code_list.append(f'4{_COLORS[bg]}')

	for o in font:
		code_list.append(o.value)

	ansi = ';'.join(code_list)

	return f'\033[{ansi}m{text}\033[0m'


def _timestamp() -> str:
	now = datetime.now(tz=UTC)
	return now.strftime('%Y-%m-%d %H:%M:%S')


def info(
	*msgs: str,
	level: int = logging.INFO,
	fg: str = 'white',
	bg: str | None = None,
	font: list[Font] = [],
) -> None:
	log(*msgs, level=level, fg=fg, bg=bg, font=font)


def debug(
	*msgs: str,
	level: int = logging.DEBUG,
	fg: str = 'white',
	bg: str | None = None,
	font: list[Font] = [],
) -> None:
	log(*msgs, level=level, fg=fg, bg=bg, font=font)


def error(
	*msgs: str,
	level: int = logging.ERROR,
	fg: str = 'red',
	bg: str | None = None,
	font: list[Font] = [],
) -> None:
	log(*msgs, level=level, fg=fg, bg=bg, font=font)


def warn(
	*msgs: str,
	level: int = logging.WARNING,
	fg: str = 'yellow',
	bg: str | None = None,
	font: list[Font] = [],
) -> None:
	log(*msgs, level=level, fg=fg, bg=bg, font=font)


def log(
	*msgs: str,
	level: int = logging.INFO,
	fg: str = 'white',
	bg: str | None = None,
	font: list[Font] = [],
) -> None:
	text = ' '.join([str(x) for x in msgs])

	logger.log(level, text)

	Journald.log(text, level=level)

	if level == logging.DEBUG:
		return

	if _supports_color():
		text = _stylize_output(text, fg, bg, font)

	print(text)
