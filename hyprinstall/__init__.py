"""Interactive Hyprland desktop installer for Arch Linux."""

import sys
import traceback

from .lib.args import get_config_handler
from .lib.output import debug, error, logger
from .lib.utils.util import running_as_root


def _log_env_info() -> None:
	# Log the invoking environment before anything is installed, this might assist in troubleshooting
	debug(f'Running as root: {running_as_root()}')
	debug(f'Arguments: {get_config_handler().args}')


def main() -> int:
	"""
	This can either be run as the installed application: hyprinstall
	OR straight as a module: python -m hyprinstall
	"""
	if '--help' in sys.argv or '-h' in sys.argv:
		get_config_handler().print_help()
		return 0

	_log_env_info()

	from .scripts.guided import guided

	guided()

	return 0


def run_as_a_module() -> None:
	rc = 0
	exc = None

	try:
		rc = main()
	except KeyboardInterrupt:
		error('Installer aborted by user')
		rc = 1
	except Exception as e:
		exc = e
	finally:
		if exc:
			err = ''.join(traceback.format_exception(exc))
			error(err)

			text = (
				'hyprinstall experienced the above error. If you think this is a bug, please report it\n'
				f'and include the log file "{logger.path}".'
			)

			error(text)
			rc = 1

	sys.exit(rc)
