from .exceptions import RequirementError, ServiceException, SysCallError
from .general import SysCommand
from .output import info


def enable_service(service: str) -> None:
	info(f'Enabling service: {service}')

	try:
		SysCommand(['systemctl', 'enable', service], environment_vars={'SYSTEMD_COLORS': '0'})
	except (SysCallError, RequirementError) as err:
		raise ServiceException(f'Unable to enable service {service}: {err}')

	info(f'Service enabled: {service}', fg='green')
