class RequirementError(Exception):
	pass


class SysCallError(Exception):
	def __init__(self, message: str, exit_code: int | None = None) -> None:
		super().__init__(message)
		self.message = message
		self.exit_code = exit_code


class ServiceException(Exception):
	pass


class ConfigPathError(Exception):
	"""
	Raised when no writable location for hyprland.conf can be determined.
	"""
