from .catalog import CATALOG, Category, Option
from .install_config import InstallConfig
from .plan import InstallPlan

__all__ = [
	'CATALOG',
	'Category',
	'InstallConfig',
	'InstallPlan',
	'Option',
]
