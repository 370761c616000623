from dataclasses import dataclass, field


@dataclass
class InstallPlan:
	packages: list[str] = field(default_factory=list)
	aur_packages: list[str] = field(default_factory=list)
	services: list[str] = field(default_factory=list)

	def is_empty(self) -> bool:
		return not (self.packages or self.aur_packages or self.services)

	def as_tuple(self) -> tuple[tuple[str, ...], tuple[str, ...], tuple[str, ...]]:
		return tuple(self.packages), tuple(self.aur_packages), tuple(self.services)
