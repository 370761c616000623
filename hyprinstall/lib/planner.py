from .models.catalog import (
	AUDIO_PIPEWIRE,
	AUDIO_PULSEAUDIO,
	GPU_AMD,
	GPU_INTEL,
	GPU_NVIDIA,
	GPU_OPEN_SOURCE,
	HYPRLAND_DEFAULT,
)
from .models.install_config import InstallConfig
from .models.plan import InstallPlan

GPU_PACKAGES: dict[str, list[str]] = {
	GPU_NVIDIA: ['nvidia', 'nvidia-utils', 'nvidia-settings'],
	GPU_AMD: ['mesa', 'vulkan-radeon', 'libva-mesa-driver'],
	GPU_INTEL: ['mesa', 'vulkan-intel', 'intel-media-driver'],
	GPU_OPEN_SOURCE: ['mesa'],
}

AUDIO_PACKAGES: dict[str, list[str]] = {
	AUDIO_PIPEWIRE: ['pipewire', 'pipewire-pulse', 'pipewire-alsa', 'pipewire-jack', 'wireplumber'],
	AUDIO_PULSEAUDIO: ['pulseaudio', 'pulseaudio-alsa'],
}

XDG_USER_DIRS_PACKAGES = ['xdg-user-dirs']
XDG_PORTAL_PACKAGES = ['xdg-desktop-portal-hyprland', 'xdg-desktop-portal']
QT_PACKAGES = ['qt5-wayland', 'qt6-wayland']
UWSM_AUR_PACKAGES = ['uwsm']

# wallpaper utilities available from the official repositories,
# everything else in the catalog has to come from the AUR
OFFICIAL_WALLPAPER_UTILS = frozenset({'hyprpaper', 'swww'})

CLIPBOARD_BRIDGE = 'wl-clipboard'
# copyq talks to the compositor itself and needs no wl-paste bridge
CLIPBOARD_WITHOUT_BRIDGE = frozenset({'copyq'})


def plan_installation(config: InstallConfig) -> InstallPlan:
	"""
	Maps a finished configuration to the packages and services
	that have to be installed and enabled.

	The function has no side effects; calling it repeatedly with
	the same configuration returns equal plans.
	"""
	plan = InstallPlan()

	if config.greeter:
		plan.packages.append(config.greeter)
		plan.services.append(f'{config.greeter}.service')

	if config.gpu_driver:
		plan.packages.extend(GPU_PACKAGES.get(config.gpu_driver, []))

	if config.hyprland_version:
		if config.hyprland_version == HYPRLAND_DEFAULT:
			plan.packages.append(config.hyprland_version)
		else:
			plan.aur_packages.append(config.hyprland_version)

	if config.xdg_user_dirs:
		plan.packages.extend(XDG_USER_DIRS_PACKAGES)

	if config.uwsm:
		plan.aur_packages.extend(UWSM_AUR_PACKAGES)

	for single in (config.terminal, config.shell, config.notification_daemon):
		if single:
			plan.packages.append(single)

	if config.audio:
		plan.packages.extend(AUDIO_PACKAGES.get(config.audio, []))

	if config.xdg_portal:
		plan.packages.extend(XDG_PORTAL_PACKAGES)

	if config.auth_agent:
		plan.packages.append(config.auth_agent)

	if config.qt_support:
		plan.packages.extend(QT_PACKAGES)

	if config.status_bar:
		plan.packages.append(config.status_bar)

	for wallpaper in config.wallpaper_utils:
		if wallpaper in OFFICIAL_WALLPAPER_UTILS:
			plan.packages.append(wallpaper)
		else:
			plan.aur_packages.append(wallpaper)

	for single in (config.app_launcher, config.color_picker):
		if single:
			plan.packages.append(single)

	if config.clipboard_manager:
		plan.packages.append(config.clipboard_manager)

		if config.clipboard_manager not in CLIPBOARD_WITHOUT_BRIDGE:
			plan.packages.append(CLIPBOARD_BRIDGE)

	for single in (config.gui_file_manager, config.tui_file_manager):
		if single:
			plan.packages.append(single)

	return plan
