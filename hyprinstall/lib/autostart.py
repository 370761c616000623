from .models.catalog import AUDIO_PIPEWIRE, GPU_NVIDIA
from .models.install_config import InstallConfig

MARKER_START = '# === AUTO-GENERATED EXEC-ONCE START ==='
MARKER_END = '# === AUTO-GENERATED EXEC-ONCE END ==='

GPU_ENVIRONMENT: dict[str, list[str]] = {
	GPU_NVIDIA: [
		'env = LIBVA_DRIVER_NAME,nvidia',
		'env = XDG_SESSION_TYPE,wayland',
		'env = GBM_BACKEND,nvidia-drm',
		'env = __GLX_VENDOR_LIBRARY_NAME,nvidia',
	],
}

NOTIFICATION_EXEC: dict[str, str] = {
	'dunst': 'exec-once = dunst',
	'mako': 'exec-once = mako',
	'fnott': 'exec-once = fnott',
	'swaync': 'exec-once = swaync',
}

AUDIO_EXEC: dict[str, list[str]] = {
	AUDIO_PIPEWIRE: [
		'exec-once = /usr/bin/pipewire',
		'exec-once = /usr/bin/pipewire-pulse',
		'exec-once = /usr/bin/wireplumber',
	],
}

PORTAL_EXEC = [
	'exec-once = dbus-update-activation-environment --systemd WAYLAND_DISPLAY XDG_CURRENT_DESKTOP',
	'exec-once = systemctl --user import-environment WAYLAND_DISPLAY XDG_CURRENT_DESKTOP',
]

AUTH_AGENT_EXEC: dict[str, str] = {
	'hyprpolkitagent': 'exec-once = hyprpolkitagent',
	'polkit-kde-agent': 'exec-once = /usr/lib/polkit-kde-authentication-agent-1',
	'polkit-gnome': 'exec-once = /usr/lib/polkit-gnome/polkit-gnome-authentication-agent-1',
}

STATUS_BAR_EXEC: dict[str, str] = {
	'waybar': 'exec-once = waybar',
	'polybar': 'exec-once = polybar',
	'eww': 'exec-once = eww daemon && eww open bar',
	'ironbar': 'exec-once = ironbar',
}

WALLPAPER_EXEC: dict[str, str] = {
	'hyprpaper': 'exec-once = hyprpaper',
	'swww': 'exec-once = swww-daemon',
	'swaybg': 'exec-once = swaybg -i /path/to/wallpaper.png  # Update path',
	'mpvpaper': "exec-once = mpvpaper '*' /path/to/video.mp4  # Update path",
	'wpaperd': 'exec-once = wpaperd',
}

CLIPBOARD_EXEC: dict[str, str] = {
	'cliphist': 'exec-once = wl-paste --type text --watch cliphist store',
	'clipman': 'exec-once = wl-paste -t text --watch clipman store',
	'clipse': 'exec-once = clipse -listen',
	'copyq': 'exec-once = copyq',
	'wl-clip-persist': 'exec-once = wl-clip-persist --clipboard both',
}

UWSM_NOTE = ['# UWSM is configured via systemd units']


def _lookup(table: dict[str, str], value: str | None) -> list[str]:
	if value and (line := table.get(value)):
		return [line]
	return []


def generate_autostart_lines(config: InstallConfig) -> list[str]:
	"""
	Builds the hyprland.conf lines for the selected components.

	Lines are grouped per category and every group that produced
	at least one line is closed by a single blank line. Selections
	without a known autostart command are ignored.
	"""
	groups: list[list[str]] = [
		GPU_ENVIRONMENT.get(config.gpu_driver or '', []),
		_lookup(NOTIFICATION_EXEC, config.notification_daemon),
		AUDIO_EXEC.get(config.audio or '', []),
		PORTAL_EXEC if config.xdg_portal else [],
		_lookup(AUTH_AGENT_EXEC, config.auth_agent),
		_lookup(STATUS_BAR_EXEC, config.status_bar),
		[line for wallpaper in config.wallpaper_utils for line in _lookup(WALLPAPER_EXEC, wallpaper)],
		_lookup(CLIPBOARD_EXEC, config.clipboard_manager),
		UWSM_NOTE if config.uwsm else [],
	]

	lines: list[str] = []

	for group in groups:
		if group:
			lines.extend(group)
			lines.append('')

	return lines


def render_block(lines: list[str]) -> str:
	"""
	Returns the generated lines wrapped in the start and end markers,
	without a trailing newline after the end marker.
	"""
	body = '\n'.join(lines)
	return f'{MARKER_START}\n{body}\n{MARKER_END}'
