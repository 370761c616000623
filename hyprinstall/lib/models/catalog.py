from dataclasses import dataclass
from enum import StrEnum


class Category(StrEnum):
	AUR_HELPER = 'aur_helper'
	GREETER = 'greeter'
	GPU_DRIVER = 'gpu_driver'
	HYPRLAND_VERSION = 'hyprland_version'
	XDG_USER_DIRS = 'xdg_user_dirs'
	UWSM = 'uwsm'
	TERMINAL = 'terminal'
	SHELL = 'shell'
	NOTIFICATION_DAEMON = 'notification_daemon'
	AUDIO = 'audio'
	XDG_PORTAL = 'xdg_portal'
	AUTH_AGENT = 'auth_agent'
	QT_SUPPORT = 'qt_support'
	STATUS_BAR = 'status_bar'
	WALLPAPER_UTILS = 'wallpaper_utils'
	APP_LAUNCHER = 'app_launcher'
	COLOR_PICKER = 'color_picker'
	CLIPBOARD_MANAGER = 'clipboard_manager'
	GUI_FILE_MANAGER = 'gui_file_manager'
	TUI_FILE_MANAGER = 'tui_file_manager'

	def display_name(self) -> str:
		return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
	Category.AUR_HELPER: 'AUR Helper',
	Category.GREETER: 'Display Manager',
	Category.GPU_DRIVER: 'GPU Driver',
	Category.HYPRLAND_VERSION: 'Hyprland Version',
	Category.XDG_USER_DIRS: 'XDG User Directories',
	Category.UWSM: 'UWSM',
	Category.TERMINAL: 'Terminal',
	Category.SHELL: 'Shell',
	Category.NOTIFICATION_DAEMON: 'Notification Daemon',
	Category.AUDIO: 'Audio System',
	Category.XDG_PORTAL: 'XDG Portal',
	Category.AUTH_AGENT: 'Auth Agent',
	Category.QT_SUPPORT: 'Qt Support',
	Category.STATUS_BAR: 'Status Bar',
	Category.WALLPAPER_UTILS: 'Wallpaper Utils',
	Category.APP_LAUNCHER: 'App Launcher',
	Category.COLOR_PICKER: 'Color Picker',
	Category.CLIPBOARD_MANAGER: 'Clipboard Manager',
	Category.GUI_FILE_MANAGER: 'GUI File Manager',
	Category.TUI_FILE_MANAGER: 'TUI File Manager',
}


@dataclass(frozen=True)
class Option:
	value: str
	label: str | None = None
	default: bool = False

	@property
	def text(self) -> str:
		text = self.label or self.value

		if self.default and self.label is None:
			text += ' (default)'

		return text


AUR_HELPERS = (
	Option('yay', label='yay (recommended)', default=True),
	Option('paru'),
)

# probed in this order when looking for an installed helper
KNOWN_AUR_HELPERS = ('yay', 'paru')

GPU_NVIDIA = 'nvidia'
GPU_AMD = 'amd'
GPU_INTEL = 'intel'
GPU_OPEN_SOURCE = 'open-source (mesa)'

HYPRLAND_DEFAULT = 'hyprland'

AUDIO_PIPEWIRE = 'pipewire'
AUDIO_PULSEAUDIO = 'pulseaudio'

CATALOG: dict[Category, tuple[Option, ...]] = {
	Category.AUR_HELPER: AUR_HELPERS,
	Category.GREETER: (
		Option('sddm', default=True),
		Option('gdm'),
		Option('lightdm'),
		Option('greetd'),
	),
	Category.GPU_DRIVER: (
		Option(GPU_NVIDIA),
		Option(GPU_AMD),
		Option(GPU_INTEL),
		Option(GPU_OPEN_SOURCE),
	),
	Category.HYPRLAND_VERSION: (
		Option(HYPRLAND_DEFAULT, default=True),
		Option('hyprland-git'),
		Option('hyprland-meta'),
	),
	Category.TERMINAL: (
		Option('kitty', default=True),
		Option('foot'),
		Option('alacritty'),
		Option('ghostty'),
	),
	Category.SHELL: (
		Option('bash', default=True),
		Option('zsh'),
		Option('fish'),
	),
	Category.NOTIFICATION_DAEMON: (
		Option('dunst'),
		Option('mako'),
		Option('fnott'),
		Option('swaync'),
	),
	Category.AUDIO: (
		Option(AUDIO_PIPEWIRE, label='pipewire (recommended)', default=True),
		Option(AUDIO_PULSEAUDIO),
	),
	Category.AUTH_AGENT: (
		Option('hyprpolkitagent', default=True),
		Option('polkit-kde-agent'),
		Option('polkit-gnome'),
	),
	Category.STATUS_BAR: (
		Option('waybar', default=True),
		Option('polybar'),
		Option('eww'),
		Option('ironbar'),
	),
	Category.WALLPAPER_UTILS: (
		Option('hyprpaper'),
		Option('waypaper'),
		Option('swww'),
		Option('swaybg'),
		Option('mpvpaper'),
		Option('wpaperd'),
	),
	Category.APP_LAUNCHER: (
		Option('rofi', default=True),
		Option('wofi'),
		Option('tofi'),
		Option('fuzzel'),
		Option('bemenu'),
		Option('anyrun'),
		Option('walker'),
	),
	Category.COLOR_PICKER: (
		Option('hyprpicker', default=True),
		Option('wl-color-picker'),
	),
	Category.CLIPBOARD_MANAGER: (
		Option('cliphist', default=True),
		Option('clipman'),
		Option('clipse'),
		Option('copyq'),
		Option('wl-clip-persist'),
	),
	Category.GUI_FILE_MANAGER: (
		Option('dolphin', default=True),
		Option('nautilus'),
		Option('nemo'),
		Option('thunar'),
	),
	Category.TUI_FILE_MANAGER: (
		Option('lf'),
		Option('nnn'),
		Option('ranger'),
		Option('yazi'),
	),
}

# yes/no categories and the answer preselected in the prompt
BOOLEAN_DEFAULTS: dict[Category, bool] = {
	Category.XDG_USER_DIRS: True,
	Category.UWSM: False,
	Category.XDG_PORTAL: True,
	Category.QT_SUPPORT: True,
}


def default_option(category: Category) -> Option | None:
	for option in CATALOG.get(category, ()):
		if option.default:
			return option
	return None
