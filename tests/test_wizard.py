import pytest
from pytest import MonkeyPatch

from hyprinstall.lib.models.install_config import InstallConfig
from hyprinstall.lib.wizard import STEPS, Wizard

ALL_HEADERS = [prompt.header for step in STEPS for prompt in step.prompts]


@pytest.fixture(autouse=True)
def no_installed_helper(monkeypatch: MonkeyPatch) -> None:
	monkeypatch.setattr('hyprinstall.lib.wizard.find_installed_helper', lambda: None)


def test_prompt_order(prompter) -> None:
	scripted = prompter()
	Wizard(scripted, InstallConfig()).run()

	assert scripted.asked == ALL_HEADERS
	assert [step.title for step in STEPS] == [
		'AUR Helper',
		'Display Manager',
		'GPU Driver Selection',
		'Hyprland Installation',
		'XDG User Directories',
		'UWSM (Universal Wayland Session Manager)',
		'Terminal & Shell Selection',
		'Notification Daemon',
		'Audio System',
		'XDG Desktop Portal',
		'Authentication Agent',
		'Qt5/6 Support',
		'Status Bar',
		'Wallpaper Utility (Multiple Selection)',
		'Application Launcher',
		'Color Picker',
		'Clipboard Manager',
		'File Manager',
	]


def test_skipping_everything_reaches_the_end(prompter) -> None:
	config = Wizard(prompter(), InstallConfig(dry_run=True)).run()

	assert config == InstallConfig(dry_run=True)


def test_answers_are_recorded(prompter) -> None:
	scripted = prompter(
		{
			'Select an AUR helper to install:': 'paru',
			'Select your GPU driver:': 'nvidia',
			'Install xdg-user-dirs?': True,
			'Install UWSM?': False,
			'Select a terminal emulator:': 'foot',
			'Select wallpaper utilities (Space to select, Enter to confirm):': ['swww', 'waypaper'],
			'Select TUI file manager:': 'yazi',
		}
	)

	config = Wizard(scripted, InstallConfig()).run()

	assert config.aur_helper == 'paru'
	assert config.gpu_driver == 'nvidia'
	assert config.xdg_user_dirs is True
	assert config.uwsm is False
	assert config.terminal == 'foot'
	assert config.wallpaper_utils == ['swww', 'waypaper']
	assert config.tui_file_manager == 'yazi'
	assert config.greeter is None


def test_interrupted_prompt_degrades_one_field(prompter) -> None:
	scripted = prompter(
		{
			'Select a display manager:': KeyboardInterrupt(),
			'Install XDG Desktop Portal (xdg-desktop-portal-hyprland)?': EOFError(),
			'Select a status bar:': 'waybar',
		}
	)

	config = Wizard(scripted, InstallConfig()).run()

	assert config.greeter is None
	assert config.xdg_portal is False
	assert config.status_bar == 'waybar'
	assert scripted.asked == ALL_HEADERS


def test_empty_wallpaper_selection(prompter) -> None:
	scripted = prompter({'Select wallpaper utilities (Space to select, Enter to confirm):': []})
	config = Wizard(scripted, InstallConfig(wallpaper_utils=['hyprpaper'])).run()

	assert config.wallpaper_utils == []


def test_keep_installed_helper(prompter, monkeypatch: MonkeyPatch) -> None:
	monkeypatch.setattr('hyprinstall.lib.wizard.find_installed_helper', lambda: 'paru')
	scripted = prompter({'Keep using paru?': True})

	config = Wizard(scripted, InstallConfig()).run()

	assert config.aur_helper == 'paru'
	assert 'Select an AUR helper to install:' not in scripted.asked
	assert scripted.asked[0] == 'Keep using paru?'


def test_decline_installed_helper(prompter, monkeypatch: MonkeyPatch) -> None:
	monkeypatch.setattr('hyprinstall.lib.wizard.find_installed_helper', lambda: 'yay')
	scripted = prompter({'Keep using yay?': False, 'Select an AUR helper to install:': 'paru'})

	config = Wizard(scripted, InstallConfig()).run()

	assert config.aur_helper == 'paru'
	assert scripted.asked[:2] == ['Keep using yay?', 'Select an AUR helper to install:']


def test_confirm_defaults(prompter) -> None:
	scripted = prompter()
	Wizard(scripted, InstallConfig()).run()

	assert scripted.presets['Install xdg-user-dirs?'] is True
	assert scripted.presets['Install UWSM?'] is False
	assert scripted.presets['Install XDG Desktop Portal (xdg-desktop-portal-hyprland)?'] is True
	assert scripted.presets['Install Qt5/Qt6 Wayland support?'] is True


def test_preset_is_offered(prompter) -> None:
	preset = InstallConfig(terminal='alacritty', uwsm=True, wallpaper_utils=['swaybg'])
	scripted = prompter()

	Wizard(scripted, InstallConfig(), preset=preset).run()

	assert scripted.presets['Select a terminal emulator:'] == 'alacritty'
	assert scripted.presets['Install UWSM?'] is True
	assert scripted.presets['Select wallpaper utilities (Space to select, Enter to confirm):'] == ['swaybg']
	assert scripted.presets['Select a shell:'] is None
