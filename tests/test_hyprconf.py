from pathlib import Path

import pytest
from pytest import MonkeyPatch

from hyprinstall.lib.autostart import MARKER_END, MARKER_START, render_block
from hyprinstall.lib.hyprconf import (
	HyprlandConfigPatcher,
	PatchState,
	show_config_preview,
	sidecar_content,
	splice_block,
	update_hyprland_config,
)
from hyprinstall.lib.models.install_config import InstallConfig

LINES = ['exec-once = waybar', '']
NEW_LINES = ['exec-once = mako', '', 'exec-once = hyprpaper', '']

USER_CONFIG = """monitor = ,preferred,auto,1

input {
    kb_layout = us
}
"""


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
	return tmp_path / 'hypr' / 'hyprland.conf'


def test_missing_config_creates_sidecar(config_path: Path) -> None:
	patcher = HyprlandConfigPatcher(config_path)
	assert patcher.detect_state() == PatchState.NoFile

	written = patcher.apply(LINES)

	assert written == config_path.parent / 'hyprland-autostart.conf'
	assert not config_path.exists()

	content = written.read_text()
	assert content == sidecar_content(LINES)
	assert 'source = ~/.config/hypr/hyprland-autostart.conf' in content
	assert content.count(MARKER_START) == 1
	assert content.count(MARKER_END) == 1


def test_existing_sidecar_is_backed_up(config_path: Path) -> None:
	config_path.parent.mkdir(parents=True)
	sidecar = config_path.parent / 'hyprland-autostart.conf'
	sidecar.write_text('old sidecar\n')

	HyprlandConfigPatcher(config_path).apply(LINES)

	assert (config_path.parent / 'hyprland-autostart.conf.backup').read_text() == 'old sidecar\n'
	assert sidecar.read_text() == sidecar_content(LINES)


def test_append_to_config_without_markers(config_path: Path) -> None:
	config_path.parent.mkdir(parents=True)
	config_path.write_text(USER_CONFIG)

	patcher = HyprlandConfigPatcher(config_path)
	assert patcher.detect_state() == PatchState.ExistingNoMarker

	assert patcher.apply(LINES) == config_path

	content = config_path.read_text()
	assert content == f'{USER_CONFIG}\n\n{render_block(LINES)}\n'
	assert patcher.detect_state() == PatchState.ExistingWithMarker


def test_backup_holds_previous_content(config_path: Path) -> None:
	config_path.parent.mkdir(parents=True)
	config_path.write_text(USER_CONFIG)

	HyprlandConfigPatcher(config_path).apply(LINES)

	assert (config_path.parent / 'hyprland.conf.backup').read_text() == USER_CONFIG


def test_replace_existing_block_keeps_surroundings(config_path: Path) -> None:
	before = '# user settings\nmonitor = ,preferred,auto,1\n\n'
	after = '\n\nbind = SUPER, Q, exec, kitty\n'
	old_block = f'{MARKER_START}\nexec-once = dunst\n{MARKER_END}'

	config_path.parent.mkdir(parents=True)
	config_path.write_text(before + old_block + after)

	HyprlandConfigPatcher(config_path).apply(NEW_LINES)

	content = config_path.read_text()
	assert content == before + render_block(NEW_LINES) + after
	assert 'exec-once = dunst' not in content


def test_rerun_is_idempotent(config_path: Path) -> None:
	config_path.parent.mkdir(parents=True)
	config_path.write_text(USER_CONFIG)
	patcher = HyprlandConfigPatcher(config_path)

	patcher.apply(LINES)
	first = config_path.read_text()

	patcher.apply(LINES)
	second = config_path.read_text()

	assert first == second
	assert second.count(MARKER_START) == 1
	assert second.count(MARKER_END) == 1


def test_rerun_with_other_selections_replaces_block(config_path: Path) -> None:
	config_path.parent.mkdir(parents=True)
	config_path.write_text(USER_CONFIG)
	patcher = HyprlandConfigPatcher(config_path)

	patcher.apply(LINES)
	patcher.apply(NEW_LINES)

	assert config_path.read_text() == f'{USER_CONFIG}\n\n{render_block(NEW_LINES)}\n'


def test_dry_run_writes_nothing(config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	patcher = HyprlandConfigPatcher(config_path, dry_run=True)

	assert patcher.apply(LINES) is None
	assert not config_path.parent.exists()
	assert MARKER_START in capsys.readouterr().out


def test_dry_run_leaves_existing_file_alone(config_path: Path) -> None:
	config_path.parent.mkdir(parents=True)
	config_path.write_text(USER_CONFIG)

	HyprlandConfigPatcher(config_path, dry_run=True).apply(LINES)

	assert config_path.read_text() == USER_CONFIG
	assert sorted(p.name for p in config_path.parent.iterdir()) == ['hyprland.conf']


def test_no_lines_changes_nothing(config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	assert HyprlandConfigPatcher(config_path).apply([]) is None
	assert not config_path.parent.exists()
	assert 'No exec-once statements to add' in capsys.readouterr().out


def test_splice_without_marker_appends() -> None:
	assert splice_block('a = 1', LINES) == f'a = 1\n\n{render_block(LINES)}\n'


def test_splice_replaces_first_pair_only() -> None:
	block = f'{MARKER_START}\nold\n{MARKER_END}'
	content = f'top\n{block}\nmiddle\n{block}\nbottom\n'

	result = splice_block(content, LINES)

	assert result == f'top\n{render_block(LINES)}\nmiddle\n{block}\nbottom\n'


def test_splice_start_marker_without_end() -> None:
	content = f'top\n{MARKER_START}\nexec-once = leftover\n'

	result = splice_block(content, LINES)

	assert result == f'top\n{render_block(LINES)}\nexec-once = leftover\n'
	assert result.count(MARKER_START) == 1
	assert result.count(MARKER_END) == 1


def test_update_uses_config_dir(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
	monkeypatch.setenv('SUDO_USER', 'alice')
	monkeypatch.setattr('hyprinstall.lib.hyprconf.running_as_root', lambda: False)

	config = InstallConfig(status_bar='waybar')
	written = update_hyprland_config(config, config_dir=tmp_path)

	assert written == tmp_path / 'hypr' / 'hyprland-autostart.conf'
	assert render_block(['exec-once = waybar', '']) in written.read_text()


def test_update_without_user_or_xdg_home(monkeypatch: MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
	monkeypatch.delenv('SUDO_USER', raising=False)
	monkeypatch.delenv('XDG_CONFIG_HOME', raising=False)
	monkeypatch.setenv('USER', 'root')

	assert update_hyprland_config(InstallConfig(status_bar='waybar')) is None
	assert 'Could not determine config path' in capsys.readouterr().out


def test_undecodable_bytes_survive_patching(config_path: Path) -> None:
	before = b'# caf\xe9 settings\nmonitor = ,preferred,auto,1\n\n'
	after = b'\n\n# \xff\xfe trailing\n'
	old_block = f'{MARKER_START}\nexec-once = dunst\n{MARKER_END}'.encode()

	config_path.parent.mkdir(parents=True)
	config_path.write_bytes(before + old_block + after)

	assert HyprlandConfigPatcher(config_path).apply(LINES) == config_path

	assert config_path.read_bytes() == before + render_block(LINES).encode() + after


def test_undecodable_bytes_survive_append(config_path: Path) -> None:
	original = b'# caf\xe9\n'

	config_path.parent.mkdir(parents=True)
	config_path.write_bytes(original)

	HyprlandConfigPatcher(config_path).apply(LINES)

	assert config_path.read_bytes() == original + b'\n\n' + render_block(LINES).encode() + b'\n'
	assert (config_path.parent / 'hyprland.conf.backup').read_bytes() == original


def test_failed_backup_still_patches(monkeypatch: MonkeyPatch, config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	config_path.parent.mkdir(parents=True)
	config_path.write_text(USER_CONFIG)

	def copy2(src: Path, dst: Path) -> None:
		raise OSError('read-only file system')

	monkeypatch.setattr('hyprinstall.lib.hyprconf.shutil.copy2', copy2)

	assert HyprlandConfigPatcher(config_path).apply(LINES) == config_path

	assert config_path.read_text() == f'{USER_CONFIG}\n\n{render_block(LINES)}\n'
	assert not (config_path.parent / 'hyprland.conf.backup').exists()
	assert 'Failed to create backup: read-only file system' in capsys.readouterr().out


def test_sidecar_ownership_handed_back(monkeypatch: MonkeyPatch, config_path: Path, fake_run) -> None:
	monkeypatch.setattr('hyprinstall.lib.hyprconf.running_as_root', lambda: True)

	sidecar = HyprlandConfigPatcher(config_path, username='alice').apply(LINES)

	assert fake_run.calls == [['/usr/bin/chown', 'alice:alice', str(sidecar)]]


def test_patched_directory_ownership_handed_back(monkeypatch: MonkeyPatch, config_path: Path, fake_run) -> None:
	monkeypatch.setattr('hyprinstall.lib.hyprconf.running_as_root', lambda: True)
	config_path.parent.mkdir(parents=True)
	config_path.write_text(USER_CONFIG)

	HyprlandConfigPatcher(config_path, username='alice').apply(LINES)

	assert fake_run.calls == [['/usr/bin/chown', '-R', 'alice:alice', str(config_path.parent)]]


def test_ownership_untouched_without_root(monkeypatch: MonkeyPatch, config_path: Path, fake_run) -> None:
	monkeypatch.setattr('hyprinstall.lib.hyprconf.running_as_root', lambda: False)

	HyprlandConfigPatcher(config_path, username='alice').apply(LINES)

	assert fake_run.calls == []


def test_failed_chown_is_a_warning(
	monkeypatch: MonkeyPatch,
	config_path: Path,
	fake_run,
	capsys: pytest.CaptureFixture[str],
) -> None:
	monkeypatch.setattr('hyprinstall.lib.hyprconf.running_as_root', lambda: True)
	fake_run.failing = lambda cmd: True

	sidecar = HyprlandConfigPatcher(config_path, username='alice').apply(LINES)

	assert sidecar is not None
	assert sidecar.exists()
	assert f'Failed to hand {sidecar} back to alice' in capsys.readouterr().out


def test_preview_with_config_dir(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	show_config_preview(InstallConfig(status_bar='waybar'), config_dir=tmp_path)

	out = capsys.readouterr().out
	assert f'The following would be added to {tmp_path / "hypr" / "hyprland.conf"}' in out
	assert 'exec-once = waybar' in out
	assert not (tmp_path / 'hypr').exists()
