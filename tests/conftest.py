import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest
from pytest import MonkeyPatch

from hyprinstall.lib.models.catalog import Option
from hyprinstall.lib.output import logger
from hyprinstall.tui.result import Result, ResultType


@pytest.fixture(autouse=True)
def log_directory(monkeypatch: MonkeyPatch, tmp_path: Path) -> Path:
	log_dir = tmp_path / 'log'
	log_dir.mkdir()
	monkeypatch.setattr(logger, '_path', log_dir)
	return log_dir


@pytest.fixture(scope='session')
def config_fixture() -> Path:
	return Path(__file__).parent / 'data' / 'test_config.json'


class ScriptedPrompter:
	"""
	Answers prompts from a mapping of header to answer. Headers
	without an answer are skipped; an exception instance as the
	answer is raised instead.
	"""

	def __init__(self, answers: dict[str, Any] | None = None) -> None:
		self.answers = answers or {}
		self.asked: list[str] = []
		self.presets: dict[str, Any] = {}

	def _answer(self, header: str, preset: Any = None) -> Result[Any]:
		self.asked.append(header)
		self.presets[header] = preset

		if header not in self.answers:
			return Result(ResultType.Skip, None)

		answer = self.answers[header]

		if isinstance(answer, BaseException):
			raise answer

		return Result(ResultType.Selection, answer)

	def select(self, header: str, options: Sequence[Option], preset: str | None = None) -> Result[str]:
		return self._answer(header, preset)

	def multi_select(self, header: str, options: Sequence[Option], preset: list[str] | None = None) -> Result[str]:
		return self._answer(header, preset)

	def confirm(self, header: str, default: bool = True) -> Result[bool]:
		return self._answer(header, default)

	def text(self, header: str, default: str | None = None) -> Result[str]:
		return self._answer(header, default)


@pytest.fixture
def prompter() -> Callable[..., ScriptedPrompter]:
	def _create(answers: dict[str, Any] | None = None) -> ScriptedPrompter:
		return ScriptedPrompter(answers)

	return _create


class FakeRun:
	"""
	Stands in for ``subprocess.run`` and records every command.
	"""

	def __init__(self, failing: Callable[[list[str]], bool] | None = None) -> None:
		self.calls: list[list[str]] = []
		self.failing = failing or (lambda cmd: False)

	def __call__(self, cmd: list[str], **kwargs: Any) -> Any:
		self.calls.append(list(cmd))
		returncode = 1 if self.failing(cmd) else 0
		return subprocess.CompletedProcess(cmd, returncode, stdout=b'')


@pytest.fixture
def fake_run(monkeypatch: MonkeyPatch) -> FakeRun:
	run = FakeRun()
	monkeypatch.setattr('subprocess.run', run)
	monkeypatch.setattr('hyprinstall.lib.general.which', lambda name: f'/usr/bin/{name}')
	return run
