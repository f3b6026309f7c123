from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from vengo.config import Settings
from vengo.registry import EnvironmentRegistry, resolve_root


@pytest.fixture
def home(tmp_path: Path) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    (home / ".bashrc").write_text("export EDITOR=vi\n", encoding="utf-8")
    (home / ".zshrc").write_text("", encoding="utf-8")
    return home


@pytest.fixture
def registry(home: Path) -> EnvironmentRegistry:
    registry = EnvironmentRegistry(resolve_root(home))
    registry.ensure_root()
    return registry


@pytest.fixture
def settings(home: Path) -> Settings:
    return Settings(home=home, shell="/bin/bash", python="python3")


@pytest.fixture
def fake_venv(monkeypatch: pytest.MonkeyPatch) -> list[list[str]]:
    """Replace the external interpreter with one that lays out a bare venv."""
    calls: list[list[str]] = []

    def run(command, check=False, **kwargs):
        calls.append(list(command))
        target = Path(command[-1])
        (target / "bin").mkdir(parents=True)
        (target / "bin" / "activate").write_text("# activate\n", encoding="utf-8")
        (target / "pyvenv.cfg").write_text("home = /usr/bin\n", encoding="utf-8")
        return subprocess.CompletedProcess(command, 0)

    monkeypatch.setattr("vengo.provisioner.subprocess.run", run)
    return calls
