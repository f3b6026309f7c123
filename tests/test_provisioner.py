from __future__ import annotations

import subprocess

import pytest

from vengo.errors import EnvironmentExistsError, ProvisioningError
from vengo.provisioner import VenvProvisioner
from vengo.registry import EnvironmentRegistry


def test_create_runs_venv_module(registry: EnvironmentRegistry, fake_venv) -> None:
    provisioner = VenvProvisioner(registry, python="/opt/python3.12")

    path = provisioner.create("web")

    assert path == registry.root / "web"
    assert registry.exists("web")
    assert fake_venv == [["/opt/python3.12", "-m", "venv", str(registry.root / "web")]]


def test_create_existing_leaves_contents(registry: EnvironmentRegistry, fake_venv) -> None:
    env = registry.root / "web"
    env.mkdir()
    (env / "keep.txt").write_text("original", encoding="utf-8")

    with pytest.raises(EnvironmentExistsError):
        VenvProvisioner(registry).create("web")

    assert fake_venv == []
    assert (env / "keep.txt").read_text(encoding="utf-8") == "original"


def test_create_reports_non_zero_exit(
    registry: EnvironmentRegistry, monkeypatch: pytest.MonkeyPatch
) -> None:
    def run(command, check=False, **kwargs):
        raise subprocess.CalledProcessError(1, command)

    monkeypatch.setattr("vengo.provisioner.subprocess.run", run)

    with pytest.raises(ProvisioningError):
        VenvProvisioner(registry).create("broken")


def test_create_reports_missing_interpreter(registry: EnvironmentRegistry) -> None:
    provisioner = VenvProvisioner(registry, python="no-such-python-interpreter")

    with pytest.raises(ProvisioningError):
        provisioner.create("broken")
