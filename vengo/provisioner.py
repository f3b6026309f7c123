from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_PYTHON
from .errors import EnvironmentExistsError, ProvisioningError
from .log import get_logger
from .registry import EnvironmentRegistry

logger = get_logger("provisioner")


class VenvProvisioner:
    """Create environments with an external interpreter's ``venv`` module.

    The interpreter's output is not captured so progress and errors reach
    the user's terminal directly. A failed run may leave a partial
    directory behind; nothing is cleaned up.
    """

    def __init__(
        self,
        registry: EnvironmentRegistry,
        *,
        python: str = DEFAULT_PYTHON,
    ) -> None:
        self.registry = registry
        self.python = python

    def create(self, name: str) -> Path:
        if self.registry.exists(name):
            raise EnvironmentExistsError("Environment already exists.")

        venv_path = self.registry.path_for(name)
        self._run([self.python, "-m", "venv", str(venv_path)])
        return venv_path

    def _run(self, command: Sequence[str]) -> None:
        logger.debug("running %s", " ".join(command))
        try:
            subprocess.run(command, check=True)
        except (subprocess.CalledProcessError, OSError) as exc:
            raise ProvisioningError(
                f"Failed to create virtual environment: {exc}"
            ) from exc
