from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Callable

from .errors import (
    DeletionAborted,
    EnvironmentNotFoundError,
    HomeDirectoryError,
    RegistryReadError,
    RegistryRootError,
    RemovalError,
)
from .log import get_logger

ROOT_DIRNAME = ".vengo"
ROOT_MODE = 0o755

logger = get_logger("registry")


def user_home() -> Path:
    if os.environ.get("HOME") == "":
        raise HomeDirectoryError("Error getting home directory: HOME is empty")
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirectoryError(f"Error getting home directory: {exc}") from exc
    if str(home) == "~":
        raise HomeDirectoryError("Error getting home directory: not set")
    return home


def resolve_root(home: Path | str | None = None) -> Path:
    base = Path(home) if home is not None else user_home()
    return base / ROOT_DIRNAME


class EnvironmentRegistry:
    """Track environments as the directories found under a single root."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def ensure_root(self) -> Path:
        try:
            self.root.mkdir(mode=ROOT_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            raise RegistryRootError(f"Failed to create vengo directory: {exc}") from exc
        return self.root

    def path_for(self, name: str) -> Path:
        # Names are used verbatim; see DESIGN.md on traversal.
        return self.root / name

    def exists(self, name: str) -> bool:
        return os.path.lexists(self.path_for(name))

    def list(self) -> list[str]:
        """Return environment names in directory-read order."""
        try:
            with os.scandir(self.root) as entries:
                return [
                    entry.name
                    for entry in entries
                    if entry.is_dir(follow_symlinks=False)
                ]
        except OSError as exc:
            raise RegistryReadError(f"Error reading environments: {exc}") from exc

    def delete(self, name: str, confirm: Callable[[str], bool]) -> Path:
        target = self.path_for(name)
        if not self.exists(name):
            raise EnvironmentNotFoundError("Environment does not exist.")

        if not confirm(name):
            raise DeletionAborted("Aborted deletion.")

        logger.debug("removing %s", target)
        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        except OSError as exc:
            raise RemovalError(f"Failed to delete environment: {exc}") from exc
        return target
