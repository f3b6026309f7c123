"""Install the ``vengo`` shell function into the user's profile.

A child process cannot change its parent shell, so activation happens in
a function sourced by the shell itself. The binary only validates; the
function intercepts ``vengo activate <name>`` and sources the
environment's ``bin/activate``, forwarding everything else to the real
executable.
"""

from __future__ import annotations

import os
from pathlib import Path

from .errors import ShellProfileError
from .log import get_logger

MARKER = "vengo() {"

SHELL_FUNCTION = """
vengo() {
    if [ "$1" = "activate" ]; then
        if [ -z "$2" ]; then
            echo "Usage: vengo activate <env-name>"
            return 1
        fi
        source "$HOME/.vengo/$2/bin/activate"
    else
        command vengo "$@"
    fi
}
"""

ZSH_PROFILE = ".zshrc"
BASH_PROFILE = ".bashrc"

logger = get_logger("shell")


def profile_path(home: Path | str, shell: str | None) -> Path:
    if shell and "zsh" in shell:
        return Path(home) / ZSH_PROFILE
    return Path(home) / BASH_PROFILE


class ShellIntegration:
    def __init__(self, home: Path | str, shell: str | None = None) -> None:
        self.home = Path(home)
        self.shell = shell or ""

    @property
    def profile(self) -> Path:
        return profile_path(self.home, self.shell)

    def is_installed(self) -> bool:
        try:
            with self.profile.open("r", encoding="utf-8", errors="replace") as handle:
                return any(MARKER in line for line in handle)
        except OSError as exc:
            logger.debug("cannot read %s: %s", self.profile, exc)
            return False

    def install(self) -> bool:
        """Append the shell function unless the profile already has it.

        The profile must already exist; it is never created here.
        """
        if self.is_installed():
            return False

        try:
            fd = os.open(self.profile, os.O_WRONLY | os.O_APPEND)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(SHELL_FUNCTION)
        except OSError as exc:
            raise ShellProfileError(f"Error opening file for writing: {exc}") from exc

        logger.debug("appended shell function to %s", self.profile)
        return True
