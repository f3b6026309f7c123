"""Named Python virtual environments kept under ``~/.vengo``."""

from .config import Settings
from .provisioner import VenvProvisioner
from .registry import EnvironmentRegistry, resolve_root
from .shell import ShellIntegration

__all__ = [
    "EnvironmentRegistry",
    "Settings",
    "ShellIntegration",
    "VenvProvisioner",
    "resolve_root",
]
