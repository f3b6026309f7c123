"""CLI entrypoint for `vengo`."""

from __future__ import annotations

import sys
from typing import Callable

from .config import Settings
from .errors import FatalError, VengoError
from .log import configure_logging, get_logger
from .provisioner import VenvProvisioner
from .registry import EnvironmentRegistry, resolve_root, user_home
from .shell import ShellIntegration

logger = get_logger("cli")

USAGE = """Vengo - Python virtual environment manager
Usage:
  vengo create <env-name>     Create a new virtual environment
  vengo list                  List all virtual environments
  vengo activate <env-name>   Show activation command for environment
  vengo delete <env-name>     Delete an environment"""


def _print_usage() -> None:
    print(USAGE)


def confirm_deletion(
    name: str, input_fn: Callable[[str], str] | None = None
) -> bool:
    """Ask before removing an environment; only ``y`` or ``Y`` proceeds."""
    prompt = f"Are you sure you want to delete '{name}'? [y/N]: "
    try:
        answer = (input_fn or input)(prompt)
    except EOFError:
        answer = ""
    tokens = answer.split()
    return bool(tokens) and tokens[0] in ("y", "Y")


def prepare(registry: EnvironmentRegistry, shell: ShellIntegration) -> None:
    """Make sure the registry root and the shell function are in place.

    Runs once per invocation, whatever the subcommand.
    """
    registry.ensure_root()
    try:
        added = shell.install()
    except VengoError as exc:
        print(exc)
        return
    if added:
        print(f"Shell function added to {shell.profile}")
        print(
            f"Please restart your terminal or run 'source {shell.profile}' "
            "to apply the changes."
        )


def _cmd_create(provisioner: VenvProvisioner, name: str) -> int:
    try:
        provisioner.create(name)
    except VengoError as exc:
        print(exc)
        return 0
    print(f"Created virtual environment '{name}'")
    return 0


def _cmd_list(registry: EnvironmentRegistry) -> int:
    try:
        names = registry.list()
    except VengoError as exc:
        print(exc)
        return 0

    if not names:
        print("No virtual environments created yet.")
        return 0

    print("Your virtual environments:")
    for name in names:
        print(" -", name)
    return 0


def _cmd_activate(
    registry: EnvironmentRegistry, shell: ShellIntegration, name: str
) -> int:
    # The shell function performs the activation; this only validates.
    if not shell.is_installed():
        print("Shell function not added. Run 'vengo' to add it.")
        return 0
    if not registry.exists(name):
        print("Environment does not exist.")
    return 0


def _cmd_delete(
    registry: EnvironmentRegistry,
    name: str,
    confirm: Callable[[str], bool] = confirm_deletion,
) -> int:
    try:
        registry.delete(name, confirm)
    except VengoError as exc:
        print(exc)
        return 0
    print(f"Deleted environment '{name}'.")
    return 0


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = Settings.from_env()

    configure_logging(settings.log_level)

    if not argv:
        _print_usage()
        return 0

    try:
        home = settings.home if settings.home is not None else user_home()
        registry = EnvironmentRegistry(resolve_root(home))
        shell = ShellIntegration(home, settings.shell)
        prepare(registry, shell)
    except FatalError as exc:
        print(exc)
        return 1

    provisioner = VenvProvisioner(registry, python=settings.python)
    command, args = argv[0], argv[1:]
    logger.debug("command=%s args=%s root=%s", command, args, registry.root)

    if command == "create":
        if len(args) != 1:
            print("Usage: vengo create <env-name>")
            return 0
        return _cmd_create(provisioner, args[0])
    if command == "list":
        return _cmd_list(registry)
    if command == "activate":
        if len(args) != 1:
            print("Usage: vengo activate <env-name>")
            return 0
        return _cmd_activate(registry, shell, args[0])
    if command == "delete":
        if len(args) != 1:
            print("Usage: vengo delete <env-name>")
            return 0
        return _cmd_delete(registry, args[0])

    _print_usage()
    return 0


def run() -> None:
    sys.exit(main())
