"""Exceptions raised by vengo components."""

from __future__ import annotations


class VengoError(Exception):
    """Base class for every error vengo reports to the user."""


class FatalError(VengoError):
    """The process cannot continue and must exit non-zero."""


class HomeDirectoryError(FatalError):
    pass


class RegistryRootError(FatalError):
    pass


class EnvironmentExistsError(VengoError, FileExistsError):
    pass


class EnvironmentNotFoundError(VengoError, FileNotFoundError):
    pass


class DeletionAborted(VengoError):
    pass


class RemovalError(VengoError):
    pass


class RegistryReadError(VengoError):
    pass


class ProvisioningError(VengoError):
    pass


class ShellProfileError(VengoError):
    pass
