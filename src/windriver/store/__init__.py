"""Packaged (Store) application support: identity, lookups and lifecycle."""

from windriver.store.activation import (
    ActivateStoreAppCommand,
    ActivationEntrypoint,
    ShellActivation,
)
from windriver.store.control import PackageControlSurface, PackageDebugSettings
from windriver.store.identity import PackageIdentity
from windriver.store.lifecycle import PackageLifecycleController
from windriver.store.query import PackageQueryService, PowerShellPackageQuery

__all__ = [
    "ActivateStoreAppCommand",
    "ActivationEntrypoint",
    "ShellActivation",
    "PackageControlSurface",
    "PackageDebugSettings",
    "PackageIdentity",
    "PackageLifecycleController",
    "PackageQueryService",
    "PowerShellPackageQuery",
]
