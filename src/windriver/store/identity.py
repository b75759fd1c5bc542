"""PackageIdentity — identity strings derived from an AppUserModelId.

An AppUserModelId has the form ``{PackageFamilyName}!{AppId}`` and a package
family name the form ``{Name}_{PublisherHash}``. Derived values are computed
on first access and never change afterwards; only ``is_installed`` goes back
to the package query service on every call.

Instances are not safe for concurrent use from several threads.
"""

from __future__ import annotations

import logging
import os
from functools import cached_property
from typing import Callable, Optional

from windriver._utils import expand_environment_variables
from windriver.config import DriverConfig, get_driver_config
from windriver.errors import ConfigurationError, NotInstalledError
from windriver.store.query import PackageQueryService, PowerShellPackageQuery

logger = logging.getLogger(__name__)

SEPARATOR = "!"
PUBLISHER_SEPARATOR = "_"


class PackageIdentity:
    """Parses and caches the identity of a packaged application."""

    def __init__(
        self,
        app_user_model_id: str,
        query_service: Optional[PackageQueryService] = None,
        config: Optional[DriverConfig] = None,
        expand: Callable[[str], str] = expand_environment_variables,
    ) -> None:
        if not app_user_model_id:
            raise ConfigurationError("Application User Model ID must not be empty")
        self._app_user_model_id = app_user_model_id
        self._query_service = query_service or PowerShellPackageQuery()
        self._config = config or get_driver_config()
        self._expand = expand
        self._full_name: Optional[str] = None

    @staticmethod
    def parse(app_user_model_id: str) -> str:
        """Return the package family name of an AppUserModelId.

        :param app_user_model_id: ``{PackageFamilyName}!{AppId}``.
        :return: The part before the first ``!``.
        """
        family_name, sep, _ = app_user_model_id.partition(SEPARATOR)
        if not sep:
            raise ConfigurationError(
                f"Invalid Application User Model ID: {app_user_model_id}"
            )
        return family_name

    @property
    def app_user_model_id(self) -> str:
        return self._app_user_model_id

    @cached_property
    def package_family_name(self) -> str:
        return self.parse(self._app_user_model_id)

    @cached_property
    def application_id(self) -> str:
        family_name = self.package_family_name
        return self._app_user_model_id[len(family_name) + len(SEPARATOR):]

    @cached_property
    def package_short_name(self) -> str:
        family_name = self.package_family_name
        name, sep, _ = family_name.partition(PUBLISHER_SEPARATOR)
        if not sep:
            raise ConfigurationError(
                f"Invalid package family name (no publisher hash): {family_name}"
            )
        return name

    @cached_property
    def package_data_dir(self) -> str:
        base = os.path.join(self._config.local_app_data, "Packages")
        return self._expand(os.path.join(base, self.package_family_name))

    @cached_property
    def backup_state_dir(self) -> str:
        base = os.path.join(
            self._config.local_app_data, self._config.driver_name, "Packages"
        )
        return self._expand(os.path.join(base, self.package_family_name))

    def is_installed(self) -> bool:
        """Check whether any package matches the short name. Never cached."""
        return len(self._query_service.find(self.package_short_name)) > 0

    def resolve_full_name(self) -> str:
        """Resolve and cache the package full name.

        The lookup and the installed check share a single query: an empty
        result means the package is not installed.
        """
        if self._full_name is not None:
            return self._full_name

        records = self._query_service.find(self.package_short_name)
        if not records:
            raise NotInstalledError(
                self.package_short_name, "find PackageFullName"
            )
        if len(records) > 1:
            logger.warning(
                f"{len(records)} packages match {self.package_short_name}, "
                f"using {records[0].package_full_name}"
            )
        self._full_name = records[0].package_full_name
        return self._full_name

    @property
    def package_full_name(self) -> str:
        return self.resolve_full_name()

    def __repr__(self) -> str:
        return f"PackageIdentity({self._app_user_model_id!r})"
