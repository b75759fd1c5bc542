"""PackageLifecycleController — activate, terminate and isolate an application."""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional, Union

from windriver._utils import copy_directory, remove_directory
from windriver.config import DriverConfig, get_driver_config
from windriver.models import PackageExecutionState
from windriver.store.activation import ActivateStoreAppCommand, ActivationEntrypoint
from windriver.store.control import PackageControlSurface, PackageDebugSettings
from windriver.store.identity import PackageIdentity
from windriver.store.query import PackageQueryService

logger = logging.getLogger(__name__)


class PackageLifecycleController:
    """Lifecycle operations for one installed packaged application.

    Typical flow:
        app = PackageLifecycleController("Contoso.App_8wekyb3d8bbwe!App")
        app.backup_initial_states()
        app.activate()
        ...
        app.terminate()
        app.restore_initial_states()

    Backup and restore mirror each state folder in turn: the destination
    folder is deleted and then copied from the source, so files created
    after a backup do not survive a restore. The destination is only
    deleted when the source folder exists. Neither operation is
    transactional: when a later folder fails the earlier ones stay mirrored,
    a folder that fails during its copy is left partially written, and the
    failure is raised as ``ExternalCallError``.
    """

    def __init__(
        self,
        identity: Union[PackageIdentity, str],
        control_surface: Optional[PackageControlSurface] = None,
        activation: Optional[ActivationEntrypoint] = None,
        query_service: Optional[PackageQueryService] = None,
        config: Optional[DriverConfig] = None,
        copy: Callable[[str, str], None] = copy_directory,
        remove: Callable[[str], None] = remove_directory,
    ) -> None:
        self._config = config or get_driver_config()
        if isinstance(identity, str):
            identity = PackageIdentity(
                identity, query_service=query_service, config=self._config
            )
        self.identity = identity
        self._control_surface = control_surface
        self._activation = activation or ActivateStoreAppCommand(
            self._config.activator_executable
        )
        self._copy = copy
        self._remove = remove

    @property
    def control_surface(self) -> PackageControlSurface:
        # The COM object is only created once a control operation needs it.
        if self._control_surface is None:
            self._control_surface = PackageDebugSettings()
        return self._control_surface

    @property
    def app_user_model_id(self) -> str:
        return self.identity.app_user_model_id

    @property
    def package_family_name(self) -> str:
        return self.identity.package_family_name

    @property
    def package_full_name(self) -> str:
        return self.identity.resolve_full_name()

    @property
    def package_folder_dir(self) -> str:
        return self.identity.package_data_dir

    def is_installed(self) -> bool:
        return self.identity.is_installed()

    def activate(self) -> None:
        """Launch the application. The launch outcome is not observed."""
        logger.info(f"Activating {self.app_user_model_id}")
        self._activation.activate(self.app_user_model_id)

    def terminate(self) -> None:
        """Terminate every process of the package."""
        full_name = self.identity.resolve_full_name()
        logger.info(f"Terminating all processes of {full_name}")
        self.control_surface.terminate_all_processes(full_name)

    def suspend(self) -> None:
        full_name = self.identity.resolve_full_name()
        logger.info(f"Suspending {full_name}")
        self.control_surface.suspend(full_name)

    def resume(self) -> None:
        full_name = self.identity.resolve_full_name()
        logger.info(f"Resuming {full_name}")
        self.control_surface.resume(full_name)

    def execution_state(self) -> PackageExecutionState:
        return self.control_surface.get_execution_state(
            self.identity.resolve_full_name()
        )

    def backup_initial_states(self) -> None:
        """Mirror the state folders from the package data dir to the backup dir."""
        logger.info(
            f"Backing up {self.package_family_name} to {self.identity.backup_state_dir}"
        )
        self._mirror_state_folders(
            self.identity.package_data_dir, self.identity.backup_state_dir
        )

    def restore_initial_states(self) -> None:
        """Mirror the state folders from the backup dir back to the package data dir."""
        logger.info(
            f"Restoring {self.package_family_name} from {self.identity.backup_state_dir}"
        )
        self._mirror_state_folders(
            self.identity.backup_state_dir, self.identity.package_data_dir
        )

    def _mirror_state_folders(self, source_root: str, destination_root: str) -> None:
        for folder in self._config.state_folders:
            source = os.path.join(source_root, folder)
            destination = os.path.join(destination_root, folder)
            if os.path.isdir(source):
                self._remove(destination)
            self._copy(source, destination)
