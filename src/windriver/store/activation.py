"""Activation entrypoints — launch a packaged application by AppUserModelId."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional

from windriver.config import get_driver_config
from windriver.errors import ExternalCallError

logger = logging.getLogger(__name__)


class ActivationEntrypoint(ABC):
    """Define an interface for application activation.

    Activation is fire-and-forget: implementations start the launch and
    return without observing whether the application came up.
    """

    @abstractmethod
    def activate(self, app_user_model_id: str) -> None:
        pass


class _ProcessActivation(ActivationEntrypoint):
    @abstractmethod
    def build_command(self, app_user_model_id: str) -> List[str]:
        pass

    def activate(self, app_user_model_id: str) -> None:
        command = self.build_command(app_user_model_id)
        logger.debug(f"Starting activation helper: {command}")
        try:
            subprocess.Popen(command)
        except OSError as e:
            raise ExternalCallError(
                f"Activate {app_user_model_id}", f"cannot start {command[0]}: {e}"
            ) from e


class ActivateStoreAppCommand(_ProcessActivation):
    """Launch through the ``ActivateStoreApp`` helper executable."""

    def __init__(self, executable: Optional[str] = None) -> None:
        self.executable = executable or get_driver_config().activator_executable

    def build_command(self, app_user_model_id: str) -> List[str]:
        return [self.executable, app_user_model_id]


class ShellActivation(_ProcessActivation):
    """Launch through the shell's ``AppsFolder`` namespace."""

    def build_command(self, app_user_model_id: str) -> List[str]:
        return ["explorer.exe", f"shell:AppsFolder\\{app_user_model_id}"]
