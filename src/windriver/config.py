from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class DriverConfig:
    """Configuration for packaged application handling."""

    driver_name: str = "WinAppDriver"
    local_app_data: str = "%LOCALAPPDATA%"
    powershell_executable: str = "powershell"
    activator_executable: str = "ActivateStoreApp"
    state_folders: Tuple[str, ...] = ("Settings", "LocalState")


# Module-level late-binding singleton
_config: Optional[DriverConfig] = None


def configure(**kwargs) -> DriverConfig:
    """Create and set the global DriverConfig.

    :param kwargs: Fields to override on DriverConfig.
    :return: The configured DriverConfig instance.
    """
    global _config
    _config = DriverConfig(**kwargs)
    return _config


def get_driver_config() -> DriverConfig:
    """Return the current config, creating a default if needed."""
    global _config
    if _config is None:
        _config = DriverConfig()
    return _config
