"""windriver — packaged application lifecycle and element access for Windows UI automation.

Core exports for library usage.
"""

from windriver._version import __version__
from windriver.config import DriverConfig, configure, get_driver_config
from windriver.errors import (
    ConfigurationError,
    DriverError,
    ExternalCallError,
    NotInstalledError,
)
from windriver.models import (
    ElementInfo,
    ElementRect,
    PackageExecutionState,
    PackageRecord,
    ToggleState,
)
from windriver.store import (
    ActivateStoreAppCommand,
    ActivationEntrypoint,
    PackageControlSurface,
    PackageDebugSettings,
    PackageIdentity,
    PackageLifecycleController,
    PackageQueryService,
    PowerShellPackageQuery,
    ShellActivation,
)
from windriver.control import AccessibilityNode, AutomationElementFacade, UIANode

__all__ = [
    "__version__",
    # Config
    "DriverConfig",
    "configure",
    "get_driver_config",
    # Errors
    "DriverError",
    "ConfigurationError",
    "NotInstalledError",
    "ExternalCallError",
    # Models
    "ElementInfo",
    "ElementRect",
    "PackageExecutionState",
    "PackageRecord",
    "ToggleState",
    # Packaged applications
    "ActivationEntrypoint",
    "ActivateStoreAppCommand",
    "ShellActivation",
    "PackageControlSurface",
    "PackageDebugSettings",
    "PackageIdentity",
    "PackageLifecycleController",
    "PackageQueryService",
    "PowerShellPackageQuery",
    # Elements
    "AccessibilityNode",
    "AutomationElementFacade",
    "UIANode",
]
