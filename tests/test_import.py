"""Basic import tests — verify the package structure is correct."""


def test_version():
    from windriver._version import __version__
    assert __version__ == "0.1.0"


def test_top_level_imports():
    from windriver import (
        AutomationElementFacade,
        ConfigurationError,
        DriverConfig,
        DriverError,
        ExternalCallError,
        NotInstalledError,
        PackageControlSurface,
        PackageIdentity,
        PackageLifecycleController,
        PowerShellPackageQuery,
        ToggleState,
        UIANode,
    )
    assert PackageIdentity is not None
    assert PackageLifecycleController is not None
    assert AutomationElementFacade is not None
    assert UIANode is not None


def test_error_hierarchy():
    from windriver import (
        ConfigurationError,
        DriverError,
        ExternalCallError,
        NotInstalledError,
    )

    assert issubclass(ConfigurationError, DriverError)
    assert issubclass(NotInstalledError, DriverError)
    assert issubclass(ExternalCallError, DriverError)
