"""Driver-level errors.

Every failure raised by the package and application layers derives from
``DriverError`` so callers can catch a single type and report its message.
"""

from __future__ import annotations

from typing import Optional


class DriverError(Exception):
    """Base class for all driver errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(DriverError):
    """An identity string is malformed."""


class NotInstalledError(DriverError):
    """The operation needs an installed package and none was found."""

    def __init__(self, package_name: str, operation: str = "") -> None:
        action = f", cannot {operation}" if operation else ""
        super().__init__(f"Application {package_name} is not installed{action}.")
        self.package_name = package_name
        self.operation = operation


class ExternalCallError(DriverError):
    """A native call, helper process or filesystem operation failed."""

    def __init__(
        self,
        operation: str,
        message: str,
        hresult: Optional[int] = None,
        returncode: Optional[int] = None,
    ) -> None:
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.hresult = hresult
        self.returncode = returncode
