"""Look up installed packages by short name."""

from __future__ import annotations

import json
import logging
import platform
import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional

from windriver.config import get_driver_config
from windriver.errors import ExternalCallError
from windriver.models import PackageRecord

logger = logging.getLogger(__name__)


class PackageQueryService(ABC):
    """Define an interface for installed-package lookups."""

    @abstractmethod
    def find(self, package_name: str) -> List[PackageRecord]:
        """Return the installed packages matching a short package name.

        An empty list means the package is not installed.
        """
        pass


class PowerShellPackageQuery(PackageQueryService):
    """Query installed packages through ``Get-AppxPackage``."""

    _FIELDS = "Name, PackageFullName, Version, Publisher, InstallLocation"

    def __init__(self, executable: Optional[str] = None) -> None:
        self.executable = executable or get_driver_config().powershell_executable

    def build_command(self, package_name: str) -> List[str]:
        quoted = package_name.replace("'", "''")
        script = (
            "[Console]::OutputEncoding = [Text.Encoding]::UTF8; "
            f"Get-AppxPackage -Name '{quoted}' | "
            f"Select-Object {self._FIELDS} | ConvertTo-Json"
        )
        return [self.executable, "-NoProfile", "-NonInteractive", "-Command", script]

    def find(self, package_name: str) -> List[PackageRecord]:
        command = self.build_command(package_name)
        logger.debug(f"Running package query: {command}")

        kwargs = {}
        if platform.system() == "Windows":
            kwargs["creationflags"] = subprocess.CREATE_NO_WINDOW
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                **kwargs,
            )
        except OSError as e:
            raise ExternalCallError("Get-AppxPackage", str(e)) from e

        if completed.returncode != 0:
            raise ExternalCallError(
                "Get-AppxPackage",
                completed.stderr.strip() or f"exit code {completed.returncode}",
                returncode=completed.returncode,
            )
        return self.parse_output(completed.stdout)

    @staticmethod
    def parse_output(stdout: str) -> List[PackageRecord]:
        """Parse ``ConvertTo-Json`` output into package records.

        A single match is serialized as an object, several as a list.
        """
        text = stdout.strip()
        if not text:
            return []
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ExternalCallError(
                "Get-AppxPackage", f"unreadable output: {e}"
            ) from e

        if isinstance(raw, dict):
            raw = [raw]
        return [
            PackageRecord.from_query_row(row)
            for row in raw
            if isinstance(row, dict) and row.get("PackageFullName")
        ]
