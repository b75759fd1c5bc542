"""Data models shared by the package and element layers."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToggleState(IntEnum):
    """Current state of a toggle-able control (UIA ToggleState)."""

    OFF = 0
    ON = 1
    INDETERMINATE = 2


class PackageExecutionState(IntEnum):
    """Execution state of a packaged application (PACKAGE_EXECUTION_STATE)."""

    UNKNOWN = 0
    RUNNING = 1
    SUSPENDING = 2
    SUSPENDED = 3
    TERMINATED = 4


class PackageRecord(BaseModel):
    """One installed package as reported by the package query service."""

    model_config = ConfigDict(populate_by_name=True)

    package_full_name: str = Field(..., alias="PackageFullName")
    name: Optional[str] = Field(default=None, alias="Name")
    version: Optional[str] = Field(default=None, alias="Version")
    publisher: Optional[str] = Field(default=None, alias="Publisher")
    install_location: Optional[str] = Field(default=None, alias="InstallLocation")

    @classmethod
    def from_query_row(cls, row: Dict[str, Any]) -> "PackageRecord":
        return cls.model_validate(
            {k: (str(v) if v is not None else None) for k, v in row.items()}
        )


class ElementInfo(BaseModel):
    """Frozen property snapshot of an accessibility node."""

    model_config = ConfigDict(frozen=True)

    automation_id: str = ""
    control_type_programmatic_name: str = ""
    name: str = ""
    class_name: str = ""
    is_offscreen: bool = False
    is_enabled: bool = True


class ElementRect(BaseModel):
    """Frozen bounding rectangle snapshot of an accessibility node."""

    model_config = ConfigDict(frozen=True)

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
