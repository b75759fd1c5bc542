"""Package control surface — lifecycle operations on an installed package.

``PackageControlSurface`` is the capability interface the lifecycle
controller talks to. ``PackageDebugSettings`` binds it to the
``IPackageDebugSettings`` COM object; all native declarations live here.
"""

from __future__ import annotations

import logging
import platform
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, TYPE_CHECKING

from windriver.errors import ExternalCallError
from windriver.models import PackageExecutionState

if TYPE_CHECKING or platform.system() == "Windows":
    from ctypes import POINTER, c_int, c_ulong, c_void_p, c_wchar_p

    import comtypes
    from comtypes import COMMETHOD, GUID, HRESULT, COMError, IUnknown

    CLSID_PackageDebugSettings = GUID("{B1AEC16F-2383-4852-B0E9-8F0B1DC66B4D}")

    class IPackageDebugSettings(IUnknown):
        _iid_ = GUID("{F27C3930-8029-4AD1-94E3-3DBA417810C1}")
        _methods_ = [
            COMMETHOD(
                [], HRESULT, "EnableDebugging",
                (["in"], c_wchar_p, "packageFullName"),
                (["in"], c_wchar_p, "debuggerCommandLine"),
                (["in"], c_void_p, "environment"),
            ),
            COMMETHOD(
                [], HRESULT, "DisableDebugging",
                (["in"], c_wchar_p, "packageFullName"),
            ),
            COMMETHOD([], HRESULT, "Suspend", (["in"], c_wchar_p, "packageFullName")),
            COMMETHOD([], HRESULT, "Resume", (["in"], c_wchar_p, "packageFullName")),
            COMMETHOD(
                [], HRESULT, "TerminateAllProcesses",
                (["in"], c_wchar_p, "packageFullName"),
            ),
            COMMETHOD([], HRESULT, "SetTargetSessionId", (["in"], c_ulong, "sessionId")),
            COMMETHOD(
                [], HRESULT, "EnumerateBackgroundTasks",
                (["in"], c_wchar_p, "packageFullName"),
                (["out"], POINTER(c_ulong), "taskCount"),
                (["out"], POINTER(c_void_p), "taskIds"),
                (["out"], POINTER(c_void_p), "taskNames"),
            ),
            COMMETHOD([], HRESULT, "ActivateBackgroundTask", (["in"], c_void_p, "taskId")),
            COMMETHOD(
                [], HRESULT, "StartServicing",
                (["in"], c_wchar_p, "packageFullName"),
            ),
            COMMETHOD(
                [], HRESULT, "StopServicing",
                (["in"], c_wchar_p, "packageFullName"),
            ),
            COMMETHOD(
                [], HRESULT, "StartSessionRedirection",
                (["in"], c_wchar_p, "packageFullName"),
                (["in"], c_ulong, "sessionId"),
            ),
            COMMETHOD(
                [], HRESULT, "StopSessionRedirection",
                (["in"], c_wchar_p, "packageFullName"),
            ),
            COMMETHOD(
                [], HRESULT, "GetPackageExecutionState",
                (["in"], c_wchar_p, "packageFullName"),
                (["out"], POINTER(c_int), "packageExecutionState"),
            ),
            COMMETHOD(
                [], HRESULT, "RegisterForPackageStateChanges",
                (["in"], c_wchar_p, "packageFullName"),
                (["in"], c_void_p, "pPackageExecutionStateChangeNotification"),
                (["out"], POINTER(c_ulong), "pdwCookie"),
            ),
            COMMETHOD(
                [], HRESULT, "UnregisterForPackageStateChanges",
                (["in"], c_ulong, "dwCookie"),
            ),
        ]
else:
    comtypes = None
    COMError = ()
    CLSID_PackageDebugSettings = None
    IPackageDebugSettings = Any

logger = logging.getLogger(__name__)


class PackageControlSurface(ABC):
    """Define an interface for package lifecycle control.

    Only ``terminate_all_processes`` is required; the remaining slots raise
    ``NotImplementedError`` unless an implementation provides them.
    """

    @abstractmethod
    def terminate_all_processes(self, package_full_name: str) -> None:
        pass

    def suspend(self, package_full_name: str) -> None:
        raise NotImplementedError(self._unsupported("suspend"))

    def resume(self, package_full_name: str) -> None:
        raise NotImplementedError(self._unsupported("resume"))

    def enable_debugging(
        self,
        package_full_name: str,
        debugger_command_line: Optional[str] = None,
        environment: Optional[int] = None,
    ) -> None:
        raise NotImplementedError(self._unsupported("enable_debugging"))

    def disable_debugging(self, package_full_name: str) -> None:
        raise NotImplementedError(self._unsupported("disable_debugging"))

    def start_servicing(self, package_full_name: str) -> None:
        raise NotImplementedError(self._unsupported("start_servicing"))

    def stop_servicing(self, package_full_name: str) -> None:
        raise NotImplementedError(self._unsupported("stop_servicing"))

    def set_target_session_id(self, session_id: int) -> None:
        raise NotImplementedError(self._unsupported("set_target_session_id"))

    def start_session_redirection(
        self, package_full_name: str, session_id: int
    ) -> None:
        raise NotImplementedError(self._unsupported("start_session_redirection"))

    def stop_session_redirection(self, package_full_name: str) -> None:
        raise NotImplementedError(self._unsupported("stop_session_redirection"))

    def get_execution_state(self, package_full_name: str) -> PackageExecutionState:
        raise NotImplementedError(self._unsupported("get_execution_state"))

    def register_for_state_changes(
        self, package_full_name: str, notification: Any
    ) -> int:
        raise NotImplementedError(self._unsupported("register_for_state_changes"))

    def unregister_for_state_changes(self, cookie: int) -> None:
        raise NotImplementedError(self._unsupported("unregister_for_state_changes"))

    def _unsupported(self, operation: str) -> str:
        return f"{self.__class__.__name__} does not support {operation}"


class PackageDebugSettings(PackageControlSurface):
    """Control surface backed by the ``IPackageDebugSettings`` COM object."""

    def __init__(self, api: Optional[IPackageDebugSettings] = None) -> None:
        self._api = api

    @property
    def api(self) -> IPackageDebugSettings:
        if self._api is None:
            if comtypes is None:
                raise ExternalCallError(
                    "PackageDebugSettings", "only available on Windows"
                )
            self._api = comtypes.CoCreateInstance(
                CLSID_PackageDebugSettings,
                interface=IPackageDebugSettings,
                clsctx=comtypes.CLSCTX_INPROC_SERVER,
            )
        return self._api

    def _call(self, operation: str, method: Callable[..., Any], *args) -> Any:
        logger.debug(f"IPackageDebugSettings::{operation}{args}")
        try:
            return method(*args)
        except COMError as e:
            hresult = e.hresult & 0xFFFFFFFF
            raise ExternalCallError(
                operation, f"{e.text or e} (HRESULT 0x{hresult:08X})", hresult=hresult
            ) from e

    def terminate_all_processes(self, package_full_name: str) -> None:
        self._call(
            "TerminateAllProcesses", self.api.TerminateAllProcesses, package_full_name
        )

    def suspend(self, package_full_name: str) -> None:
        self._call("Suspend", self.api.Suspend, package_full_name)

    def resume(self, package_full_name: str) -> None:
        self._call("Resume", self.api.Resume, package_full_name)

    def enable_debugging(
        self,
        package_full_name: str,
        debugger_command_line: Optional[str] = None,
        environment: Optional[int] = None,
    ) -> None:
        self._call(
            "EnableDebugging",
            self.api.EnableDebugging,
            package_full_name,
            debugger_command_line,
            environment,
        )

    def disable_debugging(self, package_full_name: str) -> None:
        self._call("DisableDebugging", self.api.DisableDebugging, package_full_name)

    def start_servicing(self, package_full_name: str) -> None:
        self._call("StartServicing", self.api.StartServicing, package_full_name)

    def stop_servicing(self, package_full_name: str) -> None:
        self._call("StopServicing", self.api.StopServicing, package_full_name)

    def set_target_session_id(self, session_id: int) -> None:
        self._call("SetTargetSessionId", self.api.SetTargetSessionId, session_id)

    def start_session_redirection(
        self, package_full_name: str, session_id: int
    ) -> None:
        self._call(
            "StartSessionRedirection",
            self.api.StartSessionRedirection,
            package_full_name,
            session_id,
        )

    def stop_session_redirection(self, package_full_name: str) -> None:
        self._call(
            "StopSessionRedirection",
            self.api.StopSessionRedirection,
            package_full_name,
        )

    def get_execution_state(self, package_full_name: str) -> PackageExecutionState:
        state = self._call(
            "GetPackageExecutionState",
            self.api.GetPackageExecutionState,
            package_full_name,
        )
        try:
            return PackageExecutionState(state)
        except ValueError:
            return PackageExecutionState.UNKNOWN

    def register_for_state_changes(
        self, package_full_name: str, notification: Any
    ) -> int:
        return self._call(
            "RegisterForPackageStateChanges",
            self.api.RegisterForPackageStateChanges,
            package_full_name,
            notification,
        )

    def unregister_for_state_changes(self, cookie: int) -> None:
        self._call(
            "UnregisterForPackageStateChanges",
            self.api.UnregisterForPackageStateChanges,
            cookie,
        )
