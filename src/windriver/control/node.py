# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Accessibility node contract and its UI Automation implementation."""

from __future__ import annotations

import platform
from abc import ABC, abstractmethod
from typing import Any, Optional, Union, TYPE_CHECKING

from windriver.models import ElementInfo, ElementRect, ToggleState

if TYPE_CHECKING or platform.system() == "Windows":
    from pywinauto.controls.uiawrapper import UIAWrapper
    from pywinauto.uia_defines import NoPatternInterfaceError, get_elem_interface
    from pywinauto.uia_element_info import UIAElementInfo
else:
    UIAWrapper = Any
    UIAElementInfo = Any
    get_elem_interface = None
    NoPatternInterfaceError = None

CONTROL_TYPE_PREFIX = "ControlType."


class AccessibilityNode(ABC):
    """Define an interface for a live accessibility node."""

    @abstractmethod
    def snapshot_info(self) -> ElementInfo:
        pass

    @abstractmethod
    def snapshot_rect(self) -> ElementRect:
        pass

    @abstractmethod
    def try_get_toggle_state(self) -> Optional[ToggleState]:
        """Return the current toggle state, or None without a Toggle pattern."""
        pass


class UIANode(AccessibilityNode):
    """An accessibility node backed by a pywinauto UIA element."""

    def __init__(self, element: Union[UIAWrapper, UIAElementInfo]) -> None:
        self.element_info: UIAElementInfo = getattr(element, "element_info", element)

    def snapshot_info(self) -> ElementInfo:
        info = self.element_info
        com_element = info.element
        return ElementInfo(
            automation_id=info.automation_id or "",
            control_type_programmatic_name=(
                f"{CONTROL_TYPE_PREFIX}{info.control_type or 'Custom'}"
            ),
            name=info.name or "",
            class_name=info.class_name or "",
            is_offscreen=bool(com_element.CurrentIsOffscreen),
            is_enabled=bool(com_element.CurrentIsEnabled),
        )

    def snapshot_rect(self) -> ElementRect:
        rect = self.element_info.rectangle
        return ElementRect(
            x=int(rect.left),
            y=int(rect.top),
            width=int(rect.right - rect.left),
            height=int(rect.bottom - rect.top),
        )

    def try_get_toggle_state(self) -> Optional[ToggleState]:
        try:
            toggle = get_elem_interface(self.element_info.element, "Toggle")
        except NoPatternInterfaceError:
            return None
        return ToggleState(toggle.CurrentToggleState)
