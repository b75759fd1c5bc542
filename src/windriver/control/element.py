"""AutomationElementFacade — a cached, read-only view of an accessibility node.

Properties fall into two groups, each captured from the node once and then
frozen: the info group (id, type, names, visibility, enabled) and the
bounding rectangle. Each group is captured on its own first access, so the
two snapshots may come from different instants. Call ``snapshot()`` to
capture both at one known point instead. ``selected`` is never cached.
"""

from __future__ import annotations

import logging
from functools import cached_property
from typing import Any, Dict

from windriver.control.node import CONTROL_TYPE_PREFIX, AccessibilityNode
from windriver.models import ElementInfo, ElementRect, ToggleState

logger = logging.getLogger(__name__)


class AutomationElementFacade:
    """Typed, cached accessors over an accessibility node."""

    def __init__(self, node: AccessibilityNode) -> None:
        self.node = node

    @cached_property
    def info(self) -> ElementInfo:
        info = self.node.snapshot_info()
        logger.debug(f"Captured element info: {info}")
        return info

    @cached_property
    def rect(self) -> ElementRect:
        rect = self.node.snapshot_rect()
        logger.debug(f"Captured element rect: {rect}")
        return rect

    @property
    def is_info_snapshotted(self) -> bool:
        return "info" in self.__dict__

    @property
    def is_rect_snapshotted(self) -> bool:
        return "rect" in self.__dict__

    def snapshot(self) -> "AutomationElementFacade":
        """Capture every group that has not been captured yet."""
        _ = self.info
        _ = self.rect
        return self

    @property
    def id(self) -> str:
        return self.info.automation_id

    @property
    def type_name(self) -> str:
        programmatic_name = self.info.control_type_programmatic_name
        if programmatic_name.startswith(CONTROL_TYPE_PREFIX):
            return programmatic_name[len(CONTROL_TYPE_PREFIX):]
        return programmatic_name

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def class_name(self) -> str:
        return self.info.class_name

    @property
    def visible(self) -> bool:
        return not self.info.is_offscreen

    @property
    def enabled(self) -> bool:
        return self.info.is_enabled

    @property
    def selected(self) -> bool:
        """Whether a toggle-able control is checked, read live on every call."""
        state = self.node.try_get_toggle_state()
        if state is None:
            return False
        return state != ToggleState.OFF

    @property
    def x(self) -> int:
        return self.rect.x

    @property
    def y(self) -> int:
        return self.rect.y

    @property
    def width(self) -> int:
        return self.rect.width

    @property
    def height(self) -> int:
        return self.rect.height

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type_name,
            "name": self.name,
            "class_name": self.class_name,
            "visible": self.visible,
            "enabled": self.enabled,
            "selected": self.selected,
            "rect": [self.x, self.y, self.width, self.height],
        }

    def __repr__(self) -> str:
        if self.is_info_snapshotted:
            return f"AutomationElementFacade({self.type_name} {self.name!r})"
        return "AutomationElementFacade(<not captured>)"
