"""Element layer: accessibility nodes and the cached element facade."""

from windriver.control.element import AutomationElementFacade
from windriver.control.node import AccessibilityNode, UIANode

__all__ = [
    "AccessibilityNode",
    "AutomationElementFacade",
    "UIANode",
]
