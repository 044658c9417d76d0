"""
================================================================================
UI Automation Exceptions
================================================================================

Error taxonomy shared by the interaction layer, Page Objects and fixtures.

State-changing actions (fill/click/clear) raise these; read-only queries
never do.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional


class UIAutomationError(Exception):
    """Base class for all UI automation failures."""
    pass


class ElementNotFoundError(UIAutomationError):
    """Raised when a target resolves to zero matches after the timeout."""

    def __init__(self, target: str, timeout: Optional[int] = None):
        self.target = target
        self.timeout = timeout
        message = f"Element not found: {target}"
        if timeout is not None:
            message += f" (waited {timeout}ms)"
        super().__init__(message)


class ElementNotInteractableError(UIAutomationError):
    """Raised when a target exists but cannot accept the requested action."""

    def __init__(self, target: str, action: str, reason: str = ""):
        self.target = target
        self.action = action
        self.reason = reason
        message = f"Element not interactable for {action}: {target}"
        if reason:
            message += f" - {reason}"
        super().__init__(message)


class FixtureAuthenticationFailed(UIAutomationError):
    """Raised when the session post-condition is false after login."""
    pass


class InvalidTransitionError(UIAutomationError):
    """Raised when a workflow tries to reach a screen its table does not allow."""
    pass


__all__ = [
    "UIAutomationError",
    "ElementNotFoundError",
    "ElementNotInteractableError",
    "FixtureAuthenticationFailed",
    "InvalidTransitionError",
]
