"""
================================================================================
Declarative Locators
================================================================================

Tagged locator variants used by Page Objects to describe *where* an element
lives without holding on to a resolved handle.

Every variant is re-resolved against the current page on each use, so a
Page Object stays valid across navigations and re-renders.

Variants:
    - ByRole: accessible role + accessible name (preferred)
    - BySelector: raw CSS selector
    - ByXPath: raw XPath expression
    - ByText: visible text match

Plain strings are accepted anywhere a locator is and are treated as CSS.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Optional, Union

from playwright.async_api import Locator, Page


@dataclass(frozen=True)
class ByRole:
    """Element located by ARIA role and accessible name."""
    role: str
    name: Optional[str] = None
    exact: bool = False
    nth: Optional[int] = None

    def __str__(self) -> str:
        return f"role={self.role}[name='{self.name}']"


@dataclass(frozen=True)
class BySelector:
    """Element located by CSS selector."""
    selector: str
    nth: Optional[int] = None

    def __str__(self) -> str:
        return self.selector


@dataclass(frozen=True)
class ByXPath:
    """Element located by XPath expression."""
    xpath: str
    nth: Optional[int] = None

    def __str__(self) -> str:
        return f"xpath={self.xpath}"


@dataclass(frozen=True)
class ByText:
    """Element located by its visible text."""
    text: str
    exact: bool = False
    nth: Optional[int] = None

    def __str__(self) -> str:
        return f"text='{self.text}'"


LocatorSpec = Union[ByRole, BySelector, ByXPath, ByText]

# Anything an action accepts as a target
Target = Union[LocatorSpec, str]


def _narrow(locator: Locator, nth: Optional[int]) -> Locator:
    return locator if nth is None else locator.nth(nth)


@singledispatch
def resolve(target: Target, page: Page) -> Locator:
    """
    Resolve a target into a fresh Playwright Locator on ``page``.

    Args:
        target: Locator variant or CSS selector string
        page: Playwright Page to resolve against

    Returns:
        Playwright Locator (lazy, not yet bound to a DOM node)
    """
    raise TypeError(f"Unsupported locator target: {target!r}")


@resolve.register
def _(target: str, page: Page) -> Locator:
    return page.locator(target)


@resolve.register
def _(target: BySelector, page: Page) -> Locator:
    return _narrow(page.locator(target.selector), target.nth)


@resolve.register
def _(target: ByXPath, page: Page) -> Locator:
    return _narrow(page.locator(f"xpath={target.xpath}"), target.nth)


@resolve.register
def _(target: ByRole, page: Page) -> Locator:
    if target.name is None:
        locator = page.get_by_role(target.role)
    else:
        locator = page.get_by_role(target.role, name=target.name, exact=target.exact)
    return _narrow(locator, target.nth)


@resolve.register
def _(target: ByText, page: Page) -> Locator:
    return _narrow(page.get_by_text(target.text, exact=target.exact), target.nth)


def describe(target: Target) -> str:
    """Human-readable description of a target for logs and reports."""
    return str(target)


__all__ = [
    "ByRole",
    "BySelector",
    "ByXPath",
    "ByText",
    "LocatorSpec",
    "Target",
    "resolve",
    "describe",
]
