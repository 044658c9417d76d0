"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Route navigation relative to the storefront base URL
    - Element interaction through ElementActions
    - Explicit screen state machine (Screen x workflow -> Screen)
    - Wait/settle utilities
    - Failure capture for Allure

A Page Object never outlives the screen it models: a workflow that leaves
the screen returns a new Page Object built through ``_transition()``, which
only allows destinations listed in the class ``TRANSITIONS`` table.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
import re
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import ClassVar, Dict, FrozenSet, Optional, Type, TypeVar

import allure
from loguru import logger
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .element_actions import ElementActions
from .exceptions import InvalidTransitionError
from .locators import Target


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

P = TypeVar("P", bound="BasePage")


class Screen(Enum):
    """Logical screens of the storefront account area."""
    LOGIN = "login"
    REGISTER = "register"
    HOME = "home"
    FORGOTTEN_PASSWORD = "forgotten_password"


# Screen -> Page Object class, filled in as page classes are defined
SCREEN_REGISTRY: Dict[Screen, Type["BasePage"]] = {}


class BasePage:
    """
    Base class for all page objects.

    Subclasses declare:
        SCREEN: the Screen they model
        ROUTE: OpenCart route (appended as ?route=...)
        PAGE_TITLE: expected document title
        LOCATORS: semantic field name -> Locator variant
        TRANSITIONS: workflow name -> screens it may lead to

    Usage:
        class LoginPage(BasePage):
            SCREEN = Screen.LOGIN
            ROUTE = "account/login"
            TRANSITIONS = {"do_login": frozenset({Screen.HOME, Screen.LOGIN})}

            async def do_login(self, email, password):
                ...
                return self._transition("do_login", Screen.HOME)
    """

    SCREEN: ClassVar[Optional[Screen]] = None
    ROUTE: ClassVar[str] = ""
    PAGE_TITLE: ClassVar[str] = ""
    LOCATORS: ClassVar[Dict[str, Target]] = {}
    TRANSITIONS: ClassVar[Dict[str, FrozenSet[Screen]]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.SCREEN is not None:
            SCREEN_REGISTRY[cls.SCREEN] = cls

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        actions: Optional[ElementActions] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Storefront base URL (defaults to UI_BASE_URL)
            actions: Shared ElementActions; a new one is created if omitted
        """
        self.page = page
        if not base_url:
            base_url = os.getenv("UI_BASE_URL", "")
        self.base_url = base_url.rstrip("/")
        self.actions = actions or ElementActions(page)
        self.locators: Dict[str, Target] = dict(self.LOCATORS)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(screen={self.SCREEN}, url={self.base_url!r})"

    def locator(self, field_name: str) -> Target:
        """Declarative locator for a semantic field name."""
        try:
            return self.locators[field_name]
        except KeyError:
            raise KeyError(
                f"{self.__class__.__name__} has no locator named '{field_name}'"
            ) from None

    @property
    def url(self) -> str:
        """Full URL of this screen."""
        if not self.ROUTE:
            return self.base_url
        return f"{self.base_url}?route={self.ROUTE}"

    # =========================================================================
    # Navigation
    # =========================================================================

    async def open(self: P, wait_for: str = "networkidle") -> P:
        """
        Navigate directly to this screen.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Open {self.__class__.__name__}"):
            await self.page.goto(self.url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url}")
        return self

    def _transition(self, workflow: str, destination: Screen) -> "BasePage":
        """
        Build the Page Object for ``destination`` after ``workflow`` ran.

        Staying on the same screen returns ``self``; any other destination
        yields a fresh instance sharing the page and actions.

        Raises:
            InvalidTransitionError: destination not allowed for this workflow
        """
        allowed = self.TRANSITIONS.get(workflow)
        if allowed is None or destination not in allowed:
            raise InvalidTransitionError(
                f"{self.SCREEN} --{workflow}--> {destination} is not a declared transition"
            )

        if destination is self.SCREEN:
            logger.debug(f"{workflow}: stayed on {destination.value}")
            return self

        page_cls = SCREEN_REGISTRY[destination]
        logger.debug(f"{workflow}: {self.SCREEN.value} -> {destination.value}")
        return page_cls(self.page, self.base_url, self.actions)

    # =========================================================================
    # Wait Utilities
    # =========================================================================

    async def wait_for_page_load(
        self,
        state: str = "networkidle",
        timeout: int = 15000,
    ) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Timeout in milliseconds
        """
        await self.page.wait_for_load_state(state, timeout=timeout)

    async def wait_for_navigation_settled(self, timeout: int = 15000) -> None:
        """
        Best-effort wait for network idle after a navigating action.

        Long-polling third-party scripts can keep the network busy; a timeout
        here is logged and the workflow continues with the page as loaded.
        """
        try:
            await self.wait_for_page_load("networkidle", timeout)
        except PlaywrightTimeoutError:
            logger.warning(f"Network did not go idle within {timeout}ms on {self.page.url}")

    async def settle(self, milliseconds: int) -> None:
        """Explicit delay letting server-side state settle before the next read."""
        if milliseconds > 0:
            await self.page.wait_for_timeout(milliseconds)

    # =========================================================================
    # Page Queries
    # =========================================================================

    async def get_page_title(self) -> str:
        return await self.page.title()

    async def get_page_url(self) -> str:
        return self.page.url

    def is_on_route(self, route: Optional[str] = None) -> bool:
        """True if the current URL carries ``route`` (defaults to ROUTE)."""
        return (route or self.ROUTE) in (self.page.url or "")

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        # Parametrized test ids carry brackets and slashes
        safe_name = re.sub(r"[^\w.-]+", "_", name)
        filepath = SCREENSHOT_DIR / f"{safe_name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """Attach a screenshot and the current URL to the Allure report."""
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )


__all__ = [
    "BasePage",
    "PageBase",
    "Screen",
    "SCREEN_REGISTRY",
]

PageBase = BasePage
