"""
================================================================================
Browser Manager
================================================================================

Browser provisioning for the UI test run.

The interaction layer never launches browsers itself; this manager is used
only by the pytest fixtures that hand a Page to each test.

Features:
    - Browser type / channel / headless / slow-mo from configuration
    - One isolated context per test (cookies, storage)
    - Default action and navigation timeouts applied per context
    - Optional site-wide HTTP basic auth

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from .config_loader import ConfigLoader, Credentials


@dataclass
class BrowserSettings:
    """Launch and context settings for one test run."""
    browser_type: str = "chromium"
    channel: Optional[str] = None
    headless: bool = True
    slow_mo: int = 0
    action_timeout: int = 15000
    navigation_timeout: int = 30000
    viewport: Optional[Dict[str, int]] = field(
        default_factory=lambda: {"width": 1920, "height": 1080}
    )
    args: List[str] = field(default_factory=list)

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "BrowserSettings":
        """Read the ``browser.*`` section (env vars such as BROWSER_HEADLESS win)."""
        config = config or ConfigLoader()
        defaults = cls()
        return cls(
            browser_type=config.get("browser.type", defaults.browser_type),
            channel=config.get("browser.channel", defaults.channel),
            headless=config.get("browser.headless", defaults.headless),
            slow_mo=config.get("browser.slow_mo", defaults.slow_mo),
            action_timeout=config.get("browser.action_timeout", defaults.action_timeout),
            navigation_timeout=config.get(
                "browser.navigation_timeout", defaults.navigation_timeout
            ),
            viewport=config.get("browser.viewport", defaults.viewport),
            args=list(config.get("browser.args", []) or []),
        )


class BrowserManager:
    """
    Manages the browser instance and per-test contexts.

    Usage:
        async with BrowserManager(BrowserSettings(headless=False)) as manager:
            page = await manager.new_page()
            await page.goto("https://example.com")
    """

    def __init__(self, settings: Optional[BrowserSettings] = None):
        self.settings = settings or BrowserSettings()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()

        if self.settings.browser_type == "firefox":
            browser_launcher = self._playwright.firefox
        elif self.settings.browser_type == "webkit":
            browser_launcher = self._playwright.webkit
        else:
            browser_launcher = self._playwright.chromium

        launch_options: Dict[str, Any] = {
            "headless": self.settings.headless,
            "slow_mo": self.settings.slow_mo,
            "args": self.settings.args,
        }
        if self.settings.channel:
            launch_options["channel"] = self.settings.channel

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.settings.browser_type} "
            f"(headless={self.settings.headless}, slow_mo={self.settings.slow_mo})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.warning(f"Failed to close browser context: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(
        self,
        http_credentials: Optional[Credentials] = None,
        **options: Any,
    ) -> BrowserContext:
        """
        Create new isolated browser context.

        Args:
            http_credentials: Site-wide HTTP basic auth, if the storefront needs it
            **options: Additional context options
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options: Dict[str, Any] = {
            "viewport": self.settings.viewport,
            "ignore_https_errors": True,
            **options,
        }
        if http_credentials is not None:
            context_options["http_credentials"] = {
                "username": http_credentials.username,
                "password": http_credentials.password,
            }

        context = await self._browser.new_context(**context_options)
        context.set_default_timeout(self.settings.action_timeout)
        context.set_default_navigation_timeout(self.settings.navigation_timeout)
        self._contexts.append(context)
        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """Create new page in a new or existing context."""
        if context is None:
            context = await self.new_context(**context_options)
        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser


__all__ = [
    "BrowserManager",
    "BrowserSettings",
]
