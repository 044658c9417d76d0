"""
================================================================================
Home Page Object (Async / Playwright)
================================================================================

"My Account" screen reached after a successful login.

Logout is an ordinary transition back to LOGIN; the Page Object itself is
simply discarded afterwards.

================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import allure
from loguru import logger

from testsuites.ui_testing.framework.element_actions import ClickOptions
from testsuites.ui_testing.framework.locators import BySelector
from testsuites.ui_testing.framework.page_base import PageBase, Screen

if TYPE_CHECKING:
    from testsuites.ui_testing.pages.login_page import LoginPage


class HomePage(PageBase):
    """Authenticated account page object (async)."""

    SCREEN = Screen.HOME
    ROUTE = "account/account"
    PAGE_TITLE = "My Account"

    LOCATORS = {
        "logout_link": BySelector("a:has-text('Logout')"),
        "sidebar_logout_link": BySelector("a.list-group-item:has-text('Logout')"),
    }

    TRANSITIONS = {
        "logout": frozenset({Screen.LOGIN}),
    }

    @allure.step("Check user is logged in")
    async def is_user_logged_in(self) -> bool:
        """
        True when the storefront recognises the session.

        Requires the "My Account" title and at least one Logout link, which
        OpenCart only renders for authenticated customers.
        """
        title = await self.get_page_title()
        has_logout = await self.actions.count(self.locator("logout_link")) > 0
        logger.debug(f"Home check: title='{title}', logout link present={has_logout}")
        return self.PAGE_TITLE in title and has_logout

    @allure.step("Logout")
    async def logout(self) -> "LoginPage":
        """Log out, then land on the login screen."""
        # The header copy of the link sits in a collapsed dropdown
        await self.actions.click(self.locator("sidebar_logout_link"), ClickOptions(force=True))
        await self.wait_for_navigation_settled()
        login_page = self._transition("logout", Screen.LOGIN)
        return await login_page.open()
