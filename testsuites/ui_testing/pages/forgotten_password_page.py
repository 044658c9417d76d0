"""
================================================================================
Forgotten Password Page Object (Async / Playwright)
================================================================================

Reached from the login screen via the "Forgotten Password" link.

================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import allure

from testsuites.ui_testing.framework.locators import ByRole
from testsuites.ui_testing.framework.page_base import PageBase, Screen

if TYPE_CHECKING:
    from testsuites.ui_testing.pages.login_page import LoginPage


class ForgottenPasswordPage(PageBase):
    """Forgotten password page object (async)."""

    SCREEN = Screen.FORGOTTEN_PASSWORD
    ROUTE = "account/forgotten"
    PAGE_TITLE = "Forgot Your Password?"

    LOCATORS = {
        "email_input": ByRole("textbox", "E-Mail Address"),
        "back_button": ByRole("link", "Back"),
    }

    TRANSITIONS = {
        "back_to_login": frozenset({Screen.LOGIN}),
    }

    def is_loaded(self) -> bool:
        """True when the browser is on the forgotten-password route."""
        return self.is_on_route()

    async def is_email_input_visible(self) -> bool:
        return await self.actions.is_visible(self.locator("email_input"), 2000)

    @allure.step("Back to Login page")
    async def back_to_login(self) -> "LoginPage":
        await self.actions.click(self.locator("back_button"))
        await self.wait_for_navigation_settled()
        return self._transition("back_to_login", Screen.LOGIN)
