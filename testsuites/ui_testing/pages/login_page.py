"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Account Login screen of the storefront (``?route=account/login``).

Transitions:
    do_login                     -> HOME (accepted) | LOGIN (warning shown)
    click_login_button           -> LOGIN (empty credentials)
    login_with_keyboard          -> HOME | LOGIN
    navigate_to_register_page    -> REGISTER
    navigate_to_continue_button  -> REGISTER
    navigate_to_forgot_password  -> FORGOTTEN_PASSWORD

================================================================================
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Optional, Union

import allure
from loguru import logger

from testsuites.ui_testing.framework.element_actions import ClickOptions
from testsuites.ui_testing.framework.locators import ByRole, BySelector, ByText
from testsuites.ui_testing.framework.page_base import PageBase, Screen

if TYPE_CHECKING:
    from testsuites.ui_testing.pages.forgotten_password_page import ForgottenPasswordPage
    from testsuites.ui_testing.pages.home_page import HomePage
    from testsuites.ui_testing.pages.register_page import RegisterPage


NO_MATCH_WARNING = "Warning: No match for E-Mail Address and/or Password."
LOCKOUT_WARNING = "Warning: Your account has exceeded allowed number of login attempts."
# Either server message counts as a rejected login
INVALID_LOGIN_PATTERN = re.compile(
    r"Warning: (No match for E-Mail Address and/or Password\.|"
    r"Your account has exceeded allowed number of login attempts\.)"
)

HOME_ROUTE = "account/account"

SUBMIT_OPTIONS = ClickOptions(force=True, timeout=5000)


class LoginPage(PageBase):
    """Login page object (async)."""

    SCREEN = Screen.LOGIN
    ROUTE = "account/login"
    PAGE_TITLE = "Account Login"

    LOCATORS = {
        "email_input": ByRole("textbox", "E-Mail Address"),
        "password_input": ByRole("textbox", "Password"),
        "login_button": BySelector('input[type="submit"][value="Login"]'),
        "warning_message": BySelector(".alert.alert-danger.alert-dismissible"),
        "register_link": ByText("Register", exact=True),
        "forgot_password_link": ByRole("link", "Forgotten Password"),
        "continue_button": ByRole("link", "Continue"),
    }

    TRANSITIONS = {
        "do_login": frozenset({Screen.HOME, Screen.LOGIN}),
        "click_login_button": frozenset({Screen.LOGIN}),
        "login_with_keyboard": frozenset({Screen.HOME, Screen.LOGIN}),
        "multiple_login_attempts": frozenset({Screen.HOME, Screen.LOGIN}),
        "navigate_to_register_page": frozenset({Screen.REGISTER}),
        "navigate_to_continue_button": frozenset({Screen.REGISTER}),
        "navigate_to_forgot_password": frozenset({Screen.FORGOTTEN_PASSWORD}),
    }

    async def go_to_login_page(self) -> "LoginPage":
        """Navigate to the login page."""
        return await self.open()

    # =========================================================================
    # Transition workflows
    # =========================================================================

    async def do_login(self, email: str, password: str) -> Union["HomePage", "LoginPage"]:
        """
        Submit the login form.

        Returns:
            HomePage when the storefront accepted the credentials,
            otherwise this LoginPage (warning message now populated).
        """
        with allure.step(f"Login (email={email})"):
            await self.fill_email_and_password(email, password)
            await self.actions.click(self.locator("login_button"), SUBMIT_OPTIONS)
            return await self._login_outcome("do_login")

    @allure.step("Click login without credentials")
    async def click_login_button(self) -> "LoginPage":
        """Press Login without filling anything."""
        await self.actions.click(self.locator("login_button"), SUBMIT_OPTIONS)
        await self.wait_for_navigation_settled()
        return self._transition("click_login_button", Screen.LOGIN)

    async def login_with_keyboard(
        self, email: str, password: str
    ) -> Union["HomePage", "LoginPage"]:
        """Type the credentials and submit with Tab/Enter only."""
        with allure.step(f"Login via keyboard (email={email})"):
            await self.actions.focus(self.locator("email_input"))
            await self.actions.type_keys(email)
            await self.actions.press_key("Tab")
            await self.actions.type_keys(password)
            await self.actions.press_key("Enter")
            return await self._login_outcome("login_with_keyboard")

    async def multiple_login_attempts(
        self,
        email: str,
        password: str,
        attempts: int,
        settle_ms: int = 500,
    ) -> Union["HomePage", "LoginPage"]:
        """
        Submit the same credentials ``attempts`` times.

        Each attempt is followed by ``settle_ms`` so server-side failure
        counters are updated before the next one. Stops early if an attempt
        leaves the login screen.
        """
        current: Union["HomePage", "LoginPage"] = self
        with allure.step(f"Repeat login {attempts}x"):
            for attempt in range(1, max(attempts, 0) + 1):
                logger.info(f"Login attempt {attempt}/{attempts}")
                current = await self.do_login(email, password)
                await self.settle(settle_ms)
                if current is not self:
                    break
        destination = Screen.LOGIN if current is self else Screen.HOME
        return self._transition("multiple_login_attempts", destination)

    @allure.step("Navigate to Register page")
    async def navigate_to_register_page(self) -> "RegisterPage":
        # "Register" appears in the header dropdown first; the second is the sidebar link
        await self.actions.click(
            self.locator("register_link"), ClickOptions(force=True), occurrence_index=1
        )
        await self.wait_for_navigation_settled()
        return self._transition("navigate_to_register_page", Screen.REGISTER)

    @allure.step("Navigate to Register page via Continue")
    async def navigate_to_continue_button(self) -> "RegisterPage":
        await self.actions.click(self.locator("continue_button"), ClickOptions(force=True))
        await self.wait_for_navigation_settled()
        return self._transition("navigate_to_continue_button", Screen.REGISTER)

    @allure.step("Navigate to Forgotten Password page")
    async def navigate_to_forgot_password(self) -> "ForgottenPasswordPage":
        await self.actions.click(
            self.locator("forgot_password_link"), ClickOptions(force=True), occurrence_index=1
        )
        await self.wait_for_navigation_settled()
        return self._transition("navigate_to_forgot_password", Screen.FORGOTTEN_PASSWORD)

    async def _login_outcome(self, workflow: str) -> Union["HomePage", "LoginPage"]:
        await self.wait_for_navigation_settled()
        if HOME_ROUTE in (self.page.url or ""):
            return self._transition(workflow, Screen.HOME)
        logger.info(f"Login rejected, still on {self.page.url}")
        return self._transition(workflow, Screen.LOGIN)

    # =========================================================================
    # Screen queries
    # =========================================================================

    async def fill_email_and_password(self, email: str, password: str) -> None:
        await self.actions.fill(self.locator("email_input"), email)
        await self.actions.fill(self.locator("password_input"), password, sensitive=True)

    async def get_invalid_login_message(self) -> Optional[str]:
        """Warning banner text, or None if no warning appeared."""
        message = await self.actions.get_text(self.locator("warning_message"))
        logger.info(f"invalid login warning message: {message}")
        return message

    async def is_warning_message_visible(self) -> bool:
        return await self.actions.is_visible(self.locator("warning_message"), 0)

    async def is_forgot_password_link_visible(self) -> bool:
        return await self.actions.is_visible(self.locator("forgot_password_link"), 0)

    async def is_continue_button_visible(self) -> bool:
        return await self.actions.is_visible(self.locator("continue_button"), 0)

    async def get_email_placeholder(self) -> Optional[str]:
        return await self.actions.get_attribute(self.locator("email_input"), "placeholder")

    async def get_password_placeholder(self) -> Optional[str]:
        return await self.actions.get_attribute(self.locator("password_input"), "placeholder")

    async def is_password_masked(self) -> bool:
        """True when the password input renders as type=password."""
        input_type = await self.actions.get_attribute(self.locator("password_input"), "type")
        return input_type == "password"

    async def get_password_value_attribute(self) -> Optional[str]:
        """Raw ``value`` attribute of the password input (not the live value)."""
        return await self.actions.get_attribute(self.locator("password_input"), "value")

    async def get_email_value(self) -> Optional[str]:
        return await self.actions.get_input_value(self.locator("email_input"))

    async def get_password_value(self) -> Optional[str]:
        return await self.actions.get_input_value(self.locator("password_input"))

    async def is_login_button_enabled(self) -> bool:
        return await self.actions.is_enabled(self.locator("login_button"))

    async def are_core_elements_visible(self) -> bool:
        """Email, password, login button and forgotten-password link are all shown."""
        for name in ("email_input", "password_input", "login_button", "forgot_password_link"):
            if not await self.actions.is_visible(self.locator(name), 0):
                logger.warning(f"Login page element not visible: {name}")
                return False
        return True
