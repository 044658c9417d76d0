"""
================================================================================
Register Page Object (Async / Playwright)
================================================================================

Register Account screen of the storefront (``?route=account/register``).

Transitions:
    register_user          -> REGISTER (success or warning banner shown in place)
    click_continue         -> REGISTER
    click_login_page_link  -> LOGIN

Whether a submission succeeded is read back through get_success_message()
and get_warning_message(); asserting on it is up to the test.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import allure
from loguru import logger

from testsuites.ui_testing.framework.data_generator import DataGenerator
from testsuites.ui_testing.framework.locators import ByRole, BySelector, ByText, ByXPath
from testsuites.ui_testing.framework.page_base import PageBase, Screen

if TYPE_CHECKING:
    from testsuites.ui_testing.pages.login_page import LoginPage


SUCCESS_MESSAGE = "Your Account Has Been Created!"
DUPLICATE_EMAIL_WARNING = "E-Mail Address is already registered!"
PRIVACY_POLICY_WARNING = "Warning: You must agree to the Privacy Policy!"
PASSWORD_CONFIRM_ERROR = "Password confirmation does not match password!"

BANNER_TIMEOUT = 5000


def _field_error(field_name: str) -> ByXPath:
    return ByXPath(
        f'//input[@name="{field_name}"]/following-sibling::div[@class="text-danger"]',
        nth=0,
    )


@dataclass
class RegistrationData:
    """Values submitted through the registration form."""
    first_name: str
    last_name: str
    email: str
    telephone: str
    password: str
    password_confirm: Optional[str] = None
    subscribe_newsletter: bool = False

    def __post_init__(self):
        if self.password_confirm is None:
            self.password_confirm = self.password

    def __repr__(self) -> str:
        return (
            f"RegistrationData({self.first_name} {self.last_name}, {self.email}, "
            f"{self.telephone}, newsletter={self.subscribe_newsletter})"
        )

    @classmethod
    def random(cls, password_length: int = 8, **overrides) -> "RegistrationData":
        """Fresh registration data from DataGenerator; keyword overrides win."""
        password = DataGenerator.generate_random_password(password_length)
        values = dict(
            first_name=DataGenerator.generate_random_first_name(),
            last_name=DataGenerator.generate_random_last_name(),
            email=DataGenerator.generate_random_email(),
            telephone=DataGenerator.generate_random_phone(),
            password=password,
        )
        values.update(overrides)
        return cls(**values)


class RegisterPage(PageBase):
    """Registration page object (async)."""

    SCREEN = Screen.REGISTER
    ROUTE = "account/register"
    PAGE_TITLE = "Register Account"

    LOCATORS = {
        "first_name_input": ByRole("textbox", "First Name"),
        "last_name_input": ByRole("textbox", "Last Name"),
        "email_input": ByRole("textbox", "E-Mail"),
        "telephone_input": ByRole("textbox", "Telephone"),
        # "Password" also matches "Password Confirm"
        "password_input": ByRole("textbox", "Password", nth=0),
        "confirm_password_input": ByRole("textbox", "Password Confirm"),
        "newsletter_yes_radio": ByRole("radio", "Yes"),
        "newsletter_no_radio": ByRole("radio", "No"),
        "agree_checkbox": BySelector('[name="agree"]'),
        "continue_button": ByRole("button", "Continue"),
        "success_message": ByText(SUCCESS_MESSAGE, exact=True),
        "warning_message": BySelector(".alert.alert-danger.alert-dismissible"),
        "login_link": ByRole("link", "login page", exact=True),
        "first_name_error": _field_error("firstname"),
        "last_name_error": _field_error("lastname"),
        "email_error": _field_error("email"),
        "telephone_error": _field_error("telephone"),
        "password_error": _field_error("password"),
        "password_confirm_error": _field_error("confirm"),
    }

    TRANSITIONS = {
        "register_user": frozenset({Screen.REGISTER}),
        "click_continue": frozenset({Screen.REGISTER}),
        "click_login_page_link": frozenset({Screen.LOGIN}),
    }

    async def navigate_to_register(self) -> "RegisterPage":
        """Navigate directly to the register page."""
        return await self.open()

    # =========================================================================
    # Field actions
    # =========================================================================

    async def fill_first_name(self, first_name: str) -> None:
        await self.actions.fill(self.locator("first_name_input"), first_name)

    async def fill_last_name(self, last_name: str) -> None:
        await self.actions.fill(self.locator("last_name_input"), last_name)

    async def fill_email(self, email: str) -> None:
        await self.actions.fill(self.locator("email_input"), email)

    async def fill_telephone(self, telephone: str) -> None:
        await self.actions.fill(self.locator("telephone_input"), telephone)

    async def fill_password(self, password: str) -> None:
        await self.actions.fill(self.locator("password_input"), password, sensitive=True)

    async def fill_confirm_password(self, password: str) -> None:
        await self.actions.fill(self.locator("confirm_password_input"), password, sensitive=True)

    async def check_privacy_policy(self) -> None:
        await self.actions.click(self.locator("agree_checkbox"))

    async def is_privacy_policy_checked(self) -> bool:
        return await self.actions.is_checked(self.locator("agree_checkbox"))

    async def select_newsletter(self, option: str) -> None:
        """
        Select newsletter subscription.

        Args:
            option: "Yes" or "No"
        """
        if option not in ("Yes", "No"):
            raise ValueError(f"Newsletter option must be 'Yes' or 'No', got {option!r}")
        radio = "newsletter_yes_radio" if option == "Yes" else "newsletter_no_radio"
        await self.actions.click(self.locator(radio))

    async def clear_all_fields(self) -> None:
        for name in (
            "first_name_input",
            "last_name_input",
            "email_input",
            "telephone_input",
            "password_input",
            "confirm_password_input",
        ):
            await self.actions.clear(self.locator(name))

    # =========================================================================
    # Transition workflows
    # =========================================================================

    @allure.step("Click Continue")
    async def click_continue(self) -> "RegisterPage":
        await self.actions.click(self.locator("continue_button"))
        await self.wait_for_navigation_settled()
        return self._transition("click_continue", Screen.REGISTER)

    @allure.step("Register user {data}")
    async def register_user(
        self,
        data: RegistrationData,
        agree_to_policy: bool = True,
    ) -> "RegisterPage":
        """
        Fill the whole form and submit it.

        Args:
            data: Values to submit
            agree_to_policy: Tick the Privacy Policy checkbox before submitting

        Returns:
            This RegisterPage; read the success or warning banner afterwards.
        """
        logger.info(f"Registering user: {data!r}")
        await self.fill_first_name(data.first_name)
        await self.fill_last_name(data.last_name)
        await self.fill_email(data.email)
        await self.fill_telephone(data.telephone)
        await self.fill_password(data.password)
        await self.fill_confirm_password(data.password_confirm)
        await self.select_newsletter("Yes" if data.subscribe_newsletter else "No")

        if agree_to_policy:
            await self.check_privacy_policy()

        await self.actions.click(self.locator("continue_button"))
        await self.wait_for_navigation_settled()
        return self._transition("register_user", Screen.REGISTER)

    @allure.step("Navigate back to Login page")
    async def click_login_page_link(self) -> "LoginPage":
        await self.actions.click(self.locator("login_link"))
        await self.wait_for_navigation_settled()
        return self._transition("click_login_page_link", Screen.LOGIN)

    # =========================================================================
    # Screen queries
    # =========================================================================

    async def get_success_message(self) -> str:
        """Success banner text, or "" when absent."""
        text = await self.actions.get_text(self.locator("success_message"), BANNER_TIMEOUT)
        return text or ""

    async def get_warning_message(self) -> str:
        """Warning banner text, or "" when absent."""
        text = await self.actions.get_text(self.locator("warning_message"), BANNER_TIMEOUT)
        return text or ""

    async def _field_error_text(self, name: str) -> str:
        return await self.actions.get_text(self.locator(name)) or ""

    async def get_first_name_error(self) -> str:
        return await self._field_error_text("first_name_error")

    async def get_last_name_error(self) -> str:
        return await self._field_error_text("last_name_error")

    async def get_email_error(self) -> str:
        return await self._field_error_text("email_error")

    async def get_telephone_error(self) -> str:
        return await self._field_error_text("telephone_error")

    async def get_password_error(self) -> str:
        return await self._field_error_text("password_error")

    async def get_password_confirm_error(self) -> str:
        return await self._field_error_text("password_confirm_error")

    async def _input_type_is_password(self, name: str) -> bool:
        return await self.actions.get_attribute(self.locator(name), "type") == "password"

    async def is_password_masked(self) -> bool:
        return await self._input_type_is_password("password_input")

    async def is_password_confirm_masked(self) -> bool:
        return await self._input_type_is_password("confirm_password_input")

    async def get_password_value_attribute(self) -> Optional[str]:
        """Raw ``value`` attribute of the password input (not the live value)."""
        return await self.actions.get_attribute(self.locator("password_input"), "value")

    async def get_first_name_placeholder(self) -> Optional[str]:
        return await self.actions.get_attribute(self.locator("first_name_input"), "placeholder")

    async def get_last_name_placeholder(self) -> Optional[str]:
        return await self.actions.get_attribute(self.locator("last_name_input"), "placeholder")

    async def get_email_placeholder(self) -> Optional[str]:
        return await self.actions.get_attribute(self.locator("email_input"), "placeholder")

    async def get_telephone_placeholder(self) -> Optional[str]:
        return await self.actions.get_attribute(self.locator("telephone_input"), "placeholder")
