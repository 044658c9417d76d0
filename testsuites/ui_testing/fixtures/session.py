"""
================================================================================
Authenticated Session Bootstrap
================================================================================

Turns a fresh Page into an authenticated HomePage before a dependent test
body runs.

Contract:
    open LoginScreen -> do_login(configured credentials) -> settle ->
    verify "user is recognised as logged in" -> hand over a Session.

A false post-condition raises FixtureAuthenticationFailed; nothing is
retried here. The only side effect is navigating the given page.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page

from testsuites.ui_testing.framework.config_loader import EnvironmentConfig
from testsuites.ui_testing.framework.element_actions import ElementActions
from testsuites.ui_testing.framework.exceptions import FixtureAuthenticationFailed
from testsuites.ui_testing.pages.home_page import HomePage
from testsuites.ui_testing.pages.login_page import LoginPage


DEFAULT_SETTLE_MS = 3000


@dataclass(frozen=True)
class Session:
    """
    Authenticated browsing context handed to a test.

    Attributes:
        page: Playwright page the login happened in
        home: HomePage for the authenticated screen
        environment: Environment the session was created against
    """
    page: Page
    home: HomePage
    environment: EnvironmentConfig


@allure.step("Establish authenticated session")
async def establish_session(
    page: Page,
    environment: EnvironmentConfig,
    actions: Optional[ElementActions] = None,
    settle_ms: int = DEFAULT_SETTLE_MS,
) -> Session:
    """
    Log in with the environment's credentials and verify the result.

    Args:
        page: Fresh Playwright page (navigated by this call)
        environment: Base URL and credential metadata
        actions: ElementActions to share with the page objects
        settle_ms: Delay after login before checking the post-condition

    Returns:
        Session wrapping the authenticated HomePage

    Raises:
        FixtureAuthenticationFailed: Login did not produce a recognised session
        ElementNotFoundError / ElementNotInteractableError: Login form unusable
    """
    credentials = environment.credentials
    logger.info(f"Bootstrapping session for {credentials.username} on {environment.name}")

    login_page = LoginPage(page, environment.base_url, actions)
    await login_page.go_to_login_page()

    result = await login_page.do_login(credentials.username, credentials.password)
    await login_page.settle(settle_ms)

    if not isinstance(result, HomePage) or not await result.is_user_logged_in():
        warning = await login_page.get_invalid_login_message()
        raise FixtureAuthenticationFailed(
            f"User '{credentials.username}' is not logged in after login "
            f"(url={page.url}, warning={warning!r})"
        )

    logger.info(f"Session ready: {page.url}")
    return Session(page=page, home=result, environment=environment)


__all__ = ["Session", "establish_session", "DEFAULT_SETTLE_MS"]
