"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module provides fixtures for browser provisioning, page objects and the
authenticated session used by the storefront scenarios.

Key Features:
- One browser + one isolated context per test (tests run sequentially)
- Page Object fixtures for the login and register screens
- `session` / `home_page` fixtures with an enforced logged-in post-condition
- Screenshot capture on failure

================================================================================
"""

import asyncio
from typing import AsyncGenerator

import pytest
from loguru import logger
from playwright.async_api import BrowserContext, Page

from testsuites.ui_testing.fixtures.session import Session, establish_session
from testsuites.ui_testing.framework.browser_manager import BrowserManager, BrowserSettings
from testsuites.ui_testing.framework.config_loader import (
    ConfigLoader,
    EnvironmentConfig,
    load_environment,
)
from testsuites.ui_testing.framework.element_actions import ElementActions
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages.home_page import HomePage
from testsuites.ui_testing.pages.login_page import LoginPage
from testsuites.ui_testing.pages.register_page import RegisterPage


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_config() -> ConfigLoader:
    """Loaded UI configuration (config/ui_config.yaml + env overrides)."""
    return ConfigLoader()


@pytest.fixture(scope="session")
def environment(ui_config: ConfigLoader) -> EnvironmentConfig:
    """Base URL and credential metadata for the selected environment."""
    return load_environment(loader=ui_config)


@pytest.fixture(scope="session")
def base_url(environment: EnvironmentConfig) -> str:
    return environment.base_url


@pytest.fixture(scope="session")
def browser_settings(ui_config: ConfigLoader) -> BrowserSettings:
    return BrowserSettings.from_config(ui_config)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager(
    browser_settings: BrowserSettings,
) -> AsyncGenerator[BrowserManager, None]:
    """Browser for a single test; closed with all its contexts afterwards."""
    async with BrowserManager(browser_settings) as manager:
        yield manager


@pytest.fixture
async def context(
    browser_manager: BrowserManager,
    environment: EnvironmentConfig,
) -> AsyncGenerator[BrowserContext, None]:
    """Isolated browser context (cookies, storage) for one test."""
    context = await browser_manager.new_context(
        http_credentials=environment.http_credentials
    )
    yield context


@pytest.fixture
async def page(
    context: BrowserContext,
    request: pytest.FixtureRequest,
) -> AsyncGenerator[Page, None]:
    """Page for one test; attaches a screenshot to Allure if the test failed."""
    page = await context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            await BasePage(page).capture_failure(request.node.name)
        except Exception as e:
            # Log but don't fail if screenshot capture fails
            logger.warning(f"Failed to capture screenshot on failure: {e}")


@pytest.fixture
def actions(page: Page, browser_settings: BrowserSettings) -> ElementActions:
    return ElementActions(page, default_timeout=browser_settings.action_timeout)


@pytest.fixture(autouse=True)
async def inter_test_delay(ui_config: ConfigLoader) -> None:
    """Pause before each UI test so server-side state from the previous one settles."""
    delay_ms = ui_config.get("timing.inter_test_delay_ms", 1000)
    await asyncio.sleep(delay_ms / 1000)


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page, base_url: str, actions: ElementActions) -> LoginPage:
    """LoginPage bound to the test's page (not yet navigated)."""
    return LoginPage(page, base_url, actions)


@pytest.fixture
def register_page(page: Page, base_url: str, actions: ElementActions) -> RegisterPage:
    """RegisterPage bound to the test's page (not yet navigated)."""
    return RegisterPage(page, base_url, actions)


# ================================================================================
# Authentication Fixtures
# ================================================================================

@pytest.fixture
async def session(
    page: Page,
    environment: EnvironmentConfig,
    actions: ElementActions,
    ui_config: ConfigLoader,
) -> Session:
    """
    Authenticated session for the configured account.

    Fails the test in setup (FixtureAuthenticationFailed) if the storefront
    does not recognise the user after login.
    """
    return await establish_session(
        page,
        environment,
        actions=actions,
        settle_ms=ui_config.get("timing.session_settle_ms", 3000),
    )


@pytest.fixture
def home_page(session: Session) -> HomePage:
    """HomePage of an already-authenticated session."""
    return session.home


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item (``rep_setup``, ``rep_call``)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
