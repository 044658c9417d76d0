"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based interaction layer for the storefront authentication suite.

Components:
    - locators: declarative locator variants and their resolution
    - element_actions: fill/click/read helpers with a fixed failure policy
    - page_base: base Page Object and screen state machine
    - data_generator: synthetic registration/login inputs
    - config_loader: YAML + env configuration, environment credentials
    - browser_manager: browser provisioning for the test run

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager, BrowserSettings
from .config_loader import (
    ConfigLoader,
    ConfigurationError,
    Credentials,
    EnvironmentConfig,
    load_environment,
)
from .data_generator import DataGenerator
from .element_actions import ClickOptions, ElementActions
from .exceptions import (
    ElementNotFoundError,
    ElementNotInteractableError,
    FixtureAuthenticationFailed,
    InvalidTransitionError,
    UIAutomationError,
)
from .locators import ByRole, BySelector, ByText, ByXPath
from .page_base import BasePage, Screen

__all__ = [
    "BasePage",
    "BrowserManager",
    "BrowserSettings",
    "ByRole",
    "BySelector",
    "ByText",
    "ByXPath",
    "ClickOptions",
    "ConfigLoader",
    "ConfigurationError",
    "Credentials",
    "DataGenerator",
    "ElementActions",
    "ElementNotFoundError",
    "ElementNotInteractableError",
    "EnvironmentConfig",
    "FixtureAuthenticationFailed",
    "InvalidTransitionError",
    "Screen",
    "UIAutomationError",
    "load_environment",
]
