"""
Fakes of the Playwright surface used by the interaction layer.

Page/Locator factory methods are synchronous in Playwright while actions and
queries are coroutines, so the fakes mix MagicMock and AsyncMock the same way.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from testsuites.ui_testing.framework.element_actions import ElementActions


LOCATOR_COROUTINES = (
    "fill", "click", "clear", "focus", "press",
    "text_content", "get_attribute", "input_value",
    "is_visible", "wait_for", "is_enabled", "is_checked", "count",
)

ACTION_COROUTINES = (
    "fill", "click", "clear", "focus", "press_key", "type_keys",
    "get_text", "get_attribute", "get_input_value",
    "is_visible", "is_enabled", "is_checked", "count",
)


def make_locator() -> MagicMock:
    locator = MagicMock(name="locator")
    locator.nth.return_value = locator
    for name in LOCATOR_COROUTINES:
        setattr(locator, name, AsyncMock(name=f"locator.{name}"))
    locator.count.return_value = 1
    return locator


@pytest.fixture
def fake_locator() -> MagicMock:
    return make_locator()


@pytest.fixture
def fake_page(fake_locator: MagicMock) -> MagicMock:
    page = MagicMock(name="page")
    page.locator.return_value = fake_locator
    page.get_by_role.return_value = fake_locator
    page.get_by_text.return_value = fake_locator
    page.keyboard.press = AsyncMock()
    page.keyboard.type = AsyncMock()
    page.goto = AsyncMock()
    page.wait_for_load_state = AsyncMock()
    page.wait_for_timeout = AsyncMock()
    page.title = AsyncMock(return_value="")
    page.url = ""
    return page


@pytest.fixture
def actions(fake_page: MagicMock) -> ElementActions:
    return ElementActions(fake_page, default_timeout=1000, read_timeout=500)


@pytest.fixture
def fake_actions() -> MagicMock:
    """ElementActions stand-in for Page Object tests."""
    fake = MagicMock(name="actions")
    for name in ACTION_COROUTINES:
        setattr(fake, name, AsyncMock(name=f"actions.{name}"))
    fake.count.return_value = 1
    return fake
