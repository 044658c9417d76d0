# ================================================================================
# Element Actions Module
# ================================================================================
#
# Low-level element interaction utility shared by every Page Object.
#
# Two failure policies:
#   - State-changing actions (fill, click, clear, press) raise
#     ElementNotFoundError / ElementNotInteractableError after one bounded wait.
#   - Read-only queries (get_text, get_attribute, is_visible, ...) never raise;
#     absence is reported as None / False.
#
# Targets may be any declarative locator variant or a raw CSS selector string.
# No retries are performed beyond the single wait built into each action.
#
# ================================================================================

from dataclasses import dataclass
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page

from .exceptions import ElementNotFoundError, ElementNotInteractableError
from .locators import Target, describe, resolve


DEFAULT_ACTION_TIMEOUT = 15000
DEFAULT_READ_TIMEOUT = 5000


@dataclass(frozen=True)
class ClickOptions:
    """
    Options for click actions.

    Attributes:
        force: Bypass Playwright actionability checks
        timeout: Override the maximum wait in milliseconds
    """
    force: bool = False
    timeout: Optional[int] = None


class ElementActions:
    """
    Resilient element interaction helpers bound to a Playwright page.

    Example:
        actions = ElementActions(page)
        await actions.fill(ByRole("textbox", "E-Mail Address"), "user@example.com")
        await actions.click("input[type='submit']", ClickOptions(force=True))
        message = await actions.get_text(".alert-danger")
    """

    def __init__(
        self,
        page: Page,
        default_timeout: int = DEFAULT_ACTION_TIMEOUT,
        read_timeout: int = DEFAULT_READ_TIMEOUT,
    ):
        """
        Initialize ElementActions with a Playwright page.

        Args:
            page: Playwright Page object
            default_timeout: Max wait for state-changing actions (ms)
            read_timeout: Max wait for read-only queries (ms)
        """
        self.page = page
        self.default_timeout = default_timeout
        self.read_timeout = read_timeout

    def resolve(self, target: Target) -> Locator:
        """Resolve a target into a fresh Locator on the current page."""
        return resolve(target, self.page)

    # =========================================================================
    # State-changing actions
    # =========================================================================

    async def fill(
        self,
        target: Target,
        value: str,
        timeout: Optional[int] = None,
        sensitive: bool = False,
    ) -> None:
        """
        Set the text value of an input.

        Args:
            target: Locator variant or CSS selector
            value: Text to enter
            timeout: Operation timeout in milliseconds
            sensitive: Mask the value in logs (passwords)

        Raises:
            ElementNotFoundError: Target matched nothing
            ElementNotInteractableError: Target cannot accept input
        """
        timeout = _or_default(timeout, self.default_timeout)
        locator = self.resolve(target)
        shown = "*" * len(value) if sensitive else value

        logger.info(f"Filling {describe(target)} with '{shown[:50]}'")
        # Title-only step; decorated steps record argument values
        with allure.step(f"Fill {describe(target)}"):
            try:
                await locator.fill(value, timeout=timeout)
            except PlaywrightError as e:
                await self._raise_action_error(locator, target, "fill", timeout, e)

        logger.debug(f"Successfully filled: {describe(target)}")

    @allure.step("Click {target}")
    async def click(
        self,
        target: Target,
        options: Optional[ClickOptions] = None,
        occurrence_index: int = 0,
    ) -> None:
        """
        Click an element.

        Args:
            target: Locator variant or CSS selector
            options: Force/timeout overrides
            occurrence_index: Which match to click when several exist

        Raises:
            ElementNotFoundError: No match at ``occurrence_index``
            ElementNotInteractableError: Match exists but cannot be clicked
        """
        options = options or ClickOptions()
        timeout = _or_default(options.timeout, self.default_timeout)
        locator = self.resolve(target).nth(occurrence_index)

        logger.info(
            f"Clicking {describe(target)} [#{occurrence_index}]"
            f"{' (force)' if options.force else ''}"
        )
        try:
            await locator.click(force=options.force, timeout=timeout)
        except PlaywrightError as e:
            await self._raise_action_error(locator, target, "click", timeout, e)

        logger.debug(f"Successfully clicked: {describe(target)}")

    @allure.step("Clear {target}")
    async def clear(self, target: Target, timeout: Optional[int] = None) -> None:
        """Clear the value of an input. Same failure policy as fill()."""
        timeout = _or_default(timeout, self.default_timeout)
        locator = self.resolve(target)
        try:
            await locator.clear(timeout=timeout)
        except PlaywrightError as e:
            await self._raise_action_error(locator, target, "clear", timeout, e)

    @allure.step("Focus {target}")
    async def focus(self, target: Target, timeout: Optional[int] = None) -> None:
        """Move keyboard focus to an element."""
        timeout = _or_default(timeout, self.default_timeout)
        locator = self.resolve(target)
        try:
            await locator.focus(timeout=timeout)
        except PlaywrightError as e:
            await self._raise_action_error(locator, target, "focus", timeout, e)

    @allure.step("Press key: {key}")
    async def press_key(self, key: str, target: Optional[Target] = None) -> None:
        """
        Press a keyboard key, optionally on a specific element.

        Args:
            key: Key to press (e.g. "Enter", "Tab")
            target: Optional element receiving the key press
        """
        if target is None:
            await self.page.keyboard.press(key)
        else:
            locator = self.resolve(target)
            try:
                await locator.press(key, timeout=self.default_timeout)
            except PlaywrightError as e:
                await self._raise_action_error(
                    locator, target, f"press {key}", self.default_timeout, e
                )
        logger.debug(f"Pressed key: {key}")

    async def type_keys(self, text: str, delay: int = 0) -> None:
        """Type text through the keyboard into whatever has focus."""
        await self.page.keyboard.type(text, delay=delay)

    # =========================================================================
    # Read-only queries (never raise)
    # =========================================================================

    async def get_text(
        self,
        target: Target,
        timeout: Optional[int] = None,
        occurrence_index: int = 0,
    ) -> Optional[str]:
        """
        Get the text content of an element.

        Returns:
            Stripped text, "" if the element is present but empty,
            None if it did not appear within the timeout.
        """
        timeout = _or_default(timeout, self.read_timeout)
        locator = self.resolve(target).nth(occurrence_index)
        try:
            text = await locator.text_content(timeout=timeout)
        except PlaywrightError as e:
            logger.debug(f"No text for {describe(target)}: {_first_line(e)}")
            return None

        text = (text or "").strip()
        logger.debug(f"Got text from {describe(target)}: '{text}'")
        return text

    async def get_attribute(
        self,
        target: Target,
        name: str,
        timeout: Optional[int] = None,
    ) -> Optional[str]:
        """Get an attribute value, or None when element/attribute is absent."""
        timeout = _or_default(timeout, self.read_timeout)
        locator = self.resolve(target)
        try:
            value = await locator.get_attribute(name, timeout=timeout)
        except PlaywrightError as e:
            logger.debug(f"No attribute {name} on {describe(target)}: {_first_line(e)}")
            return None

        logger.debug(f"Got attribute {name} from {describe(target)}: '{value}'")
        return value

    async def get_input_value(
        self,
        target: Target,
        timeout: Optional[int] = None,
    ) -> Optional[str]:
        """Get the live value of an input, or None when absent."""
        timeout = _or_default(timeout, self.read_timeout)
        try:
            return await self.resolve(target).input_value(timeout=timeout)
        except PlaywrightError:
            return None

    async def is_visible(
        self,
        target: Target,
        timeout_ms: int = 0,
        occurrence_index: int = 0,
    ) -> bool:
        """
        Check if an element is visible.

        Args:
            target: Locator variant or CSS selector
            timeout_ms: 0 checks immediately, otherwise wait up to this long
            occurrence_index: Which match to check

        Returns:
            True if visible, False otherwise
        """
        locator = self.resolve(target).nth(occurrence_index)
        try:
            if timeout_ms <= 0:
                return await locator.is_visible()
            await locator.wait_for(state="visible", timeout=timeout_ms)
            return True
        except PlaywrightError:
            return False

    async def is_enabled(self, target: Target, timeout: Optional[int] = None) -> bool:
        """True if the element exists and is enabled."""
        try:
            timeout = _or_default(timeout, self.read_timeout)
            return await self.resolve(target).is_enabled(timeout=timeout)
        except PlaywrightError:
            return False

    async def is_checked(self, target: Target, timeout: Optional[int] = None) -> bool:
        """True if the checkbox/radio exists and is checked."""
        try:
            timeout = _or_default(timeout, self.read_timeout)
            return await self.resolve(target).is_checked(timeout=timeout)
        except PlaywrightError:
            return False

    async def count(self, target: Target) -> int:
        """Number of elements currently matching the target."""
        try:
            return await self.resolve(target).count()
        except PlaywrightError:
            return 0

    # =========================================================================
    # Internals
    # =========================================================================

    async def _raise_action_error(
        self,
        locator: Locator,
        target: Target,
        action: str,
        timeout: int,
        error: PlaywrightError,
    ) -> None:
        """Translate a driver error into the automation error taxonomy."""
        try:
            matches = await locator.count()
        except PlaywrightError:
            matches = 0

        if matches == 0:
            logger.error(f"{action} failed, element not found: {describe(target)}")
            raise ElementNotFoundError(describe(target), timeout) from error

        logger.error(f"{action} failed, element not interactable: {describe(target)}")
        raise ElementNotInteractableError(
            describe(target), action, _first_line(error)
        ) from error


def _or_default(timeout: Optional[int], default: int) -> int:
    # 0 is a real Playwright timeout (no limit)
    return default if timeout is None else timeout


def _first_line(error: Exception) -> str:
    lines = str(error).strip().splitlines()
    return lines[0] if lines else error.__class__.__name__


__all__ = [
    "ClickOptions",
    "ElementActions",
    "DEFAULT_ACTION_TIMEOUT",
    "DEFAULT_READ_TIMEOUT",
]
