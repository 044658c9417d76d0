import pytest

from testsuites.ui_testing.fixtures.session import Session, establish_session
from testsuites.ui_testing.framework.config_loader import Credentials, EnvironmentConfig
from testsuites.ui_testing.framework.exceptions import (
    ElementNotFoundError,
    FixtureAuthenticationFailed,
)
from testsuites.ui_testing.pages import HomePage


BASE_URL = "http://shop.test/index.php"

ENVIRONMENT = EnvironmentConfig(
    name="unit",
    base_url=BASE_URL,
    credentials=Credentials("customer@example.com", "s3cret"),
)


@pytest.fixture
def logged_in_page(fake_page, fake_actions):
    """Fake page that reports the account screen after login."""
    fake_page.url = f"{BASE_URL}?route=account/account"
    fake_page.title.return_value = "My Account"
    fake_actions.count.return_value = 1
    return fake_page


@pytest.mark.unit
class TestEstablishSession:

    @pytest.mark.asyncio
    async def test_returns_authenticated_session(self, logged_in_page, fake_actions):
        session = await establish_session(logged_in_page, ENVIRONMENT, fake_actions, settle_ms=10)

        assert isinstance(session, Session)
        assert isinstance(session.home, HomePage)
        assert session.page is logged_in_page
        assert session.environment is ENVIRONMENT

        logged_in_page.goto.assert_awaited_once_with(
            f"{BASE_URL}?route=account/login", wait_until="networkidle"
        )
        assert [c.args[1] for c in fake_actions.fill.call_args_list] == [
            "customer@example.com",
            "s3cret",
        ]
        logged_in_page.wait_for_timeout.assert_awaited_once_with(10)

    @pytest.mark.asyncio
    async def test_rejected_credentials(self, fake_page, fake_actions):
        fake_page.url = f"{BASE_URL}?route=account/login"
        fake_actions.get_text.return_value = "Warning: No match for E-Mail Address and/or Password."

        with pytest.raises(FixtureAuthenticationFailed, match="No match"):
            await establish_session(fake_page, ENVIRONMENT, fake_actions, settle_ms=0)

    @pytest.mark.asyncio
    async def test_home_without_logout_link(self, logged_in_page, fake_actions):
        fake_actions.count.return_value = 0

        with pytest.raises(FixtureAuthenticationFailed, match="customer@example.com"):
            await establish_session(logged_in_page, ENVIRONMENT, fake_actions, settle_ms=0)

    @pytest.mark.asyncio
    async def test_unusable_login_form(self, fake_page, fake_actions):
        fake_actions.fill.side_effect = ElementNotFoundError("role=textbox[name='E-Mail Address']")

        with pytest.raises(ElementNotFoundError):
            await establish_session(fake_page, ENVIRONMENT, fake_actions, settle_ms=0)

    def test_session_is_immutable(self, fake_page):
        session = Session(page=fake_page, home=None, environment=ENVIRONMENT)

        with pytest.raises(AttributeError):
            session.page = None

    def test_credentials_repr_hides_password(self):
        assert "s3cret" not in repr(ENVIRONMENT)
