import pytest
import yaml
from loguru import logger

from testsuites.ui_testing.framework.browser_manager import BrowserSettings
from testsuites.ui_testing.framework.config_loader import (
    ConfigLoader,
    ConfigurationError,
    DEFAULT_CONFIG_PATH,
    apply_selection_defaults,
    load_environment,
)
from testsuites.ui_testing.framework.log_config import init_logger, reset_logger


ENVIRONMENTS = {
    "environments": {
        "default": {
            "base_url": "http://shop.example.com/index.php/",
            "username": "customer@example.com",
            "password": "file-password",
            "http_credentials": {"username": "admin", "password": "admin"},
        },
        "staging": {
            "base_url": "http://staging.example.com/index.php",
            "username": "staging@example.com",
            "password": "staging-password",
        },
        "broken": {"base_url": "http://broken.example.com/index.php"},
    },
    "browser": {"type": "firefox", "headless": False, "slow_mo": 50},
}


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("UI_ENV", "UI_BASE_URL", "UI_USERNAME", "UI_PASSWORD",
                 "BROWSER_TYPE", "BROWSER_HEADLESS", "BROWSER_SLOW_MO"):
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    ConfigLoader.reset()


@pytest.fixture
def loader(tmp_path, clean_env):
    config_path = tmp_path / "ui_config.yaml"
    config_path.write_text(yaml.dump(ENVIRONMENTS), encoding="utf-8")
    ConfigLoader.reset()
    return ConfigLoader(config_path=config_path)


@pytest.mark.unit
def test_env_override_and_defaults(monkeypatch, tmp_path, clean_env):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump({"timing": {"session_settle_ms": 3000}}),
        encoding="utf-8",
    )

    ConfigLoader.reset()
    loader = ConfigLoader(config_path=config_path)
    assert loader.get("timing.session_settle_ms") == 3000
    assert loader.get("timing.inter_test_delay_ms", 1000) == 1000

    ConfigLoader.reset()
    monkeypatch.setenv("TIMING_SESSION_SETTLE_MS", "250")
    loader = ConfigLoader(config_path=config_path)
    assert loader.get("timing.session_settle_ms", 3000) == 250


@pytest.mark.unit
def test_reload_updates_values(tmp_path, clean_env):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"browser": {"slow_mo": 5}}), encoding="utf-8")

    ConfigLoader.reset()
    loader = ConfigLoader(config_path=config_path)
    assert loader.get("browser.slow_mo") == 5

    config_path.write_text(yaml.dump({"browser": {"slow_mo": 15}}), encoding="utf-8")
    loader.reload()
    assert loader.get("browser.slow_mo") == 15


@pytest.mark.unit
def test_selection_defaults_fill_only_unset_values():
    environ = {"UI_ENV": "staging"}

    apply_selection_defaults(environ)

    assert environ == {"UI_ENV": "staging", "UI_CONFIG_PATH": str(DEFAULT_CONFIG_PATH)}


@pytest.mark.unit
def test_loader_reads_defaulted_config_path(tmp_path, clean_env):
    config_path = tmp_path / "chosen.yaml"
    config_path.write_text(yaml.dump({"browser": {"slow_mo": 7}}), encoding="utf-8")
    clean_env.setenv("UI_CONFIG_PATH", str(config_path))

    apply_selection_defaults()
    ConfigLoader.reset()

    assert ConfigLoader().get("browser.slow_mo") == 7


@pytest.mark.unit
def test_invalid_yaml(tmp_path, clean_env):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("browser: [unclosed", encoding="utf-8")

    ConfigLoader.reset()
    with pytest.raises(ConfigurationError):
        ConfigLoader(config_path=config_path)


@pytest.mark.unit
class TestLoadEnvironment:

    def test_default_environment(self, loader):
        environment = load_environment(loader=loader)

        assert environment.name == "default"
        assert environment.base_url == "http://shop.example.com/index.php"
        assert environment.credentials.username == "customer@example.com"
        assert environment.http_credentials.username == "admin"

    def test_selected_by_env_var(self, loader, clean_env):
        clean_env.setenv("UI_ENV", "staging")

        environment = load_environment(loader=loader)

        assert environment.name == "staging"
        assert environment.http_credentials is None

    def test_explicit_name_wins(self, loader, clean_env):
        clean_env.setenv("UI_ENV", "default")

        assert load_environment("staging", loader).name == "staging"

    def test_env_vars_override_file(self, loader, clean_env):
        clean_env.setenv("UI_BASE_URL", "http://override.example.com/index.php")
        clean_env.setenv("UI_PASSWORD", "env-password")

        environment = load_environment(loader=loader)

        assert environment.base_url == "http://override.example.com/index.php"
        assert environment.credentials.username == "customer@example.com"
        assert environment.credentials.password == "env-password"
        assert "env-password" not in repr(environment.credentials)

    def test_unknown_environment(self, loader):
        with pytest.raises(ConfigurationError, match="Unknown environment 'prod'"):
            load_environment("prod", loader)

    def test_missing_credentials(self, loader):
        with pytest.raises(ConfigurationError, match="No credentials"):
            load_environment("broken", loader)


@pytest.mark.unit
def test_browser_settings_from_config(loader):
    settings = BrowserSettings.from_config(loader)

    assert settings.browser_type == "firefox"
    assert settings.headless is False
    assert settings.slow_mo == 50
    assert settings.action_timeout == 15000


@pytest.mark.unit
def test_logger_file_sink(loader, tmp_path):
    log_file = tmp_path / "logs" / "ui.log"
    loader._config["logging"] = {"level": "DEBUG", "file": str(log_file)}

    reset_logger()
    try:
        init_logger(config=loader)
        logger.info("file sink check")
        assert log_file.exists()
        assert "file sink check" in log_file.read_text(encoding="utf-8")
    finally:
        del loader._config["logging"]
        reset_logger()
        init_logger(config=loader)
