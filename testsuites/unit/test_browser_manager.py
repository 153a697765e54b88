import pytest
import yaml

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.config_loader import ConfigLoader


@pytest.fixture
def ui_config(fresh_config, monkeypatch, tmp_path):
    for name in ("UI_BROWSER", "UI_HEADLESS", "UI_VIEWPORT_WIDTH", "UI_VIEWPORT_HEIGHT"):
        monkeypatch.delenv(name, raising=False)
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump({
            "ui": {"browser": "webkit", "headless": False, "viewport": {"width": 800, "height": 600}},
        }),
        encoding="utf-8",
    )
    return ConfigLoader(config_path=config_path)


def test_settings_come_from_ui_section(ui_config):
    manager = BrowserManager()

    assert manager.browser_type == "webkit"
    assert manager.headless is False
    assert manager.viewport == {"width": 800, "height": 600}


def test_arguments_win_over_config(ui_config):
    manager = BrowserManager(headless=True, browser_type="firefox", viewport={"width": 1, "height": 2})

    assert manager.browser_type == "firefox"
    assert manager.headless is True
    assert manager.viewport == {"width": 1, "height": 2}


def test_unknown_browser_argument_rejected(ui_config):
    with pytest.raises(ValueError, match="Unsupported browser 'lynx'"):
        BrowserManager(browser_type="lynx")


def test_browser_is_none_before_start(ui_config):
    assert BrowserManager().browser is None
