"""Shared fixtures for deskopen tests."""
import pytest

from deskopen import desktop
from deskopen.logger import Logger
from deskopen.terminal import Terminal, ColorMode


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without side effects")


@pytest.fixture(autouse=True)
def isolated_state(tmp_path, monkeypatch):
    """Reset singletons and point configuration at a temporary directory."""
    monkeypatch.setenv('DESKOPEN_HOME', str(tmp_path / 'deskopen'))
    monkeypatch.delenv('DESKOPEN_LOG_LEVEL', raising=False)
    monkeypatch.delenv('DESKOPEN_COLOR', raising=False)
    Logger.reset()
    desktop.set_strategy(None)
    Terminal.set_color_mode(ColorMode.NEVER)
    yield
    Logger.reset()
    desktop.set_strategy(None)
    Terminal.set_color_mode(ColorMode.AUTO)
