import importlib

import config


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("APP_NAME", "Branch Library")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DEFAULT_PATRON_NAME", "Ada")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.settings.app_name == "Branch Library"
        assert reloaded.settings.log_level == "DEBUG"
        assert reloaded.settings.default_patron_name == "Ada"
    finally:
        monkeypatch.undo()
        importlib.reload(config)

def test_settings_defaults(monkeypatch):
    for name in ("APP_NAME", "LOG_LEVEL", "DEFAULT_PATRON_NAME"):
        monkeypatch.delenv(name, raising=False)
    try:
        reloaded = importlib.reload(config)
        assert reloaded.settings.app_name == "Library Catalog"
        assert reloaded.settings.log_level == "WARNING"
        assert reloaded.settings.default_patron_name == "Guest"
    finally:
        monkeypatch.undo()
        importlib.reload(config)
