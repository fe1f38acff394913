import logging

import config


def test_env_helpers_parse_values(monkeypatch):
    monkeypatch.setenv("X_BOOL", " Yes ")
    monkeypatch.setenv("X_INT", "12")
    monkeypatch.setenv("X_FLOAT", "2.5")

    assert config._env_bool("X_BOOL", False) is True
    assert config._env_int("X_INT", 0) == 12
    assert config._env_float("X_FLOAT", 0.0) == 2.5


def test_env_helpers_fall_back_to_default(monkeypatch):
    monkeypatch.delenv("X_MISSING", raising=False)
    monkeypatch.setenv("X_BAD", "nope")

    assert config._env_bool("X_MISSING", True) is True
    assert config._env_int("X_BAD", 100) == 100
    assert config._env_float("X_BAD", 20.0) == 20.0


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        config.configure_logging("debug")
        assert root.level == logging.DEBUG

        config.configure_logging("not-a-level")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)
