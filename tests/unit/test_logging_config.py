import logging

from filescout.logging_config import setup_logging


def test_env_level_is_applied(monkeypatch):
    captured = {}
    monkeypatch.setenv("FILESCOUT_LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: captured.update(kw))
    setup_logging()
    assert captured["level"] == logging.DEBUG


def test_unknown_level_falls_back_to_info(monkeypatch):
    captured = {}
    monkeypatch.setenv("FILESCOUT_LOG_LEVEL", "chatty")
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: captured.update(kw))
    setup_logging()
    assert captured["level"] == logging.INFO
