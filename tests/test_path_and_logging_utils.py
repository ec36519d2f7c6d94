"""Tests for path discovery and logging setup."""

import logging

from docsim.utils.logging_utils import LOG_FORMAT, get_logger, setup_logging
from docsim.utils.path_utils import get_config_path, get_project_root


def test_project_root_holds_package():
    assert (get_project_root() / "docsim" / "__init__.py").exists()


def test_config_found_in_working_directory(tmp_path, monkeypatch):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "settings.yaml").write_text("similarity: {}\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    assert get_config_path() == tmp_path / "config" / "settings.yaml"


def test_config_falls_back_to_project_root(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert get_config_path("other.yaml") == get_project_root() / "config" / "other.yaml"


def test_setup_logging_adds_file_handler(tmp_path, monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    log_file = tmp_path / "similarity.log"

    setup_logging("debug", str(log_file))

    assert calls["level"] == logging.DEBUG
    handler_types = [type(h) for h in calls["handlers"]]
    assert handler_types == [logging.StreamHandler, logging.FileHandler]
    for handler in calls["handlers"]:
        handler.close()


def test_setup_logging_console_only(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    setup_logging("warning")

    assert calls["level"] == logging.WARNING
    assert len(calls["handlers"]) == 1
    assert calls["format"] == LOG_FORMAT


def test_setup_logging_uses_configured_format(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    setup_logging("info", log_format="%(levelname)s %(message)s")

    assert calls["format"] == "%(levelname)s %(message)s"


def test_get_logger_uses_module_name():
    assert get_logger("docsim.similarity").name == "docsim.similarity"
