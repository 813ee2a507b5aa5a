# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import importlib
import logging

import pytest

from linkedbag import config, errors, log
from linkedbag.errors import ErrorCategory


def test_bag_settings_env_override(monkeypatch):
    monkeypatch.setenv("LINKEDBAG_REPR_LIMIT", "3")
    importlib.reload(config)
    assert config.load_bag_settings().repr_limit == 3


@pytest.mark.parametrize("raw", ["not-a-number", "", "0", "-4"])
def test_bag_settings_invalid_env_falls_back(monkeypatch, raw):
    monkeypatch.setenv("LINKEDBAG_REPR_LIMIT", raw)
    importlib.reload(config)
    assert config.load_bag_settings().repr_limit == config.BagSettings.repr_limit


def test_load_bag_settings_reads_env_at_call_time(monkeypatch):
    importlib.reload(config)
    monkeypatch.setenv("LINKEDBAG_REPR_LIMIT", "4")
    assert config.load_bag_settings().repr_limit == 4
    monkeypatch.setenv("LINKEDBAG_REPR_LIMIT", "5")
    assert config.load_bag_settings().repr_limit == 5


def test_categorize_exception_maps_library_errors():
    assert errors.categorize_exception(errors.InvalidArgumentError("x")) == ErrorCategory.INVALID_ARGUMENT
    assert errors.categorize_exception(errors.IndexOutOfRangeError("x")) == ErrorCategory.INDEX_OUT_OF_RANGE
    assert errors.categorize_exception(errors.HashNotSupportedError("x")) == ErrorCategory.NOT_IMPLEMENTED
    assert errors.categorize_exception(ValueError("x")) == ErrorCategory.NONE


def test_error_hierarchy():
    assert issubclass(errors.InvalidArgumentError, ValueError)
    assert issubclass(errors.IndexOutOfRangeError, IndexError)
    assert issubclass(errors.HashNotSupportedError, NotImplementedError)
    for cls in (errors.InvalidArgumentError, errors.IndexOutOfRangeError, errors.HashNotSupportedError):
        assert issubclass(cls, errors.LinkedBagError)


def test_error_category_to_reason():
    assert "insufficient space" in errors.error_category_to_reason(ErrorCategory.INVALID_ARGUMENT)
    assert errors.error_category_to_reason(ErrorCategory.NONE) == ""
    assert errors.error_category_to_reason(None) == ""


def test_setup_logging_uses_requested_level(monkeypatch):
    calls = {}

    def fake_basic_config(**kwargs):
        calls.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    log.setup_logging("debug")
    assert calls["level"] == logging.DEBUG
    assert calls["format"] == "%(levelname)s %(name)s: %(message)s"

    log.setup_logging("bogus")
    assert calls["level"] == logging.WARNING


def test_setup_logging_sets_package_logger_level(monkeypatch, caplog):
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    package_logger = logging.getLogger(log.PACKAGE_LOGGER)
    original_level = package_logger.level
    try:
        assert log.setup_logging("debug") is package_logger
        assert package_logger.level == logging.DEBUG

        from linkedbag import LinkedBag

        with caplog.at_level(logging.DEBUG):
            bag = LinkedBag([1, 2])
            bag.clear()
        assert any(record.name == "linkedbag.bag" for record in caplog.records)
    finally:
        package_logger.setLevel(original_level)
