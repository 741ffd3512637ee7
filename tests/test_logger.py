from __future__ import annotations

import logging
from typing import Iterator

import pytest

from vepfs_ext.utils import logger as logger_module
from vepfs_ext.utils.logger import resolve_level, setup_logger


@pytest.fixture
def clean_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    names = ("vepfs_ext",) + logger_module.TRANSPORT_LOGGERS
    levels = {name: logging.getLogger(name).level for name in names}
    monkeypatch.setattr(logger_module, "_logger_initialized", False)
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, value in levels.items():
        logging.getLogger(name).setLevel(value)


def test_resolve_level() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level("verbose") == logging.INFO
    assert resolve_level(None) == logging.INFO


def test_debug_level_opens_transport_loggers(clean_logging: None) -> None:
    setup_logger("DEBUG", force=True)

    assert logging.getLogger("vepfs_ext").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.DEBUG


def test_info_level_quiets_transport_loggers(clean_logging: None) -> None:
    setup_logger("INFO", force=True)

    assert logging.getLogger("vepfs_ext").level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("requests").level == logging.WARNING


def test_setup_runs_once_without_force(clean_logging: None) -> None:
    setup_logger("ERROR", force=True)
    setup_logger("DEBUG")

    assert logging.getLogger("vepfs_ext").level == logging.ERROR
