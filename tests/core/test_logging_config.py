import logging

from rich.logging import RichHandler

from core.logging_config import setup_logging


def test_setup_logging_default_quiets_http_libraries():
    setup_logging("WARNING")
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert any(isinstance(h, RichHandler) for h in root.handlers)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_setup_logging_debug_enables_http_libraries():
    setup_logging("debug")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpcore").level == logging.DEBUG
    setup_logging("WARNING")


def test_setup_logging_unknown_level_falls_back_to_warning():
    setup_logging("chatty")
    assert logging.getLogger().level == logging.WARNING
