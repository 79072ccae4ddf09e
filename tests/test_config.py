import logging

from catalog_search.config import Settings
from catalog_search.utils.logger import LOG_FORMAT, setup_logger


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("INDEX_BATCH_SIZE", raising=False)

    settings = Settings(_env_file=None)

    assert settings.index_batch_size == 100
    assert settings.index_source_name == "product"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("INDEX_BATCH_SIZE", "25")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.index_batch_size == 25
    assert settings.log_level == "debug"


def test_setup_logger_is_idempotent():
    logger = setup_logger("debug")
    handlers = list(logger.handlers)

    logger = setup_logger(logging.WARNING)

    assert logger.name == "catalog_search"
    assert logger.level == logging.WARNING
    assert logger.handlers == handlers


def test_setup_logger_installs_one_console_handler():
    setup_logger("info")
    logger = setup_logger("info")

    stream_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(stream_handlers) == 1
    assert stream_handlers[0].formatter._fmt == LOG_FORMAT
