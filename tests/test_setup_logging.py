import logging

from tsv_processor.setup_logging import PACKAGE_LOGGER, setup_logging


def test_configures_package_logger_not_root():
    root_handlers = list(logging.getLogger().handlers)
    setup_logging("INFO")
    assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1
    assert logging.getLogger().handlers == root_handlers


def test_second_call_changes_level_without_new_handler():
    setup_logging("INFO")
    setup_logging("debug")
    logger = logging.getLogger(PACKAGE_LOGGER)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
