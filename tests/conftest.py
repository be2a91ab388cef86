import logging

import pytest

from tsv_processor.setup_logging import PACKAGE_LOGGER


# setup_logging binds a handler to the sys.stderr of the test that first calls it;
# drop it so later tests (and capsys) start clean.
@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
