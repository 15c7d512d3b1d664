import logging
from unittest import mock

import pytest

# Keep config files installed on the test machine out of the tests.
@pytest.fixture(autouse=True)
def no_default_config_files():
    with mock.patch.dict("shortopt._internal.constants.CLI_DEFAULTS", config_files=[]):
        yield

@pytest.fixture(autouse=True)
def restore_root_handlers():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
