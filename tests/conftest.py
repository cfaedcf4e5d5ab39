"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['GROUPCALC_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    # --test raises every groupcalc logger to DEBUG; put them back
    for name, logger in logging.root.manager.loggerDict.items():
        if name.startswith('groupcalc') and isinstance(logger, logging.Logger):
            logger.setLevel(logging.WARNING)
