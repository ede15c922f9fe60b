import logging

import pytest


@pytest.fixture(autouse=True)
def _configure_logging_for_tests() -> None:
    """
    Configure logging for all unit tests so structlog events are routed
    through the standard library and never land on captured stdout.
    """
    from rbgn.core.common.logging_utils import configure_logging

    configure_logging(level=logging.INFO)
